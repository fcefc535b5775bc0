"""Error kinds raised by the blog services.

Each kind is an ``HTTPException`` so the JSON error handler registered in
``app.py`` renders it with the right status code.
"""

from werkzeug.exceptions import BadRequest, Conflict, Forbidden, NotFound, Unauthorized


class ValidationError(BadRequest):
    """A required field is missing or empty."""

    description = "Missing fields."


class InvalidCode(BadRequest):
    """No pending verification matches the supplied email and code."""

    description = "Invalid or expired code."


class InvalidCredentials(Unauthorized):
    """Unknown email or wrong password; deliberately indistinguishable."""

    description = "Invalid email or password."


__all__ = [
    "Conflict",
    "Forbidden",
    "InvalidCode",
    "InvalidCredentials",
    "NotFound",
    "ValidationError",
]
