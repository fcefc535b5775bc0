"""Blog domain services operating on a loaded ``Dataset``."""
