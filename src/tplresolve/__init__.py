"""tplresolve — resolve Product, Model and Rate templates by id or natural key."""

__version__ = "0.1.0"
