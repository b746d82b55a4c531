"""Irish income tax filing assistant backend."""

__version__ = "0.1.0"
