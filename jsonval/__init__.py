"""JSON values with insertion-ordered objects, an encoder, an outline printer and structured errors."""

__version__ = "0.1.0"

__all__ = ["errors", "seed", "hashtable", "value", "dump", "tree"]