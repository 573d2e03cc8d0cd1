"""Console teaching programs: length conversion, list operations and pharmacy records."""

__version__ = "0.1.0"
__all__ = ["lengthconv", "listops", "records", "pharmacy"]