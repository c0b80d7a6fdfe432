"""Two-stack integer sorter that reports its operations, with small string and number helpers."""

__version__ = "0.1.0"