"""Classic algorithms, data structures and small terminal programs."""

__version__ = "0.1.0"