"""Classic algorithms and data structures, a word-upload protocol and a threaded message board."""

__version__ = "0.1.0"