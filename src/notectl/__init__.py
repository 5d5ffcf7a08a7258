"""notectl — command-line client for the notes service."""

__version__ = "0.3.0"
