"""An in-memory file-system shell and a /proc-based system resource monitor."""

__version__ = "0.1.0"