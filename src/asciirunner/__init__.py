"""asciirunner - a terminal side-scrolling obstacle runner."""

__version__ = "0.1.0"
