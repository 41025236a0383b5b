"""Small classic programming exercises as a library and command-line tools."""

__version__ = "0.1.0"