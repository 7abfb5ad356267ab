"""Parsers and feature enums for CPU reports such as /proc/cpuinfo."""

__version__ = "0.1.0"
__all__ = ["__version__"]