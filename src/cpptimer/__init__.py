"""cpptimer: time from C++ file creation to its first successful build."""

__version__ = "0.1.0"
