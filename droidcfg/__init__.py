"""Build-descriptor loader for the Android packaging layer of a Flutter app."""

__version__ = "0.1.0"
