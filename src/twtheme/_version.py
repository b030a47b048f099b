"""Package version; hatch reads it from here at build time."""

__version__ = "0.3.0"
