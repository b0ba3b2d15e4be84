"""Export Figma local variables as design-token JSON files."""

__version__ = "0.1.0"
