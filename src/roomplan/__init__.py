"""Room layout designer: 2D placement geometry and edit history."""

__version__ = "0.1.0"
