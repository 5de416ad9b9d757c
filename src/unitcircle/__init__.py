"""Interactive unit circle with live trigonometric values."""
__version__ = "0.1.0"
