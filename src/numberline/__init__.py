"""Integer addition as movement along a number line."""
__version__ = "0.1.0"
