"""Draw the circle through three points placed on a canvas, with a Tk window and a reusable model."""

__version__ = "1.0.0"