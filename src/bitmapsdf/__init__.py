"""Bitmapsdf - Convert antialiased bitmaps to signed distance fields.

Bitmapsdf locates the sub-pixel iso-contour of each selected channel of an
8-bit bitmap, approximates it with line segments and renders the signed
distance to that contour, optionally at a different output resolution.

Example:
    $ bitmapsdf icon.png --size 64

This will create icon-sdf.png holding a 64 pixel distance field.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
