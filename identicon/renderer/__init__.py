"""Rendering subpackage.

Turns a finished :class:`identicon.image.Image` record into pixels:

* A fixed 250x250 RGB canvas with a white background.
* One solid rectangle per entry of ``pixel_map``, all in ``color``.
* Pillow for drawing and PNG encoding, NumPy for array views of the result.

See :mod:`identicon.renderer.raster` for the drawing routines.
"""
