"""Rendering subpackage.

Turns a finished :class:`identicon.state.ImageState` into pixels. The
renderer focuses on:

* A fixed 250x250 canvas with a white background.
* Flat filled rectangles in the state's color, one per painted cell.
* Byte-stable PNG encoding so identical inputs give identical files.

See :mod:`identicon.renderer.raster` for the Pillow drawing and encoding
routines.
"""
