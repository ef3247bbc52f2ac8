"""Rendering subpackage.

Paints resolved masks into RGBA grids. The renderer focuses on:

* Hue banding along a randomly chosen gradient axis.
* A half-sine brightness arch across the same axis.
* NumPy based colour conversion suitable for small sprite grids.

See :mod:`spritegen.renderer.sprite` for the draw order contract.
"""
