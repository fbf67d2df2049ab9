"""Splatcover - Estimate the area covered by overlapping splats.

Splatcover keeps a growing set of circles ("splats") placed on a surface and
estimates the area of their union by sampling a uniform grid over the
bounding box of the whole set. Overlapping regions are counted once.

Example:
    $ splatcover -c 0,0,1 -c 10,10,1

This prints the covered area of the two circles (about 6.28).
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
