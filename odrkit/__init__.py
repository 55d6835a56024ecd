"""Road geometry, spline, lane, junction and mesh primitives for OpenDRIVE road networks."""

__version__ = "0.6.0"