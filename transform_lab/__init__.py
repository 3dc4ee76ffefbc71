"""transform-lab — 2D affine transformation pipeline and viewport fitting."""

__version__ = "0.1.0"
