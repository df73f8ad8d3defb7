"""Console food diary: log meals, track calories and review daily nutrition."""

__version__ = "0.1.0"
__all__ = ["__version__"]