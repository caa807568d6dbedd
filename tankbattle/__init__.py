"""Board, pieces and an offensive algorithm for a tank battle on a wrapping grid."""

__version__ = "0.1.0"
__all__ = ["__version__"]