"""Tower of Hanoi played on a glyph grid."""

__version__ = "0.1.0"
