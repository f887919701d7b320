"""Colorings of the Devil's Checkerboard (perfect neighborhood colorings of Q_n)."""
import dcb.colorings  # registers generators

__version__ = "0.1.0"
