"""An interactive graphing calculator: expression parsing and evaluation, plotting and a pygame window."""

__version__ = "0.1.0"