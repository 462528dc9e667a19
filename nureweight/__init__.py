"""Tweak dials, their uncertainties, and a driver for combining event weights."""

__version__ = "0.1.0"