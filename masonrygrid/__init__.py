"""Masonry grid layout for Qt widgets."""

__version__ = '1.1.0'
