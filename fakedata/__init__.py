"""Seedable generators of fake values for built-in and common data types."""

__version__ = "0.1.0"