"""Toroidal Game of Life board and simulation, and a hashed sales-record lookup table and command."""

__version__ = "0.1.0"