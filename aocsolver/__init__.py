"""Advent of Code puzzle solutions for 2024 and 2025, with a command-line runner."""

__version__ = "0.1.0"