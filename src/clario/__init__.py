"""Clario: console client for a REST to-do list backend."""

__version__ = "0.1.0"
