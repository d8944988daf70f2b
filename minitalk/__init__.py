"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with C-style string, memory and formatting helpers."""

__version__ = "0.1.0"