"""Reusable circuit modules."""

from .opamp_buffer import opamp_buffer

__all__ = ["opamp_buffer"]
