"""Upstream statistics feeding the confidence-region boundary search."""

from .t2 import HotellingParameters, get_t2_two

__all__ = ["HotellingParameters", "get_t2_two"]
