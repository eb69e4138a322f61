"""Mapping between decibels and a perceptually linear fader scale."""

import math


def decibel_to_linear(decibel: float, factor: float = -24) -> float:
    """Convert a decibel value to a linear position."""
    return math.exp((decibel - factor) / -factor) - math.e


def linear_to_decibel(linear_value: float, factor: float = -24) -> float:
    """Convert a linear position back to decibels."""
    return -factor * math.log(linear_value + math.e) + factor