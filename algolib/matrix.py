"""Quarter-turn rotations of two-dimensional lists."""

from __future__ import annotations


def left_rotate(matrix):
    """Rotate a matrix 90 degrees counter-clockwise."""
    return [list(col) for col in zip(*matrix)][::-1]


def right_rotate(matrix):
    """Rotate a matrix 90 degrees clockwise."""
    return [list(col) for col in zip(*matrix[::-1])]