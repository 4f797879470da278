# MIT License (see LICENSE)
"""
2D vector helpers for the particle sandbox.

Vectors are numpy float64 arrays of shape (2,). The helpers return plain
floats for scalar results so diagnostics never carry numpy scalar types.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Accepts tuples and lists so callers can write positions as (x, y).
    """
    return np.array(x, dtype=np.float64)


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 2D vectors."""
    return float(a[0] * b[0] + a[1] * b[1])


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = 1e-8) -> np.ndarray:
    """
    Return a unit vector in the direction of v.

    Returns the zero vector if |v| <= eps instead of dividing by a
    near-zero length.
    """
    n = norm(v)
    if n <= eps:
        return np.zeros(2, dtype=np.float64)
    return v / n


def cross2(a: np.ndarray, b: np.ndarray) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    Twice the signed area of the triangle (0, a, b); positive when b is
    counterclockwise from a.
    """
    return float(a[0] * b[1] - a[1] * b[0])
