"""Array namespace dispatch so the stage math runs on numpy or torch.

Floats and numpy arrays go to numpy. Torch tensors go to torch, imported
on first use, and stay on their device.
"""

import numpy as np
from typing import Any

Array = Any  # float, numpy.ndarray or torch.Tensor

_torch = None


def _get_torch():
    global _torch
    if _torch is None:
        import torch
        _torch = torch
    return _torch


def is_torch(x: Array) -> bool:
    return type(x).__module__.startswith('torch')


def xp(x: Array):
    """Module providing math for x: torch for tensors, numpy otherwise."""
    return _get_torch() if is_torch(x) else np


# Same name in numpy and torch
def sin(x: Array) -> Array:
    return xp(x).sin(x)


def cos(x: Array) -> Array:
    return xp(x).cos(x)


def sqrt(x: Array) -> Array:
    return xp(x).sqrt(x)


def abs(x: Array) -> Array:
    return xp(x).abs(x)


def sign(x: Array) -> Array:
    return xp(x).sign(x)


def where(cond: Array, true_val: Array, false_val: Array) -> Array:
    return xp(cond).where(cond, true_val, false_val)


# Names or signatures differ between numpy and torch
def cbrt(x: Array) -> Array:
    """Real cube root, negative for negative input."""
    if is_torch(x):
        return x.sign() * x.abs().pow(1 / 3)
    return np.cbrt(x)


def pow(x: Array, exp: float) -> Array:
    return x.pow(exp) if is_torch(x) else np.power(x, exp)


def atan2(y: Array, x: Array) -> Array:
    return y.atan2(x) if is_torch(y) else np.arctan2(y, x)


def clip(x: Array, lo: float, hi: float) -> Array:
    return x.clamp(lo, hi) if is_torch(x) else np.clip(x, lo, hi)


def stack(arrays: list[Array], axis: int = -1) -> Array:
    if is_torch(arrays[0]):
        return _get_torch().stack(arrays, dim=axis)
    return np.stack(arrays, axis=axis)


def all_along_axis(x: Array, axis: int) -> Array:
    return x.all(dim=axis) if is_torch(x) else np.all(x, axis=axis)


def zeros_like(x: Array) -> Array:
    return _get_torch().zeros_like(x) if is_torch(x) else np.zeros_like(x, dtype=float)


def full_like(x: Array, value: float) -> Array:
    return _get_torch().full_like(x, value) if is_torch(x) else np.full_like(x, value, dtype=float)
