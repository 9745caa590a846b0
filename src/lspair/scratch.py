#!/usr/bin/env python3
"""
Call-local scratch buffers.

Every transform call owns its buffers; nothing here is cached between calls.
"""

import numpy as np

from .errors import InvalidInputError, LspAllocationError


def allocate_scratch(size: int, what: str = "scratch") -> np.ndarray:
    """Return a zeroed float64 buffer of ``size`` values."""
    try:
        return np.zeros(size, dtype=np.float64)
    except MemoryError as e:
        raise LspAllocationError(f"Cannot allocate {size} values for {what}") from e


def check_work_buffer(work: np.ndarray, size: int) -> np.ndarray:
    """Validate a caller-provided buffer (1-D float64, at least ``size`` long)."""
    if not isinstance(work, np.ndarray) or work.ndim != 1 or work.dtype != np.float64:
        raise InvalidInputError("work buffer must be a 1-D float64 numpy array")
    if work.shape[0] < size:
        raise InvalidInputError(f"work buffer too short: {work.shape[0]} < {size}")
    return work
