#!/usr/bin/env python3
"""
Search configuration for the forward (LPC -> LSP) transform.
"""

import operator
from dataclasses import dataclass, asdict, replace
from typing import Dict, Any, Optional

import numpy as np

from .errors import InvalidInputError

# Largest LPC order accepted by the transforms.
MAX_ORDER = 64

DEFAULT_NB_BISECTIONS = 4
DEFAULT_GRID_DELTA = 0.02


@dataclass
class LspSearchConfig:
    """Accuracy/cost trade-off of the root search."""
    nb_bisections: int = DEFAULT_NB_BISECTIONS  # refinement steps per root
    grid_delta: float = DEFAULT_GRID_DELTA      # coarse step in the x = cos(w) domain

    def validate(self) -> 'LspSearchConfig':
        """Check both fields; return a normalized copy, leaving ``self`` as given."""
        nb = _as_int(self.nb_bisections, "nb_bisections")
        if nb < 0:
            raise InvalidInputError(f"nb_bisections must be >= 0, got {nb}")
        try:
            delta = float(self.grid_delta)
        except (TypeError, ValueError):
            raise InvalidInputError(f"grid_delta must be a number, got {self.grid_delta!r}") from None
        if not 0.0 < delta <= 2.0:
            raise InvalidInputError(f"grid_delta must lie in (0, 2], got {self.grid_delta}")
        return replace(self, nb_bisections=nb, grid_delta=delta)

    def max_grid_steps(self) -> int:
        """Upper bound on grid evaluations for a single alternation."""
        return int(2.0 / float(self.grid_delta)) + 2

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'LspSearchConfig':
        unknown = set(d) - {'nb_bisections', 'grid_delta'}
        if unknown:
            raise InvalidInputError(f"Unknown search options: {sorted(unknown)}")
        return cls(**d).validate()


def check_order(order: Any) -> int:
    """Validate an LPC order and return it as a plain int."""
    order = _as_int(order, "order")
    if order < 0:
        raise InvalidInputError(f"order must be non-negative, got {order}")
    if order % 2:
        raise InvalidInputError(f"order must be even, got {order}")
    if order > MAX_ORDER:
        raise InvalidInputError(f"order {order} exceeds MAX_ORDER={MAX_ORDER}")
    return order


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidInputError(f"{name} must be an integer, got {value!r}") from None


def as_real_vector(values: Any, length: Optional[int] = None, name: str = "vector") -> np.ndarray:
    """Copy ``values`` into a finite 1-D float64 array, optionally of fixed length."""
    try:
        arr = np.asarray(values)
        if np.iscomplexobj(arr):
            raise TypeError("complex values")
        arr = np.array(arr, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a sequence of real numbers") from None
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be 1-D, got shape {arr.shape}")
    if length is not None and arr.shape[0] != length:
        raise InvalidInputError(f"{name} must have {length} values, got {arr.shape[0]}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} contains non-finite values")
    return arr
