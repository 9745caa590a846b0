#!/usr/bin/env python3
"""
Chebyshev Series Evaluation
===========================

The half-order polynomials P'(z) and Q'(z) are symmetric, so on the unit
circle they reduce to a cosine series in w. Substituting x = cos(w) turns
cos(k*w) into the Chebyshev polynomial T_k(x), which is what the root search
evaluates:

    P'(x) = sum_{i=0}^{m} coef[m - i] * T_i(x),    m = order / 2

with T_0 = 1, T_1 = x and T_i = 2x*T_{i-1} - T_{i-2}.
"""

from typing import Optional

import numpy as np

from .scratch import allocate_scratch, check_work_buffer


def chebyshev_basis(x: float, m: int, work: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Fill T_0(x) .. T_m(x) iteratively.

    Parameters
    ----------
    x : float
        Evaluation point, normally in [-1, 1]
    m : int
        Highest Chebyshev index (order / 2)
    work : np.ndarray, optional
        Caller-owned float64 buffer of at least ``m + 1`` values. When given,
        the basis is written into it and no memory is allocated.

    Returns
    -------
    np.ndarray
        View of length ``m + 1`` holding T_0 .. T_m
    """
    if work is None:
        work = allocate_scratch(m + 1, "Chebyshev basis")
    else:
        check_work_buffer(work, m + 1)

    T = work[:m + 1]
    T[0] = 1.0
    if m >= 1:
        T[1] = x
    for i in range(2, m + 1):
        T[i] = 2.0 * x * T[i - 1] - T[i - 2]
    return T


def cheb_poly_eval(coef: np.ndarray, x: float, order: int,
                   work: Optional[np.ndarray] = None) -> float:
    """
    Evaluate a half-order polynomial given in Chebyshev form at ``x``.

    ``coef`` holds ``order/2 + 1`` values with the highest-index term first,
    i.e. ``coef[m]`` multiplies T_0 and ``coef[0]`` multiplies T_m.
    """
    m = order // 2
    T = chebyshev_basis(x, m, work)
    total = 0.0
    for i in range(m + 1):
        total += coef[m - i] * T[i]
    return float(total)
