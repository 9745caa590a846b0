#!/usr/bin/env python3
"""
Symmetric / antisymmetric decomposition of an LPC polynomial.

A(z) of even order p splits into

    P(z) = A(z) + z^-(p+1) A(1/z)     (symmetric)
    Q(z) = A(z) - z^-(p+1) A(1/z)     (antisymmetric)

whose zeros lie on the unit circle. P(z) has a trivial zero at z = -1 and
Q(z) one at z = +1; dividing them out gives P'(z) = P(z)/(1 + z^-1) and
Q'(z) = Q(z)/(1 - z^-1), each of order p/2 in cos(w).
"""

from typing import Tuple

import numpy as np

from .config import as_real_vector, check_order
from .scratch import allocate_scratch


def decompose_lpc(a: np.ndarray, order: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Derive the Chebyshev-form coefficients of P'(z) and Q'(z).

    Parameters
    ----------
    a : array_like
        LPC coefficients a[0..order]; a[0] is taken as unity
    order : int
        Even LPC order

    Returns
    -------
    p, q : np.ndarray
        ``order/2 + 1`` coefficients each. All entries but the last are
        doubled, so they can be fed straight to ``cheb_poly_eval``.
    """
    order = check_order(order)
    a = as_real_vector(a, order + 1, "LPC coefficients")
    return _deflate(a, order)


def _deflate(a: np.ndarray, order: int) -> Tuple[np.ndarray, np.ndarray]:
    # a is a validated float64 vector of length order + 1
    m = order // 2

    p = allocate_scratch(m + 1, "P' coefficients")
    q = allocate_scratch(m + 1, "Q' coefficients")
    p[0] = 1.0
    q[0] = 1.0
    for i in range(1, m + 1):
        p[i] = a[i] + a[order + 1 - i] - p[i - 1]
        q[i] = a[i] - a[order + 1 - i] + q[i - 1]

    # cos(k*w) terms for k >= 1 appear twice in the symmetric expansion
    p[:m] *= 2.0
    q[:m] *= 2.0
    return p, q
