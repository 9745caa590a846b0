#!/usr/bin/env python3
"""
LSP -> LPC Reconstruction
=========================

Rebuilds A(z) = 0.5 * [P(z) + Q(z)] from its LSP frequencies by clocking a
unit impulse through a cascade of second-order sections

    1 - 2*cos(w_k)*z^-1 + z^-2

one chain per polynomial (even-index frequencies build P, odd-index ones
build Q), followed by the trivial (1 + z^-1) / (1 - z^-1) factors. The first
``order + 1`` output samples are the LPC coefficients.

State layout (``order/2`` stages, stride 4, then two trailing slots)::

    [n1 n2 n3 n4] * (order/2) + [t1 t2]

n1/n2 hold the delay line of the P-chain stage, n3/n4 that of the Q-chain
stage, t1/t2 the single delays of the trivial factors.
"""

from typing import Optional

import numpy as np

from .config import as_real_vector, check_order
from .errors import InvalidInputError
from .scratch import allocate_scratch


def cascade_state_size(order: int) -> int:
    return 4 * (order // 2) + 2


def lsp_to_lpc(lsp: np.ndarray, order: Optional[int] = None) -> np.ndarray:
    """
    Convert LSP frequencies (radians) to LPC coefficients.

    Parameters
    ----------
    lsp : array_like
        ``order`` LSP frequencies in radians
    order : int, optional
        Even LPC order; defaults to ``len(lsp)``

    Returns
    -------
    np.ndarray
        ``order + 1`` LPC coefficients, ``ak[0] == 1``
    """
    lsp = as_real_vector(lsp, name="LSP frequencies")
    if order is None:
        order = lsp.shape[0]
    order = check_order(order)
    if lsp.shape[0] != order:
        raise InvalidInputError(f"Expected {order} LSP frequencies, got {lsp.shape[0]}")
    m = order // 2

    freq = np.cos(lsp)

    # fresh, explicitly zeroed state for every call (trailing slots included)
    state = allocate_scratch(cascade_state_size(order), "cascade state")
    state[:] = 0.0
    t1 = 4 * m
    t2 = t1 + 1

    ak = allocate_scratch(order + 1, "LPC coefficients")
    xin1 = 1.0
    xin2 = 1.0
    for j in range(order + 1):
        for i in range(m):
            n1 = 4 * i
            n2, n3, n4 = n1 + 1, n1 + 2, n1 + 3
            xout1 = xin1 - 2.0 * freq[2 * i] * state[n1] + state[n2]
            xout2 = xin2 - 2.0 * freq[2 * i + 1] * state[n3] + state[n4]
            state[n2] = state[n1]
            state[n4] = state[n3]
            state[n1] = xin1
            state[n3] = xin2
            xin1 = xout1
            xin2 = xout2
        xout1 = xin1 + state[t1]
        xout2 = xin2 - state[t2]
        ak[j] = 0.5 * (xout1 + xout2)
        state[t1] = xin1
        state[t2] = xin2
        xin1 = 0.0
        xin2 = 0.0

    return ak
