#!/usr/bin/env python3
"""
LSP Root Search
===============

Locates the zeros of P'(x) and Q'(x) on [-1, 1] (x = cos w) with a coarse
grid walk followed by bisection.

The zeros of the two polynomials interlace on the unit circle, so the search
alternates between them (P' for even indices, Q' for odd ones) and each
search starts where the previous root was found. x decreases from 1 towards
-1 as w increases from 0 towards pi, so the frequencies come out sorted.

Incomplete root sets
--------------------
If the grid walk reaches x < -1 without bracketing a sign change, the root
for that index is not recorded and the search stops there: with interlacing
broken, any later "root" would be attributed to the wrong polynomial. The
number of roots located is returned and the unfilled entries are NaN.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from .chebyshev import cheb_poly_eval
from .config import (DEFAULT_GRID_DELTA, DEFAULT_NB_BISECTIONS,
                     LspSearchConfig, check_order)
from .errors import InvalidInputError
from .scratch import allocate_scratch

log = logging.getLogger(__name__)


def bisect_root(coef: np.ndarray, xl: float, xr: float, psuml: float,
                order: int, nb_bisections: int, work: np.ndarray) -> float:
    """
    Refine a bracketed root of ``coef`` inside [xr, xl].

    The bracket is halved ``nb_bisections`` times, always keeping the half
    that still contains the sign change, and the midpoint of the final
    bracket is returned.
    """
    xm = xl
    for _ in range(nb_bisections + 1):
        xm = 0.5 * (xl + xr)
        psumm = cheb_poly_eval(coef, xm, order, work)
        if psumm * psuml > 0.0:
            psuml = psumm
            xl = xm
        else:
            xr = xm
    return xm


def search_root(coef: np.ndarray, xl: float, order: int,
                nb_bisections: int, grid_delta: float,
                work: np.ndarray, max_steps: Optional[int] = None) -> Optional[float]:
    """
    Walk down from ``xl`` in steps of ``grid_delta`` until the polynomial
    changes sign (or hits an exact zero), then bisect.

    Returns the refined root in the x domain, or ``None`` once the walk has
    gone past x = -1 without finding a bracket.
    """
    if max_steps is None:
        max_steps = LspSearchConfig(nb_bisections, grid_delta).max_grid_steps()
    psuml = cheb_poly_eval(coef, xl, order, work)
    for _ in range(max_steps):
        xr = xl - grid_delta
        psumr = cheb_poly_eval(coef, xr, order, work)
        if psuml * psumr <= 0.0:
            return bisect_root(coef, xl, xr, psuml, order, nb_bisections, work)
        if xr < -1.0:
            return None
        psuml = psumr
        xl = xr
    return None


def find_lsp_roots(
    p: np.ndarray,
    q: np.ndarray,
    order: int,
    nb_bisections: int = DEFAULT_NB_BISECTIONS,
    grid_delta: float = DEFAULT_GRID_DELTA,
) -> Tuple[np.ndarray, int]:
    """
    Locate the alternating roots of P' and Q' and convert them to radians.

    Parameters
    ----------
    p, q : np.ndarray
        Chebyshev-form coefficients from ``decompose_lpc`` (order/2 + 1 each)
    order : int
        Even LPC order
    nb_bisections : int
        Bisection refinements per root (default 4)
    grid_delta : float
        Coarse grid step in the x domain (default 0.02)

    Returns
    -------
    freq : np.ndarray
        ``order`` LSP frequencies in radians; entries at index >= roots_found
        are NaN
    roots_found : int
        Number of roots located
    """
    order = check_order(order)
    cfg = LspSearchConfig(nb_bisections, grid_delta).validate()
    m = order // 2
    if len(p) != m + 1 or len(q) != m + 1:
        raise InvalidInputError(
            f"P'/Q' must have {m + 1} coefficients for order {order}, "
            f"got {len(p)} and {len(q)}"
        )

    # one basis buffer serves every evaluation of this call
    work = allocate_scratch(m + 1, "Chebyshev basis")
    freq = np.full(order, np.nan, dtype=np.float64)
    max_steps = cfg.max_grid_steps()

    roots_found = 0
    xl = 1.0
    for j in range(order):
        coef = q if j % 2 else p
        xm = search_root(coef, xl, order, cfg.nb_bisections, cfg.grid_delta,
                         work, max_steps)
        if xm is None:
            log.debug("No sign change for %s' root %d below x=%.6f; stopping search",
                      "Q" if j % 2 else "P", j, xl)
            break
        log.debug("Root %d (%s'): x=%.8f", j, "Q" if j % 2 else "P", xm)
        freq[j] = xm
        xl = xm
        roots_found += 1

    # x domain -> radians; clip guards acos against rounding just outside [-1, 1]
    freq[:roots_found] = np.arccos(np.clip(freq[:roots_found], -1.0, 1.0))
    return freq, roots_found
