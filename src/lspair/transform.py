#!/usr/bin/env python3
"""
LPC <-> LSP Transforms
======================

Public entry points wrapping the decomposition, root search and lattice
reconstruction:

- ``transform_lpc_to_lsp``: LPC coefficients -> LSP frequencies (radians)
  plus the number of roots actually located
- ``transform_lsp_to_lpc``: LSP frequencies -> LPC coefficients

Both are pure functions of their inputs. Each call allocates and owns its
scratch buffers, so calls from several threads need no locking.

Example
-------
    result = transform_lpc_to_lsp(lpc)
    if result.complete:
        lsp = result.lsp
    else:
        lsp = previous_lsp            # caller's fallback policy
    lpc_back = transform_lsp_to_lpc(lsp)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

import numpy as np

from .config import (DEFAULT_GRID_DELTA, DEFAULT_NB_BISECTIONS,
                     LspSearchConfig, as_real_vector, check_order)
from .decompose import _deflate
from .errors import IncompleteRootSetError, InvalidInputError
from .lattice import lsp_to_lpc
from .roots import find_lsp_roots

log = logging.getLogger(__name__)


@dataclass(eq=False)
class LspResult:
    """
    Outcome of a forward transform.

    Unpacks as ``lsp, roots_found = result``. Entries of ``lsp`` at index
    ``>= roots_found`` are NaN and are not valid frequencies.
    """
    lsp: np.ndarray
    roots_found: int
    order: int = field(init=False)

    def __post_init__(self):
        self.order = len(self.lsp)

    def __iter__(self) -> Iterator[Any]:
        return iter((self.lsp, self.roots_found))

    @property
    def complete(self) -> bool:
        return self.roots_found == self.order

    def found(self) -> np.ndarray:
        """The located frequencies only."""
        return self.lsp[:self.roots_found]

    def require_complete(self) -> np.ndarray:
        if not self.complete:
            raise IncompleteRootSetError(self.roots_found, self.order)
        return self.lsp


def _resolve_order(values: np.ndarray, order: Optional[int], extra: int, name: str) -> int:
    if order is None:
        order = values.shape[0] - extra
    order = check_order(order)
    if values.shape[0] != order + extra:
        raise InvalidInputError(
            f"{name} must have {order + extra} values for order {order}, got {values.shape[0]}"
        )
    return order


def transform_lpc_to_lsp(
    lpc: Any,
    order: Optional[int] = None,
    nb_bisections: int = DEFAULT_NB_BISECTIONS,
    grid_delta: float = DEFAULT_GRID_DELTA,
) -> LspResult:
    """
    Convert LPC coefficients to LSP frequencies.

    Parameters
    ----------
    lpc : array_like
        ``order + 1`` LPC coefficients; lpc[0] is treated as unity gain
    order : int, optional
        Even LPC order; defaults to ``len(lpc) - 1``
    nb_bisections : int
        Bisection refinements per root (default 4)
    grid_delta : float
        Coarse grid step in the x = cos(w) domain (default 0.02)

    Returns
    -------
    LspResult
        Frequencies in radians (strictly increasing where populated) and the
        number of roots located. Check ``roots_found`` (or ``complete``)
        before using the frequencies.
    """
    lpc = as_real_vector(lpc, name="LPC coefficients")
    order = _resolve_order(lpc, order, 1, "LPC coefficients")
    cfg = LspSearchConfig(nb_bisections, grid_delta).validate()

    # lpc was validated and copied above
    p, q = _deflate(lpc, order)
    freq, roots_found = find_lsp_roots(p, q, order, cfg.nb_bisections, cfg.grid_delta)

    if roots_found < order:
        log.warning("Incomplete LSP root set: %d of %d roots located "
                    "(nb_bisections=%d, grid_delta=%g)",
                    roots_found, order, cfg.nb_bisections, cfg.grid_delta)
    return LspResult(freq, roots_found)


def transform_lsp_to_lpc(lsp: Any, order: Optional[int] = None) -> np.ndarray:
    """
    Convert LSP frequencies (radians) to ``order + 1`` LPC coefficients.

    Always produces a full output for well-formed input.
    """
    lsp = as_real_vector(lsp, name="LSP frequencies")
    order = _resolve_order(lsp, order, 0, "LSP frequencies")
    return lsp_to_lpc(lsp, order)


class LspTransformer:
    """
    Fixed-order LPC <-> LSP converter.

    Holds only configuration (order and search parameters); no filter state
    is kept between calls.
    """

    def __init__(
        self,
        order: int,
        config: Optional[LspSearchConfig] = None,
        log: Optional[logging.Logger] = None
    ):
        """
        Parameters
        ----------
        order : int
            Even LPC order shared by every call
        config : LspSearchConfig, optional
            Root search parameters (defaults: 4 bisections, 0.02 grid step)
        log : Logger, optional
            Logger for per-call summaries
        """
        self.order = check_order(order)
        self.config = (config or LspSearchConfig()).validate()
        self.log = log or logging.getLogger(__name__)

    def lpc_to_lsp(self, lpc: Any) -> LspResult:
        result = transform_lpc_to_lsp(
            lpc, self.order, self.config.nb_bisections, self.config.grid_delta
        )
        self.log.debug("lpc_to_lsp: %d/%d roots", result.roots_found, self.order)
        return result

    def lsp_to_lpc(self, lsp: Any) -> np.ndarray:
        return transform_lsp_to_lpc(lsp, self.order)

    def round_trip(self, lpc: Any) -> Dict[str, Any]:
        """
        LPC -> LSP -> LPC, reporting the reconstruction error.

        The inverse step is only run on a complete root set.
        """
        lpc = as_real_vector(lpc, self.order + 1, "LPC coefficients")
        result = self.lpc_to_lsp(lpc)
        report = {
            'order': self.order,
            'config': self.config.to_dict(),
            'roots_found': result.roots_found,
            'complete': result.complete,
            'lsp': result.lsp,
            'lpc': None,
            'max_abs_error': None,
        }
        if result.complete:
            lpc_back = self.lsp_to_lpc(result.lsp)
            # lpc[0] is unity by convention on both sides
            err = float(np.max(np.abs(lpc_back[1:] - lpc[1:]))) if self.order else 0.0
            report['lpc'] = lpc_back
            report['max_abs_error'] = err
            self.log.debug("round trip: max |error| = %.3e", err)
        return report
