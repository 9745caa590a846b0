#!/usr/bin/env python3
"""
Verification tools for LSP frequency sets.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import numpy as np
from scipy import signal
import matplotlib.pyplot as plt

from .chebyshev import cheb_poly_eval
from .config import as_real_vector, check_order
from .decompose import decompose_lpc
from .scratch import allocate_scratch

log = logging.getLogger(__name__)


def check_lsp_ordering(lsp: np.ndarray) -> Dict[str, Any]:
    """
    Check that LSP frequencies are strictly increasing and inside (0, pi).

    Only reports; the frequencies are never modified.
    """
    lsp = np.asarray(lsp, dtype=np.float64)
    finite = bool(np.all(np.isfinite(lsp)))
    diffs = np.diff(lsp) if lsp.size > 1 else np.zeros(0)
    return {
        'finite': finite,
        'strictly_increasing': finite and bool(np.all(diffs > 0)),
        'in_range': finite and bool(np.all((lsp > 0) & (lsp < np.pi))),
        'min_separation': float(np.min(diffs)) if diffs.size and finite else np.inf,
    }


def reference_lsp(lpc: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    LSP frequencies of an even-order LPC filter from polynomial roots.

    Independent of the grid search: P(z) and Q(z) are formed explicitly,
    the trivial zeros at z = -1 / z = +1 are divided out and the remaining
    roots are found with ``np.roots``.

    Returns
    -------
    p_freqs, q_freqs : np.ndarray
        Sorted angles in (0, pi) of the roots of P'(z) and Q'(z)
    """
    lpc = as_real_vector(lpc, name="LPC coefficients")
    check_order(lpc.size - 1)

    a1 = np.append(lpc, 0.0)
    a2 = a1[::-1]
    p_full, _ = signal.deconvolve(a1 + a2, [1.0, 1.0])
    q_full, _ = signal.deconvolve(a1 - a2, [1.0, -1.0])

    def upper_half_angles(poly: np.ndarray) -> np.ndarray:
        if poly.size < 2:
            return np.zeros(0)
        angles = np.angle(np.roots(poly))
        return np.sort(angles[angles > 0])

    return upper_half_angles(p_full), upper_half_angles(q_full)


def verify_lsp_set(
    lpc: np.ndarray,
    lsp: np.ndarray,
    roots_found: Optional[int] = None,
    residual_tol: float = 1e-3,
    reference_tol: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Verify LSP frequencies against the LPC filter they were derived from.

    Parameters
    ----------
    lpc : np.ndarray
        LPC coefficients (order + 1 values)
    lsp : np.ndarray
        LSP frequencies in radians (order values)
    roots_found : int, optional
        Number of valid leading entries of ``lsp``; defaults to all of them
    residual_tol : float
        Largest accepted |P'(cos w)| or |Q'(cos w)| at a claimed root,
        relative to the sum of absolute coefficients
    reference_tol : float, optional
        When given, also compare against ``reference_lsp`` (radians)

    Returns
    -------
    dict
        Verification results
    """
    lpc = as_real_vector(lpc, name="LPC coefficients")
    order = check_order(lpc.size - 1)
    lsp = np.asarray(lsp, dtype=np.float64)
    if roots_found is None:
        roots_found = order
    valid = lsp[:roots_found]

    p, q = decompose_lpc(lpc, order)
    work = allocate_scratch(order // 2 + 1, "Chebyshev basis")
    p_scale = float(np.sum(np.abs(p))) or 1.0
    q_scale = float(np.sum(np.abs(q))) or 1.0

    # even indices belong to P', odd indices to Q'
    residuals = np.zeros(roots_found)
    for j, w in enumerate(valid):
        coef, scale = (q, q_scale) if j % 2 else (p, p_scale)
        residuals[j] = abs(cheb_poly_eval(coef, float(np.cos(w)), order, work)) / scale

    ordering = check_lsp_ordering(valid)
    results = {
        'order': order,
        'roots_found': roots_found,
        'complete': roots_found == order,
        'max_residual': float(np.max(residuals)) if roots_found else 0.0,
        'alternation_pass': bool(np.all(residuals <= residual_tol)),
        **ordering,
    }

    if reference_tol is not None:
        p_ref, q_ref = reference_lsp(lpc)
        if p_ref.size == q_ref.size == order // 2:
            ref = np.empty(order)
            ref[0::2] = p_ref
            ref[1::2] = q_ref
            dev = np.abs(valid - ref[:roots_found])
            results['max_reference_dev'] = float(np.max(dev)) if roots_found else 0.0
            results['meets_reference'] = results['max_reference_dev'] <= reference_tol
        else:
            # reference root count off: filter is not minimum phase
            results['max_reference_dev'] = np.inf
            results['meets_reference'] = False

    log.debug("LSP verification: %s", results)
    return results


def compare_spectra(
    lpc_a: np.ndarray,
    lpc_b: np.ndarray,
    n_points: int = 512,
    sample_rate: float = 8000.0,
    plot: bool = False
) -> Dict[str, Any]:
    """
    Compare the spectral envelopes 1/|A(e^jw)| of two LPC filters.

    Parameters
    ----------
    lpc_a, lpc_b : np.ndarray
        LPC coefficient vectors (same order)
    n_points : int
        Frequency grid size
    sample_rate : float
        Sample rate in Hz, used for the frequency axis only
    plot : bool
        Whether to plot both envelopes

    Returns
    -------
    dict
        Envelope differences in dB
    """
    lpc_a = as_real_vector(lpc_a, name="LPC coefficients")
    lpc_b = as_real_vector(lpc_b, lpc_a.size, "LPC coefficients")

    w, h_a = signal.freqz([1.0], lpc_a, worN=n_points)
    _, h_b = signal.freqz([1.0], lpc_b, worN=n_points)
    env_a = 20 * np.log10(np.abs(h_a) + 1e-300)
    env_b = 20 * np.log10(np.abs(h_b) + 1e-300)
    diff = env_a - env_b

    results = {
        'max_abs_diff_db': float(np.max(np.abs(diff))),
        'rms_diff_db': float(np.sqrt(np.mean(diff ** 2))),
    }

    if plot:
        freq = w * sample_rate / (2 * np.pi)
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(10, 8))

        ax1.plot(freq, env_a, label='A', linewidth=2)
        ax1.plot(freq, env_b, label='B', linewidth=1, alpha=0.7)
        ax1.set_xlabel('Frequency (Hz)')
        ax1.set_ylabel('Magnitude (dB)')
        ax1.set_title('LPC Spectral Envelopes')
        ax1.grid(True, alpha=0.3)
        ax1.legend()

        ax2.plot(freq, diff)
        ax2.set_xlabel('Frequency (Hz)')
        ax2.set_ylabel('Difference (dB)')
        ax2.set_title(f"Envelope difference (max {results['max_abs_diff_db']:.3f} dB)")
        ax2.grid(True, alpha=0.3)

        plt.tight_layout()
        plt.show()

    return results


def plot_lsp(lpc: np.ndarray, lsp: np.ndarray, sample_rate: float = 8000.0) -> None:
    """Plot the LPC envelope with its LSP frequencies overlaid."""
    lpc = as_real_vector(lpc, name="LPC coefficients")
    lsp = np.asarray(lsp, dtype=np.float64)
    w, h = signal.freqz([1.0], lpc, worN=1024)
    freq = w * sample_rate / (2 * np.pi)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(freq, 20 * np.log10(np.abs(h) + 1e-300), color='k', label='1/|A|')
    for j, wj in enumerate(lsp[np.isfinite(lsp)]):
        ax.axvline(wj * sample_rate / (2 * np.pi),
                   color='tab:blue' if j % 2 == 0 else 'tab:red',
                   linestyle='--', alpha=0.7)
    ax.set_xlabel('Frequency (Hz)')
    ax.set_ylabel('Magnitude (dB)')
    ax.set_title('LPC Envelope and LSP Frequencies (blue: P, red: Q)')
    ax.grid(True, alpha=0.3)
    ax.legend()
    plt.show()
