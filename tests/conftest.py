"""
Shared fixtures: reference LPC filters built independently of lspair.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

# Reference LSP set (radians) with two close pairs (formants near 0.84 and 1.44 rad).
GOLDEN_LSP = np.array([0.80, 0.88, 1.12, 1.40, 1.48, 1.72, 1.94, 2.10, 2.22, 2.34])


def lpc_from_poles(radii, angles) -> np.ndarray:
    """A(z) = prod_k (1 - r_k e^{j t_k} z^-1)(1 - r_k e^{-j t_k} z^-1)."""
    poles = np.concatenate([
        np.asarray(radii) * np.exp(1j * np.asarray(angles)),
        np.asarray(radii) * np.exp(-1j * np.asarray(angles)),
    ])
    return np.real(np.poly(poles))


def lpc_from_lsp_roots(lsp) -> np.ndarray:
    """
    Expand P(z) and Q(z) from their unit-circle zeros and average them.

    Even-index frequencies are zeros of P, odd-index ones zeros of Q.
    """
    lsp = np.asarray(lsp, dtype=np.float64)
    wp, wq = lsp[0::2], lsp[1::2]
    p = np.real(np.poly(np.concatenate([np.exp(1j * wp), np.exp(-1j * wp)])))
    q = np.real(np.poly(np.concatenate([np.exp(1j * wq), np.exp(-1j * wq)])))
    p = np.convolve(p, [1.0, 1.0])
    q = np.convolve(q, [1.0, -1.0])
    return (0.5 * (p + q))[:-1]


@pytest.fixture
def golden_lsp() -> np.ndarray:
    return GOLDEN_LSP.copy()


@pytest.fixture
def golden_lpc() -> np.ndarray:
    return lpc_from_lsp_roots(GOLDEN_LSP)


@pytest.fixture
def two_formant_lpc() -> np.ndarray:
    """10th-order filter: two sharp formants plus three broad pole pairs."""
    return lpc_from_poles(
        radii=[0.95, 0.60, 0.90, 0.60, 0.60],
        angles=[0.50, 1.00, 1.50, 2.00, 2.50],
    )


@pytest.fixture
def stable_filters():
    """A handful of minimum-phase filters of different even orders."""
    return [
        lpc_from_poles([0.9], [1.2]),
        lpc_from_poles([0.9, 0.7], [0.7, 2.1]),
        lpc_from_poles([0.95, 0.8, 0.5], [0.6, 1.6, 2.6]),
        lpc_from_poles([0.97, 0.9, 0.8, 0.7], [0.45, 1.2, 1.9, 2.6]),
        lpc_from_poles([0.95, 0.60, 0.90, 0.60, 0.60], [0.50, 1.00, 1.50, 2.00, 2.50]),
        lpc_from_poles([0.9, 0.85, 0.8, 0.75, 0.7, 0.65],
                       [0.4, 0.9, 1.4, 1.9, 2.4, 2.8]),
    ]


@pytest.fixture
def pole_lpc():
    return lpc_from_poles


@pytest.fixture
def lsp_lpc():
    return lpc_from_lsp_roots
