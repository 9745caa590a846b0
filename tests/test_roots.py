"""
Grid search + bisection for the LSP roots.
"""

import numpy as np
import pytest

from lspair import (InvalidInputError, cheb_poly_eval, decompose_lpc,
                    find_lsp_roots)
from lspair.roots import bisect_root, search_root


def test_golden_fixture(golden_lpc, golden_lsp):
    p, q = decompose_lpc(golden_lpc, 10)
    freq, roots = find_lsp_roots(p, q, 10, nb_bisections=4, grid_delta=0.02)
    assert roots == 10
    np.testing.assert_allclose(freq, golden_lsp, atol=1e-3)


def test_two_formant_filter_is_complete(two_formant_lpc):
    p, q = decompose_lpc(two_formant_lpc, 10)
    freq, roots = find_lsp_roots(p, q, 10)
    assert roots == 10
    assert np.all(np.isfinite(freq))


def test_monotonic_and_in_range(stable_filters):
    for a in stable_filters:
        order = len(a) - 1
        p, q = decompose_lpc(a, order)
        freq, roots = find_lsp_roots(p, q, order, nb_bisections=8, grid_delta=0.01)
        assert roots == order
        assert np.all(np.diff(freq) > 0)
        assert np.all((freq > 0) & (freq < np.pi))


def test_alternation(two_formant_lpc):
    p, q = decompose_lpc(two_formant_lpc, 10)
    freq, _ = find_lsp_roots(p, q, 10, nb_bisections=30, grid_delta=0.01)
    x = np.cos(freq)
    for j in range(10):
        own = q if j % 2 else p
        assert abs(cheb_poly_eval(own, x[j], 10)) < 1e-7


def test_more_bisections_are_more_accurate(golden_lpc, golden_lsp):
    p, q = decompose_lpc(golden_lpc, 10)
    coarse, _ = find_lsp_roots(p, q, 10, nb_bisections=2)
    fine, _ = find_lsp_roots(p, q, 10, nb_bisections=12)
    assert np.max(np.abs(fine - golden_lsp)) < np.max(np.abs(coarse - golden_lsp))
    assert np.max(np.abs(fine - golden_lsp)) < 1e-5


def test_no_root_in_range_stops_search():
    # P'(x) = 2x + 4 and Q'(x) = 2x - 4: neither vanishes on [-1, 1]
    p, q = decompose_lpc([1.0, 0.0, 5.0], 2)
    np.testing.assert_allclose(p, [2.0, 4.0])
    np.testing.assert_allclose(q, [2.0, -4.0])
    freq, roots = find_lsp_roots(p, q, 2)
    assert roots == 0
    assert np.all(np.isnan(freq))


def test_unstable_filter_stops_at_first_missing_root():
    a = np.array([1.0, 0.3, -0.2, 0.1, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 4.0])
    p, q = decompose_lpc(a, 10)
    freq, roots = find_lsp_roots(p, q, 10)
    assert roots == 8
    assert np.all(np.isfinite(freq[:8]))
    assert np.all(np.diff(freq[:8]) > 0)
    assert np.all(np.isnan(freq[8:]))


def test_missing_q_root_after_p_root():
    # P'(x) = 2x + 0.5 vanishes at x = -0.25; Q'(x) = 2x - 0.5 only at x = 0.25,
    # which lies above where the Q' search starts
    p, q = decompose_lpc([1.0, 0.0, 1.5], 2)
    np.testing.assert_allclose(p, [2.0, 0.5])
    np.testing.assert_allclose(q, [2.0, -0.5])
    freq, roots = find_lsp_roots(p, q, 2)
    assert roots == 1
    assert freq[0] == pytest.approx(np.arccos(-0.25), abs=1e-3)
    assert np.isnan(freq[1])


def test_order_zero():
    freq, roots = find_lsp_roots(np.array([1.0]), np.array([1.0]), 0)
    assert roots == 0
    assert freq.shape == (0,)


def test_search_root_exact_zero_on_grid():
    # P'(x) = 2x - 1 has its root at x = 0.5, which is hit exactly by the walk
    coef = np.array([2.0, -1.0])
    work = np.zeros(2)
    xm = search_root(coef, 1.0, 2, 4, 0.25, work)
    assert xm == pytest.approx(0.5, abs=0.25 / 16)


def test_bisect_root_bracket_precision():
    coef = np.array([2.0, -0.3])     # root at 0.15
    work = np.zeros(2)
    xl, xr = 0.16, 0.14
    xm = bisect_root(coef, xl, xr, cheb_poly_eval(coef, xl, 2), 2, 4, work)
    assert abs(xm - 0.15) <= (xl - xr) / 32


def test_coefficient_length_mismatch():
    with pytest.raises(InvalidInputError):
        find_lsp_roots(np.ones(3), np.ones(2), 4)


@pytest.mark.parametrize("nb, delta", [(-1, 0.02), (4, 0.0), (4, -0.1), (4, 3.0)])
def test_bad_search_parameters(nb, delta):
    with pytest.raises(InvalidInputError):
        find_lsp_roots(np.ones(2), np.ones(2), 2, nb, delta)
