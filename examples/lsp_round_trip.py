#!/usr/bin/env python3
"""
Example: LPC -> LSP -> LPC round trip on a synthetic two-formant filter.
"""

import logging

import numpy as np

from lspair import LspSearchConfig, LspTransformer, compare_spectra, verify_lsp_set


def lpc_from_formants(freqs_hz, bandwidths_hz, fs=8000.0):
    """All-pole filter with one conjugate pole pair per formant."""
    poles = []
    for f, bw in zip(freqs_hz, bandwidths_hz):
        r = np.exp(-np.pi * bw / fs)
        theta = 2 * np.pi * f / fs
        poles += [r * np.exp(1j * theta), r * np.exp(-1j * theta)]
    return np.real(np.poly(poles))


def main():
    # Setup logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    lpc = lpc_from_formants(
        freqs_hz=[500, 1500, 2500, 3000, 3500],
        bandwidths_hz=[60, 90, 400, 500, 600],
    )
    order = len(lpc) - 1

    print("LSP round trip")
    print("=" * 50)

    for cfg in (LspSearchConfig(), LspSearchConfig(nb_bisections=8, grid_delta=0.01)):
        tf = LspTransformer(order, cfg)
        report = tf.round_trip(lpc)
        print(f"\nnb_bisections={cfg.nb_bisections}, grid_delta={cfg.grid_delta}")
        print(f"  Roots found: {report['roots_found']}/{order}")
        if not report['complete']:
            print("  ✗ Incomplete root set")
            continue

        lsp = report['lsp']
        print("  LSP (Hz): " + ", ".join(f"{w * 4000 / np.pi:.1f}" for w in lsp))
        print(f"  Max |LPC error|: {report['max_abs_error']:.2e}")

        checks = verify_lsp_set(lpc, lsp, reference_tol=1e-3)
        print(f"  Ordered: {checks['strictly_increasing']}, "
              f"alternation: {checks['alternation_pass']}, "
              f"max reference deviation: {checks.get('max_reference_dev', 0):.2e} rad")

        spectra = compare_spectra(lpc, report['lpc'])
        print(f"  Envelope RMS difference: {spectra['rms_diff_db']:.4f} dB")


if __name__ == '__main__':
    main()
