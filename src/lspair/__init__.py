"""
lspair - LPC <-> Line Spectral Pair conversion for speech codecs.
"""

from .chebyshev import cheb_poly_eval, chebyshev_basis
from .config import LspSearchConfig, MAX_ORDER
from .decompose import decompose_lpc
from .errors import (LspError, InvalidInputError, LspAllocationError,
                     IncompleteRootSetError)
from .lattice import lsp_to_lpc
from .roots import find_lsp_roots
from .transform import (LspResult, LspTransformer, transform_lpc_to_lsp,
                        transform_lsp_to_lpc)
from .verification import (check_lsp_ordering, reference_lsp, verify_lsp_set,
                           compare_spectra)

__version__ = "0.1.0"
__all__ = [
    "cheb_poly_eval",
    "chebyshev_basis",
    "LspSearchConfig",
    "MAX_ORDER",
    "decompose_lpc",
    "LspError",
    "InvalidInputError",
    "LspAllocationError",
    "IncompleteRootSetError",
    "lsp_to_lpc",
    "find_lsp_roots",
    "LspResult",
    "LspTransformer",
    "transform_lpc_to_lsp",
    "transform_lsp_to_lpc",
    "check_lsp_ordering",
    "reference_lsp",
    "verify_lsp_set",
    "compare_spectra",
]
