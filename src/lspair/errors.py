#!/usr/bin/env python3
"""
Exception taxonomy for the LPC <-> LSP transforms.

An incomplete root set is *not* an error by default: the forward transform
reports it through ``roots_found``. ``IncompleteRootSetError`` only exists
for callers that ask for a hard failure via ``LspResult.require_complete()``.
"""


class LspError(Exception):
    """Base class for all lspair errors."""


class InvalidInputError(LspError, ValueError):
    """Odd order, length mismatch, non-finite values or bad configuration."""


class LspAllocationError(LspError, MemoryError):
    """Scratch memory for a transform call could not be allocated."""


class IncompleteRootSetError(LspError):
    """Raised on request when the grid search located fewer than ``order`` roots."""

    def __init__(self, roots_found: int, order: int):
        self.roots_found = roots_found
        self.order = order
        super().__init__(
            f"Only {roots_found} of {order} LSP roots were located"
        )
