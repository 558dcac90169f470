"""Ledger exceptions."""

from __future__ import annotations


class LedgerFrozenError(RuntimeError):
    """Raised when a frozen timeline or element registry is mutated."""
