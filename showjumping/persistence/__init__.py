"""Cached access to loaded competition data."""

from showjumping.persistence.results_store import ResultsStore

__all__ = ["ResultsStore"]
