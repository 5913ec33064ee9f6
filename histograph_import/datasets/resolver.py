"""
Requested-Dataset Reconciliation.

Tracks which explicitly requested dataset identifiers have been matched by a
processed descriptor, so that the leftovers can be reported once at the end
of the run.
"""

from __future__ import annotations

from typing import Iterable

from .descriptor import DatasetDescriptor


def normalize_requested(ids: Iterable[str]) -> list[str]:
    """De-duplicate requested identifiers, keeping first-occurrence order."""
    return list(dict.fromkeys(i for i in ids if i))


class DatasetResolver:
    """
    Maintains the "not found" working set for a run.

    Attributes:
        requested: Normalized list of identifiers the operator asked for.

    Example:
        >>> resolver = DatasetResolver(["a", "missing"])
        >>> resolver.mark_processed(DatasetDescriptor("a", Path("/data/a")))
        >>> resolver.not_found
        ['missing']
    """

    def __init__(self, requested: Iterable[str] = ()) -> None:
        self.requested = normalize_requested(requested)
        self._pending: dict[str, None] = dict.fromkeys(self.requested)

    def mark_processed(self, descriptor: DatasetDescriptor) -> None:
        """Remove the descriptor's id from the working set (no-op when absent)."""
        self._pending.pop(descriptor.id, None)

    @property
    def not_found(self) -> list[str]:
        """Requested identifiers not matched so far, in request order."""
        return list(self._pending)
