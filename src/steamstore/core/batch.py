"""
Batch model.

Represents a chunk of appids fetched together in a single request.
"""

from dataclasses import dataclass, field
from typing import List, Sequence


@dataclass
class AppBatch:
    """
    A consecutive chunk of the appids requested in one call.

    Attributes:
        index: Position of the batch within the call (0-based)
        app_ids: Appids of this batch, in input order
    """

    index: int
    app_ids: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Get the number of appids in this batch."""
        return len(self.app_ids)

    def __repr__(self) -> str:
        return f"AppBatch(index={self.index}, size={self.size})"


def partition(app_ids: Sequence[int], batch_size: int) -> List[AppBatch]:
    """
    Split appids into consecutive, non-overlapping batches.

    Every appid lands in exactly one batch and the input order is kept
    across and within batches. Only the last batch may be smaller than
    ``batch_size``.

    Args:
        app_ids: Appids to split, duplicates are kept
        batch_size: Maximum number of appids per batch

    Returns:
        List of batches, empty for an empty input

    Raises:
        ValueError: If batch_size is not positive
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    ids = list(app_ids)
    return [
        AppBatch(index=index, app_ids=ids[start:start + batch_size])
        for index, start in enumerate(range(0, len(ids), batch_size))
    ]
