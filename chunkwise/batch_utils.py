"""Chunking helper that splits an ordered collection into fixed-size batches."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def chunk_list(items: Sequence[T], batch_size: int) -> List[List[T]]:
    """Split *items* into consecutive batches of *batch_size*.

    Every batch holds exactly *batch_size* items except the last, which
    holds the remainder. A fractional *batch_size* is truncated and a
    *batch_size* below 1 is clamped to 1.
    """
    batch_size = int(batch_size)
    if batch_size < 1:
        batch_size = 1

    chunks: List[List[T]] = []
    total = len(items)

    idx = 0
    while idx < total:
        end = idx + batch_size
        if end > total:
            end = total
        chunks.append(list(items[idx:end]))
        idx = end

    return chunks
