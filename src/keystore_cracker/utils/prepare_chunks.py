
"""
Split the base sequence into worker chunks.
"""

from keystore_cracker.models.models import SearchChunk


def split_range(total: int, parts: int) -> list[tuple[int, int]]:
    """Split [0..total) into `parts` contiguous half-open slices.

    Every slice but the last holds `total // parts` items (at least one
    while items remain); the last slice takes the remainder. When there
    are fewer items than parts, the trailing slices are empty.

    Args:
        total: Number of items to split
        parts: Number of slices

    Returns:
        List of (start, end) tuples, one per slice
    """
    if parts < 1:
        raise ValueError("Number of parts must be at least 1")
    if total < 0:
        raise ValueError("Total must not be negative")

    size = max(1, total // parts)
    ranges = []

    for i in range(parts):
        start = min(i * size, total)
        end = min(start + size, total) if i < parts - 1 else total
        ranges.append((start, end))

    return ranges


def prepare_chunks(base_count: int, worker_count: int) -> list[SearchChunk]:
    """
    Assign one chunk of the base sequence to each worker.
    """
    return [
        SearchChunk(worker_id=worker_id, start=start, end=end)
        for worker_id, (start, end) in enumerate(split_range(base_count, worker_count))
    ]
