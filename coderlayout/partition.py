"""Integer partitioning of a span among panes."""

from .errors import PartitionError


def partition(total: int, count: int) -> list[int]:
    """
    Divvy ``total`` into ``count`` near-equal parts.

    Equivalent to dealing ``total`` unit tokens round-robin into ``count``
    buckets, so the leading buckets take the remainder:
    ``partition(10, 3) == [4, 3, 3]``.

    Args:
        total: Amount to split, at least 0.
        count: Number of parts, at least 1.

    Returns:
        List of ``count`` integers summing to ``total``.

    Raises:
        PartitionError: If count is below 1 or total is negative.
    """
    if count < 1:
        raise PartitionError(f"cannot partition {total} into {count} parts")
    if total < 0:
        raise PartitionError(f"cannot partition negative span {total}")

    base, extra = divmod(total, count)
    return [base + 1 if i < extra else base for i in range(count)]
