from collections.abc import Sequence


def find_duplicate_ids(ids: Sequence[int]) -> list[int]:
    """Return the IDs that appear more than once, in order of first repetition."""
    seen: set[int] = set()
    duplicates: list[int] = []
    for id_ in ids:
        if id_ in seen and id_ not in duplicates:
            duplicates.append(id_)
        seen.add(id_)
    return duplicates


def id_batch_problem(ids: Sequence[int], max_size: int) -> str | None:
    """Describe why ``ids`` is not a valid batch, or return None when it is.

    A batch is non-empty, holds at most ``max_size`` IDs and has no repeats.
    """
    if not ids:
        return "at least one ID is required"
    if len(ids) > max_size:
        return f"at most {max_size} IDs are allowed per request"
    duplicates = find_duplicate_ids(ids)
    if duplicates:
        return f"duplicate IDs: {', '.join(str(d) for d in duplicates)}"
    return None
