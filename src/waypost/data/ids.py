"""Record ID generation."""

import time
from collections.abc import Container


def generate_id(existing: Container[str] = ()) -> str:
    """Return a millisecond-timestamp ID not present in *existing*.

    Two records created within the same millisecond get consecutive
    values rather than a duplicate.
    """
    candidate = time.time_ns() // 1_000_000
    while str(candidate) in existing:
        candidate += 1
    return str(candidate)
