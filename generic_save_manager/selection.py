from typing import Sequence


def resolve_selection(listing: Sequence[str], previous_name: str | None) -> int | None:
    """
    Pick the selected index after ``listing`` was refreshed.

    Keeps ``previous_name`` if it is still listed, otherwise falls back to the
    last (lexicographically greatest) entry, or None for an empty listing.
    """
    if previous_name:
        try:
            return list(listing).index(previous_name)
        except ValueError:
            pass
    if listing:
        return len(listing) - 1
    return None
