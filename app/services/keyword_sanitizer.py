from typing import List, Optional

MAX_KEYWORDS = 10


def split_comma_list(raw: Optional[str], limit: int) -> List[str]:
    """
    Split a comma-separated string into trimmed, non-empty entries.

    Args:
        raw (str): Comma-separated input, may be None or empty
        limit (int): Maximum number of entries to keep

    Returns:
        List[str]: At most ``limit`` entries in their original order
    """
    if not raw:
        return []

    entries = [entry.strip() for entry in raw.split(",")]
    return [entry for entry in entries if entry][:limit]


def sanitize_keywords(raw: Optional[str]) -> List[str]:
    """Normalize a raw keyword string into a bounded keyword list."""
    return split_comma_list(raw, MAX_KEYWORDS)
