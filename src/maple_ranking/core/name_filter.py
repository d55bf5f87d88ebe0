"""
Name lookups over a ranking record set: the character filter, the default
recent window and the selector's name list.
"""

from typing import Iterable, List, Optional, Sequence

from .records import RankingRecord

DEFAULT_RECENT_WINDOW = 100


def filter_by_name(records: Sequence[RankingRecord], name: str) -> Sequence[RankingRecord]:
    """
    Records whose name equals ``name`` ignoring case.

    An empty name filters nothing and hands back the records it was given.
    Callers pass the full record set for a named search so history outside
    the recent window is found too.
    """
    if not name:
        return records
    wanted = name.casefold()
    return [record for record in records if record.name.casefold() == wanted]


def recent_window(records: Sequence[RankingRecord], size: int = DEFAULT_RECENT_WINDOW) -> List[RankingRecord]:
    """Last ``size`` records in delivery order, the table's default view."""
    if size <= 0:
        return []
    return list(records[-size:])


def unique_names(records: Iterable[RankingRecord]) -> List[str]:
    return sorted({record.name for record in records})


def suggest_names(records: Iterable[RankingRecord], prefix: str, limit: Optional[int] = None) -> List[str]:
    """Distinct names starting with ``prefix`` (case-insensitive), sorted."""
    folded = prefix.casefold()
    matches = [name for name in unique_names(records) if name.casefold().startswith(folded)]
    if limit is not None:
        matches = matches[:limit]
    return matches
