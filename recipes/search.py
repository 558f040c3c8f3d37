"""Free-text search over in-memory recipe records."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple

SEARCHABLE_FIELDS = ("title", "ingredients", "instructions")


@dataclass(frozen=True)
class SearchFields:
    """Which recipe fields a query is matched against."""

    title: bool = True
    ingredients: bool = True
    instructions: bool = True

    @classmethod
    def only(cls, *names: str) -> "SearchFields":
        unknown = set(names) - set(SEARCHABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown search field(s): {', '.join(sorted(unknown))}")
        return cls(**{name: name in names for name in SEARCHABLE_FIELDS})

    @property
    def enabled(self) -> Tuple[str, ...]:
        return tuple(name for name in SEARCHABLE_FIELDS if getattr(self, name))

    @property
    def all_enabled(self) -> bool:
        return len(self.enabled) == len(SEARCHABLE_FIELDS)


def matches(record: Mapping[str, Any], query: str, fields: SearchFields = SearchFields()) -> bool:
    """True for an empty query, or when query is a case-insensitive substring of an enabled field."""
    if not query:
        return True
    needle = query.casefold()
    for name in fields.enabled:
        value = record.get(name)
        if value is not None and needle in str(value).casefold():
            return True
    return False


def filter_records(records: Iterable[Mapping[str, Any]], query: str,
                   fields: SearchFields = SearchFields()) -> List[Mapping[str, Any]]:
    """Recompute the matching subset from the full list, preserving order."""
    return [record for record in records if matches(record, query, fields)]
