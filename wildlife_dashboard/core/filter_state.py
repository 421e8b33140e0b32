from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict

ALL = "all"


def _category(value: Any) -> str:
    # "" is a real value (a blank cell), only a missing selection means all
    return ALL if value is None else str(value)


@dataclass(frozen=True)
class FilterCriteria:
    """
    Represents the current user selection/filters.

    Fields:

    - species: "all" or an exact species name
    - observer: "all" or an exact observer name
    - search_text: free text matched case-insensitively against species,
      observer and comment. Empty means no text filter.
    """

    species: str = ALL
    observer: str = ALL
    search_text: str = ""

    @property
    def is_identity(self) -> bool:
        return self.species == ALL and self.observer == ALL and not self.search_text

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> FilterCriteria:
        data = data or {}
        return cls(
            species=_category(data.get("species")),
            observer=_category(data.get("observer")),
            search_text=str(data.get("search_text") or ""),
        )
