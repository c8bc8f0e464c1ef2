from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class FilterCriteria:
    """
    Represents the current user selection/filters. Replaced on every interaction.

    Fields:

    - search_text: case-insensitive substring matched against domain and family names
    - selected_brands: brand codes; a row must match at least one of them
    - moat: selected moat number as a string key ("" for none)
    - usecase: selected use-case column name ("" for none)

    - domains_only: If True, presentation hides the family tiles
    - measure: name of the measure used for colouring family tiles
    - focus_brand: brand code whose coverage is highlighted

    """

    search_text: str = ""
    selected_brands: Tuple[str, ...] = ()
    moat: str = ""
    usecase: str = ""

    domains_only: bool = False
    measure: Optional[str] = None
    focus_brand: Optional[str] = None

    @property
    def search_query(self) -> str:
        return (self.search_text or "").strip().lower()

    def with_moat(self, moat: Optional[str]) -> FilterCriteria:
        """A moat change always clears the use-case selection."""
        return FilterCriteria(
            search_text=self.search_text,
            selected_brands=self.selected_brands,
            moat=str(moat or ""),
            usecase="",
            domains_only=self.domains_only,
            measure=self.measure,
            focus_brand=self.focus_brand,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["selected_brands"] = list(self.selected_brands)
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterCriteria:
        data = data or {}
        return cls(
            search_text=str(data.get("search_text") or ""),
            selected_brands=tuple(data.get("selected_brands") or ()),
            moat=str(data.get("moat") or ""),
            usecase=str(data.get("usecase") or ""),
            domains_only=bool(data.get("domains_only", False)),
            measure=data.get("measure") or None,
            focus_brand=data.get("focus_brand") or None,
        )
