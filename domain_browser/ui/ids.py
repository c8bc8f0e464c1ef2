from __future__ import annotations

__all__ = ["IDs", "family_tile_id"]


class IDs:
    class Store:
        CRITERIA = "criteria-state"

    class Control:
        # Criteria widgets
        SEARCH_INPUT = "search-input"
        BRAND_CHECKLIST = "brand-checklist"
        MOAT_SELECT = "moat-select"
        USECASE_SELECT = "usecase-select"
        DOMAINS_ONLY_TOGGLE = "domains-only-toggle"
        MEASURE_BUTTONS = "measure-buttons"
        FOCUS_BRAND_SELECT = "focus-brand-select"
        RESET_BTN = "reset-btn"

        # Grid + status
        GRID = "domain-grid"
        EMPTY_STATE = "empty-state"
        STATUS_BAR = "csv-status"

        # Details drawer
        DETAILS_DRAWER = "details-drawer"
        DETAILS_BODY = "details-body"

    class Pattern:
        # pattern-matching "type" strings
        FAMILY_TILE = "family-tile"


def family_tile_id(domain: str, family: str) -> dict:
    return {"type": IDs.Pattern.FAMILY_TILE, "domain": domain, "family": family}
