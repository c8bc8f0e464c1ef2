from __future__ import annotations

from domain_browser.core.criteria import FilterCriteria


def test_criteria_to_from_dict_roundtrip():
    criteria = FilterCriteria(
        search_text="chain",
        selected_brands=("AFI", "RH"),
        moat="2",
        usecase="2.1 Slotting",
        domains_only=True,
        measure="Timeliness",
        focus_brand="ADG",
    )

    raw = criteria.to_dict()
    assert raw["selected_brands"] == ["AFI", "RH"]
    assert FilterCriteria.from_dict(raw) == criteria


def test_from_dict_defaults():
    assert FilterCriteria.from_dict(None) == FilterCriteria()
    assert FilterCriteria.from_dict({"moat": None, "measure": ""}) == FilterCriteria()


def test_search_query_is_trimmed_and_lowercased():
    assert FilterCriteria(search_text="  Supply ").search_query == "supply"


def test_moat_change_clears_usecase():
    criteria = FilterCriteria(moat="1", usecase="1.1 Forecast", measure="Quality")

    moved = criteria.with_moat("2")

    assert moved.moat == "2"
    assert moved.usecase == ""
    assert moved.measure == "Quality"
