from pathlib import Path

import pytest

from domain_browser.core.catalog import Catalog
from domain_browser.core.catalog_view import build_catalog_view
from domain_browser.core.coercion import is_truthy
from domain_browser.core.criteria import FilterCriteria
from domain_browser.core.dataset_loader import load_table
from domain_browser.core.exceptions import DatasetLoadError


def _write_csv(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_table_types_fields(tmp_path):
    path = _write_csv(
        tmp_path,
        "Data Domain,Data Family,AFI,Quality,MOAT 1\n"
        "Supply Chain,Orders,TRUE,82,x\n"
        ",,,,\n"
        "Logistics,Shipments,FALSE,,\n",
    )

    rows, columns = load_table(path)

    assert columns == ["Data Domain", "Data Family", "AFI", "Quality", "MOAT 1"]
    assert len(rows) == 2
    assert list(rows["Data Family"]) == ["Orders", "Shipments"]
    assert rows["Quality"].iloc[0] == 82
    assert [is_truthy(v) for v in rows["AFI"]] == [True, False]
    assert [is_truthy(v) for v in rows["MOAT 1"]] == [True, False]


def test_missing_file_raises(tmp_path):
    with pytest.raises(DatasetLoadError, match="not found"):
        load_table(tmp_path / "nope.csv")


def test_empty_file_raises(tmp_path):
    path = _write_csv(tmp_path, "")

    with pytest.raises(DatasetLoadError, match="empty"):
        load_table(path)


def test_header_only_file_gives_empty_catalog(tmp_path):
    path = _write_csv(tmp_path, "Domain,Family,Quality\n")

    rows, columns = load_table(path)
    catalog = Catalog.from_table(rows, columns)

    assert catalog.n_rows == 0
    assert catalog.schema.domain_column == "Domain"


def test_na_like_labels_stay_strings(tmp_path):
    path = _write_csv(
        tmp_path,
        "Data Domain,Data Family,Quality\n"
        "NA,Sales Orders,10\n"
        "Finance,None,20\n"
        "Finance,null,\n"
        "Finance,Ledger,30\n",
    )

    rows, columns = load_table(path)
    view = build_catalog_view(Catalog.from_table(rows, columns), FilterCriteria())

    assert {d.name: [f.name for f in d.families] for d in view.domains} == {
        "Finance": ["Ledger", "None", "null"],
        "NA": ["Sales Orders"],
    }
    # Empty cells are still missing and numbers still parse
    assert rows["Quality"].isna().tolist() == [False, False, True, False]
    assert rows["Quality"].iloc[0] == 10
