import logging

import pandas as pd
import pytest

from domain_browser.core.catalog import Catalog
from domain_browser.validation.errors import ValidationError
from domain_browser.validation.schema_validation import validate_catalog, warn_on_invalid_catalog


def _make_catalog(columns, records=None) -> Catalog:
    rows = pd.DataFrame(records or [], columns=columns)
    return Catalog.from_table(rows, columns)


def test_complete_catalog_passes():
    columns = ["Domain", "Family", "AFI", "Quality", "Accessibility", "Timeliness", "Completeness",
               "MOAT 1", "1.1 Forecasting"]
    catalog = _make_catalog(columns, [["D", "F", True, 1, 2, 3, 4, "x", "x"]])

    validate_catalog(catalog)


def test_missing_roles_are_reported():
    catalog = _make_catalog(["Domain", "Family", "Quality", "2.1 Slotting"])

    with pytest.raises(ValidationError) as exc:
        validate_catalog(catalog)

    assert exc.value.codes == {"CATALOG_EMPTY", "CATALOG_BRANDS", "CATALOG_MEASURES", "CATALOG_USECASE_MOAT"}
    assert "Accessibility" in str(exc.value)

    orphan = next(i for i in exc.value.issues if i.code == "CATALOG_USECASE_MOAT")
    assert orphan.column == "2.1 Slotting"
    assert str(orphan).startswith("CATALOG_USECASE_MOAT [2.1 Slotting]")


def test_tiny_table_reports_domain_and_family():
    catalog = _make_catalog([])

    with pytest.raises(ValidationError) as exc:
        validate_catalog(catalog)

    assert {"CATALOG_DOMAIN_COLUMN", "CATALOG_FAMILY_COLUMN"} <= exc.value.codes


def test_warn_on_invalid_catalog_logs(caplog):
    catalog = _make_catalog(["Domain", "Family"])
    logger = logging.getLogger("test_schema_validation")

    with caplog.at_level(logging.WARNING, logger="test_schema_validation"):
        warn_on_invalid_catalog(catalog, logger)

    assert "CATALOG_BRANDS" in caplog.text
