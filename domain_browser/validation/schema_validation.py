from __future__ import annotations

import logging

from domain_browser.core.catalog import Catalog
from domain_browser.validation.errors import ValidationIssue, ValidationError


def validate_catalog(catalog: Catalog) -> None:
    issues: list[ValidationIssue] = []
    schema = catalog.schema

    if catalog.n_rows == 0:
        issues.append(ValidationIssue("CATALOG_EMPTY", "Catalog CSV has no data rows."))

    # domain/family columns (ordinal fallback means these only fail on tiny tables)
    if schema.domain_column is None:
        issues.append(ValidationIssue("CATALOG_DOMAIN_COLUMN", "No domain column could be resolved."))
    if schema.family_column is None:
        issues.append(ValidationIssue("CATALOG_FAMILY_COLUMN", "No family column could be resolved."))

    # brands: either per-brand flag columns or a brand column
    if not schema.brand_columns and schema.brand_column is None:
        issues.append(
            ValidationIssue(
                "CATALOG_BRANDS",
                f"None of the brand columns {list(schema.brand_codes)} (or a Brand column) are present.",
            )
        )

    missing = [name for name, col in schema.measure_columns.items() if col is None]
    if missing:
        issues.append(
            ValidationIssue("CATALOG_MEASURES", f"Measure columns not found: {', '.join(missing)}.")
        )

    # use cases whose moat has no column can never be selected
    reachable = {uc for moat in schema.moat_columns for uc in schema.usecases_for_moat(moat)}
    for col in schema.usecase_columns:
        if col not in reachable:
            issues.append(ValidationIssue("CATALOG_USECASE_MOAT", "Use-case column has no moat column.", column=col))

    if issues:
        raise ValidationError(issues)


def warn_on_invalid_catalog(catalog: Catalog, logger: logging.Logger) -> None:
    """
    Validate the catalog and log a warning if any roles are missing.

    Warn-only: missing roles just disable the matching filters/colouring.
    """
    try:
        validate_catalog(catalog)
    except ValidationError as e:
        logger.warning(
            "Catalog %r validation failed: %s",
            str(catalog.source_path or "<memory>"),
            "; ".join(str(issue) for issue in e.issues),
        )
