from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .catalog import Catalog
from .coercion import cell_text, is_missing, is_truthy
from .colors import HslColor, color_for
from .criteria import FilterCriteria
from .filtering import filter_rows
from .grouping import FamilyGroup, GroupedView, Row, domain_key, group_rows
from .schema import ColumnSchema, VARIANT_BRAND_ROWS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrandChip:
    code: str
    present: bool
    color: Optional[HslColor] = None


@dataclass(frozen=True)
class FamilyCard:
    name: str
    color: Optional[HslColor] = None
    measure_value: Any = None
    tooltip: Optional[str] = None
    dimmed: bool = False
    brands: List[BrandChip] = field(default_factory=list)


@dataclass(frozen=True)
class DomainCard:
    name: str
    slug: str
    families: List[FamilyCard]


@dataclass(frozen=True)
class CatalogView:
    """
    Everything presentation needs for one render: cards, colours and status.
    """
    domains: List[DomainCard]
    n_rows: int
    measure: Optional[str] = None
    domains_only: bool = False

    @property
    def n_domains(self) -> int:
        return len(self.domains)

    @property
    def is_empty(self) -> bool:
        return not self.domains

    @property
    def status_text(self) -> str:
        return f"{self.n_rows} rows / {self.n_domains} data domains shown"


@dataclass(frozen=True)
class MeasureReading:
    measure: str
    brand: Optional[str]
    value: Any
    color: Optional[HslColor]


@dataclass(frozen=True)
class FamilyDetails:
    """Detail drawer content for one family (one block per brand for brand-as-row catalogs)."""
    domain: str
    family: str
    measures: Dict[str, List[MeasureReading]]
    moats: List[str]
    usecases: List[str]


def slugify(value: Any) -> str:
    """Icon file stem for a domain name ("Supply Chain" -> "supply-chain")."""
    text = cell_text(value) or "domain"
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return slug.strip("-")


def _reading(row: Optional[Row], measure_col: Optional[str]) -> tuple[Any, Optional[HslColor]]:
    if row is None or measure_col is None:
        return None, None
    value = row.get(measure_col)
    if is_missing(value) or cell_text(value).strip() == "":
        return None, None
    return value, color_for(value)


def _tooltip(measure: Optional[str], value: Any) -> Optional[str]:
    if measure is None or value is None:
        return None
    return f"{measure}: {cell_text(value)}"


def _ordered_brands(group: FamilyGroup, schema: ColumnSchema) -> List[str]:
    known = [code for code in schema.brand_codes if code in group.brands]
    return known + sorted(code for code in group.brands if code not in known)


def _row_present(row: Row, schema: ColumnSchema) -> bool:
    if schema.exists_column is None:
        return True
    return is_truthy(row.get(schema.exists_column))


def _column_family_card(
    group: FamilyGroup, schema: ColumnSchema, criteria: FilterCriteria, measure_col: Optional[str]
) -> FamilyCard:
    row = group.row or {}
    value, color = _reading(row, measure_col)
    chips = [
        BrandChip(code=code, present=is_truthy(row.get(col)))
        for code, col in zip(_brand_codes_for_columns(schema), schema.brand_columns)
    ]

    dimmed = False
    if criteria.focus_brand:
        focus = next((c for c in chips if c.code.lower() == criteria.focus_brand.lower()), None)
        dimmed = focus is not None and not focus.present

    return FamilyCard(
        name=group.name,
        color=color,
        measure_value=value,
        tooltip=_tooltip(criteria.measure, value),
        dimmed=dimmed,
        brands=chips,
    )


def _brand_codes_for_columns(schema: ColumnSchema) -> List[str]:
    canonical = {code.lower(): code for code in schema.brand_codes}
    return [canonical.get(col.strip().lower(), col) for col in schema.brand_columns]


def _row_family_card(
    group: FamilyGroup, schema: ColumnSchema, criteria: FilterCriteria, measure_col: Optional[str]
) -> FamilyCard:
    chips = []
    for code in _ordered_brands(group, schema):
        row = group.brands[code]
        present = _row_present(row, schema)
        _, color = _reading(row, measure_col) if present else (None, None)
        chips.append(BrandChip(code=code, present=present, color=color))

    lead: Optional[str] = None
    dimmed = False
    if criteria.focus_brand:
        focus = criteria.focus_brand.lower()
        # Colour follows the focus brand only where its row says it exists, like the chips
        lead = next((c.code for c in chips if c.present and c.code.lower() == focus), None)
        dimmed = lead is None
    if lead is None:
        lead = next((c.code for c in chips if c.present), None)

    value, color = _reading(group.brands.get(lead) if lead else None, measure_col)
    return FamilyCard(
        name=group.name,
        color=color,
        measure_value=value,
        tooltip=_tooltip(criteria.measure, value),
        dimmed=dimmed,
        brands=chips,
    )


def view_from_groups(
    grouped: GroupedView, schema: ColumnSchema, criteria: FilterCriteria, n_rows: int
) -> CatalogView:
    measure_col = schema.measure_column(criteria.measure)
    build_card = _row_family_card if grouped.variant == VARIANT_BRAND_ROWS else _column_family_card

    domains = [
        DomainCard(
            name=domain.name,
            slug=slugify(domain.name),
            families=[build_card(f, schema, criteria, measure_col) for f in domain.families],
        )
        for domain in grouped.domains
    ]
    return CatalogView(
        domains=domains,
        n_rows=n_rows,
        measure=criteria.measure if measure_col else None,
        domains_only=criteria.domains_only,
    )


def build_catalog_view(catalog: Catalog, criteria: FilterCriteria) -> CatalogView:
    """
    Recompute the whole view for one set of criteria: filter -> group -> colour.
    """
    filtered = filter_rows(catalog.rows, catalog.schema, criteria)
    grouped = group_rows(filtered, catalog.schema)
    view = view_from_groups(grouped, catalog.schema, criteria, n_rows=len(filtered))

    logger.info(
        "catalog_view",
        extra={
            "n_rows": view.n_rows,
            "n_domains": view.n_domains,
            "measure": view.measure,
            "moat": criteria.moat or None,
            "usecase": criteria.usecase or None,
            "n_brands": len(criteria.selected_brands),
        },
    )
    return view


def _family_rows(catalog: Catalog, domain: str, family: str) -> pd.DataFrame:
    schema = catalog.schema
    rows = catalog.rows
    if schema.domain_column is None or schema.family_column is None:
        return rows.iloc[0:0]
    domains = rows[schema.domain_column].map(domain_key)
    families = rows[schema.family_column].map(lambda v: cell_text(v).strip())
    return rows[(domains == domain) & (families == family)]


def describe_family(catalog: Catalog, domain: str, family: str) -> Optional[FamilyDetails]:
    """
    Detail record for one family, independent of the active filters.

    Returns None when the family is not in the catalog.
    """
    schema = catalog.schema
    grouped = group_rows(_family_rows(catalog, domain, family), schema)
    domain_group = grouped.domain(domain)
    group = domain_group.family(family) if domain_group else None
    if group is None:
        return None

    if grouped.variant == VARIANT_BRAND_ROWS:
        blocks = {code: group.brands[code] for code in _ordered_brands(group, schema)}
    else:
        blocks = {None: group.row or {}}

    measures: Dict[str, List[MeasureReading]] = {}
    for name, col in schema.measure_columns.items():
        if col is None:
            continue
        readings = []
        for brand, row in blocks.items():
            value, color = _reading(row, col)
            readings.append(MeasureReading(measure=name, brand=brand, value=value, color=color))
        measures[name] = readings

    # A moat or use case counts when any block flags it
    def flagged(col: str) -> bool:
        return any(is_truthy(row.get(col)) for row in blocks.values())

    return FamilyDetails(
        domain=domain,
        family=family,
        measures=measures,
        moats=[catalog.moat_labels.get(num, col) for num, col in schema.moat_columns.items() if flagged(col)],
        usecases=[col for col in schema.usecase_columns if flagged(col)],
    )
