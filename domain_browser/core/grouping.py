from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pandas as pd

from .coercion import cell_text, clean_record
from .schema import ColumnSchema, VARIANT_BRAND_ROWS

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

# Domain label that is never shown, whatever the criteria.
EXCLUDED_DOMAIN = "other"


@dataclass(frozen=True)
class FamilyGroup:
    """
    One data family inside a domain.

    - row: representative row (first seen) in the brand-as-column layout
    - brands: brand code -> row (last seen) in the brand-as-row layout
    """
    name: str
    row: Optional[Row] = None
    brands: Dict[str, Row] = field(default_factory=dict)


@dataclass(frozen=True)
class DomainGroup:
    name: str
    families: List[FamilyGroup]

    def family_names(self) -> List[str]:
        return [f.name for f in self.families]

    def family(self, name: str) -> Optional[FamilyGroup]:
        return next((f for f in self.families if f.name == name), None)


@dataclass(frozen=True)
class GroupedView:
    domains: List[DomainGroup]
    variant: str

    @property
    def is_empty(self) -> bool:
        return not self.domains

    def domain_names(self) -> List[str]:
        return [d.name for d in self.domains]

    def domain(self, name: str) -> Optional[DomainGroup]:
        return next((d for d in self.domains if d.name == name), None)


def domain_key(value: Any) -> str:
    """Trimmed domain label, or "" when the row must be excluded."""
    text = cell_text(value).strip()
    if text.lower() == EXCLUDED_DOMAIN:
        return ""
    return text


def _brand_code(value: Any, schema: ColumnSchema) -> str:
    text = cell_text(value).strip()
    canonical = {code.lower(): code for code in schema.brand_codes}
    return canonical.get(text.lower(), text)


def group_rows(rows: pd.DataFrame, schema: ColumnSchema) -> GroupedView:
    """
    Group filtered rows by domain -> family (-> brand in the brand-as-row layout).

    Rows without a domain, with the domain "Other", or without a family are
    dropped. Domains and families come out sorted by name.
    """
    variant = schema.variant
    if schema.domain_column is None or schema.family_column is None or rows.empty:
        return GroupedView(domains=[], variant=variant)

    by_domain: Dict[str, Dict[str, FamilyGroup]] = {}
    for record in rows.to_dict("records"):
        domain = domain_key(record.get(schema.domain_column))
        if not domain:
            continue
        family = cell_text(record.get(schema.family_column)).strip()
        if not family:
            continue

        families = by_domain.setdefault(domain, {})
        row = clean_record(record)

        if variant == VARIANT_BRAND_ROWS:
            group = families.setdefault(family, FamilyGroup(name=family))
            brand = _brand_code(record.get(schema.brand_column), schema)
            if brand:
                group.brands[brand] = row
        elif family not in families:
            families[family] = FamilyGroup(name=family, row=row)

    domains = [
        DomainGroup(
            name=domain,
            families=[families[name] for name in sorted(families)],
        )
        for domain, families in sorted(by_domain.items())
    ]

    logger.debug(
        "group_rows",
        extra={"rows_in": len(rows), "n_domains": len(domains), "variant": variant},
    )
    return GroupedView(domains=domains, variant=variant)
