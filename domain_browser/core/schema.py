from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BRANDS: Tuple[str, ...] = ("AFI", "ADG", "RH")
DEFAULT_MEASURES: Tuple[str, ...] = ("Quality", "Accessibility", "Timeliness", "Completeness")

VARIANT_BRAND_COLUMNS = "brand_columns"
VARIANT_BRAND_ROWS = "brand_rows"

# Ranked candidate names per role, matched case-insensitively.
NAME_CANDIDATES: Dict[str, Tuple[str, ...]] = {
    "domain": ("Data Domain", "Domain", "DataDomain", "Domain Name"),
    "family": ("Data Family", "Data Product", "Family", "DataFamily"),
    "brand": ("Brand", "Brand Code", "BrandCode"),
    "exists": ("Exists", "Exists?", "Available", "Has Data"),
}

# Ordinal fallback when no candidate matches.
ORDINAL_FALLBACK: Dict[str, int] = {"domain": 0, "family": 1}

# (pattern, role) rules. Group 1 of every pattern is the moat number.
#   moat:    "MOAT 1", " moat2 - Supply chain"
#   usecase: "1.2 Forecasting", "2.4.1 Route planning"
PATTERN_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"^\s*moat\s*(\d+)", re.IGNORECASE), "moat"),
    (re.compile(r"^(\d+)\.\d+(?:\.\d+)?\s+\S"), "usecase"),
)


@dataclass(frozen=True)
class ColumnSchema:
    """
    Semantic roles of the catalog columns, resolved once per load.

    Fields:

    - domain_column / family_column: grouping columns (None only for tables with too few columns)
    - brand_columns: per-brand flag columns present in the table, in vocabulary order
    - measure_columns: measure name -> column name, or None when the measure is absent
    - moat_columns: moat number (string) -> flag column, ordered by moat number
    - usecase_columns: use-case flag columns, in table order
    - brand_column / exists_column: row-per-brand layout ("brand_rows" variant)
    """

    domain_column: Optional[str] = None
    family_column: Optional[str] = None
    brand_columns: Tuple[str, ...] = ()
    measure_columns: Dict[str, Optional[str]] = field(default_factory=dict)
    moat_columns: Dict[str, str] = field(default_factory=dict)
    usecase_columns: Tuple[str, ...] = ()
    brand_column: Optional[str] = None
    exists_column: Optional[str] = None
    brand_codes: Tuple[str, ...] = DEFAULT_BRANDS

    @property
    def variant(self) -> str:
        return VARIANT_BRAND_ROWS if self.brand_column else VARIANT_BRAND_COLUMNS

    def measure_column(self, measure: Optional[str]) -> Optional[str]:
        if not measure:
            return None
        return self.measure_columns.get(measure)

    def moat_column(self, moat: Optional[str]) -> Optional[str]:
        if not moat:
            return None
        return self.moat_columns.get(str(moat).strip())

    def usecases_for_moat(self, moat: Optional[str]) -> List[str]:
        if not moat:
            return []
        moat = str(moat).strip()
        return [col for col in self.usecase_columns if usecase_moat(col) == moat]


def _match_rule(column: str, role: str) -> Optional[str]:
    for pattern, rule_role in PATTERN_RULES:
        if rule_role != role:
            continue
        m = pattern.match(column)
        if m:
            return m.group(1)
    return None


def moat_number(column: str) -> Optional[str]:
    """Moat number of a moat column ("MOAT 2" -> "2"), or None."""
    number = _match_rule(column, "moat")
    return str(int(number)) if number is not None else None


def usecase_moat(column: str) -> Optional[str]:
    """Moat number a use-case column belongs to ("2.4.1 Foo" -> "2"), or None."""
    number = _match_rule(column, "usecase")
    return str(int(number)) if number is not None else None


def resolve_schema(
    columns: Sequence[str],
    brand_codes: Sequence[str] = DEFAULT_BRANDS,
    measures: Sequence[str] = DEFAULT_MEASURES,
) -> ColumnSchema:
    """
    Infer column roles from column names. Never raises; unresolved roles stay empty.
    """
    columns = [str(c) for c in columns]
    lookup: Dict[str, str] = {}
    for col in columns:
        lookup.setdefault(col.strip().lower(), col)

    def find(*candidates: str) -> Optional[str]:
        return next((lookup[c.lower()] for c in candidates if c.lower() in lookup), None)

    def find_role(role: str) -> Optional[str]:
        found = find(*NAME_CANDIDATES[role])
        if found is None and role in ORDINAL_FALLBACK:
            pos = ORDINAL_FALLBACK[role]
            found = columns[pos] if len(columns) > pos else None
        return found

    domain_column = find_role("domain")
    family_column = find_role("family")

    brand_columns = tuple(
        lookup[code.lower()] for code in brand_codes if code.lower() in lookup
    )

    measure_columns = {name: find(name) for name in measures}

    moats: List[Tuple[int, str]] = []
    seen_moats = set()
    usecases: List[str] = []
    for col in columns:
        number = moat_number(col)
        if number is not None:
            if number in seen_moats:
                logger.warning("Duplicate moat column ignored", extra={"column": col, "moat": number})
            else:
                seen_moats.add(number)
                moats.append((int(number), col))
            continue
        if usecase_moat(col) is not None:
            usecases.append(col)

    moat_columns = {str(num): col for num, col in sorted(moats)}

    schema = ColumnSchema(
        domain_column=domain_column,
        family_column=family_column,
        brand_columns=brand_columns,
        measure_columns=measure_columns,
        moat_columns=moat_columns,
        usecase_columns=tuple(usecases),
        brand_column=find_role("brand"),
        exists_column=find_role("exists"),
        brand_codes=tuple(brand_codes),
    )

    logger.debug(
        "Resolved column schema",
        extra={
            "domain_column": schema.domain_column,
            "family_column": schema.family_column,
            "brand_columns": list(schema.brand_columns),
            "measures": {k: v for k, v in measure_columns.items() if v},
            "moats": list(moat_columns),
            "n_usecases": len(usecases),
            "variant": schema.variant,
        },
    )
    return schema
