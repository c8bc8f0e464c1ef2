from __future__ import annotations

import logging
from typing import List

import pandas as pd

from .coercion import cell_text, is_truthy
from .criteria import FilterCriteria
from .schema import ColumnSchema

logger = logging.getLogger(__name__)


def _text(series: pd.Series) -> pd.Series:
    return series.map(cell_text).astype(str).str.lower()


def _truthy(series: pd.Series) -> pd.Series:
    return series.map(is_truthy).astype(bool)


def _search_mask(rows: pd.DataFrame, schema: ColumnSchema, query: str) -> pd.Series:
    mask = pd.Series(False, index=rows.index)
    for col in (schema.domain_column, schema.family_column):
        if col is not None and col in rows.columns:
            mask |= _text(rows[col]).str.contains(query, regex=False).astype(bool)
    return mask


def _brand_mask(rows: pd.DataFrame, schema: ColumnSchema, brands: List[str]) -> pd.Series | None:
    """Row mask for the brand stage, or None when nothing selected is resolvable."""
    if schema.brand_column is not None:
        wanted = {b.strip().lower() for b in brands if b and b.strip()}
        if not wanted:
            return None
        mask = _text(rows[schema.brand_column]).str.strip().isin(wanted).astype(bool)
        if schema.exists_column is not None:
            mask &= _truthy(rows[schema.exists_column])
        return mask

    by_code = {col.strip().lower(): col for col in schema.brand_columns}
    cols = [by_code[b.lower()] for b in brands if b and b.lower() in by_code]
    if not cols:
        return None
    mask = pd.Series(False, index=rows.index)
    for col in cols:
        mask |= _truthy(rows[col])
    return mask


def filter_rows(rows: pd.DataFrame, schema: ColumnSchema, criteria: FilterCriteria) -> pd.DataFrame:
    """
    Apply the criteria as an AND of stages: search, brands, moat, use case.

    Stages whose criterion is empty (or unresolvable against the schema) are
    skipped. The input frame is not modified and row order is preserved.
    """
    out = rows
    n_in = len(rows)

    # 1) Text search on domain OR family
    query = criteria.search_query
    if query:
        out = out[_search_mask(out, schema, query)]

    # 2) Brands (OR across selected brands)
    if criteria.selected_brands:
        mask = _brand_mask(out, schema, list(criteria.selected_brands))
        if mask is not None:
            out = out[mask]

    # 3) Moat flag
    moat_col = schema.moat_column(criteria.moat)
    if moat_col is not None:
        out = out[_truthy(out[moat_col])]

    # 4) Use-case flag
    if criteria.usecase and criteria.usecase in schema.usecase_columns:
        out = out[_truthy(out[criteria.usecase])]

    logger.debug("filter_rows", extra={"rows_in": n_in, "rows_out": len(out)})
    return out
