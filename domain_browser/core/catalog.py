from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .coercion import cell_text
from .dataset_loader import load_table
from .schema import ColumnSchema, DEFAULT_BRANDS, DEFAULT_MEASURES, resolve_schema

if TYPE_CHECKING:
    from domain_browser.config.model import GlobalConfig

logger = logging.getLogger(__name__)


class Catalog:
    """
    The loaded catalog: rows plus the column schema resolved from them.

    Created once at load time and never mutated. Every render reads from it
    through the pure filter/group/colour functions.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        rows: pd.DataFrame,
        columns: Sequence[str],
        schema: ColumnSchema,
        moat_labels: Optional[Dict[str, str]] = None,
        source_path: Optional[Path] = None,
    ) -> None:
        self.rows = rows
        self.columns: Tuple[str, ...] = tuple(columns)
        self.schema = schema
        self.moat_labels: Dict[str, str] = dict(moat_labels or {})
        self.source_path = source_path

    @classmethod
    def from_table(
        cls,
        rows: pd.DataFrame,
        columns: Sequence[str],
        brand_codes: Sequence[str] = DEFAULT_BRANDS,
        measures: Sequence[str] = DEFAULT_MEASURES,
        moat_labels: Optional[Dict[str, str]] = None,
        source_path: Optional[Path] = None,
    ) -> Catalog:
        schema = resolve_schema(columns, brand_codes=brand_codes, measures=measures)
        return cls(rows, columns, schema, moat_labels=moat_labels, source_path=source_path)

    @classmethod
    def from_config(cls, config: GlobalConfig) -> Catalog:
        """
        Load the CSV named by the config and resolve its schema.

        Raises:
            DatasetLoadError: the CSV could not be read
        """
        rows, columns = load_table(config.data_file)
        return cls.from_table(
            rows,
            columns,
            brand_codes=config.brand_codes,
            measures=config.measures,
            moat_labels=config.moat_labels,
            source_path=config.data_file,
        )

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    # -------------------------------------------------------------------------
    # Option lists for the criteria widgets
    # -------------------------------------------------------------------------
    def moat_options(self) -> List[Tuple[str, str]]:
        """(moat number, label) pairs in moat-number order."""
        return [
            (number, self.moat_labels.get(number, col))
            for number, col in self.schema.moat_columns.items()
        ]

    def usecase_options(self, moat: Optional[str]) -> List[str]:
        """Use-case columns under the given moat; empty until a moat is chosen."""
        return self.schema.usecases_for_moat(moat)

    def measure_options(self) -> List[str]:
        return [name for name, col in self.schema.measure_columns.items() if col]

    def brand_options(self) -> List[str]:
        """
        Brand codes the user can select.

        Brand-as-row catalogs list the distinct values of the brand column,
        vocabulary codes first.
        """
        schema = self.schema
        if schema.brand_column is None:
            return list(schema.brand_columns)

        values = {cell_text(v).strip() for v in self.rows[schema.brand_column]}
        values.discard("")
        lowered = {v.lower(): v for v in values}
        known = [code for code in schema.brand_codes if code.lower() in lowered]
        known_lower = {code.lower() for code in known}
        extra = sorted(v for v in values if v.lower() not in known_lower)
        return known + extra
