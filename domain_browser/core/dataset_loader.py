from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from domain_browser.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)


def load_table(path: Path | str) -> Tuple[pd.DataFrame, List[str]]:
    """
    Read the catalog CSV into (rows, column names).

    Fields are typed opportunistically by pandas: numeric-looking strings
    become numbers, TRUE/FALSE columns become booleans, and only empty
    cells become missing. Lines with no values at all are dropped.

    Raises:
        DatasetLoadError: file missing, empty or unparsable
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Catalog CSV not found at {path}.")

    try:
        # Only empty cells are missing; "NA", "None" and "null" stay labels
        df = pd.read_csv(
            path,
            skip_blank_lines=True,
            encoding="utf-8-sig",
            keep_default_na=False,
            na_values=[""],
        )
    except pd.errors.EmptyDataError as e:
        raise DatasetLoadError(f"Catalog CSV at {path} is empty.") from e
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DatasetLoadError(f"Failed to parse catalog CSV at {path}: {e}") from e

    columns = [str(c) for c in df.columns]
    df.columns = columns

    n_raw = len(df)
    df = df.dropna(how="all").reset_index(drop=True)
    if len(df) != n_raw:
        logger.info(
            "Dropped empty rows from catalog CSV",
            extra={"path": str(path), "dropped": n_raw - len(df)},
        )

    logger.info("Loaded catalog CSV", extra={"path": str(path), "n_rows": len(df), "n_columns": len(columns)})
    return df, columns
