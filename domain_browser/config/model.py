from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from domain_browser.core.schema import DEFAULT_BRANDS, DEFAULT_MEASURES

DEFAULT_MOAT_LABELS: Dict[str, str] = {
    "1": "Moat 1: Supply Chain & Demand Planning",
    "2": "Moat 2: Warehouse & Distribution",
    "3": "Moat 3: Customer Success",
}


@dataclass
class GlobalConfig:
    """
    Parsed global.json for one deployment.

    The brand and measure vocabularies are fixed per instance; columns are
    matched against them when the catalog loads.
    """
    ui_title: str = "Data Domain Browser"
    subtitle: str = "Data domains & families"
    data_file: Optional[Path] = None
    brand_codes: List[str] = field(default_factory=lambda: list(DEFAULT_BRANDS))
    measures: List[str] = field(default_factory=lambda: list(DEFAULT_MEASURES))
    default_measure: Optional[str] = "Quality"
    moat_labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_MOAT_LABELS))
    icons_path: str = "/assets/icons"
