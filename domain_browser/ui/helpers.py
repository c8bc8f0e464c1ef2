from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from domain_browser.core.catalog import Catalog

MOAT_PLACEHOLDER = "(Select Moat first)"
ALL_USECASES = "All use cases"


def brand_options(catalog: Optional[Catalog]) -> List[dict]:
    if catalog is None:
        return []
    return [{"label": f" {code}", "value": code} for code in catalog.brand_options()]


def focus_brand_options(catalog: Optional[Catalog]) -> List[dict]:
    if catalog is None:
        return []
    return [{"label": code, "value": code} for code in catalog.brand_options()]


def moat_options(catalog: Optional[Catalog]) -> List[dict]:
    if catalog is None:
        return []
    return [{"label": label, "value": number} for number, label in catalog.moat_options()]


def measure_options(catalog: Optional[Catalog]) -> List[dict]:
    if catalog is None:
        return []
    return [{"label": name, "value": name} for name in catalog.measure_options()]


def usecase_dropdown(catalog: Optional[Catalog], moat: Optional[str]) -> tuple[List[dict], bool, str]:
    """
    (options, disabled, placeholder) for the use-case dropdown.

    Disabled with a hint until a moat is selected.
    """
    if catalog is None or not moat:
        return [], True, MOAT_PLACEHOLDER
    options = [{"label": col, "value": col} for col in catalog.usecase_options(moat)]
    return options, False, ALL_USECASES


PLACEHOLDER_ICON = "_placeholder.svg"


def make_icon_src(icons_url: str, icons_dir: Path) -> Callable[[str], str]:
    """
    Resolve a domain slug to an icon URL, falling back to the placeholder
    when no <slug>.svg ships in the icons folder.
    """
    base = icons_url.rstrip("/")

    def icon_src(slug: str) -> str:
        name = f"{slug}.svg" if slug and (icons_dir / f"{slug}.svg").is_file() else PLACEHOLDER_ICON
        return f"{base}/{name}"

    return icon_src
