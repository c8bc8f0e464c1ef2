from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from domain_browser.config.model import GlobalConfig
from domain_browser.core.catalog import Catalog
from domain_browser.core.criteria import FilterCriteria


@dataclass
class AppContext:
    """
    Everything the callbacks share. Built once in create_dash_app.

    catalog is None when the CSV failed to load; load_error then holds the
    reason shown in the status bar.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Optional[Catalog] = None
    load_error: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return self.catalog is not None

    def default_criteria(self) -> FilterCriteria:
        measure = self.global_config.default_measure
        # An explicit null default means "no colouring" and is kept as-is
        if measure is not None and self.catalog is not None and measure not in self.catalog.measure_options():
            options = self.catalog.measure_options()
            measure = options[0] if options else None
        return FilterCriteria(measure=measure)

    def validate(self) -> None:
        """A context must either carry a catalog or explain why it has none."""
        if self.catalog is None and not self.load_error:
            raise RuntimeError("AppContext.catalog is missing without a load_error.")
