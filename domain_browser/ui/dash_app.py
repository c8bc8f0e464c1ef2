from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppContext
from domain_browser.config.config_loader import load_global_config
from domain_browser.core.catalog import Catalog
from domain_browser.core.exceptions import DatasetLoadError
from domain_browser.validation.schema_validation import warn_on_invalid_catalog
from domain_browser.ui.layout.build_layout import build_layout
from domain_browser.ui.callbacks.callbacks_filters import register_filter_callbacks
from domain_browser.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def build_context(config_root: Path | str) -> AppContext:
    """
    Load config and catalog once. A CSV that fails to load leaves the
    context without a catalog so the UI can show a load-failed status.
    """
    config_root = Path(config_root)
    global_config = load_global_config(config_root)

    try:
        catalog = Catalog.from_config(global_config)
    except DatasetLoadError as e:
        logger.exception("Catalog load failed", extra={"data_file": str(global_config.data_file)})
        ctx = AppContext(config_root=config_root, global_config=global_config, load_error=str(e))
    else:
        warn_on_invalid_catalog(catalog, logger)
        ctx = AppContext(config_root=config_root, global_config=global_config, catalog=catalog)

    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_context(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
        suppress_callback_exceptions=True,
    )
    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    # Without a catalog the filter widgets are not in the layout
    if ctx.loaded:
        register_filter_callbacks(app, ctx)
        register_render_callbacks(app, ctx)

    return app
