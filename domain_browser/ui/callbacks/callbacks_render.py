from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output
from dash.exceptions import PreventUpdate

from domain_browser.core.catalog_view import build_catalog_view, describe_family
from domain_browser.core.criteria import FilterCriteria
from domain_browser.ui.cards import render_details, render_grid
from domain_browser.ui.helpers import make_icon_src
from domain_browser.ui.ids import IDs

if TYPE_CHECKING:
    from domain_browser.ui.config import AppContext

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


def _criteria_or_default(ctx: AppContext, data: dict[str, Any] | None) -> FilterCriteria:
    if data is None:
        return ctx.default_criteria()
    try:
        return FilterCriteria.from_dict(data)
    except (AttributeError, TypeError, ValueError):
        logger.exception("Invalid criteria in store, falling back to defaults: %r", data)
        return ctx.default_criteria()


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    icons_dir = ASSETS_DIR / "icons"
    icon_src = make_icon_src(ctx.global_config.icons_path, icons_dir)

    # ---------------------------------------------------------
    # Criteria -> cards + status
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.GRID, "children"),
        Output(IDs.Control.EMPTY_STATE, "is_open"),
        Output(IDs.Control.STATUS_BAR, "children"),
        Input(IDs.Store.CRITERIA, "data"),
    )
    def render_catalog(criteria_data: dict[str, Any] | None):
        if ctx.catalog is None:
            return [], False, dash.no_update

        criteria = _criteria_or_default(ctx, criteria_data)
        view = build_catalog_view(ctx.catalog, criteria)

        # First paint keeps the "Loaded N rows" message
        status = dash.no_update if dash.ctx.triggered_id is None else view.status_text
        return render_grid(view, icon_src), view.is_empty, status

    # ---------------------------------------------------------
    # Family tile click -> details drawer
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DETAILS_DRAWER, "is_open"),
        Output(IDs.Control.DETAILS_DRAWER, "title"),
        Output(IDs.Control.DETAILS_BODY, "children"),
        Input({"type": IDs.Pattern.FAMILY_TILE, "domain": ALL, "family": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def open_family_details(_clicks):
        trigger = dash.ctx.triggered_id
        # Re-rendered tiles fire with n_clicks=0; only real clicks open the drawer
        if ctx.catalog is None or trigger is None or not dash.ctx.triggered[0].get("value"):
            raise PreventUpdate

        details = describe_family(ctx.catalog, trigger["domain"], trigger["family"])
        if details is None:
            logger.warning("Family not found for details", extra={"domain": trigger["domain"], "family": trigger["family"]})
            raise PreventUpdate

        return True, details.family, render_details(details)
