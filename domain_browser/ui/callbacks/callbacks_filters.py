from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State
from dash.exceptions import PreventUpdate

from domain_browser.core.criteria import FilterCriteria
from domain_browser.ui.helpers import usecase_dropdown
from domain_browser.ui.ids import IDs

if TYPE_CHECKING:
    from domain_browser.ui.config import AppContext

logger = logging.getLogger(__name__)


def criteria_from_controls(
    ctx: AppContext,
    search_text: str | None,
    brands: list | None,
    moat: str | None,
    usecase: str | None,
    domains_only: bool | None,
    measure: str | None,
    focus_brand: str | None,
    moat_changed: bool = False,
) -> FilterCriteria:
    """Build criteria from widget values, dropping a use case that does not belong to the moat."""
    criteria = FilterCriteria(
        search_text=search_text or "",
        selected_brands=tuple(brands or ()),
        moat=str(moat) if moat else "",
        usecase=usecase or "",
        domains_only=bool(domains_only),
        measure=measure or None,
        focus_brand=focus_brand or None,
    )
    if moat_changed:
        return criteria.with_moat(criteria.moat)
    if criteria.usecase and ctx.catalog is not None:
        if criteria.usecase not in ctx.catalog.usecase_options(criteria.moat):
            return criteria.with_moat(criteria.moat)
    return criteria


def register_filter_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Controls -> criteria store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.CRITERIA, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.BRAND_CHECKLIST, "value"),
        Input(IDs.Control.MOAT_SELECT, "value"),
        Input(IDs.Control.USECASE_SELECT, "value"),
        Input(IDs.Control.DOMAINS_ONLY_TOGGLE, "value"),
        Input(IDs.Control.MEASURE_BUTTONS, "value"),
        Input(IDs.Control.FOCUS_BRAND_SELECT, "value"),
        prevent_initial_call=True,
    )
    def update_criteria(search_text, brands, moat, usecase, domains_only, measure, focus_brand):
        criteria = criteria_from_controls(
            ctx,
            search_text,
            brands,
            moat,
            usecase,
            domains_only,
            measure,
            focus_brand,
            moat_changed=dash.ctx.triggered_id == IDs.Control.MOAT_SELECT,
        )
        logger.debug("criteria_update", extra={"criteria": criteria.to_dict()})
        return criteria.to_dict()

    # ---------------------------------------------------------
    # Moat -> use-case dropdown (always clears the selection)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.USECASE_SELECT, "options"),
        Output(IDs.Control.USECASE_SELECT, "disabled"),
        Output(IDs.Control.USECASE_SELECT, "placeholder"),
        Output(IDs.Control.USECASE_SELECT, "value"),
        Input(IDs.Control.MOAT_SELECT, "value"),
        prevent_initial_call=True,
    )
    def rebuild_usecase_select(moat: str | None):
        options, disabled, placeholder = usecase_dropdown(ctx.catalog, moat)
        return options, disabled, placeholder, None

    # ---------------------------------------------------------
    # Reset button -> every control back to its default
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.BRAND_CHECKLIST, "value"),
        Output(IDs.Control.MOAT_SELECT, "value"),
        Output(IDs.Control.DOMAINS_ONLY_TOGGLE, "value"),
        Output(IDs.Control.MEASURE_BUTTONS, "value"),
        Output(IDs.Control.FOCUS_BRAND_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        State(IDs.Store.CRITERIA, "data"),
        prevent_initial_call=True,
    )
    def reset_filters(n_clicks, current):
        if not n_clicks:
            raise PreventUpdate
        defaults = ctx.default_criteria()
        logger.info("filters_reset", extra={"previous": current})
        return "", [], None, defaults.domains_only, defaults.measure, None
