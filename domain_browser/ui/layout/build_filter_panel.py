from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from domain_browser.core.criteria import FilterCriteria
from domain_browser.ui.config import AppContext
from domain_browser.ui.helpers import (
    brand_options,
    focus_brand_options,
    measure_options,
    moat_options,
    usecase_dropdown,
)
from domain_browser.ui.ids import IDs


def build_filter_panel(ctx: AppContext, defaults: FilterCriteria) -> dbc.Card:
    catalog = ctx.catalog
    usecase_opts, usecase_disabled, usecase_placeholder = usecase_dropdown(catalog, defaults.moat)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", class_name="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Search", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="search",
                        debounce=False,
                        placeholder="Domain or family",
                        class_name="mb-3",
                    ),

                    html.Label("Brands", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.BRAND_CHECKLIST,
                        options=brand_options(catalog),
                        value=list(defaults.selected_brands),
                        inline=True,
                        class_name="mb-3",
                    ),

                    html.Label("Moat", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.MOAT_SELECT,
                        options=moat_options(catalog),
                        value=defaults.moat or None,
                        placeholder="All moats",
                        className="mb-3",
                    ),

                    html.Label("Use case", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.USECASE_SELECT,
                        options=usecase_opts,
                        value=None,
                        disabled=usecase_disabled,
                        placeholder=usecase_placeholder,
                        className="mb-3",
                    ),

                    html.Label("Colour by", className="form-label"),
                    dbc.RadioItems(
                        id=IDs.Control.MEASURE_BUTTONS,
                        options=measure_options(catalog),
                        value=defaults.measure,
                        class_name="btn-group mb-3 d-flex flex-wrap",
                        input_class_name="btn-check",
                        label_class_name="btn btn-outline-secondary btn-sm",
                        label_checked_class_name="active",
                    ),

                    html.Label("Focus brand", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.FOCUS_BRAND_SELECT,
                        options=focus_brand_options(catalog),
                        value=defaults.focus_brand,
                        placeholder="None",
                        className="mb-3",
                    ),

                    dbc.Switch(
                        id=IDs.Control.DOMAINS_ONLY_TOGGLE,
                        label="Domains only",
                        value=defaults.domains_only,
                        class_name="mb-3",
                    ),

                    html.Hr(),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        outline=True,
                        size="sm",
                    ),
                ]
            ),
        ],
        class_name="dd-sidebar",
    )
