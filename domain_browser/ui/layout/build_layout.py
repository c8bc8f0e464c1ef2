from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from domain_browser.ui.config import AppContext
from domain_browser.ui.layout.build_filter_panel import build_filter_panel
from domain_browser.ui.layout.build_grid_panel import build_details_drawer, build_grid_panel
from domain_browser.ui.layout.build_navbar import build_navbar
from domain_browser.ui.ids import IDs

LOAD_FAILED_STATUS = "Failed to load CSV"


def build_layout(ctx: AppContext) -> dbc.Container:
    defaults = ctx.default_criteria()

    if ctx.catalog is None:
        status = LOAD_FAILED_STATUS
        filter_panel = dbc.Card(
            dbc.CardBody(ctx.load_error or LOAD_FAILED_STATUS),
            class_name="dd-sidebar",
        )
    else:
        status = f"Loaded {ctx.catalog.n_rows} rows from CSV"
        filter_panel = build_filter_panel(ctx, defaults)

    return dbc.Container(
        fluid=True,
        class_name="dd-root",
        children=[
            build_navbar(ctx.global_config, status),

            # Criteria live client-side; the server only holds the catalog
            dcc.Store(id=IDs.Store.CRITERIA, storage_type="memory", data=defaults.to_dict()),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, class_name="mt-3"),
                    dbc.Col(build_grid_panel(), md=9, class_name="mt-3"),
                ],
                class_name="gx-3",
            ),
            build_details_drawer(),
        ],
    )
