from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from domain_browser.ui.ids import IDs

EMPTY_MESSAGE = "No data domains match the current filters. Try clearing one or more filters."


def build_grid_panel() -> html.Div:
    return html.Div(
        [
            dbc.Alert(
                EMPTY_MESSAGE,
                id=IDs.Control.EMPTY_STATE,
                color="light",
                is_open=False,
                class_name="dd-empty-state",
            ),
            dbc.Row(id=IDs.Control.GRID, class_name="g-3"),
        ]
    )


def build_details_drawer() -> dbc.Offcanvas:
    return dbc.Offcanvas(
        html.Div(id=IDs.Control.DETAILS_BODY),
        id=IDs.Control.DETAILS_DRAWER,
        title="Data family",
        placement="end",
        is_open=False,
    )
