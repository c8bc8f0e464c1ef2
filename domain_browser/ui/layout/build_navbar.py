from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from domain_browser.config.model import GlobalConfig
from domain_browser.ui.ids import IDs


def build_navbar(global_config: GlobalConfig, status_text: str) -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title + subtitle
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0 h4"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: load / filter status
                html.Div(
                    status_text,
                    id=IDs.Control.STATUS_BAR,
                    className="ms-auto text-muted small dd-status",
                ),
            ],
        ),
        dark=False,
        class_name="shadow-sm dd-navbar",
    )
