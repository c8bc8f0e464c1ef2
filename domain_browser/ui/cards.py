from __future__ import annotations

from typing import Callable, List

import dash_bootstrap_components as dbc
from dash import html

from domain_browser.core.catalog_view import CatalogView, DomainCard, FamilyCard, FamilyDetails
from domain_browser.core.coercion import cell_text
from domain_browser.ui.ids import family_tile_id


def _brand_badges(card: FamilyCard) -> List[html.Span]:
    badges = []
    for chip in card.brands:
        style = {"backgroundColor": chip.color.to_css()} if chip.color is not None else {}
        badges.append(
            html.Span(
                chip.code,
                className="dd-brand-chip" + ("" if chip.present else " dd-brand-chip-absent"),
                style=style,
            )
        )
    return badges


def family_tile(domain: str, card: FamilyCard) -> html.Div:
    # No colour -> neutral tile, never a fallback colour
    style = {"backgroundColor": card.color.to_css()} if card.color is not None else {}
    class_name = "dd-family-tile rounded border px-3 py-2"
    if card.dimmed:
        class_name += " dd-family-dimmed"

    return html.Div(
        [
            html.Span(card.name, className="fw-medium"),
            html.Div(_brand_badges(card), className="dd-brand-chips"),
        ],
        id=family_tile_id(domain, card.name),
        n_clicks=0,
        title=card.tooltip,
        style=style,
        className=class_name,
    )


def domain_card(card: DomainCard, domains_only: bool, icon_src: Callable[[str], str]) -> dbc.Col:
    header = html.Div(
        [
            html.Img(src=icon_src(card.slug), alt=card.name, className="dd-domain-icon"),
            html.H2(card.name, className="h6 fw-semibold mb-0"),
        ],
        className="d-flex align-items-center gap-3 mb-3",
    )

    if domains_only:
        body = html.Div("Data Families hidden", className="dd-families-hidden text-muted small")
    else:
        body = html.Div(
            [family_tile(card.name, f) for f in card.families],
            className="dd-family-grid",
        )

    return dbc.Col(
        dbc.Card(dbc.CardBody([header, body]), class_name="dd-domain-card h-100"),
        xs=12, md=6, xl=4,
        class_name="mb-3",
    )


def render_grid(view: CatalogView, icon_src: Callable[[str], str]) -> List[dbc.Col]:
    return [domain_card(card, view.domains_only, icon_src) for card in view.domains]


def render_details(details: FamilyDetails) -> List:
    """Offcanvas body for one family."""
    rows = []
    for measure, readings in details.measures.items():
        cells = []
        for reading in readings:
            text = "n/a" if reading.value is None else cell_text(reading.value)
            if reading.brand:
                text = f"{reading.brand}: {text}"
            style = {"backgroundColor": reading.color.to_css()} if reading.color is not None else {}
            cells.append(html.Span(text, className="dd-measure-value", style=style))
        rows.append(html.Tr([html.Th(measure), html.Td(cells)]))

    children: List = [html.P(details.domain, className="text-muted mb-2")]
    if rows:
        children.append(dbc.Table(html.Tbody(rows), size="sm", borderless=True))
    children.append(html.H6("Moats", className="mt-3"))
    children.append(
        html.Ul([html.Li(m) for m in details.moats]) if details.moats
        else html.P("None", className="text-muted small")
    )
    children.append(html.H6("Use cases", className="mt-3"))
    children.append(
        html.Ul([html.Li(u) for u in details.usecases]) if details.usecases
        else html.P("None", className="text-muted small")
    )
    return children
