import pandas as pd
import pytest

from domain_browser.config.model import GlobalConfig
from domain_browser.core.catalog import Catalog
from domain_browser.core.catalog_view import BrandChip, CatalogView, DomainCard, FamilyCard
from domain_browser.core.colors import color_for
from domain_browser.ui.callbacks.callbacks_filters import criteria_from_controls
from domain_browser.ui.cards import domain_card, family_tile, render_grid
from domain_browser.ui.config import AppContext
from domain_browser.ui.helpers import (
    ALL_USECASES,
    MOAT_PLACEHOLDER,
    PLACEHOLDER_ICON,
    make_icon_src,
    usecase_dropdown,
)
from domain_browser.ui.ids import IDs


COLUMNS = ["Data Domain", "Data Family", "AFI", "Quality", "MOAT 1", "MOAT 2", "1.1 Forecasting", "2.1 Slotting"]


@pytest.fixture
def catalog() -> Catalog:
    rows = pd.DataFrame(
        [["Supply Chain", "Orders", True, 82, "x", "", "x", ""]],
        columns=COLUMNS,
    )
    return Catalog.from_table(rows, COLUMNS)


@pytest.fixture
def ctx(tmp_path, catalog) -> AppContext:
    return AppContext(config_root=tmp_path, global_config=GlobalConfig(), catalog=catalog)


def _icon(slug: str) -> str:
    return f"/icons/{slug}.svg"


def test_family_tile_carries_color_tooltip_and_pattern_id():
    card = FamilyCard(
        name="Orders",
        color=color_for(50),
        measure_value=50,
        tooltip="Quality: 50",
        brands=[BrandChip("AFI", True)],
    )

    tile = family_tile("Supply Chain", card)

    assert tile.id == {"type": IDs.Pattern.FAMILY_TILE, "domain": "Supply Chain", "family": "Orders"}
    assert tile.style == {"backgroundColor": color_for(50).to_css()}
    assert tile.title == "Quality: 50"
    assert "dd-family-dimmed" not in tile.className


def test_uncoloured_dimmed_tile_has_no_background():
    tile = family_tile("Supply Chain", FamilyCard(name="Orders", dimmed=True))

    assert tile.style == {}
    assert "dd-family-dimmed" in tile.className


def test_domain_card_hides_families_when_domains_only():
    card = DomainCard(name="Supply Chain", slug="supply-chain", families=[FamilyCard(name="Orders")])

    col = domain_card(card, domains_only=True, icon_src=_icon)
    body = col.children.children.children[1]

    assert body.children == "Data Families hidden"


def test_render_grid_one_column_per_domain():
    view = CatalogView(
        domains=[
            DomainCard(name="A", slug="a", families=[FamilyCard(name="F1")]),
            DomainCard(name="B", slug="b", families=[FamilyCard(name="F2"), FamilyCard(name="F3")]),
        ],
        n_rows=3,
    )

    cols = render_grid(view, _icon)

    assert len(cols) == 2
    grid = cols[1].children.children.children[1]
    assert [tile.id["family"] for tile in grid.children] == ["F2", "F3"]


def test_usecase_dropdown_disabled_until_moat(catalog):
    assert usecase_dropdown(catalog, None) == ([], True, MOAT_PLACEHOLDER)

    options, disabled, placeholder = usecase_dropdown(catalog, "2")
    assert options == [{"label": "2.1 Slotting", "value": "2.1 Slotting"}]
    assert disabled is False
    assert placeholder == ALL_USECASES


def test_make_icon_src_falls_back_to_placeholder(tmp_path):
    (tmp_path / "supply-chain.svg").write_text("<svg/>")
    icon_src = make_icon_src("/assets/icons/", tmp_path)

    assert icon_src("supply-chain") == "/assets/icons/supply-chain.svg"
    assert icon_src("finance") == f"/assets/icons/{PLACEHOLDER_ICON}"
    assert icon_src("") == f"/assets/icons/{PLACEHOLDER_ICON}"


def test_criteria_from_controls_normalises_widget_values(ctx):
    criteria = criteria_from_controls(ctx, None, None, None, None, None, "Quality", None)

    assert criteria.search_text == ""
    assert criteria.selected_brands == ()
    assert criteria.moat == ""
    assert criteria.domains_only is False
    assert criteria.measure == "Quality"


def test_criteria_from_controls_drops_foreign_usecase(ctx):
    kept = criteria_from_controls(ctx, "", ["AFI"], "1", "1.1 Forecasting", False, None, None)
    dropped = criteria_from_controls(ctx, "", ["AFI"], "1", "2.1 Slotting", False, None, None)
    moved = criteria_from_controls(ctx, "", [], "2", "1.1 Forecasting", False, None, None, moat_changed=True)

    assert kept.usecase == "1.1 Forecasting"
    assert dropped.usecase == ""
    assert moved.moat == "2"
    assert moved.usecase == ""


def test_default_criteria_falls_back_to_available_measure(tmp_path, catalog):
    config = GlobalConfig(default_measure="Timeliness")
    ctx = AppContext(config_root=tmp_path, global_config=config, catalog=catalog)

    assert ctx.default_criteria().measure == "Quality"


def test_null_default_measure_leaves_tiles_uncoloured(tmp_path, catalog):
    ctx = AppContext(config_root=tmp_path, global_config=GlobalConfig(default_measure=None), catalog=catalog)

    assert ctx.default_criteria().measure is None


def test_context_without_catalog_needs_load_error(tmp_path):
    ctx = AppContext(config_root=tmp_path, global_config=GlobalConfig())

    with pytest.raises(RuntimeError):
        ctx.validate()
