"""Tests for the theme override record and the house-style recipe."""

import pytest
from plotnine import element_blank, element_rect, element_text, theme

from phacstyle.constants import GREY_40, GREY_50, GREY_95, GREY_97
from phacstyle.viz.introspect import ChartShape, ColumnKind, FacetShape, GeomKind
from phacstyle.viz.style import StyleParameters
from phacstyle.viz.theme import (
    BLANK,
    ElementSpec,
    ThemeOverrides,
    build_overrides,
    line,
    panel_spacing_fractions,
    text,
)


def _shape(
    geom: GeomKind = GeomKind.OTHER,
    faceted: bool = False,
    x_kind: ColumnKind = ColumnKind.NUMERIC,
) -> ChartShape:
    """Compact ChartShape factory for recipe tests."""
    return ChartShape(
        geom=geom,
        facet=FacetShape(faceted=faceted, panel_count=4 if faceted else 1),
        x_name="x",
        x_kind=x_kind,
    )


# ==================================================================================================
# ThemeOverrides
# ==================================================================================================

def test_same_kind_writes_merge_per_property() -> None:
    """Later writes win per property and keep the others."""
    ov = ThemeOverrides()
    ov.set("axis_text_x", text(size=9, color="red"))
    ov.set("axis_text_x", text(size=7, rotation=30))

    assert ov["axis_text_x"] == text(size=7, color="red", rotation=30)


def test_blank_replaces_and_is_replaced() -> None:
    """Blank elements do not merge in either direction."""
    ov = ThemeOverrides()
    ov.set("panel_grid_minor", line(color=GREY_97))
    ov.set("panel_grid_minor", BLANK)
    assert ov.is_blank("panel_grid_minor")

    ov.set("panel_grid_minor", line(size=2))
    assert ov["panel_grid_minor"] == line(size=2)


def test_update_applies_other_record_in_order() -> None:
    """`update` replays every entry of the other record."""
    a = ThemeOverrides().set("axis_text", text(size=12)).set("panel_spacing_x", 0.1)
    b = ThemeOverrides().set("axis_text", text(weight="bold")).set("panel_spacing_x", 0.2)

    a.update(b)

    assert a["axis_text"] == text(size=12, weight="bold")
    assert a["panel_spacing_x"] == 0.2
    assert len(a) == 2


def test_to_theme_builds_plotnine_elements() -> None:
    """Specs become plotnine elements; scalars pass through."""
    ov = ThemeOverrides()
    ov.set("axis_title_x", text(size=13, weight="bold", margin={"t": 12, "unit": "pt"}))
    ov.set("panel_grid_major_y", BLANK)
    ov.set("plot_title_position", "plot")

    th = ov.to_theme()

    assert isinstance(th, theme)
    title = th.themeables["axis_title_x"].theme_element
    assert isinstance(title, element_text)
    assert title.properties["size"] == 13
    assert title.properties["weight"] == "bold"
    assert title.properties["margin"].t == 12
    assert isinstance(th.themeables["panel_grid_major_y"].theme_element, element_blank)
    assert th.themeables.getp("plot_title_position") == "plot"


def test_element_spec_build_does_not_share_margin_dicts() -> None:
    """Building twice gives independent elements."""
    spec = ElementSpec("text", {"margin": {"t": 5, "unit": "pt"}})

    first, second = spec.build(), spec.build()

    assert first.properties["margin"] is not second.properties["margin"]
    assert spec.props["margin"] == {"t": 5, "unit": "pt"}


def test_rect_element_maps_fill_and_color() -> None:
    """Rect specs use plotnine's fill/color keywords."""
    built = ElementSpec("rect", {"fill": "none", "color": GREY_95}).build()

    assert isinstance(built, element_rect)
    assert built.properties["facecolor"] == "none"
    assert built.properties["edgecolor"] == GREY_95


# ==================================================================================================
# Recipe
# ==================================================================================================

def test_base_recipe_sizes_and_colors() -> None:
    """Scenario A typography at base size 12."""
    ov = build_overrides(StyleParameters(font_family="serif"), _shape())

    assert ov["text"] == text(family="serif")
    assert ov["axis_title_x"].props["size"] == 13
    assert ov["axis_title_x"].props["margin"] == {"t": 12, "unit": "pt"}
    assert ov["axis_title_y"].props["margin"] == {"r": 12, "unit": "pt"}
    assert ov["axis_text"] == text(size=12)
    assert ov["plot_title"].props["size"] == 20
    assert ov["plot_title"].props["margin"] == {"t": 5, "b": 12, "unit": "pt"}
    assert ov["plot_subtitle"] == text(size=14, color=GREY_40, margin={"b": 12, "unit": "pt"})
    assert ov["plot_caption"].props == {
        "size": 9,
        "style": "italic",
        "color": GREY_50,
        "margin": {"t": 15, "unit": "pt"},
    }
    assert ov["legend_title"] == text(size=12, weight="bold")
    assert ov["legend_text"] == text(color=GREY_50)
    assert ov["panel_grid_major"] == line(color=GREY_95)
    assert ov["panel_grid_minor"] == line(color=GREY_97)
    assert ov.is_blank("axis_ticks")
    assert ov["plot_title_position"] == "plot"
    assert ov["plot_caption_position"] == "plot"


def test_base_recipe_has_no_bar_or_facet_entries() -> None:
    """A plain chart gets none of the conditional overrides."""
    ov = build_overrides(StyleParameters(), _shape())

    for name in ("panel_grid_major_y", "strip_text", "panel_border", "axis_text_x", "axis_text_y"):
        assert name not in ov


@pytest.mark.parametrize("faceted", [False, True])
def test_bar_recipe_blanks_horizontal_major_grid(faceted: bool) -> None:
    """Bar charts drop horizontal major grid lines, faceted or not."""
    ov = build_overrides(StyleParameters(), _shape(geom=GeomKind.BAR, faceted=faceted))

    assert ov.is_blank("panel_grid_major_y")


def test_facet_recipe_numeric_x() -> None:
    """Scenario C: smaller axis text, no rotation, minor grid removed."""
    ov = build_overrides(StyleParameters(), _shape(faceted=True))

    assert ov["axis_text_x"] == text(size=9)
    assert ov["axis_text_y"] == text(size=10)
    assert ov.is_blank("panel_grid_minor")
    assert ov["strip_text"] == text(weight="bold")
    assert ov["strip_background"].props == {"fill": GREY_95, "color": "none"}
    assert ov["panel_border"].props == {"fill": "none", "color": GREY_95, "linetype": "solid"}
    assert ov["panel_spacing_x"] > 0 and ov["panel_spacing_y"] > 0


def test_facet_recipe_date_x_rotates_without_stacking_shrink() -> None:
    """Dates on faceted charts: size base-3 (not base-6), 30 degrees, right aligned."""
    ov = build_overrides(StyleParameters(), _shape(faceted=True, x_kind=ColumnKind.DATETIME))

    assert ov["axis_text_x"] == text(size=9, rotation=30.0, ha="right")
    assert ov["axis_text_y"] == text(size=10)


def test_date_x_without_facets_is_not_rotated() -> None:
    """The date adjustment only applies to faceted charts."""
    ov = build_overrides(StyleParameters(), _shape(x_kind=ColumnKind.DATETIME))

    assert "axis_text_x" not in ov


def test_facet_offsets_are_relative_to_base_size() -> None:
    """Offsets track the base size."""
    ov = build_overrides(StyleParameters(size_base=16), _shape(faceted=True))

    assert ov["axis_text_x"].props["size"] == 13
    assert ov["axis_text_y"].props["size"] == 14


def test_recipe_is_deterministic() -> None:
    """Same inputs give structurally equal records."""
    params = StyleParameters(size_base=11)
    shape = _shape(geom=GeomKind.BAR, faceted=True, x_kind=ColumnKind.DATETIME)

    assert build_overrides(params, shape) == build_overrides(params, shape)


def test_panel_spacing_is_two_lines_of_base_text() -> None:
    """2 lines x 12pt on a 6.4 x 4.8 inch figure."""
    x, y = panel_spacing_fractions(12, (6.4, 4.8))

    assert x == pytest.approx(24 / (6.4 * 72))
    assert y == pytest.approx(24 / (4.8 * 72))


def test_items_follow_first_write_order() -> None:
    """Rewriting an entry keeps its original position."""
    ov = ThemeOverrides().set("text", text(size=1)).set("axis_ticks", BLANK).set("text", text(size=2))

    assert [name for name, _ in ov.items()] == ["text", "axis_ticks"]
