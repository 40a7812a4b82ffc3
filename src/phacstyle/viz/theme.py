# ==================================================================================================
#                               Theme recipe
# ==================================================================================================
#
# Builds the house-style theme for a chart as a plain override record and only
# turns it into a `plotnine.theme` at the very end.
#
# Structure
# ---------
# - `ElementSpec`: description of one theme element (text/line/rect/blank).
# - `ThemeOverrides`: ordered record of themeable name -> element or scalar.
#   Writes are additive; a later write merges into an earlier element of the
#   same kind property by property (last write wins).
# - recipe functions: base style, bar adjustment, facet adjustment, date axis
#   adjustment, and `build_overrides(...)` which chains them for a chart shape.
#
# Keeping the record plain (dicts, strings, numbers) makes two recipes easy to
# compare in tests without rendering anything.

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Literal, Mapping, Optional, Tuple, Union

from plotnine import element_blank, element_line, element_rect, element_text, theme

from phacstyle.constants import (
    AXIS_TITLE_MARGIN_PT,
    CAPTION_MARGIN_TOP_PT,
    CAPTION_SIZE,
    DEFAULT_FIGURE_SIZE_IN,
    FACET_AXIS_TEXT_X_SHRINK,
    FACET_AXIS_TEXT_Y_SHRINK,
    FACET_DATE_ROTATION_DEG,
    FACET_PANEL_SPACING_LINES,
    GREY_40,
    GREY_50,
    GREY_95,
    GREY_97,
    POINTS_PER_INCH,
    SUBTITLE_MARGIN_BOTTOM_PT,
    TITLE_MARGIN_BOTTOM_PT,
    TITLE_MARGIN_TOP_PT,
    TRANSPARENT,
)
from phacstyle.viz.introspect import ChartShape, ColumnKind, GeomKind
from phacstyle.viz.style import StyleParameters

# ==================================================================================================
#                                   TYPES
# ==================================================================================================

ElementKind = Literal["text", "line", "rect", "blank"]

_ELEMENT_FACTORIES = {
    "text": element_text,
    "line": element_line,
    "rect": element_rect,
}


@dataclass(frozen=True)
class ElementSpec:
    """
    Plain description of a plotnine theme element.

    Parameters
    ----------
    kind
        "text", "line", "rect" or "blank".
    props
        Keyword arguments for the matching plotnine `element_*` constructor.

    Usage example
    -------------
        spec = ElementSpec("text", {"size": 12, "weight": "bold"})
        spec.build()  # element_text(size=12, weight="bold")
    """

    kind: ElementKind
    props: Mapping[str, Any] = field(default_factory=dict)

    def build(self) -> Any:
        """Create the plotnine element."""
        if self.kind == "blank":
            return element_blank()
        # Margins are copied because plotnine mutates the dict it is given.
        props = {k: dict(v) if isinstance(v, Mapping) else v for k, v in self.props.items()}
        return _ELEMENT_FACTORIES[self.kind](**props)


def text(**props: Any) -> ElementSpec:
    """Shorthand for a text element spec."""
    return ElementSpec("text", props)


def line(**props: Any) -> ElementSpec:
    """Shorthand for a line element spec."""
    return ElementSpec("line", props)


def rect(**props: Any) -> ElementSpec:
    """Shorthand for a rect element spec."""
    return ElementSpec("rect", props)


BLANK = ElementSpec("blank")

OverrideValue = Union[ElementSpec, str, float, Tuple[float, ...]]


class ThemeOverrides:
    """
    Additive record of theme overrides.

    A value written under a name that already holds an element of the same
    kind is merged into it property by property; any other write replaces
    the entry. Insertion order is kept, so `to_theme()` is deterministic.

    Usage example
    -------------
        ov = ThemeOverrides()
        ov.set("axis_text_x", text(size=9))
        ov.set("axis_text_x", text(rotation=30, ha="right"))
        ov["axis_text_x"].props  # {"size": 9, "rotation": 30, "ha": "right"}
    """

    def __init__(self) -> None:
        self._entries: Dict[str, OverrideValue] = {}

    def set(self, name: str, value: OverrideValue) -> "ThemeOverrides":
        """Write one override; returns self for chaining."""
        current = self._entries.get(name)
        if (
            isinstance(current, ElementSpec)
            and isinstance(value, ElementSpec)
            and current.kind == value.kind
            and value.kind != "blank"
        ):
            value = ElementSpec(value.kind, {**current.props, **value.props})
        self._entries[name] = value
        return self

    def update(self, other: "ThemeOverrides") -> "ThemeOverrides":
        """Apply every entry of `other` on top of this record."""
        for name, value in other.items():
            self.set(name, value)
        return self

    def items(self) -> Iterator[Tuple[str, OverrideValue]]:
        """Entries in insertion order."""
        return iter(self._entries.items())

    def is_blank(self, name: str) -> bool:
        """True if `name` is overridden with a blank element."""
        value = self._entries.get(name)
        return isinstance(value, ElementSpec) and value.kind == "blank"

    def to_theme(self) -> theme:
        """Materialize the record as a partial plotnine theme."""
        kwargs = {
            name: value.build() if isinstance(value, ElementSpec) else value
            for name, value in self._entries.items()
        }
        return theme(**kwargs)

    def __getitem__(self, name: str) -> OverrideValue:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThemeOverrides):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"ThemeOverrides({self._entries!r})"


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def _pt_margin(**sides: float) -> Dict[str, Any]:
    return {**sides, "unit": "pt"}


def panel_spacing_fractions(
    size_base: int,
    figure_size: Optional[Tuple[float, float]] = None,
    lines: float = FACET_PANEL_SPACING_LINES,
) -> Tuple[float, float]:
    """
    Convert a spacing in text lines to the figure fractions plotnine expects.

    plotnine's `panel_spacing_x` / `panel_spacing_y` are fractions of the
    figure width / height, while the house style is specified in lines of
    base-size text.

    Returns
    -------
    tuple[float, float]
        (x fraction, y fraction).
    """
    width_in, height_in = figure_size or DEFAULT_FIGURE_SIZE_IN
    spacing_pt = lines * size_base
    return (
        spacing_pt / (width_in * POINTS_PER_INCH),
        spacing_pt / (height_in * POINTS_PER_INCH),
    )


# ==================================================================================================
#                                   RECIPE
# ==================================================================================================

def base_overrides(params: StyleParameters) -> ThemeOverrides:
    """
    House style applied to every chart.

    Covers typography, axis lines and titles, transparent panel, light grid,
    legend, and plot-aligned title/subtitle/caption.
    """
    sizes = params.sizes
    ov = ThemeOverrides()

    ov.set("text", text(family=params.font_family))

    # --- Axis
    ov.set("axis_line_x", line(color=GREY_50))
    ov.set("axis_line_y", line(color=GREY_50))
    ov.set("axis_ticks", BLANK)
    ov.set(
        "axis_title_x",
        text(size=sizes.axis_title, weight="bold", margin=_pt_margin(t=AXIS_TITLE_MARGIN_PT)),
    )
    ov.set(
        "axis_title_y",
        text(size=sizes.axis_title, weight="bold", margin=_pt_margin(r=AXIS_TITLE_MARGIN_PT)),
    )
    ov.set("axis_text", text(size=sizes.axis_text))

    # --- Grid
    ov.set("panel_background", rect(fill=TRANSPARENT, color=TRANSPARENT))
    ov.set("panel_grid_major", line(color=GREY_95))
    ov.set("panel_grid_minor", line(color=GREY_97))

    # --- Legend
    ov.set("legend_title", text(size=params.size_base, weight="bold"))
    ov.set("legend_background", rect(fill=TRANSPARENT))
    ov.set("legend_box_background", rect(fill=TRANSPARENT, color=TRANSPARENT))
    ov.set("legend_key", rect(fill=TRANSPARENT))
    ov.set("legend_text", text(color=GREY_50))

    # --- Title
    ov.set(
        "plot_title",
        text(
            size=sizes.title,
            weight="bold",
            margin=_pt_margin(t=TITLE_MARGIN_TOP_PT, b=TITLE_MARGIN_BOTTOM_PT),
        ),
    )
    ov.set(
        "plot_subtitle",
        text(size=sizes.subtitle, color=GREY_40, margin=_pt_margin(b=SUBTITLE_MARGIN_BOTTOM_PT)),
    )
    ov.set("plot_title_position", "plot")

    # --- Caption
    ov.set(
        "plot_caption",
        text(
            size=CAPTION_SIZE,
            style="italic",
            color=GREY_50,
            margin=_pt_margin(t=CAPTION_MARGIN_TOP_PT),
        ),
    )
    ov.set("plot_caption_position", "plot")

    return ov


def bar_overrides() -> ThemeOverrides:
    """Horizontal major grid lines are redundant against bar tops."""
    return ThemeOverrides().set("panel_grid_major_y", BLANK)


def facet_overrides(
    params: StyleParameters,
    figure_size: Optional[Tuple[float, float]] = None,
) -> ThemeOverrides:
    """Spacing, strips, borders and smaller axis labels for small multiples."""
    axis_text = params.sizes.axis_text
    spacing_x, spacing_y = panel_spacing_fractions(params.size_base, figure_size)

    ov = ThemeOverrides()

    # --- Panels
    ov.set("panel_spacing_x", spacing_x)
    ov.set("panel_spacing_y", spacing_y)
    ov.set("strip_text", text(weight="bold"))
    ov.set("strip_background", rect(fill=GREY_95, color=TRANSPARENT))
    ov.set("panel_border", rect(fill=TRANSPARENT, color=GREY_95, linetype="solid"))
    ov.set("panel_grid_minor", BLANK)

    # --- Axis
    ov.set("axis_text_x", text(size=axis_text - FACET_AXIS_TEXT_X_SHRINK))
    ov.set("axis_text_y", text(size=axis_text - FACET_AXIS_TEXT_Y_SHRINK))
    return ov


def date_axis_overrides(params: StyleParameters) -> ThemeOverrides:
    """Tilt long date labels so they fit narrow facet columns."""
    return ThemeOverrides().set(
        "axis_text_x",
        text(
            size=params.sizes.axis_text - FACET_AXIS_TEXT_X_SHRINK,
            rotation=FACET_DATE_ROTATION_DEG,
            ha="right",
        ),
    )


def build_overrides(
    params: StyleParameters,
    shape: ChartShape,
    figure_size: Optional[Tuple[float, float]] = None,
) -> ThemeOverrides:
    """
    Full override record for a classified chart.

    Parameters
    ----------
    params
        Style choices.
    shape
        Result of `describe_chart(...)`.
    figure_size
        Figure size in inches, used to express the facet panel spacing.

    Returns
    -------
    ThemeOverrides
        Base style plus the bar / facet / date adjustments that apply.

    Usage example
    -------------
        ov = build_overrides(StyleParameters(), describe_chart(g))
        g2 = g + ov.to_theme()
    """
    ov = base_overrides(params)

    if shape.geom is GeomKind.BAR:
        ov.update(bar_overrides())

    if shape.facet.faceted:
        ov.update(facet_overrides(params, figure_size))
        if shape.x_kind is ColumnKind.DATETIME:
            ov.update(date_axis_overrides(params))

    return ov
