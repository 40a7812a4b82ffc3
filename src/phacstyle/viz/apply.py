# ==================================================================================================
#                               Apply house style
# ==================================================================================================
#
# Public entry point: restyle an existing plotnine chart.
#
# Flow
# ----
# 1) validate parameters (an invalid colour type fails before anything else)
# 2) classify the chart once (geometry, faceting, x-variable type)
# 3) build the theme override record and the colour/fill scales
# 4) compose everything onto the chart with a single `+`
#
# plotnine's `+` deep-copies the chart, so the caller's chart is never
# modified and no half-styled chart can escape when a step fails.

import logging
from typing import Any, Optional, Tuple, Union

from plotnine import ggplot

from phacstyle.constants import DEFAULT_FIGURE_SIZE_IN
from phacstyle.viz.introspect import describe_chart
from phacstyle.viz.palettes import carto_scales
from phacstyle.viz.style import ColorType, StyleParameters
from phacstyle.viz.theme import build_overrides

logger = logging.getLogger(__name__)


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

def _figure_size(chart: ggplot) -> Tuple[float, float]:
    """Figure size in inches from the chart's theme, else matplotlib's default."""
    chart_theme: Any = getattr(chart, "theme", None)
    size = None
    if chart_theme is not None:
        # Read the themeables directly; `theme.getp` caches itself on the
        # caller's theme instance.
        size = chart_theme.themeables.getp("figure_size")
    if not size:
        return DEFAULT_FIGURE_SIZE_IN
    width, height = size
    return float(width), float(height)


# ==================================================================================================
#                                   CORE LOGIC
# ==================================================================================================

def apply_style(chart: ggplot, params: Optional[StyleParameters] = None) -> ggplot:
    """
    Return a restyled copy of `chart`.

    Parameters
    ----------
    chart
        plotnine chart with at least one layer whose x aesthetic names a
        column of the chart data.
    params
        Style choices. Defaults to `StyleParameters()`.

    Returns
    -------
    ggplot
        New chart with the house theme and CARTOColors colour + fill scales.

    Raises
    ------
    UnresolvableAxisMappingError
        If the first layer's x aesthetic cannot be resolved.
    UnknownPaletteError
        If the palette name is not a CARTOColors palette.

    Usage example
    -------------
        params = load_style_config(Path("style.yaml")).to_parameters()
        styled = apply_style(g, params)
        styled.save("figure.png", dpi=300)
    """
    params = params if params is not None else StyleParameters()

    shape = describe_chart(chart)
    overrides = build_overrides(params, shape, figure_size=_figure_size(chart))
    scales = carto_scales(params.palette, params.color_type)

    logger.debug(
        "applying house style: %d theme overrides, %s %r scales",
        len(overrides),
        params.color_type.value,
        params.palette,
    )
    return chart + [overrides.to_theme(), *scales]


def phac_style(
    chart: ggplot,
    size_base: int = 12,
    palette: str = "Safe",
    color_type: Union[ColorType, str] = "discrete",
    font_family: str = "sans",
) -> ggplot:
    """
    Apply the house style to a plotnine chart.

    Parameters
    ----------
    chart
        plotnine chart to restyle; it is not modified.
    size_base
        Base text size. Titles, subtitles and axis titles scale from it.
    palette
        CARTOColors palette name (see `palettable.cartocolors`).
    color_type
        "discrete" / "d" for colour + fill scales drawn from the palette's
        n-colour variant, "continuous" / "c" for gradient colour + fill scales.
    font_family
        Font family for all text, passed through unchanged.

    Returns
    -------
    ggplot
        Restyled copy of `chart`.

    Raises
    ------
    InvalidColorTypeError
        Before the chart is inspected, if `color_type` is not recognised.

    Usage example
    -------------
        import logging

        from plotnine import aes, facet_wrap, geom_line, ggplot, labs

        from phacstyle.logging import configure_logging

        configure_logging(logging.WARNING, style_level=logging.DEBUG)

        g = (
            ggplot(orange, aes("age", "circumference", color="factor(Tree)"))
            + geom_line(size=1)
            + labs(title="Orange growth", caption="Data source: R datasets")
        )
        phac_style(g)
        phac_style(g + facet_wrap("Tree"))
    """
    params = StyleParameters(
        size_base=size_base,
        palette=palette,
        color_type=color_type,
        font_family=font_family,
    )
    return apply_style(chart, params)
