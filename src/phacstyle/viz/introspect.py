# ==================================================================================================
#                               Chart introspection
# ==================================================================================================
#
# Classify a plotnine chart once, up front, into the few facts the theme recipe
# branches on:
#   - geometry of the first layer: bar or other
#   - faceting: none, or faceted (with the panel count when it can be derived)
#   - data type of the first layer's x variable
#
# The recipe then branches on these plain enums instead of poking at plotnine
# classes itself. This module only reads the chart; it never builds it.

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

import pandas as pd
from pandas.api import types as ptypes
from plotnine import ggplot
from plotnine.facets import facet_grid, facet_null, facet_wrap
from plotnine.geoms import geom_bar

from phacstyle.errors import UnresolvableAxisMappingError

logger = logging.getLogger(__name__)

# ==================================================================================================
#                                   TYPES
# ==================================================================================================


class GeomKind(str, Enum):
    """Geometry of the chart's first layer."""

    BAR = "bar"
    OTHER = "other"


class ColumnKind(str, Enum):
    """Coarse data type of a column."""

    NUMERIC = "numeric"
    DATETIME = "datetime"
    CATEGORICAL = "categorical"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class FacetShape:
    """
    Faceting of a chart.

    Attributes
    ----------
    faceted
        False for `facet_null`, True for any other facet specification.
    panel_count
        Number of panels when every facet variable is a plain column of the
        plot data, otherwise None.
    """

    faceted: bool
    panel_count: Optional[int] = None


@dataclass(frozen=True, slots=True)
class ChartShape:
    """
    Everything the theme recipe needs to know about a chart.

    Usage example
    -------------
        shape = describe_chart(g)
        if shape.geom is GeomKind.BAR:
            ...
    """

    geom: GeomKind
    facet: FacetShape
    x_name: str
    x_kind: ColumnKind


# ==================================================================================================
#                                   HELPERS
# ==================================================================================================

_DATE_INFERRED_TYPES = frozenset({"date", "datetime", "datetime64"})


def resolve_column_type(frame: pd.DataFrame, column: str) -> ColumnKind:
    """
    Classify `frame[column]` into a `ColumnKind`.

    Parameters
    ----------
    frame
        Data the chart draws from.
    column
        Column name taken from the x aesthetic.

    Returns
    -------
    ColumnKind
        DATETIME for datetime64 columns (timezone-aware included) and for
        object columns holding `datetime.date`/`datetime.datetime` values,
        NUMERIC for numbers (booleans excluded), CATEGORICAL for categoricals
        and strings, OTHER for everything else.

    Raises
    ------
    UnresolvableAxisMappingError
        If `column` is not a column of `frame`.

    Usage example
    -------------
        df = pd.DataFrame({"day": pd.date_range("2024-01-01", periods=3)})
        resolve_column_type(df, "day")  # ColumnKind.DATETIME
    """
    if not isinstance(column, str) or column not in frame.columns:
        raise UnresolvableAxisMappingError(
            f"x aesthetic {column!r} is not a column of the chart data. "
            f"Available columns: {list(frame.columns)}"
        )

    series = frame[column]

    if ptypes.is_datetime64_any_dtype(series):
        return ColumnKind.DATETIME
    if ptypes.is_bool_dtype(series):
        return ColumnKind.CATEGORICAL
    if ptypes.is_numeric_dtype(series):
        return ColumnKind.NUMERIC
    if isinstance(series.dtype, pd.CategoricalDtype) or ptypes.is_string_dtype(series):
        return ColumnKind.CATEGORICAL
    # Object columns may still hold python dates.
    if ptypes.infer_dtype(series, skipna=True) in _DATE_INFERRED_TYPES:
        return ColumnKind.DATETIME
    return ColumnKind.OTHER


def _first_layer(chart: ggplot) -> Any:
    """Return the first layer, failing clearly on an empty chart."""
    if not chart.layers:
        raise UnresolvableAxisMappingError("Chart has no layers; cannot resolve the x aesthetic.")
    return chart.layers[0]


def _x_expression(chart: ggplot, layer: Any) -> Any:
    """The layer's own x aesthetic, else the plot's when the layer inherits it."""
    if "x" in layer.mapping:
        return layer.mapping["x"]
    if layer.inherit_aes and "x" in chart.mapping:
        return chart.mapping["x"]
    raise UnresolvableAxisMappingError("First layer has no x aesthetic (neither its own nor inherited).")


def _layer_frame(chart: ggplot, layer: Any) -> pd.DataFrame:
    """Data frame the first layer draws from."""
    # Layer data may also be a callable applied to the plot data at build time;
    # only a concrete frame replaces the plot data here.
    layer_data = getattr(layer, "_data", None)
    if isinstance(layer_data, pd.DataFrame):
        return layer_data
    if isinstance(chart.data, pd.DataFrame):
        return chart.data
    raise UnresolvableAxisMappingError("Chart has no data frame to resolve the x aesthetic against.")


def _count_combinations(frame: pd.DataFrame, names: Sequence[str]) -> Optional[int]:
    if not names:
        return 1
    if not all(name in frame.columns for name in names):
        return None
    return len(frame[list(names)].drop_duplicates())


def _facet_shape(chart: ggplot) -> FacetShape:
    facet = chart.facet
    if isinstance(facet, facet_null):
        return FacetShape(faceted=False, panel_count=1)

    frame = chart.data if isinstance(chart.data, pd.DataFrame) else pd.DataFrame()

    if isinstance(facet, facet_wrap):
        return FacetShape(faceted=True, panel_count=_count_combinations(frame, list(facet.vars)))

    if isinstance(facet, facet_grid):
        n_rows = _count_combinations(frame, list(facet.rows))
        n_cols = _count_combinations(frame, list(facet.cols))
        if n_rows is None or n_cols is None:
            return FacetShape(faceted=True, panel_count=None)
        return FacetShape(faceted=True, panel_count=n_rows * n_cols)

    return FacetShape(faceted=True, panel_count=None)


# ==================================================================================================
#                                   CORE LOGIC
# ==================================================================================================

def describe_chart(chart: ggplot) -> ChartShape:
    """
    Classify a chart for the theme recipe.

    Parameters
    ----------
    chart
        plotnine chart to inspect. It is only read.

    Returns
    -------
    ChartShape
        Geometry kind, faceting and x-variable type.

    Raises
    ------
    UnresolvableAxisMappingError
        If the first layer's x aesthetic cannot be resolved to a column.

    Usage example
    -------------
        g = ggplot(df, aes("date", "value")) + geom_line() + facet_wrap("region")
        describe_chart(g)
        # ChartShape(geom=GeomKind.OTHER, facet=FacetShape(True, 4), x_name='date', ...)
    """
    layer = _first_layer(chart)
    x_expr = _x_expression(chart, layer)
    x_kind = resolve_column_type(_layer_frame(chart, layer), x_expr)

    # geom_col and geom_histogram subclass geom_bar and draw bars too.
    geom = GeomKind.BAR if isinstance(layer.geom, geom_bar) else GeomKind.OTHER

    shape = ChartShape(geom=geom, facet=_facet_shape(chart), x_name=x_expr, x_kind=x_kind)
    logger.debug(
        "chart shape: geom=%s faceted=%s panels=%s x=%r (%s)",
        shape.geom.value,
        shape.facet.faceted,
        shape.facet.panel_count,
        shape.x_name,
        shape.x_kind.value,
    )
    return shape
