"""
CARTOColors palette provider.

Thin adapter between palette names and plotnine colour/fill scales. Palette
data comes from `palettable.cartocolors`; this module only looks names up and
forwards the colours, it knows nothing about individual palettes.

Discrete scales ask for the palette's own `n`-colour variant once the number
of levels is known, so a sequential or diverging ramp is sampled across its
whole range. Continuous scales interpolate across the largest variant.
"""

import logging
from dataclasses import InitVar, dataclass
from functools import partial
from types import ModuleType
from typing import Final, List, Optional, Tuple, Union

from palettable.cartocolors import diverging, qualitative, sequential
from plotnine import scale_color_gradientn, scale_fill_gradientn
from plotnine.scales.scale_discrete import scale_discrete

from phacstyle.constants import GREY_50
from phacstyle.errors import UnknownPaletteError
from phacstyle.viz.style import ColorType

logger = logging.getLogger(__name__)

# Largest variant palettable ships for each collection.
_COLLECTIONS: Final[Tuple[Tuple[str, ModuleType, int], ...]] = (
    ("qualitative", qualitative, 11),
    ("sequential", sequential, 7),
    ("diverging", diverging, 7),
)
_SMALLEST_VARIANT: Final[int] = 2


# ==================================================================================================
#                                   LOOKUP
# ==================================================================================================

def _find_collection(name: str) -> Tuple[str, ModuleType, int]:
    if not isinstance(name, str) or not name or "_" in name:
        raise UnknownPaletteError(f"Unknown CARTOColors palette: {name!r}")

    for collection, module, max_length in _COLLECTIONS:
        try:
            module.get_map(f"{name}_{_SMALLEST_VARIANT}")
        except KeyError:
            continue
        return collection, module, max_length

    raise UnknownPaletteError(f"Unknown CARTOColors palette: {name!r}")


def carto_colors(name: str, n: Optional[int] = None) -> List[str]:
    """
    Hex colours of a CARTOColors palette.

    Parameters
    ----------
    name
        Palette name, case-insensitive (e.g. "Safe", "vivid", "Sunset").
    n
        Number of colours wanted. Defaults to the largest variant. Requests
        beyond the largest variant get the largest variant (and a warning);
        requests below the smallest variant get its first `n` colours.

    Returns
    -------
    list[str]
        Colours as "#RRGGBB" strings.

    Raises
    ------
    UnknownPaletteError
        If no collection knows the name.

    Usage example
    -------------
        carto_colors("Safe")[:2]  # ['#88CCEE', '#CC6677']
        carto_colors("Sunset", 3)  # ['#F3E79B', '#EB7F86', '#5C53A5']
    """
    collection, module, max_length = _find_collection(name)

    if n is None:
        n = max_length
    if n > max_length:
        logger.warning(
            "palette %r has at most %d colours; %d were requested", name, max_length, n
        )
    length = min(max(n, _SMALLEST_VARIANT), max_length)

    palette = module.get_map(f"{name}_{length}")
    logger.debug("palette %r resolved as %s %s", name, collection, palette.name)
    return list(palette.hex_colors)[: max(n, 0)]


# ==================================================================================================
#                                   SCALES
# ==================================================================================================

@dataclass
class scale_color_carto(scale_discrete):
    """
    Discrete colour scale drawing the `n`-colour variant of a CARTOColors palette.

    Usage example
    -------------
        g + scale_color_carto(palette_name="Sunset")
    """

    _aesthetics = ["color"]

    palette_name: InitVar[str] = "Safe"
    na_value: str = GREY_50

    def __post_init__(self, palette_name: str) -> None:
        _find_collection(palette_name)
        super().__post_init__()
        self.palette = partial(carto_colors, palette_name)  # type: ignore[method-assign]


@dataclass
class scale_fill_carto(scale_color_carto):
    """Discrete fill scale drawing the `n`-colour variant of a CARTOColors palette."""

    _aesthetics = ["fill"]


def carto_scales(name: str, color_type: Union[ColorType, str]) -> list:
    """
    Colour and fill scales for a palette.

    Parameters
    ----------
    name
        CARTOColors palette name.
    color_type
        Discrete (palette variant per number of levels) or continuous
        (gradient across the largest variant).

    Returns
    -------
    list
        `[color_scale, fill_scale]`, ready to be added to a ggplot.

    Raises
    ------
    UnknownPaletteError
        If the palette name is not a CARTOColors palette.

    Usage example
    -------------
        g + carto_scales("Safe", ColorType.DISCRETE)
    """
    color_type = ColorType.parse(color_type)

    if color_type is ColorType.DISCRETE:
        return [scale_color_carto(palette_name=name), scale_fill_carto(palette_name=name)]

    colors = carto_colors(name)
    return [scale_color_gradientn(colors=colors), scale_fill_gradientn(colors=colors)]
