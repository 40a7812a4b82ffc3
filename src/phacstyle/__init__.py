"""House style for plotnine charts: typography, axes, grid, legend and CARTOColors scales."""

from .config import StyleConfig, load_style_config
from .errors import InvalidColorTypeError, StyleError, UnknownPaletteError, UnresolvableAxisMappingError
from .logging import configure_logging
from .viz.apply import apply_style, phac_style
from .viz.style import ColorType, DerivedSizes, StyleParameters

__all__ = [
    "ColorType",
    "DerivedSizes",
    "InvalidColorTypeError",
    "StyleConfig",
    "StyleError",
    "StyleParameters",
    "UnknownPaletteError",
    "UnresolvableAxisMappingError",
    "apply_style",
    "configure_logging",
    "load_style_config",
    "phac_style",
]
