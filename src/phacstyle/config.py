# ==================================================================================================
#                               Config loading
# ==================================================================================================
#
# Single entry point for reading house-style choices from disk.
#
# A project usually styles many charts the same way, so the style parameters
# can live in a small YAML file instead of being repeated at every call site:
#
#     style:
#       size_base: 14
#       palette: Vivid
#       color_type: discrete
#       font_family: DejaVu Sans
#
# This module only loads, validates and packages raw config data. The meaning
# of each field belongs to `phacstyle.viz.style.StyleParameters`.

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from phacstyle.viz.style import StyleParameters

# ==================================================================================================
#                                   TYPES
# ==================================================================================================

STYLE_SECTION: str = "style"


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """
    Parsed style configuration.

    Parameters
    ----------
    raw
        Raw config dictionary loaded from YAML.

    Usage example
    -------------
        cfg = load_style_config(Path("config/style.yaml"))
        params = cfg.to_parameters()
    """

    raw: Dict[str, Any]

    def to_parameters(self) -> StyleParameters:
        """
        Build `StyleParameters` from the `style:` section.

        Missing keys keep their defaults; a missing section yields the
        default parameters.

        Raises
        ------
        ValueError
            If the section is not a mapping or holds unknown keys.
        InvalidColorTypeError
            If `color_type` is not recognised.

        Usage example
        -------------
            params = load_style_config(Path("style.yaml")).to_parameters()
        """
        section = self.raw.get(STYLE_SECTION) or {}
        if not isinstance(section, Mapping):
            raise ValueError(f"Config section '{STYLE_SECTION}' must be a mapping, got: {type(section)}")

        allowed = {f.name for f in fields(StyleParameters)}
        unknown = sorted(set(section) - allowed)
        if unknown:
            raise ValueError(
                f"Unknown keys in config section '{STYLE_SECTION}': {unknown}. "
                f"Allowed: {sorted(allowed)}"
            )

        return StyleParameters(**dict(section))


# ==================================================================================================
#                                   IO
# ==================================================================================================

def load_style_config(config_path: Path) -> StyleConfig:
    """
    Load YAML config into a StyleConfig object.

    Parameters
    ----------
    config_path
        Path to YAML config file.

    Returns
    -------
    StyleConfig
        Loaded configuration.

    Usage example
    -------------
        cfg = load_style_config(Path("config/style.yaml"))
        print(cfg.raw["style"]["palette"])
    """
    with Path(config_path).open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, Mapping):
        raise ValueError(f"Config must be a mapping at top-level, got: {type(data)}")

    return StyleConfig(raw=dict(data))
