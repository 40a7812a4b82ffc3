# ==================================================================================================
#                               Style parameters
# ==================================================================================================
#
# Small immutable containers for the caller-facing style choices and the font
# sizes derived from them. Kept as frozen dataclasses so defaults remain
# explicit and a parameter set can be reused across many charts.

from dataclasses import dataclass
from enum import Enum
from typing import Union

from phacstyle.constants import (
    AXIS_TITLE_SIZE_OFFSET,
    SUBTITLE_SIZE_OFFSET,
    TITLE_SIZE_OFFSET,
)
from phacstyle.errors import InvalidColorTypeError

# ==================================================================================================
#                                   TYPES
# ==================================================================================================


class ColorType(str, Enum):
    """Kind of colour scale appended to the chart."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"

    @classmethod
    def parse(cls, value: Union["ColorType", str]) -> "ColorType":
        """
        Normalize a user-supplied colour type.

        Accepts the enum itself, its value, or the single-letter codes
        `"d"` / `"c"` (case-insensitive).

        Raises
        ------
        InvalidColorTypeError
            For anything else.

        Usage example
        -------------
            ColorType.parse("d") is ColorType.DISCRETE
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.value[0]):
                    return member
        raise InvalidColorTypeError(
            f"Invalid color type {value!r}; expected 'discrete' ('d') or 'continuous' ('c')."
        )


@dataclass(frozen=True, slots=True)
class DerivedSizes:
    """
    Font sizes derived from the base size.

    For any base >= 0: title > subtitle > axis_title >= axis_text.

    Usage example
    -------------
        sizes = DerivedSizes.from_base(12)
        print(sizes.title)  # 20
    """

    title: int
    subtitle: int
    axis_title: int
    axis_text: int

    @staticmethod
    def from_base(size_base: int) -> "DerivedSizes":
        """Compute the four sizes from `size_base`."""
        return DerivedSizes(
            title=size_base + TITLE_SIZE_OFFSET,
            subtitle=size_base + SUBTITLE_SIZE_OFFSET,
            axis_title=size_base + AXIS_TITLE_SIZE_OFFSET,
            axis_text=size_base,
        )


@dataclass(frozen=True, slots=True)
class StyleParameters:
    """
    Caller-facing style choices.

    Parameters
    ----------
    size_base
        Base text size in points. Must be a positive integer.
    palette
        CARTOColors palette name (e.g. "Safe", "Vivid", "Sunset").
        Not validated here; unknown names fail when the scales are built.
    color_type
        Discrete or continuous colour/fill scales. Strings are normalized
        through `ColorType.parse`.
    font_family
        Font family passed through to the renderer unchanged.

    Usage example
    -------------
        params = StyleParameters(size_base=14, color_type="c", palette="Sunset")
        styled = apply_style(g, params)
    """

    size_base: int = 12
    palette: str = "Safe"
    color_type: ColorType = ColorType.DISCRETE
    font_family: str = "sans"

    def __post_init__(self) -> None:
        # The colour type is checked first so an invalid value fails fast,
        # regardless of any other parameter.
        object.__setattr__(self, "color_type", ColorType.parse(self.color_type))

        if isinstance(self.size_base, bool) or not isinstance(self.size_base, int):
            raise ValueError(f"size_base must be an integer, got: {self.size_base!r}")
        if self.size_base <= 0:
            raise ValueError(f"size_base must be positive, got: {self.size_base}")

    @property
    def sizes(self) -> DerivedSizes:
        """Font sizes derived from `size_base`."""
        return DerivedSizes.from_base(self.size_base)
