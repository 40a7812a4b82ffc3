# ==================================================================================================
#                                   Constants
# ==================================================================================================
#
# Cosmetic constants shared by the theme recipe. Greys are the hex values of the
# R grey ramp (greyNN = NN% white) so charts match the published house style.

from typing import Final, Tuple

# --- Greys
GREY_40: Final[str] = "#666666"
GREY_50: Final[str] = "#7F7F7F"
GREY_95: Final[str] = "#F2F2F2"
GREY_97: Final[str] = "#F7F7F7"
TRANSPARENT: Final[str] = "none"

# --- Font size offsets relative to the base size
TITLE_SIZE_OFFSET: Final[int] = 8
SUBTITLE_SIZE_OFFSET: Final[int] = 2
AXIS_TITLE_SIZE_OFFSET: Final[int] = 1
CAPTION_SIZE: Final[int] = 9

# Faceted charts are busier, so axis labels shrink.
FACET_AXIS_TEXT_X_SHRINK: Final[int] = 3
FACET_AXIS_TEXT_Y_SHRINK: Final[int] = 2
FACET_DATE_ROTATION_DEG: Final[float] = 30.0
FACET_PANEL_SPACING_LINES: Final[float] = 2.0

# --- Margins (points)
AXIS_TITLE_MARGIN_PT: Final[int] = 12
TITLE_MARGIN_TOP_PT: Final[int] = 5
TITLE_MARGIN_BOTTOM_PT: Final[int] = 12
SUBTITLE_MARGIN_BOTTOM_PT: Final[int] = 12
CAPTION_MARGIN_TOP_PT: Final[int] = 15

# Matplotlib default figure size, used when the chart's theme does not set one.
DEFAULT_FIGURE_SIZE_IN: Final[Tuple[float, float]] = (6.4, 4.8)
POINTS_PER_INCH: Final[float] = 72.0
