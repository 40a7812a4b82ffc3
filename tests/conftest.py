"""Shared pytest fixtures for the phacstyle test suite.

Charts are built from tiny in-memory frames so tests stay fast and never
render anything; assertions read the composed theme and scales directly.
"""

from pathlib import Path
import sys

import numpy as np
import pandas as pd
import pytest
from plotnine import aes, facet_wrap, geom_bar, geom_line, ggplot, labs

# Ensure `import phacstyle` resolves to the in-repo source tree during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture
def orange_df() -> pd.DataFrame:
    """Tree growth table shaped like R's `Orange` dataset (4 trees, numeric age)."""
    ages = np.array([118, 484, 664, 1004, 1231, 1372, 1582])
    frames = [
        pd.DataFrame({"Tree": str(tree), "age": ages, "circumference": ages / (10 + tree)})
        for tree in range(1, 5)
    ]
    return pd.concat(frames, ignore_index=True)


@pytest.fixture
def dated_df() -> pd.DataFrame:
    """Daily values for three regions with a datetime64 x column."""
    days = pd.date_range("2024-01-01", periods=10, freq="D")
    return pd.DataFrame(
        {
            "day": np.tile(days, 3),
            "region": np.repeat(["north", "south", "west"], len(days)),
            "cases": np.arange(30, dtype=float),
        }
    )


@pytest.fixture
def line_chart(orange_df: pd.DataFrame) -> ggplot:
    """Non-faceted line chart with three-plus colour categories."""
    return (
        ggplot(orange_df, aes("age", "circumference", color="Tree"))
        + geom_line()
        + labs(title="Orange growth", caption="Data source: R datasets")
    )


@pytest.fixture
def bar_chart(orange_df: pd.DataFrame) -> ggplot:
    """Bar chart of tree counts."""
    return ggplot(orange_df, aes("Tree", fill="Tree")) + geom_bar()


@pytest.fixture
def faceted_chart(line_chart: ggplot) -> ggplot:
    """Line chart split into four panels, numeric x."""
    return line_chart + facet_wrap("Tree")


@pytest.fixture
def faceted_date_chart(dated_df: pd.DataFrame) -> ggplot:
    """Line chart split by region, datetime x."""
    return ggplot(dated_df, aes("day", "cases")) + geom_line() + facet_wrap("region")
