import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from geomlayer.coords import CoordCartesian
from geomlayer.panel import PanelLayout, PanelScales


def make_data(n_rows: int = 4, panels=(1,), groups=(1, 2), levels=None) -> pd.DataFrame:
    """Rows spread over the given panels and groups, cycling through both."""
    return pd.DataFrame({
        "x": [float(i) for i in range(n_rows)],
        "y": [float(i) * 2 for i in range(n_rows)],
        "PANEL": pd.Categorical(
            [panels[i % len(panels)] for i in range(n_rows)],
            categories=levels if levels is not None else list(panels),
        ),
        "group": [groups[i % len(groups)] for i in range(n_rows)],
    })


@pytest.fixture
def coord() -> CoordCartesian:
    return CoordCartesian()


@pytest.fixture
def layout() -> PanelLayout:
    scales = PanelScales(x_range=(0.0, 10.0), y_range=(0.0, 20.0))
    return PanelLayout(ranges={1: scales, 2: scales, 3: scales})
