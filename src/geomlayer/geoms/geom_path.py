from __future__ import annotations

import logging
from typing import Any, Mapping, TYPE_CHECKING

from geomlayer.draw_key import draw_key_path
from geomlayer.geoms.geom import Geom
from geomlayer.grobs import GPar, Grob, PolylineGrob, ZeroGrob
from geomlayer.utils import PT, alpha

if TYPE_CHECKING:
    import pandas as pd
    from geomlayer.coords import Coord
    from geomlayer.panel import PanelScales

logger = logging.getLogger(__name__)


class GeomPath(Geom):
    """
    Connects the observations of each group in the order they appear.
    """
    required_aes = {"x", "y"}
    default_aes = {
        "colour": "black",
        "linewidth": 0.5,
        "linetype": "solid",
        "alpha": None,
    }

    draw_key = staticmethod(draw_key_path)

    def draw_group(
        self,
        data: pd.DataFrame,
        panel_scales: PanelScales,
        coord: Coord,
        lineend: str = "butt",
        linejoin: str = "round"
    ) -> Grob:
        if len(data) < 2:
            logger.debug("Path group with a single observation, nothing to draw.")
            return ZeroGrob()

        coords = coord.transform(data, panel_scales)
        first = coords.iloc[0]
        return PolylineGrob(
            name="geom_path",
            x=coords["x"].to_numpy(dtype=float),
            y=coords["y"].to_numpy(dtype=float),
            gp=GPar(
                col=alpha(first["colour"], first["alpha"]),
                lwd=float(first["linewidth"]) * PT,
                lty=first["linetype"],
                lineend=lineend,
                linejoin=linejoin,
            ),
        )


class GeomLine(GeomPath):
    """
    Path with the observations ordered by x.
    """

    def setup_data(self, data: pd.DataFrame, params: Mapping[str, Any]) -> pd.DataFrame:
        keys = [key for key in ("PANEL", "group", "x") if key in data.columns]
        return data.sort_values(keys, kind="mergesort")
