from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

import numpy as np
import pandas as pd

from geomlayer.draw_key import draw_key_rect
from geomlayer.geoms.geom import Geom
from geomlayer.grobs import GPar, Grob, RectGrob
from geomlayer.utils import PT, alpha, resolution

if TYPE_CHECKING:
    from geomlayer.coords import Coord
    from geomlayer.panel import PanelScales


class GeomRect(Geom):
    """
    Rectangles given by their four corners, one per row.
    """
    required_aes = {"xmin", "xmax", "ymin", "ymax"}
    default_aes = {
        "colour": None,
        "fill": "grey35",
        "linewidth": 0.5,
        "linetype": "solid",
        "alpha": None,
    }

    draw_key = staticmethod(draw_key_rect)

    def draw_panel(
        self,
        data: pd.DataFrame,
        panel_scales: PanelScales,
        coord: Coord,
        linejoin: str = "mitre"
    ) -> Grob:
        coords = coord.transform(data, panel_scales)
        alphas = coords["alpha"].tolist()
        return RectGrob(
            name="geom_rect",
            xmin=coords["xmin"].to_numpy(dtype=float),
            xmax=coords["xmax"].to_numpy(dtype=float),
            ymin=coords["ymin"].to_numpy(dtype=float),
            ymax=coords["ymax"].to_numpy(dtype=float),
            gp=GPar(
                col=[alpha(c, a) for c, a in zip(coords["colour"], alphas)],
                fill=[alpha(f, a) for f, a in zip(coords["fill"], alphas)],
                lwd=coords["linewidth"].to_numpy(dtype=float) * PT,
                lty=coords["linetype"].tolist(),
                linejoin=linejoin,
            ),
        )


class GeomTile(GeomRect):
    """
    Rectangles given by their centre (x, y) and their width and height.
    """
    required_aes = {"x", "y"}
    default_aes = {
        "colour": None,
        "fill": "grey20",
        "linewidth": 0.1,
        "linetype": "solid",
        "alpha": None,
        "width": None,
        "height": None,
    }
    extra_params = {"na_rm", "width", "height"}

    def setup_data(self, data: pd.DataFrame, params: Mapping[str, Any]) -> pd.DataFrame:
        data = data.copy()
        x = data["x"].to_numpy(dtype=float)
        y = data["y"].to_numpy(dtype=float)
        width = self._size(data, params, "width", x)
        height = self._size(data, params, "height", y)

        data["xmin"] = x - width / 2
        data["xmax"] = x + width / 2
        data["ymin"] = y - height / 2
        data["ymax"] = y + height / 2
        return data.drop(columns=["width", "height"], errors="ignore")

    @staticmethod
    def _size(data: pd.DataFrame, params: Mapping[str, Any], name: str, values: np.ndarray) -> np.ndarray:
        """Per-row size from the data, else the parameter, else the resolution."""
        fallback = params.get(name)
        if fallback is None:
            fallback = resolution(values, zero=False)
        if name not in data.columns:
            return np.full(len(values), float(fallback))
        sizes = pd.to_numeric(data[name], errors="coerce").to_numpy(dtype=float)
        return np.where(np.isnan(sizes), float(fallback), sizes)
