from __future__ import annotations

from typing import TYPE_CHECKING

from geomlayer.draw_key import draw_key_point
from geomlayer.geoms.geom import Geom
from geomlayer.grobs import GPar, Grob, PointsGrob
from geomlayer.utils import PT, STROKE, alpha

if TYPE_CHECKING:
    import pandas as pd
    from geomlayer.coords import Coord
    from geomlayer.panel import PanelScales


class GeomPoint(Geom):
    """
    Scatterplot points, one mark per row.
    """
    required_aes = {"x", "y"}
    non_missing_aes = {"size", "shape", "colour"}
    default_aes = {
        "shape": 19,
        "colour": "black",
        "size": 1.5,
        "fill": None,
        "alpha": None,
        "stroke": 0.5,
    }

    draw_key = staticmethod(draw_key_point)

    def draw_panel(
        self,
        data: pd.DataFrame,
        panel_scales: PanelScales,
        coord: Coord,
        na_rm: bool = False
    ) -> Grob:
        coords = coord.transform(data, panel_scales)
        stroke = coords["stroke"].fillna(0.0).to_numpy(dtype=float)
        alphas = coords["alpha"].tolist()
        return PointsGrob(
            name="geom_point",
            x=coords["x"].to_numpy(dtype=float),
            y=coords["y"].to_numpy(dtype=float),
            pch=coords["shape"].to_numpy(),
            gp=GPar(
                col=[alpha(c, a) for c, a in zip(coords["colour"], alphas)],
                fill=[alpha(f, a) for f, a in zip(coords["fill"], alphas)],
                # Stroke is added around the outside of the point
                fontsize=coords["size"].to_numpy(dtype=float) * PT + stroke * STROKE / 2,
                lwd=stroke * STROKE / 2,
            ),
        )
