from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from geomlayer.draw_key import draw_key_blank
from geomlayer.geoms.geom import Geom
from geomlayer.grobs import Grob, ZeroGrob

if TYPE_CHECKING:
    import pandas as pd
    from geomlayer.coords import Coord
    from geomlayer.panel import PanelScales


class GeomBlank(Geom):
    """Draws nothing; the data still trains the scales."""

    draw_key = staticmethod(draw_key_blank)

    def handle_na(self, data: pd.DataFrame, params: Mapping[str, Any]) -> pd.DataFrame:
        return data

    def draw_panel(self, data: pd.DataFrame, panel_scales: PanelScales, coord: Coord, **params: Any) -> Grob:
        return ZeroGrob()
