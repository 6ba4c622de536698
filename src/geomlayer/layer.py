"""
Layer
=====
Ties a geom to its parameters and runs the geom half of the layer pipeline:

    setup_data -> [position adjustment] -> use_defaults -> handle_na -> draw_layer

Position adjustment, statistics and scale training happen elsewhere; callers
hand in data that has already been through them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, TYPE_CHECKING

from geomlayer.coords import CoordCartesian
from geomlayer.data import is_empty

if TYPE_CHECKING:
    import pandas as pd
    from geomlayer.coords import Coord
    from geomlayer.geoms.geom import Geom
    from geomlayer.grobs import Grob
    from geomlayer.panel import PanelLayout

logger = logging.getLogger(__name__)


@dataclass
class Layer:
    """
    A geom with the parameters given by the user.

    ``params`` may mix geom parameters (``na_rm``, ``linejoin``, ...) and
    fixed aesthetics (``colour="red"``); they are told apart by
    ``geom.parameters(extra=True)`` and ``geom.aesthetics()``.
    """
    geom: Geom
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        known = self.geom.parameters(extra=True) | self.geom.aesthetics()
        unknown = sorted(set(self.params) - known)
        if unknown:
            logger.warning(f"Ignoring unknown parameters of {type(self.geom).__name__}: {', '.join(unknown)}")

    @property
    def geom_params(self) -> dict[str, Any]:
        accepted = self.geom.parameters(extra=True)
        return {name: value for name, value in self.params.items() if name in accepted}

    @property
    def aes_params(self) -> dict[str, Any]:
        aesthetics = self.geom.aesthetics()
        return {name: value for name, value in self.params.items() if name in aesthetics}

    def setup_data(self, data: pd.DataFrame) -> pd.DataFrame:
        """First geom step, run before position adjustments."""
        if is_empty(data):
            return data
        return self.geom.setup_data(data, self.geom_params)

    def use_defaults(self, data: pd.DataFrame) -> pd.DataFrame:
        """Second geom step: defaults and fixed aesthetics."""
        if is_empty(data):
            return data
        return self.geom.use_defaults(data, self.aes_params)

    def draw(self, data: pd.DataFrame, layout: PanelLayout, coord: Optional[Coord] = None) -> list[Grob]:
        """
        Handle missing values and draw the layer, one grob per panel.
        """
        if coord is None:
            coord = CoordCartesian()
        data = self.geom.handle_na(data, self.geom_params)
        return self.geom.draw_layer(data, self.geom_params, layout, coord)

    def render(self, data: pd.DataFrame, layout: PanelLayout, coord: Optional[Coord] = None) -> list[Grob]:
        """Run all geom steps on data that needs no position adjustment."""
        data = self.setup_data(data)
        data = self.use_defaults(data)
        return self.draw(data, layout, coord)
