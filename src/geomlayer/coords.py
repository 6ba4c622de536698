from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import pandas as pd
    from geomlayer.panel import PanelScales

X_AESTHETICS = ("x", "xmin", "xmax", "xend", "xintercept")
Y_AESTHETICS = ("y", "ymin", "ymax", "yend", "yintercept")


def rescale(values: np.ndarray, from_range: tuple[float, float], to_range: tuple[float, float] = (0.0, 1.0)) -> np.ndarray:
    """Linearly map ``values`` from ``from_range`` onto ``to_range``."""
    values = np.asarray(values, dtype=float)
    lo, hi = from_range
    span = hi - lo
    if span == 0:
        return np.full_like(values, (to_range[0] + to_range[1]) / 2)
    return (values - lo) / span * (to_range[1] - to_range[0]) + to_range[0]


class Coord(ABC):
    """
    Abstract base class for coordinate systems.
    """

    @abstractmethod
    def transform(self, data: pd.DataFrame, panel_scales: PanelScales) -> pd.DataFrame:
        """
        Transform position aesthetics into normalised panel coordinates.

        Args:
            data: Layer data of one panel (or one group).
            panel_scales: Ranges of the panel.

        Returns:
            A transformed copy of ``data``.
        """
        pass


class CoordCartesian(Coord):
    """
    Cartesian coordinates: x and y are rescaled independently.
    """

    def transform(self, data: pd.DataFrame, panel_scales: PanelScales) -> pd.DataFrame:
        data = data.copy()
        for column in X_AESTHETICS:
            if column in data.columns:
                data[column] = rescale(data[column].to_numpy(), panel_scales.x_range)
        for column in Y_AESTHETICS:
            if column in data.columns:
                data[column] = rescale(data[column].to_numpy(), panel_scales.y_range)
        return data


class CoordFlip(CoordCartesian):
    """
    Cartesian coordinates with x and y swapped.
    """

    def transform(self, data: pd.DataFrame, panel_scales: PanelScales) -> pd.DataFrame:
        renames = {x: y for x, y in zip(X_AESTHETICS, Y_AESTHETICS)}
        renames.update({y: x for x, y in zip(X_AESTHETICS, Y_AESTHETICS)})
        flipped = data.rename(columns=renames)
        scales = type(panel_scales)(x_range=panel_scales.y_range, y_range=panel_scales.x_range)
        return super().transform(flipped, scales)
