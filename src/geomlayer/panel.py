"""Per-panel scale metadata and the lookup table the geoms read it from."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable


@dataclass(frozen=True)
class PanelScales:
    """Continuous ranges of the position scales in one panel."""
    x_range: tuple[float, float] = (0.0, 1.0)
    y_range: tuple[float, float] = (0.0, 1.0)


@dataclass
class PanelLayout:
    """
    Panel layout as seen by the geoms: scale ranges keyed by panel id.
    """
    ranges: dict[Hashable, PanelScales] = field(default_factory=dict)

    @classmethod
    def single(cls, panel_scales: PanelScales | None = None) -> PanelLayout:
        """Layout with one panel whose id is 1."""
        return cls(ranges={1: panel_scales or PanelScales()})

    @property
    def n_panels(self) -> int:
        return len(self.ranges)
