"""
Drawing Primitives (Grobs)
==========================
Renderable outputs of the geoms. A grob is a plain description of what to
draw; geoms build trees of them and the rendering backend consumes the tree.

Every grob can draw itself on a matplotlib ``Axes`` for debugging. Positions
are expected in normalised panel coordinates ([0, 1] on both axes).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from geomlayer.utils import alpha

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes

LINETYPES = {
    "solid": "-",
    "dashed": "--",
    "dotted": ":",
    "dotdash": "-.",
    "blank": "None",
}

# Integer shapes (R pch codes) understood by the debug renderer
SHAPES = {0: "s", 1: "o", 2: "^", 3: "+", 4: "x", 5: "D", 15: "s", 16: "o", 17: "^", 18: "D", 19: "o", 21: "o", 22: "s", 23: "D", 24: "^"}
FILLED_SHAPES = {21, 22, 23, 24}


def _as_array(values: Any) -> npt.NDArray[Any]:
    return np.atleast_1d(np.asarray(values))


@dataclass
class GPar:
    """Graphical parameters shared by all grobs."""
    col: Any = None
    fill: Any = None
    lwd: Any = None
    lty: Any = "solid"
    fontsize: Any = None
    linejoin: str = "round"
    lineend: str = "butt"


@dataclass
class Grob:
    """Base drawing primitive."""
    name: str = ""
    gp: GPar = field(default_factory=GPar)

    def __len__(self) -> int:
        return 0

    def walk(self) -> Iterator[Grob]:
        """Iterate over this grob and all of its descendants, depth first."""
        yield self

    def draw(self, ax: Axes) -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot be drawn")

    def plot(self, ax: Optional[Axes] = None) -> Axes:
        """
        Draw the grob on a fresh unit-square figure (or on ``ax``).

        Returns:
            The axes drawn on.
        """
        if ax is None:
            fig, ax = plt.subplots(figsize=(5, 5))
            ax.set_xlim(0, 1)
            ax.set_ylim(0, 1)
            ax.set_aspect("equal")
        self.draw(ax)
        return ax


@dataclass
class ZeroGrob(Grob):
    """Grob that draws nothing."""
    name: str = "NULL"

    def draw(self, ax: Axes) -> None:
        pass


def is_zero(grob: Grob) -> bool:
    return isinstance(grob, ZeroGrob)


@dataclass
class GTree(Grob):
    """Named composite of child grobs."""
    children: list[Grob] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.children)

    def walk(self) -> Iterator[Grob]:
        yield self
        for child in self.children:
            yield from child.walk()

    def draw(self, ax: Axes) -> None:
        for child in self.children:
            child.draw(ax)


@dataclass
class PointsGrob(Grob):
    x: Any = field(default_factory=list)
    y: Any = field(default_factory=list)
    pch: Any = 19

    def __post_init__(self) -> None:
        self.x = _as_array(self.x)
        self.y = _as_array(self.y)

    def __len__(self) -> int:
        return len(self.x)

    def draw(self, ax: Axes) -> None:
        pch = _as_array(self.pch)
        fontsize = _as_array(self.gp.fontsize if self.gp.fontsize is not None else 5.0)
        for i in range(len(self)):
            shape = int(pch[i % len(pch)])
            col = _colour(_pick(self.gp.col, i)) or "black"
            # 21-24 are outlined in col and filled with fill, 0-14 are hollow
            if shape in FILLED_SHAPES:
                face = _colour(_pick(self.gp.fill, i)) or "none"
            elif shape < 15:
                face = "none"
            else:
                face = col
            ax.scatter(
                self.x[i],
                self.y[i],
                marker=SHAPES.get(shape, "o"),
                s=fontsize[i % len(fontsize)] ** 2,
                facecolors=face,
                edgecolors=col,
                linewidths=_pick(self.gp.lwd, i),
            )


@dataclass
class PolylineGrob(Grob):
    """Connected line through ``x``/``y``; rows sharing an ``id`` form one line."""
    x: Any = field(default_factory=list)
    y: Any = field(default_factory=list)
    id: Any = None

    def __post_init__(self) -> None:
        self.x = _as_array(self.x)
        self.y = _as_array(self.y)
        if self.id is None:
            self.id = np.ones(len(self.x), dtype=np.int64)
        self.id = _as_array(self.id)

    def __len__(self) -> int:
        return len(self.x)

    def draw(self, ax: Axes) -> None:
        for line_id in np.unique(self.id):
            mask = self.id == line_id
            ax.plot(
                self.x[mask],
                self.y[mask],
                color=_colour(_pick(self.gp.col, 0)),
                linewidth=_pick(self.gp.lwd, 0),
                linestyle=LINETYPES.get(_pick(self.gp.lty, 0), "-"),
                solid_joinstyle=_joinstyle(self.gp.linejoin),
                solid_capstyle=_capstyle(self.gp.lineend),
            )


@dataclass
class RectGrob(Grob):
    """Axis-aligned rectangles given by their corners."""
    xmin: Any = field(default_factory=list)
    xmax: Any = field(default_factory=list)
    ymin: Any = field(default_factory=list)
    ymax: Any = field(default_factory=list)

    def __post_init__(self) -> None:
        self.xmin = _as_array(self.xmin)
        self.xmax = _as_array(self.xmax)
        self.ymin = _as_array(self.ymin)
        self.ymax = _as_array(self.ymax)

    def __len__(self) -> int:
        return len(self.xmin)

    def draw(self, ax: Axes) -> None:
        for i in range(len(self)):
            fill = _colour(_pick(self.gp.fill, i))
            ax.add_patch(Rectangle(
                (self.xmin[i], self.ymin[i]),
                self.xmax[i] - self.xmin[i],
                self.ymax[i] - self.ymin[i],
                facecolor=fill if fill is not None else "none",
                edgecolor=_colour(_pick(self.gp.col, i)) or "none",
                linewidth=_pick(self.gp.lwd, i),
                linestyle=LINETYPES.get(_pick(self.gp.lty, i), "-"),
                joinstyle=_joinstyle(self.gp.linejoin),
            ))


def _pick(value: Any, i: int) -> Any:
    """Element ``i`` of a recycled per-row graphical parameter."""
    if value is None or isinstance(value, (str, tuple)):
        return value
    values = list(value) if isinstance(value, (list, np.ndarray)) else [value]
    if not values:
        return None
    return values[i % len(values)]


def _joinstyle(linejoin: str) -> str:
    return "miter" if linejoin == "mitre" else linejoin


def _capstyle(lineend: str) -> str:
    return "projecting" if lineend == "square" else lineend


def _colour(value: Any) -> Any:
    """RGBA tuple of a colour name, hex string or tuple; None stays None."""
    return alpha(value, None)
