"""
Legend key drawers.

Each drawer takes the aesthetics of one legend entry (``data``), the layer
parameters and the key size in mm, and returns the grob of a single key in
a unit square.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from geomlayer.grobs import GPar, Grob, PointsGrob, PolylineGrob, RectGrob, ZeroGrob
from geomlayer.utils import PT, STROKE, alpha


def _get(data: Mapping[str, Any], key: str, default: Any = None) -> Any:
    value = data.get(key, default)
    return default if value is None else value


def draw_key_blank(data: Mapping[str, Any], params: Mapping[str, Any], size: Optional[float] = None) -> Grob:
    return ZeroGrob()


def draw_key_point(data: Mapping[str, Any], params: Mapping[str, Any], size: Optional[float] = None) -> Grob:
    stroke = _get(data, "stroke", 0.5)
    return PointsGrob(
        name="key_point",
        x=0.5,
        y=0.5,
        pch=_get(data, "shape", 19),
        gp=GPar(
            col=alpha(_get(data, "colour", "black"), data.get("alpha")),
            fill=alpha(data.get("fill"), data.get("alpha")),
            fontsize=_get(data, "size", 1.5) * PT + stroke * STROKE / 2,
            lwd=stroke * STROKE / 2,
        ),
    )


def draw_key_path(data: Mapping[str, Any], params: Mapping[str, Any], size: Optional[float] = None) -> Grob:
    return PolylineGrob(
        name="key_path",
        x=[0.1, 0.9],
        y=[0.5, 0.5],
        gp=GPar(
            col=alpha(_get(data, "colour", "black"), data.get("alpha")),
            lwd=_get(data, "linewidth", 0.5) * PT,
            lty=_get(data, "linetype", "solid"),
            lineend=params.get("lineend", "butt"),
        ),
    )


def draw_key_rect(data: Mapping[str, Any], params: Mapping[str, Any], size: Optional[float] = None) -> Grob:
    return RectGrob(
        name="key_rect",
        xmin=0.0,
        xmax=1.0,
        ymin=0.0,
        ymax=1.0,
        gp=GPar(
            col=alpha(data.get("colour"), data.get("alpha")),
            fill=alpha(_get(data, "fill", "grey20"), data.get("alpha")),
            lwd=_get(data, "linewidth", 0.5) * PT,
            lty=_get(data, "linetype", "solid"),
            linejoin=params.get("linejoin", "mitre"),
        ),
    )
