"""
Geom Base Class
===============
All geoms (points, paths, rects, ...) derive from ``Geom``. A geom turns the
scaled data of a layer into grobs.

To create a new geom, subclass ``Geom`` and set or override:

* ``draw_panel(self, data, panel_scales, coord, ...)`` or
  ``draw_group(self, data, panel_scales, coord, ...)``. ``draw_panel`` is
  called once per panel, ``draw_group`` once per group. Use ``draw_panel``
  when each row is a single element (points, rects) and ``draw_group`` when
  each group is one element (a path, a polygon). Both receive the scaled
  aesthetics in ``data``, the ranges of the panel in ``panel_scales`` and the
  coordinate system in ``coord``; call ``coord.transform(data, panel_scales)``
  before drawing. Return a grob, ``ZeroGrob()`` if there is nothing to draw.
* ``draw_key``: renders a single legend key.
* ``required_aes``: aesthetics needed to render the geom.
* ``non_missing_aes``: aesthetics checked for missing values but not required.
* ``default_aes``: default values of the aesthetics.
* ``setup_data``: adjusts the data before position adjustments, e.g. turning
  width and height into xmin/xmax and ymin/ymax.

``setup_data`` runs before position adjustments while ``draw_layer`` only
runs at render time, much later. There is therefore no ``setup_params``.

Extra keyword arguments of ``draw_panel`` (or of ``draw_group`` when
``draw_panel`` takes ``**params``) are the parameters a geom consumes. They
are collected once, when the subclass is defined, into ``draw_params``.
"""
from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, ClassVar, Mapping, Optional, TYPE_CHECKING

import pandas as pd

from geomlayer.config import DEFAULT_NA_RM
from geomlayer.data import aes_length, broadcast, is_empty, remove_missing, split_by_group, split_by_panel, panel_levels
from geomlayer.draw_key import draw_key_point
from geomlayer.exceptions import AestheticLengthError
from geomlayer.grobs import GTree, Grob, ZeroGrob
from geomlayer.utils import snake_class

if TYPE_CHECKING:
    from geomlayer.coords import Coord
    from geomlayer.panel import PanelLayout, PanelScales

logger = logging.getLogger(__name__)


def _formals(function: Callable[..., Any]) -> tuple[list[str], bool]:
    """
    Named parameters of ``function`` (without ``self``) and whether it has a
    catch-all ``*args``/``**kwargs``.
    """
    names = []
    catch_all = False
    for name, parameter in inspect.signature(function).parameters.items():
        if parameter.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            catch_all = True
        elif name != "self":
            names.append(name)
    return names, catch_all


def check_aesthetics(values: Mapping[str, Any], n: int) -> None:
    """
    Raise ``AestheticLengthError`` unless every value has length 1 or ``n``.
    """
    bad = [name for name, value in values.items() if aes_length(value) not in (1, n)]
    if bad:
        raise AestheticLengthError(bad, n)


class Geom:
    """
    Base class of all geoms.
    """
    required_aes: ClassVar[set[str]] = set()
    non_missing_aes: ClassVar[set[str]] = set()
    default_aes: ClassVar[dict[str, Any]] = {}

    # Parameters needed by setup_data() or handle_na() that can not be read
    # from the signature of the draw methods.
    extra_params: ClassVar[set[str]] = {"na_rm"}

    # Filled in by __init_subclass__ unless a subclass declares it
    draw_params: ClassVar[tuple[str, ...]] = ()

    draw_key = staticmethod(draw_key_point)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "draw_params" not in cls.__dict__:
            cls.draw_params = cls._collect_draw_params()

    @classmethod
    def _collect_draw_params(cls) -> tuple[str, ...]:
        # Look first in draw_panel. If it takes **params, look in draw_group
        panel_args, catch_all = _formals(cls.draw_panel)
        args = _formals(cls.draw_group)[0] if catch_all else panel_args

        # Remove the arguments every draw method gets
        base_args = _formals(Geom.draw_group)[0]
        return tuple(arg for arg in args if arg not in base_args)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"

    def aesthetics(self) -> set[str]:
        """All aesthetics the geom understands."""
        return set(self.required_aes) | set(self.default_aes) | {"group"}

    def parameters(self, extra: bool = False) -> set[str]:
        """
        Parameters consumed by the draw methods.

        Args:
            extra: Also include ``extra_params``.
        """
        args = set(self.draw_params)
        if extra:
            args |= set(self.extra_params)
        return args

    def setup_data(self, data: pd.DataFrame, params: Mapping[str, Any]) -> pd.DataFrame:
        return data

    def use_defaults(self, data: pd.DataFrame, params: Optional[Mapping[str, Any]] = None) -> pd.DataFrame:
        """
        Combine data with the default aesthetics and set aesthetics from
        parameters.

        Args:
            data: Layer data.
            params: Layer parameters; those naming an aesthetic of the geom
                replace the corresponding column.

        Returns:
            A new frame with all default aesthetics present.

        Raises:
            AestheticLengthError: If an aesthetic parameter is neither length 1
                nor as long as the data.
        """
        params = params or {}

        # Fill in missing aesthetics with their defaults
        missing_aes = [name for name in self.default_aes if name not in data.columns]
        if is_empty(data):
            data = pd.DataFrame({name: [self.default_aes[name]] for name in missing_aes})
        else:
            data = data.copy()
            for name in missing_aes:
                data[name] = broadcast(self.default_aes[name], len(data))

        # Override mappings with params
        aesthetics = self.aesthetics()
        aes_params = {name: value for name, value in params.items() if name in aesthetics}
        check_aesthetics(aes_params, len(data))
        for name, value in aes_params.items():
            data[name] = broadcast(value, len(data))
        return data

    def handle_na(self, data: pd.DataFrame, params: Mapping[str, Any]) -> pd.DataFrame:
        return remove_missing(
            data,
            params.get("na_rm", DEFAULT_NA_RM),
            [*sorted(self.required_aes), *sorted(self.non_missing_aes)],
            snake_class(self),
        )

    def draw_layer(
        self,
        data: pd.DataFrame,
        params: Mapping[str, Any],
        layout: PanelLayout,
        coord: Coord
    ) -> list[Grob]:
        """
        Draw the layer, one grob per panel.

        Args:
            data: Layer data with ``PANEL`` and ``group`` columns.
            params: Layer parameters. Those the draw methods do not take are
                dropped.
            layout: Supplies the scale ranges of each panel.
            coord: Coordinate system.

        Returns:
            One grob per panel level, in level order. Panels without data
            get a ``ZeroGrob``.
        """
        if is_empty(data):
            return [ZeroGrob() for _ in panel_levels(data)]

        # Trim off extra parameters
        accepted = self.parameters()
        params = {name: value for name, value in params.items() if name in accepted}

        grobs: list[Grob] = []
        for panel_id, panel_data in split_by_panel(data):
            if is_empty(panel_data):
                grobs.append(ZeroGrob())
                continue
            panel_scales = layout.ranges[panel_id]
            grobs.append(self.draw_panel(panel_data, panel_scales, coord, **params))
        logger.debug(f"{snake_class(self)}: drew {len(grobs)} panels.")
        return grobs

    def draw_panel(self, data: pd.DataFrame, panel_scales: PanelScales, coord: Coord, **params: Any) -> Grob:
        grobs = [
            self.draw_group(group, panel_scales, coord, **params)
            for group in split_by_group(data)
        ]
        return GTree(name=snake_class(self), children=grobs)

    def draw_group(self, data: pd.DataFrame, panel_scales: PanelScales, coord: Coord) -> Grob:
        raise NotImplementedError(
            f"{type(self).__name__} must override draw_group() or draw_panel()"
        )
