"""
geomlayer: the geom layer of a grammar-of-graphics plotting system.

Geoms turn scaled, grouped layer data into drawing primitives (grobs),
one per panel.
"""
from geomlayer.coords import Coord, CoordCartesian, CoordFlip
from geomlayer.data import remove_missing
from geomlayer.exceptions import AestheticLengthError, GeomError
from geomlayer.geoms import Geom, GeomBlank, GeomLine, GeomPath, GeomPoint, GeomRect, GeomTile
from geomlayer.grobs import GPar, GTree, Grob, PointsGrob, PolylineGrob, RectGrob, ZeroGrob
from geomlayer.layer import Layer
from geomlayer.panel import PanelLayout, PanelScales
from geomlayer.utils import PT, STROKE

__version__ = "0.1.0"
