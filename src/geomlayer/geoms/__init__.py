from geomlayer.geoms.geom import Geom, check_aesthetics
from geomlayer.geoms.geom_blank import GeomBlank
from geomlayer.geoms.geom_path import GeomLine, GeomPath
from geomlayer.geoms.geom_point import GeomPoint
from geomlayer.geoms.geom_rect import GeomRect, GeomTile

__all__ = [
    "Geom",
    "GeomBlank",
    "GeomLine",
    "GeomPath",
    "GeomPoint",
    "GeomRect",
    "GeomTile",
    "check_aesthetics",
]
