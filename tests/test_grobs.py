import matplotlib.pyplot as plt
import numpy as np

from geomlayer.coords import CoordCartesian, CoordFlip
from geomlayer.draw_key import draw_key_blank, draw_key_path, draw_key_point, draw_key_rect
from geomlayer.grobs import GPar, GTree, PointsGrob, PolylineGrob, RectGrob, ZeroGrob, is_zero
from geomlayer.panel import PanelLayout, PanelScales

import pandas as pd


def test_tree_walk_and_plot():
    tree = GTree(name="tree", children=[
        PointsGrob(x=[0.1, 0.2], y=[0.3, 0.4], gp=GPar(col=["red", "blue"], fontsize=[5.0, 6.0])),
        PolylineGrob(x=[0.0, 1.0], y=[0.0, 1.0], gp=GPar(col="black", lwd=1.0)),
        RectGrob(xmin=0.1, xmax=0.2, ymin=0.1, ymax=0.3, gp=GPar(fill="grey35")),
        ZeroGrob(),
    ])
    assert len(list(tree.walk())) == 5
    ax = tree.plot()
    assert len(ax.collections) == 2
    assert len(ax.lines) == 1
    assert len(ax.patches) == 1
    plt.close("all")


def test_draw_keys():
    assert is_zero(draw_key_blank({}, {}))
    point = draw_key_point({"colour": "red", "size": 2.0}, {})
    assert point.gp.col == (1.0, 0.0, 0.0, 1.0)
    path = draw_key_path({"linewidth": 1.0}, {"lineend": "round"})
    assert path.gp.lineend == "round"
    rect = draw_key_rect({"fill": "white"}, {})
    assert rect.gp.fill == (1.0, 1.0, 1.0, 1.0)


def test_coord_cartesian_rescales_positions():
    data = pd.DataFrame({"x": [0.0, 5.0], "ymax": [10.0, 20.0], "colour": ["a", "b"]})
    result = CoordCartesian().transform(data, PanelScales(x_range=(0.0, 10.0), y_range=(0.0, 20.0)))
    np.testing.assert_allclose(result["x"], [0.0, 0.5])
    np.testing.assert_allclose(result["ymax"], [0.5, 1.0])
    assert data["x"].tolist() == [0.0, 5.0]


def test_coord_flip_swaps_axes():
    data = pd.DataFrame({"x": [0.0, 5.0], "y": [0.0, 20.0]})
    result = CoordFlip().transform(data, PanelScales(x_range=(0.0, 10.0), y_range=(0.0, 20.0)))
    np.testing.assert_allclose(result["x"], [0.0, 1.0])
    np.testing.assert_allclose(result["y"], [0.0, 0.5])


def test_single_panel_layout():
    layout = PanelLayout.single()
    assert layout.n_panels == 1
    assert layout.ranges[1] == PanelScales()


def test_points_fill_only_filled_shapes():
    points = PointsGrob(
        x=[0.2, 0.4, 0.6],
        y=[0.5, 0.5, 0.5],
        pch=[21, 1, 19],
        gp=GPar(col="red", fill="blue"),
    )
    ax = points.plot()
    filled, hollow, solid = ax.collections
    np.testing.assert_allclose(filled.get_facecolor(), [(0.0, 0.0, 1.0, 1.0)])
    np.testing.assert_allclose(filled.get_edgecolor(), [(1.0, 0.0, 0.0, 1.0)])
    assert len(hollow.get_facecolor()) == 0
    np.testing.assert_allclose(solid.get_facecolor(), [(1.0, 0.0, 0.0, 1.0)])
    plt.close("all")
