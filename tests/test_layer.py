import logging

import pandas as pd

from geomlayer import GeomPoint, GeomTile, Layer, PanelLayout, PanelScales
from geomlayer.grobs import PointsGrob, RectGrob, ZeroGrob


def test_layer_splits_params():
    layer = Layer(GeomTile(), {"na_rm": True, "fill": "red", "width": 0.5, "linejoin": "round"})
    assert layer.geom_params == {"na_rm": True, "width": 0.5, "linejoin": "round"}
    assert layer.aes_params == {"fill": "red", "width": 0.5}


def test_layer_warns_on_unknown_params(caplog):
    with caplog.at_level(logging.WARNING, logger="geomlayer"):
        Layer(GeomPoint(), {"bogus": 1})
    assert "bogus" in caplog.text


def test_layer_render_point():
    data = pd.DataFrame({
        "x": [0.0, 5.0, None],
        "y": [1.0, 2.0, 3.0],
        "PANEL": pd.Categorical([1, 1, 1], categories=[1, 2]),
        "group": [1, 1, 1],
    })
    layout = PanelLayout(ranges={
        1: PanelScales(x_range=(0.0, 10.0), y_range=(0.0, 4.0)),
        2: PanelScales(),
    })
    grobs = Layer(GeomPoint(), {"colour": "red", "na_rm": True}).render(data, layout)
    assert len(grobs) == 2
    assert isinstance(grobs[0], PointsGrob)
    assert len(grobs[0]) == 2
    assert grobs[0].x.tolist() == [0.0, 0.5]


def test_layer_render_tile():
    data = pd.DataFrame({
        "x": [1.0, 2.0],
        "y": [1.0, 1.0],
        "PANEL": pd.Categorical([1, 1]),
        "group": [1, 2],
    })
    layout = PanelLayout.single(PanelScales(x_range=(0.0, 4.0), y_range=(0.0, 2.0)))
    grobs = Layer(GeomTile(), {"height": 1.0}).render(data, layout)
    rects = grobs[0]
    assert isinstance(rects, RectGrob)
    assert rects.xmin.tolist() == [0.125, 0.375]
    assert rects.ymin.tolist() == [0.25, 0.25]


def test_layer_render_empty_data_one_zero_grob_per_panel():
    data = pd.DataFrame({
        "x": pd.Series([], dtype=float),
        "y": pd.Series([], dtype=float),
        "PANEL": pd.Categorical([], categories=[1, 2]),
        "group": pd.Series([], dtype=int),
    })
    layout = PanelLayout(ranges={1: PanelScales(), 2: PanelScales()})
    grobs = Layer(GeomPoint(), {"colour": "red"}).render(data, layout)
    assert len(grobs) == 2
    assert all(isinstance(grob, ZeroGrob) for grob in grobs)


def test_layer_use_defaults_passes_empty_data_through():
    data = pd.DataFrame({"PANEL": pd.Categorical([], categories=[1])})
    assert Layer(GeomPoint()).use_defaults(data) is data


def test_layer_render_panel_emptied_by_missing_values():
    data = pd.DataFrame({
        "x": [1.0, None, 2.0],
        "y": [1.0, 1.0, 1.0],
        "PANEL": pd.Categorical([1, 2, 1], categories=[1, 2]),
        "group": [1, 1, 1],
    })
    layout = PanelLayout(ranges={1: PanelScales(x_range=(0.0, 4.0)), 2: PanelScales()})
    grobs = Layer(GeomPoint(), {"na_rm": True}).render(data, layout)
    assert len(grobs) == 2
    assert isinstance(grobs[0], PointsGrob)
    assert grobs[0].x.tolist() == [0.25, 0.5]
    assert isinstance(grobs[1], ZeroGrob)
