from dataclasses import replace

import pytest

from moxon_frame.features import FeatureType
from moxon_frame.frame import compose_frame
from moxon_frame.layout import compute_layout
from moxon_frame.preview import build_preview_geometry


def _model_bounds(box):
    """Undo the Y-up display remap."""
    (px, py, pz), (sx, sy, sz) = box.position, box.size
    return (
        (px - sx / 2, px + sx / 2),
        (-pz - sz / 2, -pz + sz / 2),
        (py - sy / 2, py + sy / 2),
    )


def _solid_bounds(solids):
    points = [v for solid in solids for tri in solid.triangles for v in tri.vertices]
    return tuple((min(p[i] for p in points), max(p[i] for p in points)) for i in range(3))


def _assert_same_bounds(box, solids) -> None:
    for got, want in zip(_model_bounds(box), _solid_bounds(solids)):
        assert got == pytest.approx(want)


def test_one_box_per_feature(uhf_dims, cfg) -> None:
    boxes = build_preview_geometry(uhf_dims, cfg)
    assert [box.feature for box in boxes] == (
        [FeatureType.DRIVER] * 3
        + [FeatureType.ENDCAP] * 2
        + [FeatureType.REFLECTOR] * 3
        + [FeatureType.ENDCAP] * 2
        + [FeatureType.BRIDGE] * 2
        + [FeatureType.CORNER] * 4
        + [FeatureType.BOOM] * 2
    )


def test_display_remap(uhf_dims, cfg) -> None:
    driver_bar = build_preview_geometry(uhf_dims, cfg)[0]
    assert driver_bar.position == pytest.approx((0.0, cfg.total_height / 2, uhf_dims.e / 2))
    assert driver_bar.size == pytest.approx((uhf_dims.a, cfg.total_height, cfg.outer_width))


def test_matches_exported_frame(uhf_dims, cfg) -> None:
    boxes = build_preview_geometry(uhf_dims, cfg)
    solids = compose_frame(uhf_dims, cfg).solids

    # driver bar, left driver tail, reflector bar, left reflector tail
    _assert_same_bounds(boxes[0], solids[0:3])
    _assert_same_bounds(boxes[1], solids[3:6])
    _assert_same_bounds(boxes[5], solids[11:14])
    _assert_same_bounds(boxes[6], solids[14:17])

    # end caps, bridges
    for box, solid in zip(boxes[3:5] + boxes[8:12], solids[9:11] + solids[20:24]):
        _assert_same_bounds(box, [solid])

    # corners share the chamfered blocks' bounding square
    for box, solid in zip(boxes[12:16], solids[24:28]):
        _assert_same_bounds(box, [solid])

    # boom body and mounting tail
    _assert_same_bounds(boxes[16], solids[28:29])
    _assert_same_bounds(boxes[17], solids[29:])


def test_tail_box_spans_mounting_tail(uhf_dims, cfg) -> None:
    layout = compute_layout(uhf_dims, cfg)
    tail = build_preview_geometry(uhf_dims, cfg)[-1]
    assert tail.size[2] == pytest.approx(cfg.mounting_tail_length)
    assert _model_bounds(tail)[1] == pytest.approx((layout.boom_body_end, layout.boom_tail_end))


def test_bridge_floor_shared_with_frame(make_dims, cfg) -> None:
    dims = make_dims(120.0, 15.0, 1.0, 24.0)
    bridges = [b for b in build_preview_geometry(dims, cfg) if b.feature is FeatureType.BRIDGE]
    assert all(b.size[2] == pytest.approx(0.1) for b in bridges)


def test_proportions_survive_scaling(uhf_dims, cfg) -> None:
    base = build_preview_geometry(uhf_dims, cfg)
    scaled = build_preview_geometry(uhf_dims.scaled(3), cfg.scaled(3))
    for small, big in zip(base, scaled):
        assert big.size == pytest.approx(tuple(3 * s for s in small.size))
        assert big.position == pytest.approx(tuple(3 * p for p in small.position))


def test_hole_does_not_change_preview(uhf_dims, cfg) -> None:
    assert build_preview_geometry(uhf_dims, cfg) == build_preview_geometry(
        uhf_dims, replace(cfg, mounting_hole_diameter=0)
    )
