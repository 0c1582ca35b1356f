import dataclasses
import math

import pytest

from circumdraw.app import ItemKind, SceneItem, build_scene, main
from circumdraw.model import CircleEditor

POINTS = [(100, 100), (300, 120), (200, 400)]


def _editor(points=POINTS):
    editor = CircleEditor()
    for p in points:
        editor.press(p, "5", "2")
    return editor


def test_empty_editor_has_empty_scene():
    assert build_scene(CircleEditor(), "5", "2") == []


def test_full_scene_has_three_dots_and_ring():
    scene = build_scene(_editor(), "5", "2")
    kinds = [item.kind for item in scene]
    assert kinds == [ItemKind.DOT, ItemKind.DOT, ItemKind.DOT, ItemKind.RING]
    assert all(len(item.vertices) == 100 for item in scene[:3])
    assert len(scene[3].vertices) == 200
    assert scene[3].thickness == 2.0


def test_dots_are_in_canvas_local_coordinates():
    editor = _editor()
    scene = build_scene(editor, "5", "2")
    for item, (x, y) in zip(scene, editor.points):
        lx, ly = editor.canvas.to_local((x, y))
        cx = sum(v[0] for v in item.vertices) / len(item.vertices)
        cy = sum(v[1] for v in item.vertices) / len(item.vertices)
        assert (cx, cy) == pytest.approx((lx, ly), abs=1e-9)
        for vx, vy in item.vertices:
            assert math.hypot(vx - lx, vy - ly) == pytest.approx(5.0)


def test_ring_follows_circle():
    editor = _editor()
    ring = build_scene(editor, "5", "3.5")[-1]
    lx, ly = editor.canvas.to_local(editor.circle.center)
    assert ring.thickness == 3.5
    for vx, vy in ring.vertices:
        assert math.hypot(vx - lx, vy - ly) == pytest.approx(editor.circle.radius)


def test_no_dots_without_radius():
    scene = build_scene(_editor(), "0", "2")
    assert [item.kind for item in scene] == [ItemKind.RING]


def test_no_ring_without_thickness():
    scene = build_scene(_editor(), "5", "")
    assert [item.kind for item in scene] == [ItemKind.DOT] * 3


def test_partial_clicks_draw_only_dots():
    editor = CircleEditor()
    editor.press((50, 60), "4", "")
    scene = build_scene(editor, "4", "2")
    assert len(scene) == 1
    assert scene[0].kind is ItemKind.DOT


def test_scene_after_reset_is_empty():
    editor = _editor()
    editor.reset()
    assert build_scene(editor, "5", "2") == []


def test_scene_items_are_immutable():
    ring = build_scene(_editor(), "5", "2")[-1]
    assert isinstance(ring, SceneItem)
    with pytest.raises(AttributeError):
        ring.thickness = 9.0
    assert ring.thickness == 2.0
    assert ring.kind is ItemKind.RING
    with pytest.raises(dataclasses.FrozenInstanceError):
        ring.kind = ItemKind.DOT
    assert ring.kind is ItemKind.RING


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2