# circumdraw

circumdraw is a small drawing tool. You click three points on a fixed-size
canvas, and it draws the one circle that passes through all three. After that
you can drag any of the points and the circle follows. You can also scatter
the points at random.

## Installing

```
pip install .
```

The window uses the `tkinter` module from the standard library, so the Python
installation needs Tk support. The package has no other dependencies.

## Running

```
circumdraw
```

The command takes no options other than `--help`. It opens a window titled
"Draw Circle" with a 1280 × 960 white canvas and a side panel. The panel has:

- **Point radius**: the radius of the filled black dot drawn at each clicked
  point. The canvas accepts no clicks until this field starts with a positive
  whole number. A warning appears and the field gets the focus if it does not.
- **Circle thickness**: the line width of the circle through the three
  points. It must hold a positive number before you place the third point.
- Three labels `P1:`, `P2:` and `P3:` that show the coordinates of the placed
  points. The coordinates are window coordinates, so the canvas starts at
  (10, 10).
- The **Random move** and **Reset** buttons.

How to use it:

1. Click three times inside the canvas to place the points.
2. When the third point is placed, the circle through the three points is
   drawn. If the points lie on one straight line, no circle exists. The
   previous circle, if any, then stays as it was.
3. After all three points are placed, press the mouse within the point radius
   of a point and drag to move it. Clicks anywhere else do nothing.
4. **Random move** moves all three points to random places on the canvas ten
   times, once every half second. It works only when the last calculation
   found a circle. Otherwise a notice is shown.
5. **Reset** removes all the points and the circle.

Changes to the two fields redraw the canvas at once.

## Using it as a library

The geometry and the editing state do not depend on the window.

- `circumdraw.geometry`
  - `circle_from_points(p1, p2, p3)` returns the `Circle` (`center_x`,
    `center_y`, `radius` and a `center` property) through three points. It
    returns `None` if the points are collinear.
  - `circle_vertices(center_x, center_y, radius, steps)` returns `steps`
    evenly spaced points on a circle, starting at angle zero. It raises
    `ValueError` for a negative `steps`.
  - `parse_int(text)` and `parse_float(text)` read a leading number from
    text, skipping leading whitespace. They return 0 if no number can be read.
- `circumdraw.model`
  - `Canvas` is the drawing area. The default is 1280 × 960 at (10, 10). It
    has `contains(point)` and `to_local(point)`.
  - `CircleEditor` holds the state: `press(point, point_radius_text,
    thickness_text)`, `move(point)`, `release()`, `reset()`,
    `randomize(rng)` and `labels()`. It also exposes `points`,
    `click_count`, `circle`, `calculated`, `dragging` and `dragged_index`.
  - `InputRequired` is a `ValueError` that `press` raises when a field is
    missing or not positive. Its `field` attribute names the field that needs
    input.
  - `RandomMover(editor, rng=None, iterations=10, interval=0.5,
    on_update=None)` runs the random moves on a background thread with
    `start()`, `stop()` and `join()`.
- `circumdraw.app`
  - `build_scene(editor, point_radius_text, thickness_text)` returns the
    `SceneItem` polygons to draw, in canvas-local coordinates. The polygons
    are dots of 100 vertices and a ring of 200 vertices.
  - `DrawCircleApp` is the window, and `DrawCircleApp.run()` shows it.
  - `main(argv=None)` is the entry point of the `circumdraw` command.

## What it does not do

Drawings are not saved or exported anywhere. Closing the window discards
them.

## Running the tests

```
pip install ".[test]"
pytest
```