"""Editor state: three clicked points, the circle through them, dragging and random moves."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from typing import Callable

from circumdraw.geometry import Circle, circle_from_points, parse_float, parse_int

Point = tuple[int, int]


@dataclass(frozen=True)
class Canvas:
    """The fixed drawing area, placed in window coordinates."""

    left: int = 10
    top: int = 10
    width: int = 1280
    height: int = 960

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def contains(self, point: Point) -> bool:
        """True if the point lies inside the area (right and bottom edges excluded)."""
        x, y = point
        return self.left <= x < self.right and self.top <= y < self.bottom

    def to_local(self, point: tuple[float, float]) -> tuple[float, float]:
        """Convert window coordinates to coordinates relative to the canvas origin."""
        x, y = point
        return (x - self.left, y - self.top)


class InputRequired(ValueError):
    """Raised when an action needs an input the user has not supplied."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class CircleEditor:
    """Collects up to three points, keeps the circle through them and lets points be dragged."""

    def __init__(self, canvas: Canvas | None = None) -> None:
        self.canvas = canvas or Canvas()
        self.lock = threading.RLock()
        self.reset()

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def click_count(self) -> int:
        return len(self._points)

    @property
    def dragging(self) -> bool:
        return self.dragged_index is not None

    def reset(self) -> None:
        """Forget all points, the circle and any drag in progress."""
        with self.lock:
            self._points: list[Point] = []
            self.circle: Circle | None = None
            self.calculated = False
            self.dragged_index: int | None = None

    def _recalculate(self) -> None:
        found = circle_from_points(*self._points)
        self.calculated = found is not None
        if found is not None:
            self.circle = found

    def press(self, point: Point, point_radius_text: str, thickness_text: str) -> bool:
        """Handle a button press; return True if it changed points or started a drag."""
        if not self.canvas.contains(point):
            return False

        point_radius = parse_int(point_radius_text)
        if not point_radius_text or point_radius <= 0:
            raise InputRequired("point_radius", "Enter the radius of the clicked points first.")

        with self.lock:
            if len(self._points) < 3:
                if len(self._points) == 2 and (not thickness_text or parse_float(thickness_text) <= 0):
                    raise InputRequired("thickness", "Enter the thickness of the main circle first.")
                self._points.append(tuple(point))
                if len(self._points) == 3:
                    self._recalculate()
                return True

            px, py = point
            for index, (x, y) in enumerate(self._points):
                if x - point_radius <= px < x + point_radius and y - point_radius <= py < y + point_radius:
                    self.dragged_index = index
                    return True
            return False

    def move(self, point: Point) -> bool:
        """Move the dragged point, if any; return True if something moved."""
        with self.lock:
            if self.dragged_index is None:
                return False
            self._points[self.dragged_index] = tuple(point)
            self._recalculate()
            return True

    def release(self) -> None:
        """End any drag in progress."""
        with self.lock:
            self.dragged_index = None

    def randomize(self, rng: random.Random) -> None:
        """Place all three points at random positions within the canvas, edges included."""
        c = self.canvas
        with self.lock:
            self._points = [
                (rng.randint(c.left, c.right), rng.randint(c.top, c.bottom)) for _ in range(3)
            ]
            self._recalculate()

    def labels(self) -> tuple[str, str, str]:
        """Coordinate captions for P1 to P3."""
        with self.lock:
            shown = list(self._points)
        return tuple(
            f"P{n}: ({shown[n - 1][0]}, {shown[n - 1][1]})" if n <= len(shown) else f"P{n}:"
            for n in (1, 2, 3)
        )


class RandomMover:
    """Moves the editor's points to random places a number of times on a worker thread."""

    def __init__(
        self,
        editor: CircleEditor,
        rng: random.Random | None = None,
        iterations: int = 10,
        interval: float = 0.5,
        on_update: Callable[[], None] | None = None,
    ) -> None:
        self.editor = editor
        self.rng = rng or random.Random()
        self.iterations = iterations
        self.interval = interval
        self.on_update = on_update
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Begin moving; a circle must already have been drawn."""
        if not self.editor.calculated:
            raise InputRequired("points", "Place three points to draw a circle first.")
        self.join()
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the worker to finish after its current step."""
        self._stop.set()

    def join(self) -> None:
        """Wait for the worker, if any, to finish."""
        if self._thread is not None:
            self._thread.join()

    def _run(self) -> None:
        for _ in range(self.iterations):
            if self._stop.is_set():
                break
            self.editor.randomize(self.rng)
            if self.on_update is not None:
                self.on_update()
            if self._stop.wait(self.interval):
                break