"""Window that draws clicked points and the circle through them."""

from __future__ import annotations

import argparse
import enum
import random
from dataclasses import dataclass

from circumdraw.geometry import circle_vertices, parse_float, parse_int
from circumdraw.model import CircleEditor, InputRequired, RandomMover

POINT_STEPS = 100
RING_STEPS = 200
_REFRESH_MS = 30


class ItemKind(enum.Enum):
    DOT = "dot"
    RING = "ring"


@dataclass(frozen=True)
class SceneItem:
    """One polygon to draw, in canvas-local coordinates."""

    kind: ItemKind
    vertices: tuple[tuple[float, float], ...]
    thickness: float = 0.0


def build_scene(editor: CircleEditor, point_radius_text: str, thickness_text: str) -> list[SceneItem]:
    """Describe what the canvas shows: a filled dot per point and the outlined main circle."""
    canvas = editor.canvas
    items: list[SceneItem] = []
    with editor.lock:
        points = editor.points
        circle = editor.circle

    radius = parse_int(point_radius_text)
    if radius > 0:
        for point in points:
            x, y = canvas.to_local(point)
            items.append(SceneItem(ItemKind.DOT, tuple(circle_vertices(x, y, radius, POINT_STEPS))))

    thickness = parse_float(thickness_text)
    if thickness > 0 and circle is not None and circle.radius > 0:
        x, y = canvas.to_local(circle.center)
        items.append(
            SceneItem(ItemKind.RING, tuple(circle_vertices(x, y, circle.radius, RING_STEPS)), thickness)
        )
    return items


class DrawCircleApp:
    """The interactive window: a canvas, two inputs, coordinate labels and two buttons."""

    def __init__(self, editor: CircleEditor | None = None) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.editor = editor or CircleEditor()
        self.mover: RandomMover | None = None
        self._dirty = True

        canvas = self.editor.canvas
        self.root = tk.Tk()
        self.root.title("Draw Circle")
        self.root.protocol("WM_DELETE_WINDOW", self._close)

        self.canvas = tk.Canvas(self.root, width=canvas.width, height=canvas.height, bg="white", highlightthickness=0)
        self.canvas.grid(row=0, column=0, padx=(canvas.left, 10), pady=(canvas.top, 10), sticky="nw")

        panel = tk.Frame(self.root)
        panel.grid(row=0, column=1, sticky="n", padx=10, pady=10)

        self.radius_var = tk.StringVar()
        self.thickness_var = tk.StringVar()
        tk.Label(panel, text="Point radius").pack(anchor="w")
        self.radius_entry = tk.Entry(panel, textvariable=self.radius_var)
        self.radius_entry.pack(fill="x")
        tk.Label(panel, text="Circle thickness").pack(anchor="w")
        self.thickness_entry = tk.Entry(panel, textvariable=self.thickness_var)
        self.thickness_entry.pack(fill="x")
        self.radius_var.trace_add("write", lambda *_: self._invalidate())
        self.thickness_var.trace_add("write", lambda *_: self._invalidate())

        self.label_vars = [tk.StringVar() for _ in range(3)]
        for var in self.label_vars:
            tk.Label(panel, textvariable=var).pack(anchor="w")

        tk.Button(panel, text="Random move", command=self._random_move).pack(fill="x", pady=(10, 0))
        tk.Button(panel, text="Reset", command=self._reset).pack(fill="x")

        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)

        self._refresh()

    def run(self) -> None:
        """Show the window until it is closed."""
        self.root.mainloop()

    def _window_point(self, event) -> tuple[int, int]:
        return (event.x + self.editor.canvas.left, event.y + self.editor.canvas.top)

    def _on_press(self, event) -> None:
        try:
            if self.editor.press(self._window_point(event), self.radius_var.get(), self.thickness_var.get()):
                self._invalidate()
        except InputRequired as exc:
            self._messagebox.showwarning("Input required", str(exc), parent=self.root)
            entry = self.thickness_entry if exc.field == "thickness" else self.radius_entry
            entry.focus_set()

    def _on_move(self, event) -> None:
        if self.editor.move(self._window_point(event)):
            self._invalidate()

    def _on_release(self, _event) -> None:
        self.editor.release()

    def _reset(self) -> None:
        self.editor.reset()
        self._invalidate()

    def _random_move(self) -> None:
        if self.mover is None:
            self.mover = RandomMover(self.editor, random.Random(), on_update=self._invalidate)
        try:
            self.mover.start()
        except InputRequired as exc:
            self._messagebox.showinfo("Notice", str(exc), parent=self.root)

    def _invalidate(self) -> None:
        self._dirty = True

    def _refresh(self) -> None:
        if self._dirty:
            self._dirty = False
            self._redraw()
        self.root.after(_REFRESH_MS, self._refresh)

    def _redraw(self) -> None:
        for var, text in zip(self.label_vars, self.editor.labels()):
            var.set(text)
        self.canvas.delete("all")
        for item in build_scene(self.editor, self.radius_var.get(), self.thickness_var.get()):
            coords = [c for vertex in item.vertices for c in vertex]
            if item.kind is ItemKind.DOT:
                self.canvas.create_polygon(coords, fill="black", outline="")
            else:
                self.canvas.create_polygon(coords, fill="", outline="black", width=item.thickness)

    def _close(self) -> None:
        if self.mover is not None:
            self.mover.stop()
            self.mover.join()
        self.root.destroy()


def main(argv: list[str] | None = None) -> int:
    """Start the circle drawing window."""
    parser = argparse.ArgumentParser(
        prog="circumdraw",
        description="Click three points to draw the circle through them; drag points to reshape it.",
    )
    parser.parse_args(argv)
    DrawCircleApp().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())