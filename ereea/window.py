"""The map window: controls, statistics and the drawn map."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

from .map import Map
from .map_grid import MapGrid
from .simulation import Simulation
from .tile import RobotType

TILE_SIZE = 30
CONTROL_WIDTH = 200
PADDING = 10
TICK_MS = 33


class Message(Enum):
    """Events the window reacts to."""

    TICK = auto()
    SEND_EXPLORER = auto()
    PAUSE = auto()
    PLAY = auto()
    UP_SPEED = auto()
    DOWN_SPEED = auto()
    TOGGLE_AUTO_EXPLORE = auto()


@dataclass(frozen=True)
class ButtonSpec:
    """A control button: its label, the message it sends and whether it is active."""

    label: str
    message: Message
    enabled: bool

    @property
    def on_press(self) -> Optional[Message]:
        return self.message if self.enabled else None

    @property
    def style(self) -> str:
        return "primary" if self.enabled else "secondary"


def create_button(label: str, message: Message, enabled: bool) -> ButtonSpec:
    return ButtonSpec(label, message, enabled)


def window_size(game_map: Map) -> tuple[int, int]:
    """Window width and height needed to show the map beside the controls."""
    width = game_map.width * TILE_SIZE + CONTROL_WIDTH + PADDING
    height = game_map.height * TILE_SIZE + PADDING
    return width, height


def _format_fps(fps: float) -> str:
    return str(int(fps)) if float(fps).is_integer() else f"{fps:g}"


class MapWindow:
    """State and behaviour of the map window, independent of any toolkit."""

    def __init__(self, simulation: Simulation) -> None:
        self.simulation = simulation
        self.map_grid = MapGrid(simulation.map)
        self.auto_explore = False

    def title(self) -> str:
        return "EREEA - Map View"

    def update(self, message: Message, value: Any = None) -> None:
        """React to a message; ``value`` carries the toggle's new state."""
        sim = self.simulation
        if message is Message.TICK:
            sim.compute_fps()
            with sim.map_lock:
                self.map_grid.update(sim.map)
            if self.auto_explore:
                sim.send_robot(RobotType.EXPLORER)
        elif message is Message.SEND_EXPLORER:
            sim.send_robot(RobotType.EXPLORER)
        elif message is Message.PAUSE:
            sim.pause()
        elif message is Message.PLAY:
            sim.play()
        elif message is Message.UP_SPEED:
            sim.increase_speed()
        elif message is Message.DOWN_SPEED:
            sim.decrease_speed()
        elif message is Message.TOGGLE_AUTO_EXPLORE:
            self.auto_explore = bool(value)

    def stats_text(self) -> str:
        sim = self.simulation
        return (
            f"FPS: {_format_fps(sim.fps)}\n"
            f"Resources found: {len(sim.located_resources)}\n"
            f"Energy: {sim.energy_count}"
        )

    def status_text(self) -> str:
        return "Running" if self.simulation.running else "Paused"

    def buttons(self) -> list[ButtonSpec]:
        running = self.simulation.running
        return [
            create_button("Play", Message.PLAY, not running),
            create_button("Pause", Message.PAUSE, running),
            create_button("Send Explorer", Message.SEND_EXPLORER, running),
            create_button("+ Speed", Message.UP_SPEED, True),
            create_button("- Speed", Message.DOWN_SPEED, True),
        ]


def _emoji_font() -> str:
    if sys.platform.startswith("win"):
        return "Segoe UI Emoji"
    if sys.platform == "darwin":
        return "Apple Color Emoji"
    return "Noto Color Emoji"


def open_window(simulation: Simulation) -> None:
    """Show the simulation in a window until it is closed."""
    import tkinter as tk

    with simulation.map_lock:
        width, height = window_size(simulation.map)
        map_width, map_height = simulation.map.width, simulation.map.height
    print(f"Fenêtre ajustée : {width}x{height}")

    window = MapWindow(simulation)
    root = tk.Tk()
    root.title(window.title())
    root.geometry(f"{width}x{height}")
    root.resizable(False, False)

    controls = tk.Frame(root, padx=15, pady=15, width=CONTROL_WIDTH)
    controls.pack(side=tk.LEFT, fill=tk.Y)
    tk.Label(controls, text="Controls", font=("Helvetica", 20)).pack(anchor="w", pady=5)
    status_label = tk.Label(controls, font=("Helvetica", 16))
    status_label.pack(anchor="w", pady=5)
    stats_label = tk.Label(controls, justify=tk.LEFT)
    stats_label.pack(anchor="w", pady=10)

    def dispatch(message: Message, value: Any = None) -> None:
        window.update(message, value)
        refresh()

    button_widgets: dict[Message, tk.Button] = {}
    for spec in window.buttons():
        button = tk.Button(
            controls, text=spec.label, command=lambda m=spec.message: dispatch(m)
        )
        button.pack(fill=tk.X, pady=3)
        button_widgets[spec.message] = button

    auto_var = tk.BooleanVar(value=window.auto_explore)
    tk.Checkbutton(
        controls,
        text="Auto-Explore",
        variable=auto_var,
        command=lambda: dispatch(Message.TOGGLE_AUTO_EXPLORE, auto_var.get()),
    ).pack(anchor="w", pady=10)

    canvas = tk.Canvas(root, width=map_width * TILE_SIZE, height=map_height * TILE_SIZE)
    canvas.pack(side=tk.LEFT, expand=True)
    font = (_emoji_font(), 16)
    cells = [
        [
            canvas.create_text(
                x * TILE_SIZE + TILE_SIZE // 2,
                y * TILE_SIZE + TILE_SIZE // 2,
                text="",
                font=font,
            )
            for x in range(map_width)
        ]
        for y in range(map_height)
    ]

    def refresh() -> None:
        status_label.config(text=window.status_text())
        stats_label.config(text=window.stats_text())
        for spec in window.buttons():
            state = tk.NORMAL if spec.enabled else tk.DISABLED
            button_widgets[spec.message].config(state=state)
        with simulation.map_lock:
            rows = window.map_grid.rows()
        for cell_row, symbols in zip(cells, rows):
            for item, symbol in zip(cell_row, symbols):
                canvas.itemconfigure(item, text=symbol)

    def tick() -> None:
        dispatch(Message.TICK)
        root.after(TICK_MS, tick)

    refresh()
    root.after(TICK_MS, tick)
    root.mainloop()