"""Text rendering of the map for display."""

from __future__ import annotations

from .map import Map


def render_map(game_map: Map) -> str:
    """The map as lines of tile symbols, one line per row."""
    return "".join(
        "".join(game_map.get(x, y).tile.symbol() for x in range(game_map.width)) + "\n"
        for y in range(game_map.height)
    )


class MapGrid:
    """Keeps the latest rendering of a map and gives its cells row by row."""

    def __init__(self, game_map: Map) -> None:
        self.map = game_map
        self.content = ""

    def update(self, game_map: Map) -> None:
        self.content = render_map(game_map)

    def rows(self) -> list[list[str]]:
        """The symbol of every cell of the map, row by row."""
        return [
            [self.map.get(x, y).tile.symbol() for x in range(self.map.width)]
            for y in range(self.map.height)
        ]