"""Robots that wander the map looking for resources."""

from __future__ import annotations

import random
from typing import ClassVar, Optional

from .map import Map
from .robot import ResourceTarget, Robot, RobotState
from .tile import RobotType, TileKind


class Explorer(Robot):
    """Walks at random until it finds a resource, then heads home."""

    robot_type: ClassVar[RobotType] = RobotType.EXPLORER
    initial_state: ClassVar[RobotState] = RobotState.EXPLORING

    def __init__(
        self, x: int, y: int, robot_id: int, rng: Optional[random.Random] = None
    ) -> None:
        super().__init__(x, y, robot_id)
        self._rng = rng if rng is not None else random.Random()

    def update(self, game_map: Map) -> None:
        if self.state is RobotState.EXPLORING:
            self.explore(game_map)
        else:
            super().update(game_map)

    def _coin(self) -> bool:
        return self._rng.random() < 0.5

    def explore(self, game_map: Map) -> None:
        """Take one random step, or report a resource found next to the robot."""
        step = 1 if self._coin() else -1
        if self._coin():
            dx, dy = step, 0
        else:
            dx, dy = 0, step
        new_x = max(self.x + dx, 0)
        new_y = max(self.y + dy, 0)
        if new_x >= game_map.width or new_y >= game_map.height:
            return
        tile = game_map.get(new_x, new_y).tile
        if tile.kind is TileKind.RESOURCE:
            self.target = ResourceTarget(new_x, new_y, tile.resource, True)
            self.state = RobotState.RETURNING_TO_BASE
        else:
            self.move_to(new_x, new_y, game_map)