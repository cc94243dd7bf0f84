"""Behaviour shared by every robot: moving and path finding."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional

from .map import Map
from .tile import MapTile, Resource, RobotType, Tile

logger = logging.getLogger(__name__)

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


class RobotState(Enum):
    """What a robot is currently doing."""

    EXPLORING = "exploring"
    HARVESTING = "harvesting"
    RETURNING_TO_BASE = "returning_to_base"
    REPORTING = "reporting"
    IDLE = "idle"


@dataclass(frozen=True)
class ResourceTarget:
    """A resource at a position; ``remaining`` tells whether some is left there."""

    x: int
    y: int
    resource: Resource
    remaining: bool


class Robot:
    """A robot moving on the map."""

    robot_type: ClassVar[RobotType]
    initial_state: ClassVar[RobotState] = RobotState.IDLE

    def __init__(self, x: int, y: int, robot_id: int) -> None:
        self.robot_id = robot_id
        self.x = x
        self.y = y
        self.state = self.initial_state
        self.target: Optional[ResourceTarget] = None

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def update(self, game_map: Map) -> None:
        """Advance the robot by one step."""
        if self.state is RobotState.RETURNING_TO_BASE:
            self.return_to_base(game_map)

    def move_to(self, x: int, y: int, game_map: Map) -> bool:
        """Move onto (x, y) if it is free; return whether the robot moved."""
        if not game_map.is_valid(x, y):
            logger.warning("Invalid move to position (%d, %d)", x, y)
            return False
        left_behind = Tile.base() if self.position == game_map.base_position else Tile.empty()
        game_map.set(MapTile(self.x, self.y, left_behind))
        game_map.set(MapTile(x, y, Tile.of_robot(self.robot_type)))
        self.x, self.y = x, y
        return True

    def calculate_next_step(
        self, target_x: int, target_y: int, game_map: Map
    ) -> Optional[tuple[int, int]]:
        """Next free tile towards the target, or None when there is nowhere to go."""
        start = self.position
        target = (target_x, target_y)
        if start == target:
            return None

        came_from: dict[tuple[int, int], Optional[tuple[int, int]]] = {start: None}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            if (x, y) == target:
                break
            for dx, dy in _DIRECTIONS:
                neighbour = (x + dx, y + dy)
                if neighbour not in came_from and game_map.is_valid(*neighbour):
                    came_from[neighbour] = (x, y)
                    queue.append(neighbour)

        if target not in came_from:
            return next(
                (
                    (start[0] + dx, start[1] + dy)
                    for dx, dy in _DIRECTIONS
                    if game_map.is_valid(start[0] + dx, start[1] + dy)
                ),
                None,
            )

        path = []
        current: Optional[tuple[int, int]] = target
        while current is not None:
            path.append(current)
            current = came_from[current]
        path.reverse()
        return path[1] if len(path) > 2 else None

    def return_to_base(self, game_map: Map) -> None:
        """Step towards the base, or start reporting when no step is left."""
        step = self.calculate_next_step(*game_map.base_position, game_map)
        if step is None:
            self.state = RobotState.REPORTING
        else:
            self.move_to(*step, game_map)