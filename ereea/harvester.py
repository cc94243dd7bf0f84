"""Robots that collect resources and carry them home."""

from __future__ import annotations

from typing import ClassVar

from .map import Map
from .robot import ResourceTarget, Robot, RobotState
from .tile import MapTile, Resource, RobotType, Tile, TileKind

CARGO_CAPACITY = 5


class Harvester(Robot):
    """Goes to its target resource, loads what it can carry and heads home."""

    robot_type: ClassVar[RobotType] = RobotType.HARVESTER
    initial_state: ClassVar[RobotState] = RobotState.HARVESTING

    def __init__(self, x: int, y: int, robot_id: int) -> None:
        super().__init__(x, y, robot_id)
        self.cargo_capacity = CARGO_CAPACITY

    def update(self, game_map: Map) -> None:
        if self.state is RobotState.HARVESTING:
            self.harvest(game_map)
        else:
            super().update(game_map)

    def harvest(self, game_map: Map) -> None:
        """Step towards the target, or load from it once no step is left."""
        if self.target is None:
            return
        x, y = self.target.x, self.target.y
        step = self.calculate_next_step(x, y, game_map)
        if step is not None:
            self.move_to(*step, game_map)
            return

        tile = game_map.get(x, y).tile
        if tile.kind is TileKind.RESOURCE:
            deposit = tile.resource
            if deposit.scale > self.cargo_capacity:
                load = Resource(self.cargo_capacity, deposit.resource_type)
                self.target = ResourceTarget(x, y, load, True)
                left = Resource(deposit.scale - self.cargo_capacity, deposit.resource_type)
                game_map.set(MapTile(x, y, Tile.of_resource(left)))
            else:
                self.target = ResourceTarget(x, y, deposit, False)
                game_map.set(MapTile(x, y, Tile.empty()))
        self.state = RobotState.RETURNING_TO_BASE