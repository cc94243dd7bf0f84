"""Tile kinds, resources and robot types shown on the map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResourceType(Enum):
    """Kind of resource lying on a tile."""

    ENERGY = "energy"
    MINERAL = "mineral"


@dataclass(frozen=True)
class Resource:
    """A deposit of a resource of a given size."""

    scale: int
    resource_type: ResourceType


class RobotType(Enum):
    """Kind of robot."""

    EXPLORER = "explorer"
    HARVESTER = "harvester"


class TileKind(Enum):
    """What occupies a tile."""

    EMPTY = "empty"
    TERRAIN = "terrain"
    BASE = "base"
    RESOURCE = "resource"
    ROBOT = "robot"


_RESOURCE_SYMBOLS = {
    ResourceType.ENERGY: "\u26a1",
    ResourceType.MINERAL: "\U0001f48e",
}

_ROBOT_SYMBOLS = {
    RobotType.EXPLORER: "\U0001f69c",
    RobotType.HARVESTER: "\U0001f916",
}

_KIND_SYMBOLS = {
    TileKind.EMPTY: " ",
    TileKind.TERRAIN: "\u26f0",
    TileKind.BASE: "\U0001f3e0",
}


@dataclass(frozen=True)
class Tile:
    """The content of one map cell."""

    kind: TileKind
    resource: Optional[Resource] = None
    robot_type: Optional[RobotType] = None

    def __post_init__(self) -> None:
        if (self.kind is TileKind.RESOURCE) != (self.resource is not None):
            raise ValueError("a resource tile needs a resource, and only it")
        if (self.kind is TileKind.ROBOT) != (self.robot_type is not None):
            raise ValueError("a robot tile needs a robot type, and only it")

    @staticmethod
    def empty() -> "Tile":
        return Tile(TileKind.EMPTY)

    @staticmethod
    def terrain() -> "Tile":
        return Tile(TileKind.TERRAIN)

    @staticmethod
    def base() -> "Tile":
        return Tile(TileKind.BASE)

    @staticmethod
    def of_resource(resource: Resource) -> "Tile":
        return Tile(TileKind.RESOURCE, resource=resource)

    @staticmethod
    def of_robot(robot_type: RobotType) -> "Tile":
        return Tile(TileKind.ROBOT, robot_type=robot_type)

    def symbol(self) -> str:
        """The character used to draw this tile."""
        if self.resource is not None:
            return _RESOURCE_SYMBOLS[self.resource.resource_type]
        if self.robot_type is not None:
            return _ROBOT_SYMBOLS[self.robot_type]
        return _KIND_SYMBOLS[self.kind]


@dataclass(frozen=True)
class MapTile:
    """A tile placed at a position on the map."""

    x: int
    y: int
    tile: Tile


class SimpleTile(Enum):
    """Plain text tiles for a character-only display."""

    EMPTY = "."
    OBSTACLE = "#"
    ENERGY = "+"
    MINERAL = "*"
    SCIENCE = "?"

    def symbol(self) -> str:
        return self.value