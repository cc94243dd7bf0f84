"""The running simulation: the map, the robots' threads and the shared counters."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Callable, Optional

from .explorer import Explorer
from .harvester import Harvester
from .map import Map
from .robot import ResourceTarget, Robot, RobotState
from .tile import MapTile, Resource, ResourceType, RobotType, Tile

MAP_WIDTH = 25
MAP_HEIGHT = 25
INITIAL_SPEED = 500
MIN_SPEED = 100
MAX_SPEED = 500
SPEED_STEP = 100


class Simulation:
    """Owns the map and runs every robot in its own thread."""

    def __init__(self, map_seed: int) -> None:
        self.map = Map(MAP_WIDTH, MAP_HEIGHT, map_seed)
        self.map_lock = threading.RLock()
        self.energy_count = 0
        self.speed = INITIAL_SPEED
        self.frame_count = 0
        self.fps = 0.0
        self.last_frame_time = time.monotonic()
        self.explorer_threads: dict[int, threading.Thread] = {}
        self.harvester_threads: dict[int, threading.Thread] = {}
        self.located_resources: deque[list[tuple[int, int, Resource]]] = deque()
        self._running = threading.Event()
        self._lock = threading.RLock()

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def play(self) -> None:
        self._running.set()

    def pause(self) -> None:
        self._running.clear()

    def compute_fps(self) -> None:
        """Count a frame and refresh the frame rate once a second has passed."""
        self.frame_count += 1
        now = time.monotonic()
        elapsed = now - self.last_frame_time
        if elapsed >= 1.0:
            self.fps = self.frame_count / elapsed
            self.frame_count = 0
            self.last_frame_time = now

    def increase_speed(self) -> None:
        """Shorten the delay between robot steps."""
        with self._lock:
            if self.speed > MIN_SPEED:
                self.speed -= SPEED_STEP

    def decrease_speed(self) -> None:
        """Lengthen the delay between robot steps."""
        with self._lock:
            if self.speed < MAX_SPEED:
                self.speed += SPEED_STEP

    def send_robot(
        self,
        robot_type: RobotType,
        configure: Optional[Callable[[Robot], None]] = None,
    ) -> Robot:
        """Start a robot of the given type from the base in a thread of its own.

        ``configure`` is applied to harvesters before they start.
        """
        with self.map_lock:
            base_x, base_y = self.map.base_position

        with self._lock:
            if robot_type is RobotType.EXPLORER:
                robot: Robot = Explorer(base_x, base_y, len(self.explorer_threads))
            else:
                robot = Harvester(base_x, base_y, len(self.harvester_threads))

        if robot_type is RobotType.HARVESTER and configure is not None:
            configure(robot)

        thread = threading.Thread(
            target=self._robot_loop,
            args=(robot,),
            name=f"{robot_type.value}-{robot.robot_id}",
            daemon=True,
        )
        with self._lock:
            if robot_type is RobotType.EXPLORER:
                self.frame_count += 1
                self.explorer_threads[robot.robot_id] = thread
            else:
                self.harvester_threads[robot.robot_id] = thread
        thread.start()
        return robot

    def _robot_loop(self, robot: Robot) -> None:
        while True:
            if robot.state is RobotState.REPORTING:
                self._robot_came_back(robot)
            with self._lock:
                delay = self.speed / 1000.0
            if not self.running:
                time.sleep(delay)
                continue
            with self.map_lock:
                robot.update(self.map)
            time.sleep(delay)
            if robot.state is RobotState.IDLE:
                break

    def _robot_came_back(self, robot: Robot) -> None:
        if robot.robot_type is RobotType.EXPLORER:
            found = robot.target
            if found is not None:
                self._record_resource(found)
            self._retire(robot)
            return

        target = robot.target
        if target is None:
            return
        if target.resource.resource_type is ResourceType.ENERGY:
            with self._lock:
                self.energy_count += target.resource.scale
        if target.remaining:
            robot.state = RobotState.HARVESTING
        else:
            self._retire(robot)

    def _record_resource(self, found: ResourceTarget) -> None:
        with self._lock:
            known = any(
                x == found.x and y == found.y
                for group in self.located_resources
                for x, y, _ in group
            )
            if known:
                return
            self.located_resources.append([(found.x, found.y, found.resource)])

        def aim(harvester: Robot) -> None:
            harvester.target = ResourceTarget(found.x, found.y, found.resource, True)

        self.send_robot(RobotType.HARVESTER, aim)

    def _retire(self, robot: Robot) -> None:
        with self.map_lock:
            self.map.set(MapTile(robot.x, robot.y, Tile.empty()))
        robot.state = RobotState.IDLE