import time

import pytest

from ereea.explorer import Explorer
from ereea.harvester import Harvester
from ereea.robot import ResourceTarget, RobotState
from ereea.simulation import Simulation
from ereea.tile import Resource, ResourceType, RobotType, TileKind


@pytest.fixture
def sim():
    return Simulation(123)


def _free_neighbour(sim):
    bx, by = sim.map.base_position
    return bx + 1, by


def test_simulation_initialization(sim):
    assert sim.map.seed == 123


def test_initial_state(sim):
    assert sim.running is False
    assert sim.energy_count == 0
    assert sim.speed == 500
    assert len(sim.located_resources) == 0
    assert sim.map.width == 25 and sim.map.height == 25


def test_play_and_pause(sim):
    sim.play()
    assert sim.running is True
    sim.pause()
    assert sim.running is False


def test_speed_bounds(sim):
    sim.decrease_speed()
    assert sim.speed == 500
    sim.increase_speed()
    assert sim.speed == 400
    for _ in range(10):
        sim.increase_speed()
    assert sim.speed == 100
    sim.decrease_speed()
    assert sim.speed == 200


def test_compute_fps_counts_frames_within_a_second(sim):
    sim.compute_fps()
    sim.compute_fps()
    assert sim.frame_count == 2
    assert sim.fps == 0.0


def test_compute_fps_after_a_second(sim):
    sim.last_frame_time = time.monotonic() - 2.0
    sim.compute_fps()
    assert sim.frame_count == 0
    assert 0.0 < sim.fps <= 0.5


def test_send_explorer_registers_threads(sim):
    first = sim.send_robot(RobotType.EXPLORER)
    second = sim.send_robot(RobotType.EXPLORER)
    assert (first.robot_id, second.robot_id) == (0, 1)
    assert sorted(sim.explorer_threads) == [0, 1]
    assert sim.explorer_threads[0].is_alive()
    assert isinstance(first, Explorer)
    assert first.position == sim.map.base_position


def test_configure_applies_to_harvester_only(sim):
    calls = []
    sim.send_robot(RobotType.EXPLORER, calls.append)
    assert calls == []
    harvester = sim.send_robot(RobotType.HARVESTER, calls.append)
    assert calls == [harvester]
    assert isinstance(harvester, Harvester)
    assert list(sim.harvester_threads) == [0]


def test_explorer_report_sends_harvester(sim):
    x, y = _free_neighbour(sim)
    explorer = Explorer(x, y, 0)
    resource = Resource(10, ResourceType.MINERAL)
    explorer.target = ResourceTarget(3, 4, resource, True)
    explorer.state = RobotState.REPORTING

    sim._robot_came_back(explorer)

    assert list(sim.located_resources) == [[(3, 4, resource)]]
    assert list(sim.harvester_threads) == [0]
    assert explorer.state is RobotState.IDLE
    assert sim.map.get(x, y).tile.kind is TileKind.EMPTY


def test_known_resource_is_not_recorded_twice(sim):
    x, y = _free_neighbour(sim)
    resource = Resource(10, ResourceType.ENERGY)
    for robot_id in range(2):
        explorer = Explorer(x, y, robot_id)
        explorer.target = ResourceTarget(3, 4, resource, True)
        sim._robot_came_back(explorer)
    assert len(sim.located_resources) == 1
    assert len(sim.harvester_threads) == 1


def test_harvester_with_remaining_energy_goes_back(sim):
    x, y = _free_neighbour(sim)
    harvester = Harvester(x, y, 0)
    harvester.target = ResourceTarget(3, 4, Resource(5, ResourceType.ENERGY), True)
    harvester.state = RobotState.REPORTING

    sim._robot_came_back(harvester)

    assert sim.energy_count == 5
    assert harvester.state is RobotState.HARVESTING


def test_harvester_with_last_mineral_retires(sim):
    x, y = _free_neighbour(sim)
    harvester = Harvester(x, y, 0)
    harvester.target = ResourceTarget(3, 4, Resource(5, ResourceType.MINERAL), False)
    harvester.state = RobotState.REPORTING

    sim._robot_came_back(harvester)

    assert sim.energy_count == 0
    assert harvester.state is RobotState.IDLE
    assert sim.map.get(x, y).tile.kind is TileKind.EMPTY