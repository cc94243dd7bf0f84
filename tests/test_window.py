import pytest

from ereea.map import Map
from ereea.map_grid import render_map
from ereea.simulation import Simulation
from ereea.window import (
    ButtonSpec,
    MapWindow,
    Message,
    create_button,
    window_size,
)


@pytest.fixture
def window():
    return MapWindow(Simulation(7))


def test_title(window):
    assert window.title() == "EREEA - Map View"


def test_enabled_button_sends_message():
    button = create_button("Play", Message.PLAY, True)
    assert button == ButtonSpec("Play", Message.PLAY, True)
    assert button.on_press is Message.PLAY
    assert button.style == "primary"


def test_disabled_button_sends_nothing():
    button = create_button("Pause", Message.PAUSE, False)
    assert button.on_press is None
    assert button.style == "secondary"


def test_window_size_for_simulation_map():
    assert window_size(Simulation(1).map) == (960, 760)


def test_window_size_grows_with_map():
    small = window_size(Map(10, 10, 1))
    wide = window_size(Map(12, 10, 1))
    assert wide[0] - small[0] == 2 * 30
    assert wide[1] == small[1]


def test_initial_texts(window):
    assert window.status_text() == "Paused"
    assert window.stats_text() == "FPS: 0\nResources found: 0\nEnergy: 0"


def test_play_and_pause_messages(window):
    window.update(Message.PLAY)
    assert window.status_text() == "Running"
    assert window.simulation.running is True
    window.update(Message.PAUSE)
    assert window.status_text() == "Paused"


def test_buttons_follow_running_state(window):
    paused = {b.label: b.enabled for b in window.buttons()}
    assert paused["Play"] is True
    assert paused["Pause"] is False
    assert paused["Send Explorer"] is False
    window.update(Message.PLAY)
    running = {b.label: b.enabled for b in window.buttons()}
    assert running["Play"] is False
    assert running["Pause"] is True
    assert running["Send Explorer"] is True
    assert running["+ Speed"] and running["- Speed"]


def test_speed_messages(window):
    window.update(Message.UP_SPEED)
    assert window.simulation.speed == 400
    window.update(Message.DOWN_SPEED)
    assert window.simulation.speed == 500


def test_tick_refreshes_grid(window):
    window.update(Message.TICK)
    assert window.map_grid.content == render_map(window.simulation.map)
    assert window.simulation.frame_count == 1


def test_send_explorer_message(window):
    window.update(Message.SEND_EXPLORER)
    assert list(window.simulation.explorer_threads) == [0]


def test_auto_explore_sends_on_tick(window):
    window.update(Message.TOGGLE_AUTO_EXPLORE, True)
    assert window.auto_explore is True
    window.update(Message.TICK)
    assert len(window.simulation.explorer_threads) == 1
    window.update(Message.TOGGLE_AUTO_EXPLORE, False)
    window.update(Message.TICK)
    assert len(window.simulation.explorer_threads) == 1