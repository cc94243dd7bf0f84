# ereea

A small simulation of robots exploring a procedurally generated planet.

A 25 x 25 map is generated from a seeded Perlin noise: terrain blocks
movement, and patches of energy and mineral deposits (10 units each) are
scattered over the open ground. A science base sits on a free tile of the map.
Explorer robots leave the base, wander at random until they step next to a
resource, and head back to report it. Each newly reported resource is assigned
a harvester robot, which walks to it, loads up to its cargo capacity of 5
units, carries the load home and goes back until the deposit is exhausted.
Collected energy is added to the base's total; minerals are harvested but not
counted.

Every robot runs in a thread of its own. Robots only move while the
simulation is playing.

## Installation

```
pip install .
```

The window is drawn with `tkinter`, which must be available in your Python
installation. The package has no other dependencies.

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
ereea
ereea --seed 42
```

This builds a simulation from the given map seed (4 by default) and opens its
window. It prints the window size it chose, then shows the controls beside
the map. From the window you can play and pause the simulation, send out an
explorer by hand or switch on auto-explore (one explorer sent on every refresh
tick), and raise or lower the simulation speed (the delay between robot steps,
from 100 ms to 500 ms in steps of 100 ms). The window shows whether the
simulation is running, the frame rate, the number of resources found so far
and the energy collected.

## Using the library

```python
from ereea.simulation import Simulation
from ereea.map_grid import render_map
from ereea.tile import RobotType

sim = Simulation(4)
print(render_map(sim.map))

sim.play()
sim.send_robot(RobotType.EXPLORER, None)
```

The main pieces are:

- `ereea.map.Map`: the generated grid, with `get`, `set` and `is_valid`.
  An optional `random.Random` passed to it makes resource and base placement
  reproducible. Maps must be at least 3 x 3.
- `ereea.perlin.Perlin`: the seeded two-dimensional noise used for terrain
  and resources.
- `ereea.tile`: `Tile`, `TileKind`, `Resource`, `ResourceType`, `RobotType`
  and `MapTile`, with the symbol each tile is drawn with.
- `ereea.robot.Robot`: movement (`move_to`), breadth-first path finding
  (`calculate_next_step`) and `return_to_base`, shared by
  `ereea.explorer.Explorer` and `ereea.harvester.Harvester`.
- `ereea.simulation.Simulation`: runs each robot in its own thread and keeps
  track of speed, located resources and energy; `send_robot` starts a robot
  from the base and returns it.
- `ereea.map_grid`: `render_map` and `MapGrid`, text renderings of the map.
- `ereea.window`: `MapWindow`, the window's state and controls independent of
  any toolkit, and `open_window`, which shows it with `tkinter`.

## Limitations

The simulation cannot be saved or restored, and the map size of a
`Simulation` is fixed. Robots that stop moving are not collected: their
threads are kept in the simulation until the program ends.