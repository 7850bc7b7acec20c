# godworld

The headless core of a small god game set in a solar system. Scenes hold
entities, and entities are built from components: transforms, colliders,
models, scripts and state. The package builds procedural planets on noisy
icospheres and colours stars by their temperature. A scene can be updated,
fed input events and queried without any window or graphics context, so the
game logic runs and can be tested on its own.

## What is inside

- `godworld.noise`: 1D, 2D and 3D simplex noise (`noise1d`, `noise2d`,
  `noise3d`). `SimplexNoise(frequency, amplitude, lacunarity, persistence)`
  sums octaves of them with `fractal(octaves, *coordinates)`.
- `godworld.color`: colour constants such as `BROWN`, `GREY` and
  `DARK_GREEN`, linear `interpolate`, and star colours from a temperature in
  kelvin (`calculate_star_color`, `calculate_temperature_indicator`). Both
  raise `ValueError` for a temperature that is not positive.
- `godworld.rng`: a shared random generator with `seed`, `randf`,
  `rand_radian` and `randi` (both bounds inclusive).
- `godworld.tree`: `TreeNode`, with `add_child`, pre-order `visit` and
  iteration, and `depth`.
- `godworld.entity`: `Entity` and its components, `Component`, `Script`,
  `PlanetState` and `StarState`. An entity holds at most one component per
  kind. `get` returns `None` for a missing kind, `get_required` raises
  `ComponentError`, and so does registering a kind twice.
- `godworld.transform`: `Transform`, with position, rotation (Euler angles in
  Y, X, Z order), scale, `scale_by`, `model_matrix()` and
  `absolute_position`. The parent entity's transform is taken into account.
- `godworld.collider`: `intersect_ray_sphere` and the `Collider` component,
  which remembers whether the last ray hit it (`selected`).
- `godworld.registry`: `Registry`. It holds the shared model, view and
  projection matrices and creates one instance per type with
  `get_or_create`.
- `godworld.models`: `Model` meshes of `Vertex` values and indices.
  `BackgroundModel` is a quad, `VectorModel` a line along a direction and
  `TriangleModel` a single triangle. `make_model` builds a model and
  generates its mesh.
- `godworld.sphere`: `Sphere`, a subdivided icosahedron. An optional noise
  function displaces its vertices, and a colour generator colours them by
  height.
- `godworld.color_selector`: `ColorSelector`, a height-to-colour gradient
  made of `ColorSelectorLine` stops. `make_consistent()` regenerates the
  entity's model when a stop changed.
- `godworld.camera`: `Camera`, an orthographic camera looking down the z
  axis. It moves with W, A, S and D (`Event`, `EventType`, `Key`) and casts
  click rays with `calculate_click_ray`.
- `godworld.entities`: factories `create_background`, `create_planet`,
  `create_star` and `create_triangle`, plus the default `planet_color` and
  `planet_noise`.
- `godworld.scripts`: `PlanetRotation`, which moves a planet along its
  orbit, and `DemoRotation`, which spins an entity.
- `godworld.scene`: `Scene` and its variants. `SystemScene` is a star with
  one to three random planets, `ModelScene` shows a single "Planet" or
  "Star" model, and `EditorScene` adds triangles.

## Examples

Star colours:

```python
from godworld.color import calculate_star_color

r, g, b = calculate_star_color(3500)   # roughly (1.0, 0.78, 0.49)
```

Noise:

```python
from godworld.noise import SimplexNoise, noise3d

value = noise3d(0.3, 1.7, -2.2)
fbm = SimplexNoise(1.0, 1.0, 2.0, 0.5)
detail = fbm.fractal(4, 0.3, 1.7)       # 2D fBm over four octaves
```

A generated star system, advanced by 16 milliseconds:

```python
from godworld import rng
from godworld.registry import Registry
from godworld.scene import SystemScene

rng.seed(42)
scene = SystemScene(Registry())
scene.update(16)
```

Moving the camera with a key event:

```python
from godworld.camera import Event, EventType, Key

scene.handle_input(Event(EventType.KEY_DOWN, key=Key.D))   # True: consumed
scene.update(100)                                          # camera moves 0.1 along x
```

Mouse-motion events (`EventType.MOUSE_MOTION` with `x` and `y`) are not
consumed by the scene. They cast a ray from the camera and update the
`selected` flag of every collider.

A single planet with its rotation script:

```python
from godworld.entities import create_planet
from godworld.entity import Script
from godworld.scripts import PlanetRotation

planet = create_planet(5.0, 0.5)
planet.register_component(Script, PlanetRotation(planet))
planet.update(100)
```

The model viewer, switched to the star model:

```python
from godworld.registry import Registry
from godworld.scene import ModelScene

viewer = ModelScene(Registry())
viewer.select_model("Star")
print(viewer.entity_names())   # ['Background', 'Star']
```

## What it does not do

The package has no window, no rendering, no shaders and no on-screen panels.
Meshes and matrices are computed, but nothing draws them. `Registry` only
stores matrices and single instances of the types asked of it. There is no
command to start a game. Quit, resize and the `Z`, `X` and `ESCAPE` keys
exist as event and key values, but nothing in the package acts on them.