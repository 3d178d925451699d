# comboboxes

The rules of a 2D puzzle platformer. Players push, carry and merge boxes
to reach the finish. The package covers box merging, box animation,
player movement, elevators, lighting data and level layout. It is plain
Python and has no dependencies.

## Modules

- `comboboxes.combobox`: the box kinds `Standard`, `Buff`, `Undo`,
  `Direction`, `Gravity` and `Lamp`.
  - `Combobox` holds the merge rules in `Combobox.merge` and the size in
    `world_size`.
  - `ComboboxState` runs the spawn and despawn animation with `scale`,
    `scale_ahead` and `advance`.
  - `boxes_touch` tells whether two boxes are close enough to merge.
  - `global_gravity` works out the scene gravity from settled gravity boxes.
- `comboboxes.appearance`: the look of each box.
  - `box_color` gives the tint and `overlay_image` the overlay picture.
  - `box_point_light` gives the light a box casts.
  - `box_appearance` collects all of this for a newly spawned box into a
    `BoxAppearance`.
- `comboboxes.player`:
  - `PlayerType` picks a robot colour and cycles through colours with
    `next` and `prev`, skipping banned ones.
  - `PlayerIndex` gives a player's seat.
  - `PlayersSettings` holds the robot chosen for each seat.
  - `Player` gives the jump speed with `jump_velocity` and the capped
    velocity change per frame with `movement_delta`.
- `comboboxes.player_mesh`:
  - `create_quad` builds sprite-sheet quads.
  - `collider_half_extents` gives the collider size.
  - `PlayerRectState` holds every pose and rotation of a player.
- `comboboxes.elevator`: `Elevator` with a `LoopMotion` travels between
  two points and back. On the way back it stops while something is below
  it, and it backs off when that something presses against it.
- `comboboxes.scene`: `SceneBuilder` lays out walls, boxes, elevators,
  hints, spawn points and finish points on a 50-unit cell grid. It also
  sets the camera boundaries, the ambient light, the background colour and
  the music. `hint_opacity` and `finish_arrow_offset` animate hints and the
  finish arrow.
- `comboboxes.lights`: `PointLight2d`, `AmbientLight`, `PointLightsUniform`
  (holds up to 16 lights), `build_lights_uniform` and `update_lights`.
- `comboboxes.material`: `ColorMaterialCustom`, `MaterialFlags`,
  `ColorMaterialCustomUniform` and `material_from_texture_and_emissive`.
- `comboboxes.color`: `Color`, with sRGB to linear conversion.
- `comboboxes.geometry`: `Vec2` and `Rect`, plus the camera helpers
  `clamp_to_rect`, `zoom_factor` and `follow_position`.
- `comboboxes.collision_groups`: `CollisionGroups` and the wall, box, player
  and elevator groups.
- `comboboxes.audio`: `BackgroundMusic` and `MovementSoundTracker`. Both
  return `SoundAction` values that describe what to play, pause, resume or
  stop.
- `comboboxes.screen`: the full-screen quad (`default_quad`) and sampler
  descriptions (`default_sampler`, `linear_sampler`).
- `comboboxes.game`: the GUI, audio, level and camera state enums, and
  `initial_settings`. That function starts the game in a level when
  `LOCAL_BUILD` is `2`, and at the main screen otherwise.

## Example

```python
from comboboxes.combobox import Buff, Combobox, Standard, Undo
from comboboxes.elevator import Elevator, LoopMotion
from comboboxes.geometry import Vec2

small = Combobox(1.0, Standard(group=1))
other = Combobox(1.0, Standard(group=1))
[(big, centre)] = Combobox.merge(small, Vec2(0.0, 0.0), other, Vec2(50.0, 0.0))
print(big.weight, centre)          # 2.0 Vec2(x=25.0, y=0.0)

tripler = Combobox(1.0, Buff(3.0))
[(buffed, _)] = Combobox.merge(tripler, Vec2(0.0, 0.0), small, Vec2(50.0, 0.0))
print(buffed.weight)               # 3.0

undo = Combobox(1.0, Undo())
parts = Combobox.merge(undo, Vec2(0.0, 100.0), big, centre)
print(len(parts))                  # 2

lift = Elevator(Vec2(0.0, 0.0), Vec2(0.0, 200.0), LoopMotion(period=4.0))
print(lift.step(0.5, anything_below=False, interacts=False))
```

Two standard boxes of the same group merge into one box with their
combined weight. A buff box multiplies the weight of the box it joins. An
undo box splits a merged box back into the boxes it was made from.

## What it does not do

The package has no rendering, window, input handling, physics engine or
sound output. The ray casts that decide whether something stands on an
elevator or whether a player may jump are left to the caller, who passes
in the results. Audio comes back as `SoundAction` values for the caller to
play. There is no command to run and there are no level definitions.

## Running the tests

```
pip install -e ".[test]"
pytest
```