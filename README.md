# ethrl

A small 2D game engine built around actors, components and scenes, together
with a side-scrolling platformer that runs on it. Rendering, input and sound
go through pygame.

## Playing the game

Run the command:

    ethrl

or, to point it at another asset directory:

    ethrl --assets path/to/Assets

The game changes its working directory to the asset directory (`../Assets`
by default) and reads its scenes from `Scenes/Prefabs.txt`,
`Scenes/Tilemap.txt` and `Scenes/Level.txt` (JSON documents). A scene file
that cannot be loaded or read is logged and skipped. The window is 800 × 600
and titled "Neumont".

Controls:

| Key / button | Action                                   |
|--------------|------------------------------------------|
| Space        | leave the title screen; jump when grounded |
| W A S D      | push the player (S also plays "Crouch")  |
| Left mouse   | play the "Attack" animation              |
| Escape       | quit                                     |

On leaving the title screen the game spawns coins, ghosts, bats, demons and
bosses from prefabs of those names at random positions. The actor named
`Score` shows the score through its `TextComponent`. Enemies push themselves
towards the actor named `Player`. When the player's health reaches zero a
life is lost (there are three) and the level is spawned again, or the game
ends.

## What the package does not do

There is no rigid-body physics and no collision detection. Movement comes
only from `PhysicsComponent`, which integrates velocity, acceleration and
damping. The collision callbacks (`on_collision_enter`, `on_collision_exit`)
of `PlayerComponent` and `EnemyComponent` are only run when something calls
them, so on their own players do not land on the ground (and therefore do not
jump), collect coins or take damage from enemies. Component types in a scene
file that are not registered with the `Factory` are logged and skipped.

Sounds are played at their own rate: the pitch asked of
`AudioSystem.play_audio` is kept on the returned `AudioChannel` but not
applied.

## Using the engine

- `ethrl.maths`: `Vector2`, `Vector3`, `Matrix2x2`, `Matrix3x3`, `Transform`,
  `Color`, `Rect`, helpers such as `clamp`, `lerp`, `remap`, `wrap` and
  `deg_to_rad`, and seeded random numbers (`seed_random`, `random_int`,
  `random_float`).
- `ethrl.core`: a printf-style `Logger`, file helpers (`read_file`,
  `file_exists`, `set_file_path`, …) and a frame clock (`Time`).
- `ethrl.serialization`: `load` for JSON scene files, raising
  `JsonLoadError`, and typed readers such as `get_vector2`, `get_color` and
  `get_int_list`, which return `None` for a missing or mistyped member.
- `ethrl.framework`: `Actor`, `Component`, `Scene`, `Game`, `EventManager`,
  the `Factory` registry of named classes and prefabs, and the
  `ResourceManager` cache.
- `ethrl.renderer`: `Renderer`, `Texture`, `Font`, `Text` and line `Model`s.
- `ethrl.components`: sprite, sprite animation, physics, audio, camera,
  character, player, model, text and tilemap components.
- `ethrl.inputs` and `ethrl.audio`: keyboard and mouse state (`InputSystem`,
  `KeyState`) and sound playback (`AudioSystem`, `AudioChannel`).
- `ethrl.engine.register_classes` registers the built-in actor and component
  types with a `Factory` under their class names.

A few of the maths helpers:

```python
from ethrl.maths.vector2 import Vector2
from ethrl.maths.mathutils import clamp, lerp

v = Vector2(3, 4)
print(v.length())             # 5.0
print(v.normalized())         # 0.6 0.8
print(clamp(12, 0, 10))       # 10
print(lerp(0.0, 10.0, 0.25))  # 2.5
```

Scenes are described in JSON. Each entry under `"actors"` names a registered
`type` and may carry `name`, `tag`, `m_Active`, `LifeSpan`, a `transform`
(`Position`, `Scale`, `Rotation`) and a list of `components`, each with its
own `type` and fields:

```json
{
  "actors": [
    {
      "type": "Actor",
      "name": "Coin",
      "tag": "Pickup",
      "prefab": true,
      "transform": {"Position": [0, 0], "Scale": [1, 1], "Rotation": 0},
      "components": [
        {"type": "PhysicsComponent", "Damping": 0.9}
      ]
    }
  ]
}
```

Actors marked `"prefab": true` are registered with the `Factory` under their
name instead of being added to the scene, so they can be created again later
by that name.

## Running the tests

The tests use pytest and live in `tests/`:

    pip install -e .[test]
    pytest