# mjengine

A small 2D game engine built on pygame. A game is made of scenes; each
scene holds a fixed set of layers; each layer holds game objects; each
game object carries components (a transform, a sprite renderer, an
animator, a camera, behaviour scripts). A sample game with a title
scene and a play scene comes with it.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the sample game

```
mjengine
```

This opens a window and shows the play scene. The play scene has a
warrior that you move with the arrow keys. It also has a dog that sits,
walks off in a random direction, and sits down again on its own. Press
`N` to switch between the play scene and the title scene.

Options:

- `--width`, `--height` — window size in pixels (default 1600×900).
- `--resources DIR` — directory holding the game's images (default
  `../Resource`, relative to the current directory).
- `--frames N` — stop after `N` frames; `0` (the default) runs until the
  window is closed.

The command loads these textures from the resource directory:

- `kirby.png`
- `Warrior_.bmp`
- `warrior/Warrior_Red.png`
- `skill.png`
- `dog.png`

If one of them cannot be loaded, the command prints an error and exits
with status 1.

## Building your own game

`mjengine.application.Application` drives the frame loop. Give
`initialize(surface)` the surface to draw on. After that, each call to
`run()` does one frame: `update`, then `late_update`, then `render`.
Rendering first draws into a back buffer that is cleared to white. Then
it copies the buffer onto the surface. Each step goes down through the
active scene's layers, then to each game object, then to each of its
components.

- `mjengine.vector.Vector2` — an immutable 2D vector with `+`, `-`,
  `*` and `/` (by a number), plus `Vector2.ZERO` and `Vector2.ONE`.
- `mjengine.enums` — `ComponentType`, `LayerType`, `ResourceType`.
- `mjengine.component` — `Entity`, `Component`, `Transform` (`position`,
  `scale`, `rotation` in degrees) and `Script`. Subclass `Script` to write
  your own behaviour.
- `mjengine.gameobject.GameObject` — `add_component(SomeComponent)` and
  `get_component(SomeComponent)`. Every game object starts with a
  `Transform`. It keeps one component per kind, so adding a second
  component of the same kind replaces the first.
- `mjengine.scene` — `Layer`, `Scene`, `SceneManager` and
  `instantiate(object_type, layer_type, position=None)`. `instantiate`
  creates an object in a layer of the active scene and places it at
  `position` if you give one. The module-level `scene_manager` is the one
  the application uses by default.
- `mjengine.resources` — `Texture` loads `.bmp` and `.png` files and
  raises `ResourceError` on failure. `ResourceRegistry.load(kind, key,
  path)` loads each key once, and `find(key, kind)` returns it again
  later. The shared instance is `registry`.
- `mjengine.animation` — `Animator.create_animation(name, sheet,
  left_top, size, offset, count, duration)` cuts a row of `count` frames
  from a sprite sheet. `Animator.play_animation(name, loop=True)` starts
  one from its first frame.
- `mjengine.sprite_renderer.SpriteRenderer` — draws a whole texture at
  its owner's position. Magenta (255, 0, 255) is transparent in `.bmp`
  textures.
- `mjengine.renderer` — `Camera` keeps the view centred on its owner.
  `to_screen(pos)` maps a world position through `main_camera`, if one is
  set.
- `mjengine.input` — `Input` tracks each key as down, pressed, up or
  none. Query it with `get_key_down`, `get_key` (held after the first
  frame) and `get_key_up`. The shared instance is `keyboard`.
- `mjengine.clock` — `Clock` measures frame time. `delta_time()` gives
  the seconds the last frame took on the main clock.
- `mjengine.scripts` — `DogScript` and `PlayerScript`, the sample game's
  behaviours.
- `mjengine.scenes` — `PlayScene`, `TitleScene`, `load_resources`,
  `create_scenes` and `load_scenes`, which set up the sample game.

A scene subclasses `Scene` and sets up its objects in `initialize`.
Register it with `SceneManager.create_scene(MyScene, "Name")`. That
call also makes it the active scene. Switch scenes with
`load_scene("Name")`.

## What it does not do

- It ships no images. You must supply the sample game's textures yourself.
- It has no sound, no collision detection and no physics.
- Despite the window title, it has no editing tools: the window only
  runs the game.
- `Animation` objects cannot be loaded from files. Build them from
  sprite sheets.