# gravitron

A small gravity-flipping platformer. You cannot jump; instead you flip
gravity and fall towards the ceiling or the floor. Twenty-five rooms are
joined edge to edge. Spikes and moving enemies send you back to the last
save point you touched, and a map shows which rooms you have already
visited.

## Installing

```
pip install .
```

The game draws with pygame and reads its room images with Pillow; both
are installed as dependencies.

## Playing

```
gravitron
```

Options:

| Option                 | Default       | Meaning                                 |
|------------------------|---------------|-----------------------------------------|
| `--resource-dir DIR`   | `Resources`   | folder holding the game's images        |
| `--width N`            | `1280`        | window width in pixels                  |
| `--height N`           | `720`         | window height in pixels                 |
| `--fps N`              | `60`          | frames per second                       |

The default resource folder can also be set with the environment
variable `GRAVITRON_RESOURCE_DIR`. Closing the window ends the game.

Controls:

| Key                         | Action                                            |
|-----------------------------|---------------------------------------------------|
| Left / A                    | walk left                                         |
| Right / D                   | walk right                                        |
| Space, Up, Down, W or S     | flip gravity (only while blocked in the fall direction) |
| M                           | slide the map in or out                           |
| N                           | toggle floating (stops falling)                   |

Walking off one edge of a room brings you into the neighbouring room.
Touching a save point stores your position, the room and which way
gravity was pointing; touching a spike or an enemy puts you back there.
While the map is shown the game is paused.

## Resource folder

The images are not part of the package; the game reads them from the
resource folder, laid out as:

- `Image/Character/playerNew.png`, `Image/Character/playerNewReverse.png`
  for the player (normal and flipped).
- `Image/Background/<room>.png` and `Image/Background/<room>Background.png`
  for each room, named as in `LevelData.image_name` and
  `LevelData.background_name` (for example `1.WelcomeAboardWithNote.png`).
  The room image's alpha channel is its collision mask: fully transparent
  pixels are walkable, anything else is solid. Room images are 1280 pixels
  wide.
- `Image/Background/Spike.png`, `SpikeReverse.png`, `SavePoint.png`,
  `SavePointReverse.png` and the enemy images named in the level table
  (`5.enemy.png`, `8.enemy.png`, `9.point.png`, `12.yesman.png`,
  `14.enemy.png`, `16.enemy.png`).
- `Image/Background/Map/allMap.png`, `Map/unvisitedMap/<n>.png`,
  `Map/currentMap/<n>.png` and `Map/MapTitles/(<n>).png` for n = 1 to 25.

`LevelManager` decodes every room image when it is created and raises
`gravitron.imageloader.ImageLoadError` if one cannot be read.

## Using the pieces

Much of the game logic works without opening a window, which makes it easy to
script and test.

Level data lives in `gravitron.levels`:

```python
from gravitron.levels import LevelID, LevelInfoTable

table = LevelInfoTable()
room = table.get(LevelID.TRAFFIC_JAM)
print(room.image_name, room.right_wall, len(room.enemy_infos))
for level_id in table.level_ids():
    ...
```

`table.get` raises `KeyError` for an unknown id.

`gravitron.entities` holds the moving parts: `Vec2`, the `GameObject`
scene tree, `Player` (with `flip_gravity`, `move`, `update` and the
`touch_*_wall` checks), `Trap`, `SavePoint` and `Enemy`, each with a
`touches` check against a point. `gravitron.imageloader.ImageLoader`
decodes an image to RGBA and gives `is_pixel_opaque` and `walkable_mask`.

`gravitron.level_manager.LevelManager` ties a room's walkable mask,
hazards and save points together (`is_movable`, `enter_up`/`down`/
`left`/`right`, `set_level`, `touches_trap`, `touches_enemy`,
`touches_save_point`, `update_enemies`), and
`gravitron.map_manager.MapManager` drives the map overlay (`call_map`,
`return_map`, `update_map`, `map_visited`, `map_current`).

`gravitron.app.App` runs one frame per `update(keys)` call after
`start()`, where `keys` is a `KeyState` describing which `Key`s went down,
are held, or came up during that frame.

`gravitron.phases` has a `BackgroundImage`, a `TaskText` caption and a
`PhaseResourceManager` that steps both through numbered phases; the game
itself does not use them.

## What it does not do

- It ships no images, fonts or sound; a resource folder laid out as above
  is needed to play.
- Progress is not saved between runs.
- The rooms from Quicksand onward carry no spikes or enemies, and
  quicksand has no effect.
- The game has no ending: it runs until the window is closed.

## Running the tests

```
pip install ".[test]"
pytest
```