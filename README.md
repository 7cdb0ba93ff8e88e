# snakegame

A small snake game for the desktop, drawn with pygame.

The snake is made of 16-pixel squares and moves one square per tick
(a tick is 125 ms). It starts with three segments and stands still until
you press an arrow key. Steer it onto the red apple: when the head
overlaps the apple, the snake grows by one segment and the apple jumps
to a new random spot at least one square away from the window's left and
top edges.

## Installing

```
pip install .
```

This pulls in pygame. To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
snakegame
```

Options:

- `--image PATH`: an image file stretched over the whole 640x480 window
  as a background, drawn each tick before the snake and the apple.

Controls:

- **Arrow keys**: turn the snake. It cannot turn straight back onto
  itself, and one extra key pressed within the same tick is kept for the
  next tick, so quick turns are not lost.
- **Escape**, or closing the window: quit.

## What the game does not do

There is no score, no game-over and no restart. The snake does not die
when it hits a wall or its own body: it simply keeps moving, including
off the edge of the window. The apple is placed at any pixel position,
not snapped to the snake's grid.

## Using the pieces

The game is built from small parts that can be used and tested on their
own:

- `snakegame.position`: `Pos`, an immutable (x, y) point, and
  `PositionManager`, which holds one shared, replaceable `position`.
- `snakegame.channels`: the `Key` codes the game reacts to, the
  `AppleEatChannel` publish/subscribe channel, and the small `Notifiable`,
  `Drawer` and `KeyDownChannel` interfaces.
- `snakegame.events`: `QuitEvent` and `KeyDownEvent`; `EventPoller`, whose
  `poll_buffered_events(events)` hands key presses to key-down subscribers
  and returns `True` at the first quit (Escape counts as a quit); and
  `Quitter`, which calls `pygame.quit()` when a quit is reported.
- `snakegame.snake`: `DirectionManager`, `HeadUpdater`, `TailRemover`,
  `SnakeDrawer`, `SnakeGO`, and `SnakeCreator`, which wires them together
  into a three-segment snake.
- `snakegame.apple`: `Rander`, `Mover`, `SnakeDetector`, `AppleDrawer`,
  `AppleGO`, and `AppleCreator`, which wires them together.
- `snakegame.game`: `init_display`, `load_image`, `render_frame`, and
  `main`, the game loop behind the `snakegame` command.