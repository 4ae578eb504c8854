# chaikin

An interactive pygame window for watching Chaikin's corner-cutting algorithm
smooth a closed polygon into a curve.

## Installation

```
pip install .
```

## Running

```
chaikin
```

The same window can be opened with `python -m chaikin.app`. The command takes
no options apart from `--help`. It opens a 1024×768 window titled
"Chaikin's Algorithm".

### Controls

While drawing:

- **Left click** on empty space adds a control point.
- **Left click and drag** on an existing point moves it. The click must be
  within 10 pixels of the point. If several points are that close, the
  nearest one is picked.
- **Enter** starts the animation. At least three points are needed. With
  fewer points, nothing happens.

During the animation:

- **Space** pauses or resumes playback.

At any time:

- **R** clears all points and returns to drawing.
- **Escape**, or closing the window, quits.

The animation shows the original polygon followed by seven rounds of
smoothing, with a cutting ratio of 0.25. It moves forward one step every half
second and starts again from the beginning after the last step. The top of
the window shows the current step, for example `Step: 2/7 (Playing)` or
`Step: 2/7 (PAUSED)`.

## Using the algorithm directly

```python
from chaikin.curve import chaikin_iteration, apply_chaikin

square = [(0.0, 0.0), (100.0, 0.0), (100.0, 100.0), (0.0, 100.0)]

smoothed = chaikin_iteration(square, 0.25)   # one round: 8 points
steps = apply_chaikin(square, 3, 0.25)       # original plus 3 rounds
final = steps[-1]
```

Points are given as `(x, y)` pairs and come back as tuples of floats.

`chaikin_iteration(points, ratio)` treats the points as a closed polygon. Each
edge, including the one from the last point back to the first, is replaced by
two points, at `ratio` of the way in from each end. A list of two points or
fewer is returned unchanged.

`apply_chaikin(points, iterations, ratio)` returns every stage,
`iterations + 1` lists in all. The first item is the input and the last is the
most smoothed curve.

## Driving the view from your own loop

`chaikin.animation.AnimationManager` holds the state of the interactive view:

- `points`: the control points
- `state`: an `AppState` (`DRAWING`, `ANIMATING` or `PAUSED`)
- `animation_steps` and `current_step`: the stages and the one being shown
- `animation_speed`: seconds per step, 0.5 by default
- `drag_threshold`: how close a click must be to pick a point, 10.0 by default

Its methods are `add_point`, `start_animation`, `toggle_animation_pause`,
`update(dt)`, `start_dragging`, `update_dragging`, `stop_dragging`,
`find_closest_point`, `reset`, `status_text` and `draw(surface, font)`. The
`draw` method renders onto a pygame surface, using a pygame font for the text.

`chaikin.app.process_event(manager, event)` applies one pygame event to a
manager, in the same way as the window does. It returns `False` when the event
asks to quit, and `True` otherwise. `chaikin.app.run_app()` opens the window
and runs the event loop until the user quits.