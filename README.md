# mightyui

Building blocks for custom user-interface widgets, using only the
standard library:

- `mightyui.layout`: `Box` and `Rect`, and a chainable `Layout` helper that
  positions and sizes groups of boxes relative to each other and to their
  parent.
- `mightyui.slider`: a `Slider` model with linear (`LinearMapper`) and
  logarithmic (`LogMapper`) mapping between values and screen positions.
- `mightyui.textmodel`: the `TextModel` interface for a string being edited
  and its row layout, plus `MonospaceText`, a fixed-width implementation.
- `mightyui.undo`: `UndoState`, a bounded undo/redo history with a fixed
  number of records (99 by default) and stored characters (999 by default).
- `mightyui.textedit`: `TextEditState`, which turns mouse clicks, drags,
  keys, cut and paste into edits of a `TextModel`. It tracks the cursor,
  the selection, insert mode and undo history.
- `mightyui.atlas`: `TextureAtlas`, which reads named sprite rectangles
  from XML and computes vertex and texture coordinates for drawing them.

## Installation

```
pip install mightyui
```

## Layout

```python
from mightyui.layout import Box, Layout

parent = Box(width=400, height=300)
a = Box(width=100, height=20, parent=parent)
b = Box(width=100, height=20, parent=parent)

Layout(a).pos(10, 10)
Layout(b).below(a, 5).stretch_to_right_edge_of_parent(10)
print(Layout(a, b).bounding_box())
```

Every operation returns the `Layout`, so calls chain. `Layout` accepts
boxes or iterables of boxes, can be combined with `+` and `+=`, and can be
narrowed with `filter` and `filter_visible`. `center` raises `ValueError`
when none of the targets has a parent.

## Sliders

```python
from mightyui.slider import Slider, LogMapper

s = Slider(width=200, min=0, max=100)
s.value_mapper = LogMapper(10)
s.on_change.append(lambda value: print("value", value))
s.touch_down(50)       # pointer x, in slider coordinates
print(s.value, s.handle_position())
```

`set_value_and_notify` clamps the value to `[min, max]`. It then calls
every callback in `on_change`, and so do the touch methods.

## Text editing

```python
from mightyui.textmodel import MonospaceText
from mightyui.textedit import TextEditState, Key

text = MonospaceText("hello", char_width=8, line_height=16)
state = TextEditState(single_line=True)
state.key(text, Key.TEXTEND)
state.paste(text, " world")
print(str(text))       # hello world
state.key(text, Key.UNDO)
print(str(text))       # hello
```

`key` takes either a single character to type or a `Key` value. `Key.SHIFT`
can be or'd in to extend the selection, for example `Key.LEFT | Key.SHIFT`.
Subclass `TextModel` to supply proportional fonts or word wrapping.

## Texture atlases

```python
from mightyui.atlas import TextureAtlas

atlas = TextureAtlas(256, 256)
atlas.parse('<TextureAtlas><sprite n="handle" x="0" y="0" w="26" h="27"/></TextureAtlas>')
vertices = atlas.quad("handle", 10, 10)     # four-vertex fan
atlas.add_draw("handle", 40, 10, 26, 27)    # queue two triangles
triangles = atlas.take_added()
```

`atlas.load(path)` reads the same XML from a file. Unknown names give
`TextureAtlas.NOT_FOUND`, an empty rectangle.

## What it does not do

The package produces no output on screen. It loads no images, draws
nothing, has no event loop, and does not read the mouse or keyboard.
Pass it pointer positions and keys yourself. Render its boxes, slider
positions, text state and atlas vertices with whatever graphics library
you use.

## Running the tests

```
pip install -e .[test]
pytest
```