# satoriui

Models for the controls of a string synthesizer's interface that do not
depend on any drawing toolkit: a vertical stack layout and overlay, a
horizontal parameter slider, a rotary parameter knob, a waveform view, a
computer-keyboard to MIDI keymap and a box-model debug overlay.

Nothing here draws pixels. Each control works out its own geometry and
handles pointer events, so any rendering toolkit can paint the rectangles,
lines and text it reports.

## Install

```
pip install .
```

Test dependencies come with the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `satoriui.layout`: `Rect` (with `width`, `height`, `is_valid`, `inset`,
  `contains`), `Color`, `SizeMode` (`AUTO`, `FIXED`, `PERCENT`), `SizeSpec`,
  the abstract `LayoutNode`, `StackPanel` with `StackItem` (children placed
  top to bottom with fixed spacing) and `Overlay` (children share their
  parent's bounds). Pointer events are passed down to the children.
- `satoriui.slider`: `ParameterSlider`, a labelled horizontal slider. A press
  inside it or a drag sets the value from the pointer's x position and calls
  `on_change`; `sync_value` sets it without the callback. `fill_fraction` and
  `value_text` give what to draw.
- `satoriui.knob`: `ParameterKnob`, a rotary control dragged vertically (up
  raises the value). It reports its `layout`, `pointer_angle`, `pointer_end`,
  the lit `slot_arc`, a percentage `tooltip_text` and a `debug_box_model`.
- `satoriui.knob_layout`: `compute_knob_layout` and `compute_tooltip_layout`,
  returning `KnobLayout` and `TooltipLayout`, or `None` when there is no room.
- `satoriui.waveform`: `WaveformView`, which turns samples in [-1, 1] into a
  `midline` and line `segments` across its bounds.
- `satoriui.keymap`: `make_keyboard_keymap(base_midi_note, octave_count)` maps
  the letters `A S D F G H J` (white keys) and `W E T Y U` (black keys) to
  MIDI notes, leaving out offsets beyond the octave range.
- `satoriui.debug_overlay`: `DebugBoxModel` and its segments,
  `make_layout_box`, `models_equal`, `make_unified_debug_overlay_palette`
  and `DebugHoverTracker`, which keeps the box model under the pointer while
  the overlay is in `DebugOverlayMode.BOX_MODEL`.

## Example

```python
from satoriui.layout import Rect
from satoriui.slider import ParameterSlider
from satoriui.knob import ParameterKnob
from satoriui.keymap import make_keyboard_keymap

changes = []
slider = ParameterSlider("Gain", 0.0, 1.0, 0.5, changes.append)
slider.arrange(Rect(0, 0, 200, 60))
slider.on_pointer_down(150, 40)
print(slider.value_text())          # 0.750
print(changes)                      # [0.75]

knob = ParameterKnob("Decay", 0.0, 1.0, 0.5)
knob.arrange(Rect(0, 0, 100, 140))
knob.on_pointer_down(50, 50)
knob.on_pointer_move(50, 0)         # dragged up 50 pixels
print(knob.tooltip_text())          # 70%

print(make_keyboard_keymap(60, 1)["A"])   # 60
```

## What it does not do

The package has no on-screen piano keyboard control and no colour theme or
skin settings; it also opens no window, renders nothing and plays no sound.
It provides geometry and interaction state only.