"""Layout, slider, knob, waveform, keymap and debug-overlay models for a synthesizer interface."""

__version__ = "0.1.0"
__all__ = [
    "debug_overlay",
    "keymap",
    "knob",
    "knob_layout",
    "layout",
    "slider",
    "waveform",
]