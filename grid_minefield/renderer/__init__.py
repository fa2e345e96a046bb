"""Rendering subpackage.

Turns immutable ``State`` snapshots (or bare ``Field`` terrain) into visual
representations:

* :mod:`grid_minefield.renderer.text`: one line of glyphs per row, used by the
  console game; also parses the same glyphs back into a field.
* :mod:`grid_minefield.renderer.image`: Pillow + NumPy RGBA frames, used by the
  Gymnasium environment.
"""
