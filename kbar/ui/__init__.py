"""
Terminal-facing layer for kbar.

Modules:
  theme.py    — glyphs, fixed styles, completion color gradient, ANSI export.
  terminal.py — Terminal: cursor placement, visibility, clearing over rich.
  display.py  — ProgressLine: a BarRenderer drawn through a Terminal.
"""
