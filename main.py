#!/usr/bin/env python3
"""rawedit - a minimal terminal text editor.

Usage:
    python main.py

Controls:
    Arrow keys: Navigate cursor (maintains column position)
    Type to insert text
    Backspace: Delete character, or join with the previous line
    Enter: Split the line at the cursor
    ESC: Quit (nothing is saved)
"""

from rawedit.__main__ import main


if __name__ == "__main__":
    main()
