"""calcpad: four-function calculator with operator precedence.

Evaluates whitespace-separated expressions such as "5 + 3 * 2" (* and / bind
tighter than + and -) and formats results for display without floating-point
noise. A Keypad object turns key presses into expressions the way a
calculator front end does.

Usage:
    python -m calcpad eval "5 + 3 * 2"     # 11
    python -m calcpad format 0.30000000000000004
    python -m calcpad keys "7/2="          # Drive the keypad
    python -m calcpad repl                 # Interactive session
"""
