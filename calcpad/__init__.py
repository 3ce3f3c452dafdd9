"""calcpad — single-screen keypad calculator for the terminal.

Sequential left-to-right arithmetic (+ - × ÷ %, sign flip), a running
equation line, the last calculation as a subtitle, and a dark/light theme.

Usage:
    python -m calcpad keys                    # Show the keypad tokens
    python -m calcpad press 7 + 5 =           # Press keys, show the screen
    python -m calcpad press 6 / 4 = --json    # Dump the session record
    python -m calcpad run                     # Interactive session
"""
