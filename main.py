"""
main.py — Entry point.

Run with:
    python main.py [--seed N] [--high-score-file PATH] [--mute] [--log-level LEVEL]

Requires:
    pip install pygame numpy
"""

from gridsnake.cli import main


if __name__ == "__main__":
    main()
