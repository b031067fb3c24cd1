"""Entry point kept minimal by delegating to Engine.

The window, GL state and main loop live in `core/engine.py`; gameplay lives
in the runner scene.
"""

from core.engine import Engine  # noqa: E402 (local import order)


def main():  # small wrapper for clarity / debuggers
    Engine().run()


if __name__ == "__main__":
    main()
