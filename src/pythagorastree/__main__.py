"""
Application Entry Point
=======================
Configures logging, then hands over to the Qt event loop.

Usage:
    $ python -m pythagorastree
    $ PYTHAGORASTREE_LOG_LEVEL=DEBUG python -m pythagorastree
"""
import sys

from pythagorastree.logging_config import level_from_env, setup_logging


def main() -> int:
    setup_logging(level=level_from_env())

    # Imported late so that Qt is only loaded once logging is in place
    from pythagorastree.app.main import main as run_app

    return run_app()


if __name__ == "__main__":
    sys.exit(main())
