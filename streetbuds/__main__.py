# __main__.py
# python -m streetbuds

from __future__ import annotations
import logging
from .game import Game


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Game().run()


if __name__ == "__main__":
    main()
