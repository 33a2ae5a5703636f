"""
Run the lending game with the packaged roster.

    python -m lending_game

Set LENDING_GAME_CONFIG to a YAML file to run a different configuration.
"""

import logging
import os

from lending_game.config import load_config, run_simulation
from lending_game.observations.report import ConsoleReporter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    config = load_config(os.environ.get("LENDING_GAME_CONFIG"))
    run_simulation(config, ConsoleReporter())


if __name__ == "__main__":
    main()
