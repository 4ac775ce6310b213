"""Settings read from the environment."""

import logging
import os
from typing import Optional

LOG_LEVEL = os.getenv("OTHELLO_LOG_LEVEL", "INFO").upper()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


# Seed for the computer opponent's default random generator (easy difficulty). Unset: nondeterministic.
OPPONENT_SEED = _optional_int(os.getenv("OTHELLO_OPPONENT_SEED"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """For drivers (scripts, a future web app) that want log output. The library itself never installs handlers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
