"""Runtime settings and logging setup.

Settings come from the environment; the CLI overrides individual values
from its options.  Paths resolve relative to the project root.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

# When installed in editable mode the project root is the repo root.
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_SEED_PATH = PROJECT_ROOT / "data" / "seed.json"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

LOGGER = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:

    seed_path: Path = field(default=DEFAULT_SEED_PATH)
    log_level: str = DEFAULT_LOG_LEVEL
    # Give a superseded reservation's units back to stock on overwrite
    release_superseded_reservations: bool = True

    @staticmethod
    def from_env(environ: dict[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        seed = env.get("SHOP_SEED_PATH")
        release = env.get("SHOP_RELEASE_SUPERSEDED")
        return Settings(
            seed_path=Path(seed) if seed else DEFAULT_SEED_PATH,
            log_level=_log_level(env.get("SHOP_LOG_LEVEL")),
            release_superseded_reservations=(
                release is None or release.strip().lower() not in _FALSE_VALUES
            ),
        )


def _log_level(raw: str | None) -> str:
    if raw is None:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        LOGGER.warning(
            "Ignoring unknown SHOP_LOG_LEVEL %r, using %s", raw, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
