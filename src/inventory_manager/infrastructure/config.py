"""Runtime settings read from the environment.

Values come from process environment variables, optionally loaded from
a ``.env`` file in the working directory first. CLI options override
both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"

DATA_DIR_ENV = "INVENTORY_DATA_DIR"
LOG_LEVEL_ENV = "INVENTORY_LOG_LEVEL"

# loguru's built-in levels
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @classmethod
    def from_env(cls, env_file: Path | None = None) -> Settings:
        load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)
        data_dir = os.environ.get(DATA_DIR_ENV)
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            log_level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )
