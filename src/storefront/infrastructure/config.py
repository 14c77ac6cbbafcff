"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from storefront.domain.model.lifecycle import TransitionPolicy

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    status_policy: TransitionPolicy
    log_level: str
    environment: str

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.getenv("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR),
            status_policy=TransitionPolicy.parse(
                os.getenv("STOREFRONT_STATUS_POLICY", TransitionPolicy.STRICT.value)
            ),
            log_level=os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper(),
            environment=os.getenv("STOREFRONT_ENV", "development").lower(),
        )
