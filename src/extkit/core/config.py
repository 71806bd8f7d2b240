import os
from typing import Annotated

import annotated_types as at
from pydantic import BaseModel, Field


def _default_max_workers() -> int:
    # Same default as concurrent.futures.ThreadPoolExecutor
    return min(32, (os.cpu_count() or 1) + 4)


class Settings(BaseModel):
    LOG_LEVEL: Annotated[str, at.MinLen(1)] = "INFO"
    MAX_WORKERS: Annotated[int, at.Ge(1)] = Field(default_factory=_default_max_workers)

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from the ``LOG_LEVEL`` and ``EXTKIT_MAX_WORKERS`` variables."""
        values = {}

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            values["LOG_LEVEL"] = log_level.upper()

        max_workers = os.getenv("EXTKIT_MAX_WORKERS")
        if max_workers:
            values["MAX_WORKERS"] = max_workers

        return cls(**values)


settings = Settings.load()
