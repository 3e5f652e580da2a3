from __future__ import annotations

import asyncio
import logging
import time
from functools import lru_cache
from typing import List, Optional

from models.records import DateItem, EnergyLevelData
from settings import get_settings
from storage.seed_data import (
    AVAILABLE_DATES,
    ENERGY_READINGS,
    READINGS_DATE,
    READINGS_DAY_ID,
)

logger = logging.getLogger(__name__)


class ApiError(LookupError):
    """Structured failure raised by the mock accessors."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    def to_dict(self) -> dict:
        return {"status": self.status, "message": self.message}


class _DelayedApi:

    def __init__(self, delay_ms: int = 800) -> None:
        self.delay_ms = delay_ms

    async def _delay(self) -> None:
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)


class MockDatesApi(_DelayedApi):

    async def get_available_dates(self) -> List[DateItem]:
        await self._delay()
        logger.debug("Serving available dates", extra={"delay_ms": self.delay_ms})
        return list(AVAILABLE_DATES)


class MockEnergyLevelApi(_DelayedApi):

    async def get_energy_level(self, day_id: Optional[str]) -> EnergyLevelData:
        await self._delay()
        if day_id != READINGS_DAY_ID:
            logger.info(
                "Energy level data not found",
                extra={"day_id": day_id, "status": 404, "delay_ms": self.delay_ms},
            )
            raise ApiError(404, f"Energy level data not found for day {day_id}")

        return EnergyLevelData(
            id=day_id,
            date=READINGS_DATE,
            timestamp=time.time_ns() // 1_000_000,
            raw_data=list(ENERGY_READINGS),
        )


@lru_cache
def build_default_dates_api(delay_ms: Optional[int] = None) -> MockDatesApi:
    settings = get_settings()
    return MockDatesApi(delay_ms=settings.api_delay_ms if delay_ms is None else delay_ms)


@lru_cache
def build_default_energy_api(delay_ms: Optional[int] = None) -> MockEnergyLevelApi:
    settings = get_settings()
    return MockEnergyLevelApi(delay_ms=settings.api_delay_ms if delay_ms is None else delay_ms)
