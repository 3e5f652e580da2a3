"""Explicit state containers for the home screen.

Each store is a plain object owned by whoever renders the screen; nothing here
is global. Load methods are coroutines because the accessors they wrap are.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from models.records import DateItem, EnergyLevelData
from storage.mock_api import ApiError, MockDatesApi, MockEnergyLevelApi
from storage.seed_data import AVAILABLE_DATES

logger = logging.getLogger(__name__)

DEFAULT_SELECTED_DATE_ID = "22-01-2025"
PREFERRED_DATE_ID = "21-01-2025"


def _find_date(dates: List[DateItem], date_id: str) -> Optional[DateItem]:
    return next((item for item in dates if item.id == date_id), None)


class AppStore:

    def __init__(self, init_delay_ms: int = 2000) -> None:
        self.init_delay_ms = init_delay_ms
        self.is_initialized = False
        self.is_loading = True

    def set_initialized(self, value: bool) -> None:
        self.is_initialized = value

    def set_loading(self, value: bool) -> None:
        self.is_loading = value

    async def initialize_app(self) -> None:
        self.is_loading = True
        if self.init_delay_ms > 0:
            await asyncio.sleep(self.init_delay_ms / 1000)
        self.is_initialized = True
        self.is_loading = False
        logger.info("Application initialized", extra={"delay_ms": self.init_delay_ms})


class DatesStore:

    def __init__(self, api: MockDatesApi, preferred_date_id: str = PREFERRED_DATE_ID) -> None:
        self._api = api
        self.preferred_date_id = preferred_date_id
        self.dates: List[DateItem] = []
        self.selected_date: Optional[DateItem] = _find_date(
            list(AVAILABLE_DATES), DEFAULT_SELECTED_DATE_ID
        )
        self.is_loading = False
        self.error: Optional[str] = None

    async def load_dates(self) -> None:
        self.is_loading = True
        self.error = None
        try:
            dates = await self._api.get_available_dates()
        except ApiError as exc:
            logger.warning("Failed to load dates", extra={"status": exc.status, "reason": exc.message})
            self.error = "Failed to load dates"
            self.is_loading = False
            return

        self.dates = dates
        self.selected_date = _find_date(dates, self.preferred_date_id) or (dates[0] if dates else None)
        self.is_loading = False

    def select_date(self, date_id: str) -> None:
        date = _find_date(self.dates, date_id)
        if date is None:
            self.error = "Date not found"
            self.is_loading = False
            return
        self.selected_date = date
        self.error = None


class EnergyLevelStore:

    def __init__(self, api: MockEnergyLevelApi) -> None:
        self._api = api
        self.energy_data: Optional[EnergyLevelData] = None
        self.is_loading = False
        self.error: Optional[ApiError] = None

    async def load_energy_data(self, day_id: str) -> None:
        self.is_loading = True
        self.error = None
        try:
            data = await self._api.get_energy_level(day_id)
        except ApiError as exc:
            self.energy_data = None
            self.error = exc
        else:
            self.energy_data = data
        finally:
            self.is_loading = False

    def clear_error(self) -> None:
        self.error = None

    def clear_data(self) -> None:
        self.energy_data = None
        self.error = None
