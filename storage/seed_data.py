"""Canned payloads served by the mock accessors."""

from __future__ import annotations

from models.records import DateItem, EnergyReading

AVAILABLE_DATES = (
    DateItem(id="18-01-2025", label="18", value="18/01/25", date="18/01/25"),
    DateItem(id="19-01-2025", label="19", value="19/01/25", date="19/01/25"),
    DateItem(id="20-01-2025", label="20", value="20/01/25", date="20/01/25"),
    DateItem(id="21-01-2025", label="21", value="21/01/25", date="21/01/25"),
    DateItem(id="22-01-2025", label="22", value="22/01/25", date="22/01/25"),
    DateItem(id="23-01-2025", label="23", value="23/01/25", date="23/01/25"),
    DateItem(id="24-01-2025", label="24", value="24/01/25", date="24/01/25"),
    DateItem(id="25-01-2025", label="25", value="25/01/25", date="25/01/25"),
    DateItem(id="26-01-2025", label="26", value="26/01/25", date="26/01/25"),
)

# Only this day has readings; every other id is a 404.
READINGS_DAY_ID = "22-01-2025"
READINGS_DATE = "2025-01-22"

ENERGY_READINGS = (
    EnergyReading(timestamp="2025-01-20T11:23:00Z", level="Low"),
    EnergyReading(timestamp="2025-01-20T12:23:00Z", level="High"),
    EnergyReading(timestamp="2025-01-20T13:33:00Z", level="Low"),
    EnergyReading(timestamp="2025-01-20T13:38:00Z", level="Medium"),
    EnergyReading(timestamp="2025-01-20T17:38:00Z", level="High"),
    EnergyReading(timestamp="2025-01-21T11:23:00Z", level="High"),
    EnergyReading(timestamp="2025-01-21T12:23:00Z", level="Low"),
    EnergyReading(timestamp="2025-01-21T13:33:00Z", level="Medium"),
    EnergyReading(timestamp="2025-01-21T13:38:00Z", level="High"),
    EnergyReading(timestamp="2025-01-21T17:38:00Z", level="Medium"),
    EnergyReading(timestamp="2025-01-22T11:23:00Z", level="Medium"),
    EnergyReading(timestamp="2025-01-22T12:38:00Z", level="Low"),
    EnergyReading(timestamp="2025-01-22T13:38:00Z", level="Medium"),
    EnergyReading(timestamp="2025-01-22T13:33:00Z", level="High"),
    EnergyReading(timestamp="2025-01-22T17:38:00Z", level="Low"),
)
