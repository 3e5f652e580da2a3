from __future__ import annotations

from typing import Optional, Sequence

from models.records import DateItem

TODAY_TITLE = "Today"
YESTERDAY_TITLE = "Yesterday"


def get_yesterday_date_id(dates: Sequence[DateItem], today_id: str) -> Optional[str]:
    """Return the id listed just before ``today_id``, or ``None``."""
    for index, item in enumerate(dates):
        if item.id == today_id:
            return dates[index - 1].id if index > 0 else None
    return None


def get_button_title(item: DateItem, today_id: str, yesterday_id: Optional[str]) -> str:
    if item.id == today_id:
        return TODAY_TITLE
    if yesterday_id is not None and item.id == yesterday_id:
        return YESTERDAY_TITLE
    return item.date
