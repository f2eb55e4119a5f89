from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import TIMESTAMP_FORMAT


def now_local() -> datetime:
    """Current local time, truncated to whole seconds.

    Note: Wrapped so tests can patch/mock it easily.
    """
    return datetime.now().replace(microsecond=0)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a timestamp as ``YYYY-MM-DDTHH:MM:SS`` (None stays None)."""
    if value is None:
        return None
    return value.strftime(TIMESTAMP_FORMAT)
