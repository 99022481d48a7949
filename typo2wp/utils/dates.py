from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Union

# Typo stores local time without zone information; the blogs this tool was
# written for ran four hours behind UTC.
DEFAULT_GMT_OFFSET_HOURS = 4


def to_gmt(
    value: Optional[Union[datetime, str]], offset_hours: int = DEFAULT_GMT_OFFSET_HOURS
) -> Optional[datetime]:
    """Return the ``*_gmt`` counterpart of a local Typo timestamp."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value + timedelta(hours=offset_hours)
