"""Common types shared across the calendar components.

Any object exposing the seven date/time fields as integer attributes can be
used wherever a time value is expected. ``TimeValue`` and the standard
library's ``datetime.datetime`` both qualify.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

SECONDS_IN_24_HOUR = 86400
MICROSECONDS_IN_SECOND = 1_000_000


@runtime_checkable
class TimeInternal(Protocol):
    """Structural capability: read-only date and time fields."""

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...

    @property
    def hour(self) -> int: ...

    @property
    def minute(self) -> int: ...

    @property
    def second(self) -> int: ...

    @property
    def microsecond(self) -> int: ...
