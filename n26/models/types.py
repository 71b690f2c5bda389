"""Value types shared by the N26 data models."""

from datetime import datetime, timezone

from pydantic import ConfigDict, JsonValue, RootModel, field_validator


class Timestamp(RootModel[int]):
    """Milliseconds since the Unix epoch; zero means unset."""

    model_config = ConfigDict(frozen=True)

    root: int = 0

    @field_validator("root", mode="before")
    @classmethod
    def coerce_millis(cls, v):
        """Treat JSON null as unset and accept datetimes."""
        if v is None:
            return 0
        if isinstance(v, datetime):
            return _to_millis(v)
        return v

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Build a timestamp from a datetime; naive values are taken as UTC."""
        return cls(_to_millis(value))

    @classmethod
    def now(cls) -> "Timestamp":
        return cls.from_datetime(datetime.now(timezone.utc))

    def is_zero(self) -> bool:
        return self.root == 0

    def as_millis(self) -> int:
        return self.root

    def to_datetime(self) -> datetime:
        """Timezone-aware UTC datetime for this instant."""
        return datetime.fromtimestamp(self.root / 1000, tz=timezone.utc)

    def __int__(self) -> int:
        return self.root

    def __bool__(self) -> bool:
        return not self.is_zero()


def _to_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


class RawJSON(RootModel[JsonValue]):
    """A JSON value whose type varies or is undocumented upstream.

    The value is kept exactly as received and written back unchanged.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> JsonValue:
        return self.root
