from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC (pymongo returns naive ones unless tz_aware)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
