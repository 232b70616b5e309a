from datetime import date, datetime, timezone


def utcnow():
    # MongoDB stores naive UTC datetimes with millisecond precision
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_date(value):
    """Turn a date string (ISO-8601, optional trailing Z) into a naive UTC datetime."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip() if value is not None else ""
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = (parsed - parsed.utcoffset()).replace(tzinfo=None)
    return parsed


def to_iso(value):
    """Render a stored datetime as 2024-01-15T00:00:00.000Z."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = (value - value.utcoffset()).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    if value:
        return str(value)
    return None
