from datetime import datetime, timezone

from weather_cli.core.errors import TimeConversionError

TIME_FORMAT = "%H:%M:%S"


def format_utc_time(epoch_seconds: int) -> str:
    """
    Format Unix epoch seconds as a UTC wall-clock time (HH:MM:SS).

    Raises:
        TimeConversionError: if the value falls outside the supported
            calendar range.
    """
    try:
        dt = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise TimeConversionError(f"invalid epoch timestamp: {epoch_seconds}") from e
    return dt.strftime(TIME_FORMAT)
