"""Human-readable formatting of elapsed time."""

MS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60


def format_duration(ms: int) -> str:
    """Format milliseconds as ``Hh Mm Ss``, dropping zero leading units.

    Examples:
        >>> format_duration(59_000)
        '59s'
        >>> format_duration(60_000)
        '1m 0s'
        >>> format_duration(3_661_000)
        '1h 1m 1s'
    """
    total_seconds = max(0, ms) // MS_PER_SECOND
    total_minutes = total_seconds // SECONDS_PER_MINUTE
    total_hours = total_minutes // MINUTES_PER_HOUR
    seconds = total_seconds % SECONDS_PER_MINUTE
    minutes = total_minutes % MINUTES_PER_HOUR

    if total_hours > 0:
        return f"{total_hours}h {minutes}m {seconds}s"
    if total_minutes > 0:
        return f"{total_minutes}m {seconds}s"
    return f"{seconds}s"
