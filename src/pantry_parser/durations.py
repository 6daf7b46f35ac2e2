"""Human-readable rendering of recipe duration tokens."""

import re

_ISO_DURATION = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:\d+(?:\.\d+)?S)?)?$",
    re.IGNORECASE,
)


def format_duration(duration: str | None) -> str:
    """Render an ISO-8601 duration for display.

    Hours and minutes are read out of the token; days and seconds are
    ignored. Anything that is not an ISO duration, such as ``"10 minutes"``,
    is returned unchanged.

    Args:
        duration: Raw ``prepTime``/``cookTime`` value

    Returns:
        Display string, or "" when there is nothing to show

    Example:
        >>> format_duration("PT1H30M")
        '1 hr 30 mins'
        >>> format_duration("PT1M")
        '1 min'
        >>> format_duration("25 minutes")
        '25 minutes'
    """
    if not duration:
        return ""

    token = duration.strip()
    match = _ISO_DURATION.match(token)
    if match is None:
        return token

    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)

    if hours == 0 and minutes == 0:
        return ""

    parts = []
    if hours > 0:
        parts.append(f"{hours} {'hr' if hours == 1 else 'hrs'}")
    if minutes > 0:
        parts.append(f"{minutes} {'min' if minutes == 1 else 'mins'}")
    return " ".join(parts)
