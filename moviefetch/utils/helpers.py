from typing import Any

from dateutil import parser


def format_release_date(value: Any) -> str:
    """Format a release date string for display.

    Returns 'Unknown' for falsy values and the raw value when it is not a parseable date.
    """
    if not value:
        return "Unknown"
    try:
        dt = parser.isoparse(str(value))
        return dt.strftime('%B %d, %Y')
    except (ValueError, OverflowError):
        return str(value)
