"""Jinja2 filters for the console report.

These filters are used in report.txt.j2 to format schema objects.
"""

from collections.abc import Iterable
from datetime import date


def format_date(value: date | None) -> str:
    """Format a date or datetime as a short ISO date.

    Args:
        value: Date or datetime to format

    Returns:
        Date string like "2026-01-29", or "" when no date is given

    Examples:
        >>> from datetime import datetime
        >>> format_date(datetime(2026, 1, 29, 6, 51, 50))
        '2026-01-29'
    """
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d")


def format_rating(value: float) -> str:
    """Format a rating with two decimal places.

    Examples:
        >>> format_rating(4.15)
        '4.15'
    """
    return f"{value:.2f}"


def join_names(people: Iterable) -> str:
    """Format persons as a comma-separated list of full names.

    Args:
        people: Person objects with 'first_name' and 'last_name' attributes

    Returns:
        Comma-separated names

    Examples:
        >>> from schemas import Person
        >>> join_names([Person(first_name="Ivan", last_name="Ivanov")])
        'Ivan Ivanov'
    """
    return ", ".join(f"{person.first_name} {person.last_name}" for person in people)


def join_lines(items: Iterable) -> str:
    """Render each item on its own line.

    Accepts any iterable, including the generators returned by Magazine
    queries.

    Examples:
        >>> join_lines(["a", "b"])
        'a\\nb'
    """
    return "\n".join(str(item) for item in items)


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "format_rating": format_rating,
    "join_names": join_names,
    "join_lines": join_lines,
}
