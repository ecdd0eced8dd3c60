"""Placeholder substitution for generated file paths and contents."""

import datetime
from typing import Union

YEAR_PLACEHOLDER = "{year}"
DATE_PLACEHOLDER = "{date}"

TEMPLATE_TOKENS = (YEAR_PLACEHOLDER, DATE_PLACEHOLDER)


def render_template(
    template: str,
    year: int,
    date: Union[datetime.date, str],
) -> str:
    """Replace {year} and {date} everywhere in a template.

    Substitution is plain text replacement; there is no way to escape a
    literal "{year}" or "{date}".

    Args:
        template: Path or content template
        year: Year of the vault being created
        date: Date rendered as YYYY-MM-DD (a preformatted string is used as is)

    Returns:
        Rendered text

    Examples:
        >>> render_template("{year}-{date}", 2026, datetime.date(2026, 1, 1))
        '2026-2026-01-01'
    """
    if isinstance(date, datetime.datetime):
        date = date.date()
    date_text = date if isinstance(date, str) else date.isoformat()
    return template.replace(YEAR_PLACEHOLDER, str(year)).replace(DATE_PLACEHOLDER, date_text)
