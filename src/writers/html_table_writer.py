"""Render nested day/rate code groups as an HTML table.

The Day cell of each day's first row spans all of that day's rate code
rows; the day's other rows carry no Day cell at all. Text values are
written as-is, callers must escape descriptions containing markup.
"""

import logging
from decimal import ROUND_HALF_UP, Context, Decimal
from pathlib import Path
from typing import List, Sequence, Union

from src.models.grouping import DayGroup

logger = logging.getLogger(__name__)

TABLE_OPEN = '<table border="1" cellspacing="1" cellpadding="1">'
TABLE_CLOSE = "</tbody></table>"
HEADERS = ["Day", "Rate Code", "Rate Description", "Rate", "Volume"]
DAY_FORMAT = "%A, %d %B %Y"

_CENTS = Decimal("0.01")


def format_amount(value: Decimal) -> str:
    """Format a Decimal with two places and thousands separators.

    Halves round away from zero.

    Example:
        >>> format_amount(Decimal("1234.565"))
        '1,234.57'
    """
    # Enough precision for every integer digit plus the two decimals
    context = Context(prec=max(28, value.adjusted() + 3))
    rounded = value.quantize(_CENTS, rounding=ROUND_HALF_UP, context=context)
    return f"{rounded:,.2f}"


def render_day_groups_as_html_table(day_groups: Sequence[DayGroup]) -> str:
    """Render day groups as a single HTML table.

    Args:
        day_groups: Output of ``group_by_day_then_rate_code``

    Returns:
        The table markup, one element per line, with one body row per
        (day, rate code) pair

    Example:
        >>> html = render_day_groups_as_html_table(
        ...     group_by_day_then_rate_code(sample_timesheet_lines())
        ... )
        >>> html.count("<tr>")
        3
    """
    # The opening table tag and <thead> share the first line
    out: List[str] = [TABLE_OPEN + "<thead>"]
    out.extend(f"<th>{header}</th>" for header in HEADERS)
    out.append("</thead>")
    out.append("<tbody>")

    for day_group in day_groups:
        for position, line in enumerate(day_group.lines):
            out.append("<tr>")
            if position == 0:
                out.append(
                    f'<td style="vertical-align:top" rowspan="{day_group.row_span}">'
                    f"{day_group.day.strftime(DAY_FORMAT)}</td>"
                )
            out.append(f"<td>{line.rate_code}</td>")
            out.append(f"<td>{line.rate_description}</td>")
            out.append(f"<td>{format_amount(line.rate)}</td>")
            out.append(f"<td>{format_amount(line.total_volume)}</td>")
            out.append("</tr>")

    out.append(TABLE_CLOSE)
    return "\n".join(out) + "\n"


def write_html_table(
    day_groups: Sequence[DayGroup], path: Union[str, Path]
) -> Path:
    """Render day groups and write the table to ``path`` as UTF-8.

    Parent directories are created when missing.

    Args:
        day_groups: Output of ``group_by_day_then_rate_code``
        path: Destination file

    Returns:
        The path written to
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_day_groups_as_html_table(day_groups), encoding="utf-8")

    logger.info(f"Wrote HTML table for {len(day_groups)} day(s) to {target}")
    return target
