"""Display utilities for debcrates CLI.

Renders records as a three-column table:

    foo 1.2.3                      installed  librust-foo-dev
      deps for feat "std"          --         librust-foo+std-dev
"""

from typing import Callable, List, Optional, Sequence

from ..core.record import Record

# Width of the status column ("installed" is the longest value)
STATUS_WIDTH = 9
COLUMN_GAP = 2


def format_table(
    records: Sequence[Record],
    column_gap: int = COLUMN_GAP,
    status_color: Optional[Callable[[str], str]] = None,
) -> List[str]:
    """Format records as aligned table lines.

    Args:
        records: Records in display order
        column_gap: Spaces between columns
        status_color: Optional colorize function for the status cell

    Returns:
        List of lines ready to print (empty for no records)
    """
    if not records:
        return []

    title_width = max(len(r.title) for r in records)
    gap = " " * column_gap

    lines = []
    for record in records:
        status = record.status
        if status_color:
            # Pad based on raw length, not colored length
            status_cell = status_color(status) + " " * (STATUS_WIDTH - len(status))
        else:
            status_cell = status.ljust(STATUS_WIDTH)
        lines.append(f"{record.title.ljust(title_width)}{gap}{status_cell}{gap}{record.package_id}")
    return lines


def print_table(
    records: Sequence[Record],
    status_color: Optional[Callable[[str], str]] = None,
) -> None:
    """Print records as an aligned table."""
    for line in format_table(records, status_color=status_color):
        print(line)
