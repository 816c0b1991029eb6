"""Read-only aggregate statistics over a table model."""

from collections import Counter

from tablekit.classifiers import is_checked
from tablekit.schema import ColumnStats, TableModel


def analyze(model: TableModel) -> str:
    """Summarize checked counts per column as one Markdown table line.

    e.g. '| **Total** = 2 | 1/2 | 2/2 |' -- one 'checked/total' cell for every
    column after the first.  Returns '' when there are no columns or no rows.
    """
    if not model.headers or not model.rows:
        return ""
    total = len(model.rows)
    line = f"| **Total** = {total} |"
    for col in range(1, len(model.headers)):
        count = sum(1 for row in model.rows if is_checked(row[col]))
        line += f" {count}/{total} |"
    return line


def most_common_value(values: list[str]) -> str:
    """Most frequent value; ties go to whichever was seen first.  '' for no values."""
    if not values:
        return ""
    # Counter keeps first-seen order among equal counts
    return Counter(values).most_common(1)[0][0]


def get_column_stats(model: TableModel, index: int) -> ColumnStats | None:
    """Return statistics for column *index*, or None when it is out of range."""
    if index < 0 or index >= len(model.headers):
        return None
    column = [row[index] for row in model.rows]
    return ColumnStats(
        column_name=model.headers[index],
        total_cells=len(column),
        unique_values=len(set(column)),
        empty_cells=sum(1 for value in column if not value.strip()),
        most_common=most_common_value(column),
    )
