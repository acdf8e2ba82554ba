from src.presentation.console import ConsolePresenter, format_table, ranking_rows
from src.presentation.countdown import Countdown, format_time
from src.presentation.table_sort import TableSorter, coerce, sort_rows

__all__ = [
    "ConsolePresenter",
    "Countdown",
    "TableSorter",
    "coerce",
    "format_table",
    "format_time",
    "ranking_rows",
    "sort_rows",
]
