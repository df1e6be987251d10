"""Input adapters that load raw Lahman data into the store."""

from .lahman import (
    BattingRow,
    ImportReport,
    PersonRow,
    import_lahman,
    load_batting_csv,
    load_people_csv,
)

__all__ = [
    "BattingRow",
    "ImportReport",
    "PersonRow",
    "import_lahman",
    "load_batting_csv",
    "load_people_csv",
]
