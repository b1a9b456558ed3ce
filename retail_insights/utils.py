import re
from datetime import date, datetime
from pathlib import Path

_DATE_IN_FILENAME = re.compile(r"(\d{4}-\d{2}-\d{2})")


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def get_report_date(path: Path) -> date:
    """
    Reads the report date from a 'YYYY-MM-DD' in the filename,
    falling back to the file's modification date.
    """
    match = _DATE_IN_FILENAME.search(path.name)
    if match:
        try:
            return datetime.strptime(match.group(1), "%Y-%m-%d").date()
        except ValueError:
            pass
    return datetime.fromtimestamp(path.stat().st_mtime).date()


def find_latest_report(
    directory: Path, prefix: str, extension: str = ".csv"
) -> tuple[Path, date] | None:
    """
    Finds the newest '<prefix>*<extension>' file in a directory.
    Returns (path, report_date), or None when nothing matches.
    """
    if not directory.is_dir():
        return None

    candidates = [
        (get_report_date(path), path.stat().st_mtime, path)
        for path in directory.glob(f"{prefix}*{extension}")
        if path.is_file()
    ]
    if not candidates:
        return None

    report_date, _, path = max(candidates)
    return path, report_date
