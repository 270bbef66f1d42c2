"""CSV Export — flat text rendering of the roster for download.

Invariants:
    - First line is always the fixed header, even for an empty roster
    - Name is wrapped in double quotes WITHOUT escaping embedded quotes/commas
    - Lines joined by "\\n", no trailing newline
    - Missing values render as empty text

Design Decisions:
    - Plain string join instead of the csv module: the csv module would escape
      the name, and consumers of the export rely on the unescaped layout
"""

from roster.core.domain_types import RecordField, UserRecord

CSV_HEADERS: tuple[str, ...] = (
    "ID", "Name", "Email", "Phone", "Enroll Number", "Date of Admission",
)


def _cell(record: UserRecord, key: RecordField) -> str:
    value = record.get(key.value)
    return "" if value is None else str(value)


def _row(record: UserRecord) -> str:
    return ",".join((
        _cell(record, RecordField.ID),
        f'"{_cell(record, RecordField.NAME)}"',
        _cell(record, RecordField.EMAIL),
        _cell(record, RecordField.PHONE),
        _cell(record, RecordField.ENROLL_NUMBER),
        _cell(record, RecordField.DATE_OF_ADMISSION),
    ))


def export_users_csv(records: list[UserRecord]) -> str:
    """Serialize records into CSV text. Pure."""
    lines = [",".join(CSV_HEADERS)]
    lines.extend(_row(r) for r in records)
    return "\n".join(lines)
