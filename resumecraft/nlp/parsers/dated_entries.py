"""
Line scanner shared by the experience and education parsers.

Both sections are lists of entries that each begin at a line holding a
date range ("Jan 2020 - Present"). The scanner walks the lines once with
two pieces of local state: the open entry (or None) and a buffer of
candidate header lines.

- A date-range line closes the open entry and opens a new one. When the
  text before the date range splits into two fields, those are the header
  and any buffered lines stay with the previous entry. Otherwise the
  buffered header line(s) supply the fields.
- Any other line is a detail of the open entry. After a blank line,
  lines are buffered instead, since they may be the header of the next
  entry; if no date line follows they are folded back into the details.
- Lines before the first date line only ever act as a header.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from resumecraft.nlp.patterns import (
    BULLET_PREFIX_PATTERN,
    DATE_RANGE_PATTERN,
    ENTRY_CONNECTOR_PATTERN,
    FIELD_SEPARATOR_PATTERN,
)

_EDGE_SEPARATORS = " \t,|-–—"


@dataclass(frozen=True)
class DatedEntry:
    """One entry found by the scanner, before field naming."""

    first: str
    second: str
    start_date: Optional[str]
    end_date: Optional[str]
    extra: str = ""
    details: tuple[str, ...] = ()


@dataclass
class _OpenEntry:
    first: str
    second: str
    start_date: Optional[str]
    end_date: Optional[str]
    extra: str
    details: list[str] = field(default_factory=list)

    def freeze(self) -> DatedEntry:
        return DatedEntry(
            first=self.first,
            second=self.second,
            start_date=self.start_date,
            end_date=self.end_date,
            extra=self.extra,
            details=tuple(self.details),
        )


def split_header(header: str) -> tuple[str, str, str]:
    """
    Split an entry header into two fields plus any leftover text.

    "Engineer at Acme, Berlin" -> ("Engineer", "Acme", "Berlin")
    "MIT | BSc Physics"        -> ("MIT", "BSc Physics", "")
    """
    header = header.strip(_EDGE_SEPARATORS)
    if not header:
        return "", "", ""

    connected = ENTRY_CONNECTOR_PATTERN.split(header, maxsplit=1)
    if len(connected) == 2:
        first = connected[0].strip(_EDGE_SEPARATORS)
        rest = _split_fields(connected[1])
    else:
        parts = _split_fields(header)
        first, rest = parts[0], parts[1:]

    second = rest[0] if rest else ""
    leftover = ", ".join(rest[1:])
    return first, second, leftover


def _split_fields(text: str) -> list[str]:
    parts = [p.strip(_EDGE_SEPARATORS) for p in FIELD_SEPARATOR_PATTERN.split(text)]
    return [p for p in parts if p] or [""]


def normalize_detail(line: str) -> str:
    """Render any leading list marker as a single bullet glyph."""
    if BULLET_PREFIX_PATTERN.match(line):
        return "• " + BULLET_PREFIX_PATTERN.sub("", line, count=1)
    return line


def _is_bulleted(line: str) -> bool:
    return bool(BULLET_PREFIX_PATTERN.match(line))


def _take_header(pending: list[str]) -> tuple[list[str], list[str]]:
    """
    Choose header lines from the end of the pending buffer.

    Returns (header_lines, leftover_lines). One line is enough when it
    splits into two fields; otherwise the two last lines are used as a
    two-line "Title / Company" header.
    """
    if not pending or _is_bulleted(pending[-1]):
        return [], pending

    last = pending[-1]
    _, second, _ = split_header(last)
    if second or len(pending) < 2 or _is_bulleted(pending[-2]):
        return [last], pending[:-1]
    return pending[-2:], pending[:-2]


def scan_dated_entries(lines: Iterable[str]) -> list[DatedEntry]:
    """
    Scan section lines into dated entries.

    Args:
        lines: Lines of one section body

    Returns:
        Entries in document order, including ones with empty fields;
        callers decide which to keep.
    """
    entries: list[DatedEntry] = []
    current: Optional[_OpenEntry] = None
    pending: list[str] = []
    after_blank = False

    for raw in lines:
        line = raw.strip()
        if not line:
            if current is not None:
                after_blank = True
            continue

        match = DATE_RANGE_PATTERN.search(line)
        if match is None:
            if current is None or after_blank:
                pending.append(line)
            else:
                current.details.append(normalize_detail(line))
            continue

        prefix = line[: match.start()].strip(_EDGE_SEPARATORS)
        suffix = line[match.end():].strip(_EDGE_SEPARATORS)

        prefix_fields = split_header(prefix)
        if prefix_fields[1]:
            # The date line names both fields itself
            header_lines, leftover = [], pending
        else:
            header_lines, leftover = _take_header(pending)
        if current is not None:
            current.details.extend(normalize_detail(l) for l in leftover)
            entries.append(current.freeze())

        if header_lines:
            first, second, rest = split_header(header_lines[0])
            extras = [rest]
            if len(header_lines) == 2:
                if second:
                    extras.append(header_lines[1])
                else:
                    second = header_lines[1].strip(_EDGE_SEPARATORS)
            if not second and prefix:
                # "Engineer" on its own line, "Acme | Jan 2020 - Present" below
                second, prefix_second, prefix_rest = split_header(prefix)
                extras.extend([prefix_second, prefix_rest])
            else:
                extras.append(prefix)
        else:
            first, second, rest = prefix_fields
            extras = [rest]
        extras.append(suffix)

        current = _OpenEntry(
            first=first,
            second=second,
            start_date=match.group("start").strip(),
            end_date=match.group("end").strip(),
            extra=", ".join(e for e in extras if e),
        )
        pending = []
        after_blank = False

    if current is not None:
        current.details.extend(normalize_detail(l) for l in pending)
        entries.append(current.freeze())

    return entries
