"""
Line parsing and region grouping for pasted NRC township data.

Input is spreadsheet text copied straight out of Excel: one header row, then
one row per township with the columns

    RegionName Eng | RegionName MM | Code | NRC Pattern Eng | (unused) | NRC Pattern MM

Columns are separated by tab runs, or by two or more whitespace characters
when the paste went through something that expanded the tabs.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.utils.logger import setup_logger

__all__ = [
    "FIELD_SPLIT_PATTERN",
    "MIN_FIELD_COUNT",
    "TownshipRecord",
    "TownshipPair",
    "RegionGroup",
    "ParseResult",
    "split_fields",
    "parse_record",
    "parse_townships",
]

FIELD_SPLIT_PATTERN = re.compile(r"\t+|\s{2,}")
MIN_FIELD_COUNT = 6

logger = setup_logger('NrcParser')


@dataclass(frozen=True)
class TownshipRecord:
    region_name: str
    region_name_local: str
    code: str
    township: str
    township_local: str


@dataclass(frozen=True)
class TownshipPair:
    township: str
    township_local: str


@dataclass
class RegionGroup:
    """All townships seen for one region, in input order.

    ``region_name_local`` and ``code`` come from the first record of the
    region; later records never overwrite them.
    """
    region_name: str
    region_name_local: str
    code: str
    townships: List[TownshipPair] = field(default_factory=list)


@dataclass
class ParseResult:
    regions: Dict[str, RegionGroup] = field(default_factory=dict)
    lines_read: int = 0
    records_accepted: int = 0
    skipped_lines: List[int] = field(default_factory=list)

    @property
    def township_count(self) -> int:
        return sum(len(group.townships) for group in self.regions.values())


def split_fields(line: str) -> List[str]:
    return FIELD_SPLIT_PATTERN.split(line)


def parse_record(line: str) -> Optional[TownshipRecord]:
    """Build a record from one data line, or ``None`` if it has fewer than six fields."""
    parts = split_fields(line)
    if len(parts) < MIN_FIELD_COUNT:
        return None

    # parts[4] is the English NRC pattern column, not carried into the output
    return TownshipRecord(
        region_name=parts[0].strip(),
        region_name_local=parts[1].strip(),
        code=parts[2].strip(),
        township=parts[3].strip(),
        township_local=parts[5].strip(),
    )


def parse_townships(raw_text: str) -> ParseResult:
    """
    Parse pasted text into region groups keyed by region name.

    Blank lines are removed first, then the first remaining line is dropped as
    the header whatever it contains. Lines with too few fields are skipped
    silently; their 1-based position among the data lines is kept in
    ``skipped_lines`` for callers that want diagnostics.

    Args:
        raw_text: The full pasted text block.

    Returns:
        ParseResult with regions in order of first appearance.
    """
    lines = [line for line in raw_text.split("\n") if line.strip()]
    data_lines = lines[1:]

    result = ParseResult(lines_read=len(data_lines))

    for line_no, line in enumerate(data_lines, start=1):
        record = parse_record(line)
        if record is None:
            logger.debug("Skipping data line %d: fewer than %d fields", line_no, MIN_FIELD_COUNT)
            result.skipped_lines.append(line_no)
            continue

        group = result.regions.get(record.region_name)
        if group is None:
            group = RegionGroup(
                region_name=record.region_name,
                region_name_local=record.region_name_local,
                code=record.code,
            )
            result.regions[record.region_name] = group

        group.townships.append(TownshipPair(record.township, record.township_local))
        result.records_accepted += 1

    return result
