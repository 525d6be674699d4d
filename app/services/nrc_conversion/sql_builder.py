import re
from typing import List

from app.services.nrc_conversion.parser import RegionGroup

__all__ = [
    "DEFAULT_TARGET_SCHEMA",
    "DEFAULT_TARGET_TABLE",
    "DEFAULT_CODE_TABLE",
    "format_region_name",
    "code_name_for",
    "build_region_block",
    "build_sql_script",
]

DEFAULT_TARGET_SCHEMA = "fineract_default"
DEFAULT_TARGET_TABLE = "m_code_value"
DEFAULT_CODE_TABLE = "m_code"

_TRAILING_PAREN = re.compile(r"\s+\([^)]*\)$")


def format_region_name(region_name: str) -> str:
    """Drop a trailing ``" (...)"`` annotation: ``"Kachin (Special)"`` -> ``"Kachin"``."""
    return _TRAILING_PAREN.sub("", region_name)


def code_name_for(formatted_name: str) -> str:
    return f"NRC_{formatted_name.upper()}_TOWNSHIP"


def build_region_block(
    group: RegionGroup,
    target_schema: str = DEFAULT_TARGET_SCHEMA,
    target_table: str = DEFAULT_TARGET_TABLE,
    code_table: str = DEFAULT_CODE_TABLE,
) -> str:
    """
    Render the comment line and INSERT statement for one region.

    The first township is the base SELECT of the inline table and every
    further township adds a ``UNION SELECT`` row. Values are written as plain
    single-quoted literals with no escaping, so a quote inside a name yields
    invalid SQL.
    """
    formatted = format_region_name(group.region_name)
    first, rest = group.townships[0], group.townships[1:]

    lines: List[str] = [
        f"-- {group.region_name} State",
        f"INSERT INTO `{target_schema}`.`{target_table}` (code_id, code_value, code_description, code_value_mm)",
        f"SELECT (SELECT id FROM {code_table} WHERE code_name = '{code_name_for(formatted)}'), "
        f"township, CONCAT('Township of {formatted}'), township_myanmar",
        f"FROM (SELECT '{first.township}' AS township, '{first.township_local}' AS township_myanmar",
    ]
    for pair in rest:
        lines.append(f"UNION SELECT '{pair.township}', '{pair.township_local}'")
    lines.append(") AS townships;")

    return "\n".join(lines) + "\n\n"


def build_sql_script(regions, **table_options) -> str:
    """Concatenate the blocks for every region group, keeping their order."""
    return "".join(build_region_block(group, **table_options) for group in regions)
