import sqlglot
from sqlglot import exp
from sqlglot.errors import ParseError
import logging
from typing import Dict, List

from app.services.nrc_conversion.parser import RegionGroup
from app.services.nrc_conversion.sql_builder import build_region_block

logger = logging.getLogger(__name__)

SQL_DIALECT = "mysql"


def describe_parse_failure(error: Exception) -> str:
    """Plain-text reason for a failed parse.

    ``str(ParseError)`` embeds ANSI underline codes around the offending
    token, so the structured error details are used instead.
    """
    if isinstance(error, ParseError) and error.errors:
        first = error.errors[0]
        return f"{first.get('description')} (line {first.get('line')}, col {first.get('col')})"
    return str(error)


def safe_parse_one(sql: str, dialect: str = SQL_DIALECT) -> tuple[exp.Expression | None, str | None]:
    """
    Safely parses a single SQL statement into an AST.

    Returns:
        A tuple containing (ast, error_message).
        If successful, error_message is None; otherwise ast is None.
    """
    try:
        ast = sqlglot.parse_one(sql.strip().rstrip(";"), read=dialect)
        return ast, None
    except Exception as e:
        message = describe_parse_failure(e)
        logger.warning(f"Generated statement does not parse: {message}")
        return None, message


def check_region_statements(regions: List[RegionGroup], **table_options) -> List[Dict[str, str]]:
    """Parse each region's statement and list the ones that are not valid SQL."""
    issues = []
    for group in regions:
        ast, err = safe_parse_one(build_region_block(group, **table_options))
        if err:
            issues.append({'region': group.region_name, 'error': err})
        elif not isinstance(ast, exp.Insert):
            issues.append({'region': group.region_name, 'error': f'Expected INSERT, parsed {type(ast).__name__}'})
    return issues
