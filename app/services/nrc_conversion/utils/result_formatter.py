"""
Result formatting utilities for NRC conversion.
Handles creation of standardized result dictionaries returned to API callers.
"""
from typing import List, Optional


def create_result_dictionary(status: str, message: str, sql: str, stats: dict, issues: Optional[List[dict]] = None, **kwargs) -> dict:
    """
    Create standardized result dictionary for conversion operations.

    Args:
        status: Overall conversion status ('success', 'empty', 'error')
        message: Human-readable status message
        sql: Text shown to the user; the SQL script or a notice
        stats: Conversion statistics dictionary
        issues: Statements flagged by the output check (optional)
        **kwargs: Additional keys copied into the result

    Returns:
        Standardized result dictionary
    """
    result = {
        "status": status,
        "message": message,
        "sql": sql,
        "stats": {
            "regions": 0,
            "townships": 0,
            "lines_read": 0,
            "lines_skipped": 0,
            "skipped_lines": [],
            **stats,
        },
    }

    if issues is not None:
        result["issues"] = issues
    result.update(kwargs)

    return result
