from typing import Optional

from app.config import config
from app.utils.logger import setup_logger
from app.services.nrc_conversion.parser import parse_townships
from app.services.nrc_conversion.sql_builder import (
    DEFAULT_CODE_TABLE,
    DEFAULT_TARGET_SCHEMA,
    DEFAULT_TARGET_TABLE,
    build_sql_script,
)
from app.services.nrc_conversion.utils.result_formatter import create_result_dictionary
from app.services.nrc_conversion.utils.sql_check import check_region_statements

__all__ = ["EMPTY_INPUT_MESSAGE", "UNKNOWN_ERROR_MESSAGE", "NrcConverter", "convert_to_sql"]

EMPTY_INPUT_MESSAGE = "Please enter some data to convert"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


class NrcConverter:
    """
    Turns pasted NRC township rows into MySQL INSERT statements, one per region.

    Table names default to the ``nrc_conversion`` section of settings.yaml.
    With ``check_output`` enabled every generated statement is also parsed
    with sqlglot and unparseable ones are reported under ``issues``; the SQL
    text is returned unchanged either way.
    """
    def __init__(
        self,
        target_schema: Optional[str] = None,
        target_table: Optional[str] = None,
        code_table: Optional[str] = None,
        check_output: Optional[bool] = None,
    ):
        nrc_cfg = config.get('nrc_conversion', {})
        self.table_options = {
            'target_schema': target_schema or nrc_cfg.get('target_schema', DEFAULT_TARGET_SCHEMA),
            'target_table': target_table or nrc_cfg.get('target_table', DEFAULT_TARGET_TABLE),
            'code_table': code_table or nrc_cfg.get('code_table', DEFAULT_CODE_TABLE),
        }
        self.check_output = nrc_cfg.get('check_output', False) if check_output is None else check_output
        self.logger = setup_logger('NrcConverter')

    def convert(self, raw_text: Optional[str]) -> dict:
        """
        Convert pasted text and return a result dictionary.

        ``result['sql']`` is what the user sees: the script, the empty-input
        notice, or the error notice. Nothing is raised to the caller.
        """
        if not raw_text or not raw_text.strip():
            return create_result_dictionary('empty', EMPTY_INPUT_MESSAGE, EMPTY_INPUT_MESSAGE, {})

        try:
            parsed = parse_townships(raw_text)
            regions = list(parsed.regions.values())
            sql = build_sql_script(regions, **self.table_options)

            stats = {
                'regions': len(regions),
                'townships': parsed.township_count,
                'lines_read': parsed.lines_read,
                'lines_skipped': len(parsed.skipped_lines),
                'skipped_lines': parsed.skipped_lines,
            }
            self.logger.info(
                f"Converted {stats['townships']} townships in {stats['regions']} regions "
                f"({stats['lines_skipped']} of {stats['lines_read']} data lines skipped)."
            )

            issues = None
            if self.check_output:
                issues = check_region_statements(regions, **self.table_options)
                if issues:
                    self.logger.warning(f"{len(issues)} generated statement(s) failed to parse.")

            return create_result_dictionary(
                'success',
                f"Generated {stats['regions']} INSERT statement(s).",
                sql,
                stats,
                issues,
            )
        except Exception as e:
            self.logger.error(f"Error converting NRC data: {e}", exc_info=True)
            message = f"Error converting data: {e}" if str(e) else UNKNOWN_ERROR_MESSAGE
            return create_result_dictionary('error', message, message, {})


def convert_to_sql(raw_text: Optional[str]) -> str:
    """Return the SQL script for *raw_text*, or the notice shown instead of it."""
    return NrcConverter(check_output=False).convert(raw_text)['sql']
