from sqlglot.errors import ParseError, TokenError

from app.services.nrc_conversion.utils.sql_check import describe_parse_failure, safe_parse_one


def test_parse_error_uses_structured_details():
    error = ParseError(
        "Invalid expression \x1b[4m's'\x1b[0m",
        errors=[{"description": "Invalid expression / Unexpected token", "line": 4, "col": 27}],
    )
    assert describe_parse_failure(error) == "Invalid expression / Unexpected token (line 4, col 27)"


def test_other_errors_fall_back_to_message():
    assert describe_parse_failure(TokenError("Missing ' from 4:12")) == "Missing ' from 4:12"


def test_safe_parse_one_accepts_trailing_semicolon():
    ast, err = safe_parse_one("INSERT INTO t (a) SELECT 1;\n\n")
    assert err is None
    assert ast is not None
