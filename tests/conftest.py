import pytest

from tests.helpers import HEADER, make_line


@pytest.fixture
def shan_input():
    return "\n".join([
        HEADER,
        make_line("Shan", "Taunggyi", "တောင်ကြီး"),
        make_line("Shan", "Lashio", "လားရှိုး"),
    ])


@pytest.fixture
def shan_sql():
    return (
        "-- Shan State\n"
        "INSERT INTO `fineract_default`.`m_code_value` (code_id, code_value, code_description, code_value_mm)\n"
        "SELECT (SELECT id FROM m_code WHERE code_name = 'NRC_SHAN_TOWNSHIP'), township, CONCAT('Township of Shan'), township_myanmar\n"
        "FROM (SELECT 'Taunggyi' AS township, 'တောင်ကြီး' AS township_myanmar\n"
        "UNION SELECT 'Lashio', 'လားရှိုး'\n"
        ") AS townships;\n"
        "\n"
    )
