USAGE_STEPS = [
    "Copy your Excel data including the header row",
    "Paste it into the input field",
    'Click "Convert to SQL"',
    "The output will be formatted as MySQL INSERT statements",
    "You can copy the output or download it as a SQL file",
]

EXPECTED_COLUMNS = [
    "RegionName Eng",
    "RegionName MM",
    "Code",
    "NRC Pattern Eng",
    "Code NRC Pattern",
    "NRC Pattern MM",
]

OUTPUT_FORMAT = "The output will be MySQL INSERT statements grouped by region."


def help_payload() -> dict:
    return {
        "usage_steps": USAGE_STEPS,
        "expected_columns": EXPECTED_COLUMNS,
        "output_format": OUTPUT_FORMAT,
    }
