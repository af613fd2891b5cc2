"""
Pytest configuration and shared fixtures for jspan tests.

Provides immutable test data fixtures covering the supported JSON subset.
"""

from dataclasses import dataclass
from typing import Any

import pytest


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers every value type and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42),
        JsonTestCase("zero", "0", False, 0),
        JsonTestCase("float", "3.14", False, 3.14),
        JsonTestCase("float without fraction", "7.", False, 7.0),
        JsonTestCase("float without whole", ".25", False, 0.25),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1, 2, 3]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
    ]


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides documents that must not parse.

    Taken from the json.org JSON_checker failures that this parser rejects,
    plus inputs outside the supported subset.
    """
    fail_docs = [
        '["Unclosed array"',
        '{unquoted_key: "keys must be quoted"}',
        '["Comma after the close"],',
        '["Extra close"]]',
        '{"Extra value after close": true} "misplaced quoted value"',
        '{"Illegal expression": 1 + 2}',
        '{"Illegal invocation": alert()}',
        '{"Numbers cannot be hex": 0x14}',
        "[\\naked]",
        '{"Missing colon" null}',
        '{"Double colon":: null}',
        '{"Comma instead of colon", null}',
        '["Colon instead of comma": false]',
        '["Bad value", truth]',
        "['single quote']",
        "[0e]",
        '{"Comma instead if closing brace": true,',
        '["mismatch"}',
        "-42",
        "1e10",
        "",
        "   ",
        ".",
        "nul",
    ]
    return [
        JsonTestCase(f"fail case {idx}", doc, should_fail=True)
        for idx, doc in enumerate(fail_docs)
    ]
