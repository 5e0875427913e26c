"""Unit tests for verdict extraction from model replies."""

import pytest

from specmatch.domain.exceptions import ExtractionError
from specmatch.infrastructure.llm.parsing import extract_json_payload, parse_verification_result


class TestExtractJsonPayload:
    """Tests for locating the JSON payload in reply text."""

    def test_fenced_block_interior(self) -> None:
        text = '```json\n{"matchPercentage": 50}\n```'
        assert extract_json_payload(text) == '{"matchPercentage": 50}'

    def test_surrounding_whitespace_trimmed(self) -> None:
        text = '```json   \n\n  {"notes": "x"}  \n\n```'
        assert extract_json_payload(text) == '{"notes": "x"}'

    def test_first_fenced_block_wins(self) -> None:
        text = '```json\n{"a": 1}\n```\nand later\n```json\n{"b": 2}\n```'
        assert extract_json_payload(text) == '{"a": 1}'

    def test_no_fence_returns_whole_text(self) -> None:
        text = '  {"matchPercentage": 10}  '
        assert extract_json_payload(text) == text

    def test_untagged_fence_is_not_matched(self) -> None:
        text = '```\n{"matchPercentage": 10}\n```'
        assert extract_json_payload(text) == text


class TestParseVerificationResult:
    """Tests for decoding a reply into VerificationResult."""

    def test_fenced_payload(self) -> None:
        text = (
            "Assessment below.\n"
            "```json\n"
            '{"matchPercentage": 72.5, "matchedItems": ["a"], '
            '"unmatchedItems": ["b", "c"], "notes": "ok"}\n'
            "```"
        )

        result = parse_verification_result(text)

        assert result.match_percentage == 72.5
        assert result.matched_items == ["a"]
        assert result.unmatched_items == ["b", "c"]
        assert result.notes == "ok"

    def test_bare_payload(self) -> None:
        result = parse_verification_result('{"matchPercentage": 100, "notes": "complete"}')

        assert result.match_percentage == 100
        assert result.notes == "complete"

    def test_missing_fields_take_defaults(self) -> None:
        result = parse_verification_result("{}")

        assert result.match_percentage == 0
        assert result.matched_items == []
        assert result.unmatched_items == []
        assert result.notes == ""

    def test_unknown_fields_ignored(self) -> None:
        result = parse_verification_result('{"matchPercentage": 5, "confidence": "high"}')

        assert result.match_percentage == 5

    @pytest.mark.parametrize("value", [-20, 0, 100, 250])
    def test_percentage_not_range_checked(self, value: int) -> None:
        result = parse_verification_result(f'{{"matchPercentage": {value}}}')

        assert result.match_percentage == value

    def test_malformed_json_raises(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            parse_verification_result('```json\n{"matchPercentage": \n```')

        assert exc_info.value.payload == '{"matchPercentage":'

    def test_prose_without_json_raises(self) -> None:
        with pytest.raises(ExtractionError):
            parse_verification_result("The code matches the spec quite well.")

    def test_wrong_field_type_raises(self) -> None:
        with pytest.raises(ExtractionError):
            parse_verification_result('{"matchedItems": "not a list"}')

    @pytest.mark.parametrize("raw", ["true", "\"80\""])
    def test_percentage_of_wrong_type_raises(self, raw: str) -> None:
        with pytest.raises(ExtractionError):
            parse_verification_result(f'{{"matchPercentage": {raw}}}')

    def test_non_string_items_raise(self) -> None:
        with pytest.raises(ExtractionError):
            parse_verification_result('{"matchedItems": [1, 2]}')

    def test_integer_percentage_still_decodes(self) -> None:
        result = parse_verification_result('{"matchPercentage": 80}')

        assert result.match_percentage == 80.0
        assert isinstance(result.match_percentage, float)

    def test_json_array_raises(self) -> None:
        with pytest.raises(ExtractionError):
            parse_verification_result("[80]")

    def test_cause_is_chained(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            parse_verification_result("nope")

        assert exc_info.value.__cause__ is not None
