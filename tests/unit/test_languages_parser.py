"""
Tests for resumecraft.nlp.parsers.languages_parser: LanguagesParser.
"""

import pytest

from resumecraft.nlp.parsers import LanguageEntry, LanguagesParser


@pytest.fixture
def parser():
    return LanguagesParser()


class TestLanguagesParser:
    def test_parenthesized_proficiency(self, parser):
        assert parser.parse("English (Native), German (Fluent)") == [
            LanguageEntry("English", "Native"),
            LanguageEntry("German", "Fluent"),
        ]

    def test_newline_separated_with_bullets(self, parser):
        assert parser.parse("• Spanish (B2)\n• French") == [
            LanguageEntry("Spanish", "B2"),
            LanguageEntry("French", ""),
        ]

    def test_unmatched_token_has_empty_proficiency(self, parser):
        assert parser.parse("Italian") == [LanguageEntry("Italian", "")]

    def test_empty_tokens_skipped(self, parser):
        assert parser.parse("English,, \n") == [LanguageEntry("English")]

    @pytest.mark.parametrize("separator", [" - ", " – ", " — "])
    def test_dash_separated_proficiency(self, parser, separator):
        assert parser.parse(f"English{separator}Native") == [LanguageEntry("English", "Native")]

    def test_mixed_dash_styles(self, parser):
        assert parser.parse("English - Native, German – Fluent") == [
            LanguageEntry("English", "Native"),
            LanguageEntry("German", "Fluent"),
        ]

    def test_colon_separated_proficiency(self, parser):
        assert parser.parse("• French: B1\n• Swiss-German") == [
            LanguageEntry("French", "B1"),
            LanguageEntry("Swiss-German", ""),
        ]
