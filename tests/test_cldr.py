"""Tests for the CLDR pattern corpus read from Babel locale data.

Every standard decimal, percent, scientific, currency and accounting
pattern published by CLDR must compile.
"""

from __future__ import annotations

import logging

import pytest

pytest.importorskip("babel")

from babel.core import UnknownLocaleError  # noqa: E402

from cldrdecimal import compile_pattern  # noqa: E402
from cldrdecimal import cldr  # noqa: E402
from cldrdecimal.cldr import (  # noqa: E402
    PATTERN_KINDS,
    compile_locale_patterns,
    decimal_format_list,
    locale_patterns,
)


class TestLocalePatterns:
    """Pattern text per locale."""

    def test_english_patterns(self) -> None:
        """English publishes the well-known CLDR patterns."""
        patterns = locale_patterns("en")

        assert patterns["decimal"] == "#,##0.###"
        assert patterns["percent"] == "#,##0%"
        assert patterns["scientific"] == "#E0"
        assert patterns["currency"] == "¤#,##0.00"
        assert patterns["accounting"] == "¤#,##0.00;(¤#,##0.00)"

    def test_kinds_are_known(self) -> None:
        """Only the five standard kinds are returned."""
        assert set(locale_patterns("de")) <= set(PATTERN_KINDS)

    def test_bcp47_separator_accepted(self) -> None:
        """Hyphenated identifiers are accepted."""
        assert locale_patterns("en-IN") == locale_patterns("en_IN")

    def test_unknown_locale(self) -> None:
        """Unknown locales raise Babel's error unchanged."""
        with pytest.raises(UnknownLocaleError):
            locale_patterns("xx_YY")


class TestCompileLocalePatterns:
    """Compiled patterns per locale."""

    def test_indian_grouping(self) -> None:
        """en_IN groups by three then two."""
        decimal = compile_locale_patterns("en_IN")["decimal"].positive
        assert decimal.primary_grouping_size == 3
        assert decimal.secondary_grouping_size == 2

    def test_accounting_negative(self) -> None:
        """English accounting format has a parenthesised negative."""
        accounting = compile_locale_patterns("en")["accounting"]
        assert accounting.negative is not None
        assert accounting.negative.prefix_text == "(¤"
        assert accounting.negative.suffix_text == ")"

    def test_percent_multiplier(self) -> None:
        """Percent patterns multiply by 100."""
        assert compile_locale_patterns("fr")["percent"].positive.multiplier == 100

    def test_failures_skipped_with_warning(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A pattern that fails to compile is logged and left out."""
        monkeypatch.setattr(
            cldr, "locale_patterns", lambda _code: {"decimal": "#.#.#", "percent": "0%"}
        )
        with caplog.at_level(logging.WARNING, logger="cldrdecimal.cldr"):
            compiled = compile_locale_patterns("en")

        assert set(compiled) == {"percent"}
        assert any("#.#.#" in record.getMessage() for record in caplog.records)


class TestCorpus:
    """Regression corpus across all locales."""

    @pytest.fixture(scope="class")
    def corpus(self) -> tuple[str, ...]:
        return decimal_format_list()

    def test_corpus_is_sorted_and_distinct(self, corpus: tuple[str, ...]) -> None:
        """The corpus is a sorted set of pattern strings."""
        assert list(corpus) == sorted(set(corpus))
        assert "#,##0.###" in corpus

    def test_every_cldr_pattern_compiles(self, corpus: tuple[str, ...]) -> None:
        """Every published pattern compiles without error."""
        failures: dict[str, str] = {}
        for source in corpus:
            _, error = compile_pattern(source)
            if error is not None:
                failures[source] = error.message
        assert failures == {}
