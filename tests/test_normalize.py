"""Tests for the pure field normalizers."""

import pytest

from shelfreader.extraction.normalize import (
    clean_review,
    collapse_whitespace,
    enlarge_cover,
    goodreads_id_from_href,
    parse_int,
    reorder_author,
    slugify,
    split_series,
    unwrap_parentheses,
)


class TestCollapseWhitespace:
    def test_squeezes_runs_and_newlines(self) -> None:
        assert collapse_whitespace("  The \n\n  Hobbit\t ") == "The Hobbit"

    def test_empty(self) -> None:
        assert collapse_whitespace("") == ""
        assert collapse_whitespace(" \n ") == ""


class TestParseInt:
    def test_plain_number(self) -> None:
        assert parse_int("352") == 352

    def test_oversized_digit_run_is_none(self) -> None:
        assert parse_int("9" * 5000) is None
        assert parse_int("9" * 5000 + " pp") is None

    def test_trailing_text_ignored(self) -> None:
        assert parse_int("1007pp") == 1007
        assert parse_int(" 12 pages") == 12

    def test_non_numeric_is_none(self) -> None:
        assert parse_int("unknown") is None
        assert parse_int("") is None
        assert parse_int(None) is None

    def test_leading_zero_and_sign(self) -> None:
        assert parse_int("007") == 7
        assert parse_int("-3") == -3


class TestSlugify:
    def test_basic_title(self) -> None:
        assert slugify("The Way of Kings") == "the-way-of-kings"

    def test_punctuation_runs_collapse(self) -> None:
        assert slugify("Harry Potter & the Sorcerer's Stone!!") == "harry-potter-the-sorcerer-s-stone"

    def test_only_trailing_hyphen_removed(self) -> None:
        assert slugify("...Ready Player One?") == "-ready-player-one"

    @pytest.mark.parametrize(
        "title",
        ["Dune", "The Hobbit (Middle-earth, #0)", "  Spaces  ", "Ça va?", ""],
    )
    def test_idempotent(self, title: str) -> None:
        once = slugify(title)
        assert slugify(once) == once
        assert slugify(title) == once

    def test_non_ascii_becomes_hyphen(self) -> None:
        assert slugify("Café Society") == "caf-society"


class TestSplitSeries:
    def test_no_annotation(self) -> None:
        entry, series, number = split_series("  The Hobbit ", "")
        assert entry == "The Hobbit"
        assert series is None
        assert number is None

    def test_series_with_number(self) -> None:
        entry, series, number = split_series(
            "The Way of Kings (The Stormlight Archive, #1)",
            "(The Stormlight Archive, #1)",
        )
        assert entry == "The Way of Kings"
        assert series == "The Stormlight Archive"
        assert number == "1"

    def test_name_hash_seven(self) -> None:
        _, series, number = split_series("Book (Name, #7)", "(Name, #7)")
        assert series == "Name"
        assert number == "7"

    def test_series_without_number(self) -> None:
        entry, series, number = split_series("Emma (Penguin Classics)", "(Penguin Classics)")
        assert entry == "Emma"
        assert series == "Penguin Classics"
        assert number is None

    def test_fractional_volume_keeps_leading_digits(self) -> None:
        _, series, number = split_series("Edgedancer (Stormlight, #2.5)", "(Stormlight, #2.5)")
        assert number == "2"
        assert series == "Stormlight.5"

    def test_last_volume_marker_wins(self) -> None:
        _, series, number = split_series("Omnibus (Saga, #1, #3)", "(Saga, #1, #3)")
        assert number == "3"
        # Only the first ", #N" is cut from the name
        assert series == "Saga, #3"

    def test_unwrap_parentheses(self) -> None:
        assert unwrap_parentheses("(Discworld, #4)") == "Discworld, #4"
        assert unwrap_parentheses("no parens") == "no parens"


class TestReorderAuthor:
    def test_last_first(self) -> None:
        assert reorder_author("Doe, Jane") == "Jane Doe"

    def test_marker_stripped(self) -> None:
        assert reorder_author("Sanderson, Brandon *") == "Brandon Sanderson"

    def test_single_name(self) -> None:
        assert reorder_author("Homer") == "Homer"

    def test_three_segments_reverse(self) -> None:
        assert reorder_author("King, Jr., Martin Luther") == "Martin Luther Jr. King"


class TestGoodreadsId:
    def test_dash_slug(self) -> None:
        assert goodreads_id_from_href("/book/show/12345-some-title") == 12345

    def test_dot_slug(self) -> None:
        assert goodreads_id_from_href("/book/show/5907.The_Hobbit") == 5907

    def test_bare_segment(self) -> None:
        assert goodreads_id_from_href("12345-some-title") == 12345

    def test_missing_href(self) -> None:
        assert goodreads_id_from_href("") is None


class TestEnlargeCover:
    def test_thumbnail_token_rewritten(self) -> None:
        url = "https://i.gr-assets.com/books/1l/7235533._SY75_.jpg"
        assert enlarge_cover(url) == "https://i.gr-assets.com/books/1l/7235533._SX315_.jpg"

    def test_url_without_token_only_trimmed(self) -> None:
        url = "  https://s.gr-assets.com/assets/nophoto/book/111x148.png "
        assert enlarge_cover(url) == "https://s.gr-assets.com/assets/nophoto/book/111x148.png"

    def test_only_first_token_rewritten(self) -> None:
        assert enlarge_cover("Y75/Y75.jpg") == "X315/Y75.jpg"

    def test_custom_tokens(self) -> None:
        assert enlarge_cover("a_SY75_.jpg", "Y75", "Y500") == "a_SY500_.jpg"


class TestCleanReview:
    def test_spoiler_marker(self) -> None:
        review, spoiler = clean_review("**spoiler alert**<br>It dies at the end.")
        assert spoiler is True
        assert review == "It dies at the end."

    def test_br_variants_become_newlines(self) -> None:
        review, spoiler = clean_review("One<br>Two<br/>Three<br />Four")
        assert review == "One\nTwo\nThree\nFour"
        assert spoiler is False

    def test_tags_stripped_and_entities_unescaped(self) -> None:
        review, _ = clean_review('<b>Great</b> &amp; <a href="/x">fun</a>')
        assert review == "Great & fun"

    def test_empty_is_none(self) -> None:
        assert clean_review("") == (None, False)
        assert clean_review("  <br> ") == (None, False)

    def test_marker_not_at_start(self) -> None:
        review, spoiler = clean_review("Mild **spoiler alert** inside")
        assert spoiler is False
        assert review == "Mild **spoiler alert** inside"

    def test_spoiler_only(self) -> None:
        assert clean_review("**spoiler alert**") == (None, True)
