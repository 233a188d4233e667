"""Review Repository: tests for the bulk import parser and repository ordering.

Tests cover:
    - parse_review_line: delimiter, no delimiter, empty author, extra pipes
    - split_review_lines: newline runs, CRLF, blank and whitespace lines
    - bulk_ingest: batch prepended ahead of existing reviews, order kept
    - add: id, date and Anonymous default
"""

import datetime
from itertools import count

import pytest

from storefront.core.reviews import (
    ReviewRepository,
    parse_review_line,
    parse_review_text,
    split_review_lines,
)

DAY = datetime.date(2026, 3, 14)


@pytest.fixture
def reviews(storage):
    ids = count(1)
    return ReviewRepository(storage, today=lambda: DAY, id_factory=lambda: f"rev-{next(ids)}")


# ─── Parser ──────────────────────────────────────────────────────

def test_line_with_delimiter_splits_author_and_body():
    assert parse_review_line("M. Carter | Great knife") == ("M. Carter", "Great knife")


def test_line_without_delimiter_is_author_and_body():
    assert parse_review_line("NoAuthorLine") == ("NoAuthorLine", "NoAuthorLine")


def test_empty_author_becomes_anonymous():
    assert parse_review_line("| Sharp out of the box") == ("Anonymous", "Sharp out of the box")


def test_empty_body_after_delimiter_stays_empty():
    assert parse_review_line("J. Doe |") == ("J. Doe", "")


def test_only_first_pipe_splits():
    assert parse_review_line("A | good | sharp") == ("A", "good | sharp")


def test_split_collapses_newline_runs_and_trims():
    text = "  first  \n\n\n second\r\n\r\nthird\n   \n"
    assert split_review_lines(text) == ["first", "second", "third"]


@pytest.mark.parametrize("text", ["", "\n\n", "   \n \n"])
def test_blank_input_parses_to_nothing(text):
    assert parse_review_text(text) == []


# ─── Repository ──────────────────────────────────────────────────

def test_bulk_ingest_example_yields_two_reviews(reviews):
    added = reviews.bulk_ingest("M. Carter | Great knife\nNoAuthorLine")
    assert [(r.author, r.body) for r in added] == [
        ("M. Carter", "Great knife"),
        ("NoAuthorLine", "NoAuthorLine"),
    ]
    assert all(r.date == DAY for r in added)
    assert len({r.id for r in added}) == 2


@pytest.mark.parametrize("text", ["", "\n\n"])
def test_bulk_ingest_blank_adds_nothing(reviews, storage, text):
    assert reviews.bulk_ingest(text) == []
    assert reviews.list() == []
    assert storage.writes == 0


def test_bulk_batch_prepended_in_line_order(reviews):
    reviews.add("Older review", author="Existing")
    reviews.bulk_ingest("A | one\nB | two\nC | three")
    assert [r.author for r in reviews.list()] == ["A", "B", "C", "Existing"]


def test_add_assigns_id_and_date_and_prepends(reviews):
    first = reviews.add("Solid steel", author="K. Lee")
    second = reviews.add("Holds an edge", author="R. Diaz")
    assert first.id == "rev-1"
    assert first.date == DAY
    assert [r.id for r in reviews.list()] == [second.id, first.id]


@pytest.mark.parametrize("author", [None, "", "   "])
def test_add_without_author_is_anonymous(reviews, author):
    assert reviews.add("Nice", author=author).author == "Anonymous"


def test_reviews_persist_with_iso_dates(reviews, storage):
    reviews.add("Nice", author="A")
    assert '"date":"2026-03-14"' in storage.slots["reviews"]
    reloaded = ReviewRepository(storage).list()
    assert reloaded[0].date == DAY
