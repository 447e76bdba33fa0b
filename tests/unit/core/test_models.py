"""Tests for core domain models."""

import pytest
from pydantic import ValidationError

from ghlink.core.exceptions import InvalidQueryError
from ghlink.core.models.link import LineRangeResult
from ghlink.core.models.query import (
    LineRange,
    NoRange,
    TextSearch,
    query_from_options,
    split_query_lines,
)
from ghlink.core.models.repository import RemoteIdentity
from tests.factories import LineRangeFactory, RemoteIdentityFactory, TextSearchFactory


@pytest.mark.unit
class TestQueryFromOptions:
    """Tests for query_from_options."""

    def test_no_options(self) -> None:
        assert query_from_options() == NoRange()

    def test_start_line_only(self) -> None:
        query = query_from_options(line1=3)
        assert query == LineRange(start=3)
        assert query.end is None

    def test_line_range(self) -> None:
        query = query_from_options(line1=3, line2=8)
        assert isinstance(query, LineRange)
        assert (query.start, query.end) == (3, 8)

    def test_search(self) -> None:
        query = query_from_options(search="foo\nbar")
        assert isinstance(query, TextSearch)
        assert query.pattern == "foo\nbar"

    def test_lines_and_search_rejected(self) -> None:
        with pytest.raises(InvalidQueryError, match="mutually exclusive"):
            query_from_options(line1=3, search="foo")

    def test_end_line_and_search_rejected(self) -> None:
        with pytest.raises(InvalidQueryError):
            query_from_options(line2=3, search="foo")

    def test_end_without_start_rejected(self) -> None:
        with pytest.raises(InvalidQueryError, match="without a start line"):
            query_from_options(line2=8)

    def test_end_before_start_rejected(self) -> None:
        with pytest.raises(InvalidQueryError) as exc_info:
            query_from_options(line1=8, line2=3)
        assert exc_info.value.details["line1"] == 8

    def test_zero_line_rejected(self) -> None:
        with pytest.raises(InvalidQueryError):
            query_from_options(line1=0)

    def test_empty_search_rejected(self) -> None:
        with pytest.raises(InvalidQueryError, match="empty"):
            query_from_options(search="")

    def test_newline_only_search_rejected(self) -> None:
        with pytest.raises(InvalidQueryError):
            query_from_options(search="\n\n")


@pytest.mark.unit
class TestQueryModels:
    """Tests for the LinkQuery variants."""

    def test_variants_have_distinct_kinds(self) -> None:
        kinds = {NoRange().kind, LineRangeFactory().kind, TextSearchFactory().kind}
        assert kinds == {"none", "lines", "search"}

    def test_line_range_is_frozen(self) -> None:
        query = LineRangeFactory()
        with pytest.raises(ValidationError):
            query.start = 10

    def test_equal_start_and_end_allowed(self) -> None:
        query = LineRange(start=4, end=4)
        assert query.end == 4

    def test_text_search_query_lines(self) -> None:
        query = TextSearch(pattern="a\nb\n")
        assert query.query_lines == ["a", "b"]


@pytest.mark.unit
class TestSplitQueryLines:
    """Tests for split_query_lines."""

    def test_single_line(self) -> None:
        assert split_query_lines("foo") == ["foo"]

    def test_trailing_newline_dropped_once(self) -> None:
        assert split_query_lines("foo\nbar\n") == ["foo", "bar"]
        assert split_query_lines("foo\n\n") == ["foo", ""]

    def test_crlf(self) -> None:
        assert split_query_lines("foo\r\nbar\r\n") == ["foo", "bar"]

    def test_blank_lines_kept(self) -> None:
        assert split_query_lines("Usage:\n\n    ghlink file") == ["Usage:", "", "    ghlink file"]

    def test_empty(self) -> None:
        assert split_query_lines("") == []


@pytest.mark.unit
class TestLineRangeResult:
    """Tests for LineRangeResult."""

    def test_single_line_fragment(self) -> None:
        assert LineRangeResult(first=7).fragment == "#L7"

    def test_range_fragment(self) -> None:
        assert LineRangeResult(first=3, last=8).fragment == "#L3-L8"

    def test_last_before_first_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LineRangeResult(first=5, last=2)

    def test_from_single_line_number(self) -> None:
        assert LineRangeResult.from_line_numbers([4]) == LineRangeResult(first=4)

    def test_from_line_numbers_spans_min_to_max(self) -> None:
        result = LineRangeResult.from_line_numbers([2, 9, 5])
        assert (result.first, result.last) == (2, 9)


@pytest.mark.unit
class TestRemoteIdentity:
    """Tests for RemoteIdentity."""

    def test_web_base(self) -> None:
        identity = RemoteIdentity(host="github.com", repo_path="org/repo")
        assert identity.web_base == "https://github.com/org/repo"

    def test_empty_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RemoteIdentity(host="", repo_path="org/repo")
        with pytest.raises(ValidationError):
            RemoteIdentity(host="github.com", repo_path="")

    def test_factory(self) -> None:
        identity = RemoteIdentityFactory(repo_path="me/project")
        assert identity.web_base == "https://github.com/me/project"
