"""Tests for query-string construction."""

from radiodir.api.query import (
    build_url,
    byuuid_query,
    encode_text,
    search_query,
    tags_query,
    track_path,
    vote_path,
)
from radiodir.models.search import SearchParams, SortOrder


class TestEncodeText:
    """Tests for encode_text."""

    def test_spaces_and_ampersand(self) -> None:
        """Test the common search-text case."""
        assert encode_text("jazz & blues") == "jazz%20%26%20blues"

    def test_colon_maps_to_3b(self) -> None:
        """Test the directory-specific colon escape."""
        assert encode_text(":") == "%3B"

    def test_all_escapes(self) -> None:
        """Test every escaped character."""
        assert encode_text("/#?@+") == "%2F%23%3F%40%2B"

    def test_percent_escaped_first(self) -> None:
        """Test that escapes are not double-escaped."""
        assert encode_text("100% rock") == "100%25%20rock"
        assert encode_text("a+b") == "a%2Bb"

    def test_other_characters_untouched(self) -> None:
        """Test commas, unicode and equals signs pass through."""
        assert encode_text("rock,pop") == "rock,pop"
        assert encode_text("Müsik=1") == "Müsik=1"

    def test_empty(self) -> None:
        """Test empty input."""
        assert encode_text("") == ""


class TestSearchQuery:
    """Tests for search_query."""

    def test_minimal(self) -> None:
        """Test the always-present parameters."""
        query = search_query(SearchParams(), rowcount=20, offset=0)
        assert query == "limit=20&order=name&offset=0&reverse=false"

    def test_text_and_country(self) -> None:
        """Test name and countrycode parameters."""
        params = SearchParams(text="jazz & blues", countrycode="DE", reverse=True)
        query = search_query(params, rowcount=5, offset=10)
        assert query == (
            "limit=5&order=name&offset=10&name=jazz%20%26%20blues&countrycode=DE&reverse=true"
        )

    def test_random_order_omits_reverse(self) -> None:
        """Test random order never sends reverse."""
        for reverse in (True, False):
            params = SearchParams(order=SortOrder.RANDOM, reverse=reverse)
            query = search_query(params, rowcount=10)
            assert "reverse" not in query
            assert "order=random" in query

    def test_tags_last(self) -> None:
        """Test tag filtering is appended after everything else."""
        params = SearchParams(text="x", tags=frozenset({"rock", "pop"}), countrycode="GB")
        query = search_query(params, rowcount=10)
        assert query.endswith("&tagExact=false&tagList=pop,rock")
        assert query.index("reverse=") < query.index("tagExact")

    def test_single_tag_encoded(self) -> None:
        """Test a tag with special characters is escaped."""
        params = SearchParams(tags=frozenset({"drum & bass"}))
        query = search_query(params, rowcount=10)
        assert query.endswith("&tagExact=false&tagList=drum%20%26%20bass")

    def test_no_tags_no_tag_params(self) -> None:
        """Test tag parameters are absent without tags."""
        query = search_query(SearchParams(text="x"), rowcount=10)
        assert "tagList" not in query
        assert "tagExact" not in query

    def test_empty_text_omits_name(self) -> None:
        """Test empty text does not add a name parameter."""
        assert "name=" not in search_query(SearchParams(), rowcount=1)


class TestOtherQueries:
    """Tests for tag, uuid and report paths."""

    def test_tags_query(self) -> None:
        """Test offset/limit are included only when positive."""
        assert tags_query() == ""
        assert tags_query(offset=5) == "offset=5"
        assert tags_query(limit=100) == "limit=100"
        assert tags_query(offset=5, limit=100) == "offset=5&limit=100"

    def test_byuuid_query(self) -> None:
        """Test the uuid lookup query."""
        assert byuuid_query("abc-123") == "uuids=abc-123"

    def test_report_paths(self) -> None:
        """Test track and vote paths."""
        assert track_path("abc") == "/json/url/abc"
        assert vote_path("abc") == "/json/vote/abc"

    def test_build_url(self) -> None:
        """Test URL assembly."""
        assert build_url("de1.api.radio-browser.info", "/json/stats") == (
            "http://de1.api.radio-browser.info/json/stats"
        )
        assert build_url("a", "/json/tags", "limit=1") == "http://a/json/tags?limit=1"
