import dataclasses

import pytest

from searchcrawler.core.models import SearchInput, SearchResult, WriteOutcome


def test_search_input_is_immutable():
    si = SearchInput(seed="http://example.com", search_terms=["a", "b"], link_depth=1, max_pages_limit=5)
    assert si.search_terms == ("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        si.seed = "http://other.com"
    assert si.to_dict()["search_terms"] == ["a", "b"]


def test_search_result_totals_and_row():
    sr = SearchResult(url="http://example.com", hits_by_word={"a": 2, "b": 3})
    assert sr.total_hits == 5
    assert sr.to_csv_row() == ["http://example.com", 2, 3, 5]
    assert sr.to_csv_row(["b", "c", "a"]) == ["http://example.com", 3, 0, 2, 5]


def test_search_result_from_dict():
    sr = SearchResult.from_dict({"url": "http://example.com", "hits_by_word": {"a": "4"}})
    assert sr.hits_by_word == {"a": 4}
    assert SearchResult.from_dict(sr.to_dict()) == sr


def test_write_outcome_ok():
    assert WriteOutcome(path="x").ok
    assert not WriteOutcome(path="x", error="boom").ok
