from searchcrawler.core.models import SearchInput
from searchcrawler.core.parameters_resolver import ParametersResolver


def test_valid_urls():
    r = ParametersResolver()
    for url in ["http://example.com", "https://sub.example.co.uk/path?q=1",
                "http://localhost:8000", "http://127.0.0.1/x"]:
        assert not r.is_invalid_url(url), url


def test_invalid_urls():
    r = ParametersResolver()
    for url in [None, "", "http://", "ftp://example.com", "http://example",
                "http://exa mple.com", "http://-bad-.com", "http://example.c0m",
                "http://example.com:99999", "http://999.1.1.1"]:
        assert r.is_invalid_url(url), url


def test_null_or_empty_string():
    r = ParametersResolver()
    assert r.is_null_or_empty_string(None)
    assert r.is_null_or_empty_string("")
    assert r.is_null_or_empty_string("  ")
    assert not r.is_null_or_empty_string("java")


def test_split_search_terms():
    terms = ParametersResolver.split_search_terms(" java, python ,,java,  ")
    assert terms == ["java", "python"]


def test_resolve_params_builds_search_input():
    si = ParametersResolver().resolve_params("http://example.com", "a, b", 2, 50)
    assert si == SearchInput(seed="http://example.com", search_terms=("a", "b"),
                             link_depth=2, max_pages_limit=50)


def test_resolve_params_does_not_require_positive_integers():
    si = ParametersResolver().resolve_params("http://example.com", "a", 0, -1)
    assert si.link_depth == 0
    assert si.max_pages_limit == -1


def test_resolve_params_returns_none_for_missing_values():
    r = ParametersResolver()
    assert r.resolve_params(None, "a", 1, 1) is None
    assert r.resolve_params("http://example.com", None, 1, 1) is None
    assert r.resolve_params("http://example.com", " , ", 1, 1) is None
    assert r.resolve_params("http://example.com", "a", None, 1) is None
    assert r.resolve_params("http://example.com", "a", 1, None) is None
