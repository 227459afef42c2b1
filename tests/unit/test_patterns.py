import pytest

from urls_core.scanner.patterns import (
    CSS_URL_FUNCTION_RE,
    first_group,
    iter_boundary_matches,
    rules_for,
)


def _values(line: str) -> list[str]:
    return [match.group() for match in iter_boundary_matches(line)]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("(see https://example.com/docs)", ["https://example.com/docs"]),
        ('<a href="https://example.com">', ["https://example.com"]),
        ("mail mailto:team@example.com; or call tel:+1555", ["mailto:team@example.com", "tel:+1555"]),
        ("HTTPS://EXAMPLE.COM/UP", ["HTTPS://EXAMPLE.COM/UP"]),
        ("ftp://files.example.com/a|b", ["ftp://files.example.com/a"]),
        ("https://example.com/search?q=1&lang=en#results", ["https://example.com/search?q=1&lang=en#results"]),
    ],
)
def test_boundaries(line: str, expected: list[str]) -> None:
    assert _values(line) == expected


def test_space_in_prose_truncates_url():
    # Expected behaviour: a space always ends a plain-text URL, even when the
    # author meant it to continue.
    assert _values("Download https://example.com/my file.pdf now") == ["https://example.com/my"]


def test_prefix_without_body_does_not_match():
    assert _values("'https://'") == []


def test_rules_are_grouped_by_scheme():
    web, file_rule = rules_for("file", "web")
    assert (web.name, file_rule.name) == ("web", "file")
    assert _values("file:///tmp/x https://a.com") == ["https://a.com", "file:///tmp/x"]


def test_rules_for_rejects_unknown_names():
    with pytest.raises(KeyError):
        rules_for("gopher")


def test_first_group_returns_participating_alternative():
    match = CSS_URL_FUNCTION_RE.search("a { background: url('https://cdn.example.com/bg.png') }")
    assert match is not None
    assert first_group(match) == "https://cdn.example.com/bg.png"
