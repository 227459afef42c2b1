from hypothesis import given, strategies as st

from urls_core.classifier import to_url
from urls_core.postprocess import SortKey, SortOrder, dedupe_urls, sort_lines, sort_urls

_values = st.sampled_from(
    [
        "https://a.com",
        "HTTPS://A.COM",
        " https://a.com ",
        "http://b.org/x",
        "mailto:x@y.com",
        "ftp://f.net/pub",
        "tel:+1555",
        "file:///tmp/x",
    ]
)
_urls = st.lists(
    st.builds(lambda value, context: to_url(value, context=context), _values, st.text(max_size=8)),
    max_size=20,
)


@given(_urls)
def test_dedupe_urls_idempotent(urls) -> None:
    once = dedupe_urls(urls)
    assert dedupe_urls(once) == once
    keys = [url.value.strip().lower() for url in once]
    assert len(keys) == len(set(keys))


@given(st.lists(st.text(max_size=30), max_size=30), st.sampled_from(list(SortOrder)))
def test_sort_lines_idempotent(lines, order) -> None:
    once = sort_lines(lines, order)
    assert sort_lines(once, order) == once
    assert sorted(once) == sorted(line.strip() for line in lines if line.strip())


@given(st.lists(st.text(max_size=30), max_size=30))
def test_length_orders_mirror(lines) -> None:
    ascending = sort_lines(lines, SortOrder.LENGTH_ASC)
    assert [len(line) for line in ascending] == sorted(len(line) for line in ascending)
    descending = sort_lines(lines, SortOrder.LENGTH_DESC)
    assert [len(line) for line in descending] == sorted((len(line) for line in descending), reverse=True)


@given(_urls)
def test_sort_urls_by_value_idempotent(urls) -> None:
    once = sort_urls(urls, SortKey.VALUE)
    assert sort_urls(once, SortKey.VALUE) == once


@given(_urls)
def test_sort_urls_by_length_total_order(urls) -> None:
    ordered = sort_urls(urls, SortKey.LENGTH)
    keys = [(len(url.value), url.value) for url in ordered]
    assert keys == sorted(keys)
