import pytest

from urls_core.postprocess import SortOrder, dedupe_lines, sort_lines

LINES = [
    "https://z.com/a",
    "  https://a.com/zzzz ",
    "",
    "mailto:x@y.com",
    "https://z.com/a",
]


def test_dedupe_lines_trims_and_drops_blanks():
    assert dedupe_lines(["b", " a ", "", "b", "a"]) == ["b", "a"]


@pytest.mark.parametrize(
    ("order", "expected"),
    [
        (SortOrder.ASC, ["https://a.com/zzzz", "https://z.com/a", "https://z.com/a", "mailto:x@y.com"]),
        (SortOrder.DESC, ["mailto:x@y.com", "https://z.com/a", "https://z.com/a", "https://a.com/zzzz"]),
        (SortOrder.DOMAIN, ["https://a.com/zzzz", "mailto:x@y.com", "https://z.com/a", "https://z.com/a"]),
        ("length-asc", ["mailto:x@y.com", "https://z.com/a", "https://z.com/a", "https://a.com/zzzz"]),
        ("length-desc", ["https://a.com/zzzz", "https://z.com/a", "https://z.com/a", "mailto:x@y.com"]),
    ],
)
def test_sort_orders(order, expected) -> None:
    assert sort_lines(LINES, order) == expected


def test_sort_rejects_unknown_order():
    with pytest.raises(ValueError):
        sort_lines(LINES, "random")
