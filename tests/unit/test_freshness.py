import pytest

from searxng_search.freshness import FRESHNESS_MAP, VALID_FRESHNESS, map_freshness


@pytest.mark.parametrize(
    ("code", "expected"),
    [("pd", "day"), ("pw", "week"), ("pm", "month"), ("py", "year"), ("PD", "day"), ("Pw", "week")],
)
def test_map_freshness_known_codes(code: str, expected: str) -> None:
    assert map_freshness(code) == expected


def test_map_freshness_unknown_code() -> None:
    assert map_freshness("px") is None
    assert map_freshness("day") is None
    assert map_freshness("") is None


def test_valid_freshness_order() -> None:
    assert VALID_FRESHNESS == ("pd", "pw", "pm", "py")
    assert set(VALID_FRESHNESS) == set(FRESHNESS_MAP)
