"""Tests for ResponseLimiter."""

from __future__ import annotations

import copy

import pytest

from contextfit.core.limiter import ResponseLimiter
from contextfit.exceptions import UnserializableValueError
from contextfit.utils.config import ResponseConfig


def test_none_is_not_limited(limiter):
    result = limiter.limit(None)
    assert result.limited is None
    assert result.was_limited is False
    assert result.original_count == 0
    assert result.limited_field is None


def test_small_array_returned_unchanged(limiter):
    data = list(range(5))
    result = limiter.limit(data)
    assert result.limited is data
    assert result.was_limited is False
    assert result.limited_field is None


def test_root_array_is_limited(limiter):
    data = [{"id": i} for i in range(15)]
    result = limiter.limit(data)
    assert len(result.limited) == 10
    assert result.limited == data[:10]
    assert result.original_count == 15
    assert result.was_limited is True
    assert result.limited_field == "(root)"


def test_root_array_items_are_copies(limiter):
    data = [{"id": i} for i in range(15)]
    result = limiter.limit(data)
    result.limited[0]["id"] = "changed"
    assert data[0]["id"] == 0


def test_direct_field_is_limited_and_siblings_kept(limiter, paginated_response):
    result = limiter.limit(paginated_response)
    assert len(result.limited["edges"]) == 10
    assert result.limited["pageInfo"] == {"hasNextPage": True, "endCursor": "abc"}
    assert result.limited["totalCount"] == 20
    assert result.original_count == 20
    assert result.was_limited is True
    assert result.limited_field == "edges"


def test_nested_field_is_limited(limiter):
    data = {
        "response": {"items": list(range(12)), "status": "success"},
        "meta": {"total": 12, "page": 1},
    }
    result = limiter.limit(data)
    assert result.limited["response"]["items"] == list(range(10))
    assert result.limited["response"]["status"] == "success"
    assert result.limited["meta"] == {"total": 12, "page": 1}
    assert result.original_count == 12
    assert result.limited_field == "response.items"


def test_input_is_never_mutated(limiter, paginated_response):
    before = copy.deepcopy(paginated_response)
    limiter.limit(paginated_response)
    assert paginated_response == before
    assert len(paginated_response["edges"]) == 20


def test_limited_value_shares_no_containers(limiter, paginated_response):
    result = limiter.limit(paginated_response)
    assert result.limited is not paginated_response
    assert result.limited["pageInfo"] is not paginated_response["pageInfo"]
    assert result.limited["edges"][0] is not paginated_response["edges"][0]


def test_only_first_oversized_field_is_limited(limiter):
    data = {"first": list(range(15)), "second": list(range(25))}
    result = limiter.limit(data)
    assert len(result.limited["first"]) == 10
    assert len(result.limited["second"]) == 25
    assert result.original_count == 15


def test_dotted_key_is_navigated_correctly(limiter):
    data = {"a.b": {"c": list(range(11))}}
    result = limiter.limit(data)
    assert result.limited == {"a.b": {"c": list(range(10))}}


def test_threshold_of_one():
    limiter = ResponseLimiter(ResponseConfig(max_items_for_context=1))
    result = limiter.limit({"tags": ["a", "b"]})
    assert result.limited == {"tags": ["a"]}
    assert result.original_count == 2


def test_cycle_outside_limited_field_fails_fast(limiter):
    data: dict = {"items": list(range(11)), "meta": {}}
    data["meta"]["parent"] = data
    with pytest.raises(UnserializableValueError):
        limiter.limit(data)


def test_very_deep_root_array_fails_cleanly(limiter):
    item: dict = {}
    for _ in range(5000):
        item = {"child": item}
    with pytest.raises(UnserializableValueError):
        limiter.limit([item] * 11)


def test_oversized_array_is_not_copied_in_full(limiter, monkeypatch):
    from contextfit.core import limiter as limiter_module

    big = [{"id": i} for i in range(1000)]
    data = {"meta": {"page": 1}, "wrapper": {"items": big, "note": "x"}}
    cloned_ids: list[int] = []
    real_clone = limiter_module.clone_json

    def _spy(value, *args, **kwargs):
        cloned_ids.append(id(value))
        return real_clone(value, *args, **kwargs)

    monkeypatch.setattr(limiter_module, "clone_json", _spy)
    result = limiter.limit(data)

    assert id(big) not in cloned_ids
    assert not any(id(item) in cloned_ids for item in big[10:])
    assert result.limited == {"meta": {"page": 1}, "wrapper": {"items": big[:10], "note": "x"}}
    assert result.limited["meta"] is not data["meta"]
    assert result.limited["wrapper"] is not data["wrapper"]
