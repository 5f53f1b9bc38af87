"""Tests for query normalization."""

from payments.normalize_query import clean_query, normalize_query


def test_directive_prefix_is_stripped():
    assert clean_query({"$limit": 25, "status": "paid"}) == {
        "limit": 25,
        "status": "paid",
    }


def test_only_the_first_prefix_is_removed():
    assert clean_query({"$$weird": 1}) == {"$weird": 1}


def test_nested_mappings_and_lists_are_normalized():
    query = {
        "created": {"$gte": 1700000000, "lt": 1800000000},
        "$or": [{"$in": ["a", "b"]}, {"status": "open"}],
    }

    assert clean_query(query) == {
        "created": {"gte": 1700000000, "lt": 1800000000},
        "or": [{"in": ["a", "b"]}, {"status": "open"}],
    }


def test_scalars_pass_through():
    assert clean_query("paid") == "paid"
    assert clean_query(10) == 10
    assert clean_query(None) is None


def test_input_is_not_mutated():
    query = {"$limit": 5}
    clean_query(query)
    assert query == {"$limit": 5}


def test_normalize_query_reads_params_query():
    assert normalize_query({"query": {"$limit": 3}}) == {"limit": 3}
    assert normalize_query({}) == {}
    assert normalize_query(None) == {}
