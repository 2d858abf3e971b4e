from agentdesk.utils.response_parsing import (
    convert_numeric_fields,
    parse_api_response,
    parse_stringified_json,
)


def test_stringified_objects_and_arrays_are_decoded():
    payload = {
        "address": '{"city": "Lagos", "geo": "[6.5, 3.3]"}',
        "tags": '["fragile", "express"]',
        "note": "leave at gate",
    }

    assert parse_stringified_json(payload) == {
        "address": {"city": "Lagos", "geo": [6.5, 3.3]},
        "tags": ["fragile", "express"],
        "note": "leave at gate",
    }


def test_undecodable_strings_are_kept():
    assert parse_stringified_json("{not json}") == "{not json}"
    assert parse_stringified_json('""') == '""'
    assert parse_stringified_json([1, None, True]) == [1, None, True]


def test_numeric_fields_are_converted_at_any_depth():
    payload = {
        "balance": "1500.75",
        "results": [{"amount": "200", "reference": "00123"}, {"amount": "n/a"}],
        "count": "3",
    }

    assert convert_numeric_fields(payload, ["balance", "amount"]) == {
        "balance": 1500.75,
        "results": [{"amount": 200, "reference": "00123"}, {"amount": "n/a"}],
        "count": "3",
    }


def test_non_finite_and_blank_values_are_not_numbers():
    payload = {"amount": "nan", "fee": "inf", "total": "  "}
    assert convert_numeric_fields(payload, ["amount", "fee", "total"]) == payload


def test_parse_api_response_combines_both_steps():
    payload = {"wallet": '{"balance": "10.5"}'}
    assert parse_api_response(payload, ["balance"]) == {"wallet": {"balance": 10.5}}
    assert parse_api_response(payload) == {"wallet": {"balance": "10.5"}}
