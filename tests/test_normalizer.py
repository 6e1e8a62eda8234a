import logging

import pytest

from recordtable.errors import ConfigurationError
from recordtable.normalizers import ColumnMapping, ColumnNormalizer, SchemaPolicy, normalize


def test_every_row_has_attributes_plus_id(project_records, project_columns):
    headers, keys = project_columns
    rows = normalize(["code", "title"], ["code", "title"], project_records)
    assert all(set(r) == {"code", "title", "id"} for r in rows)

    # "Id" is a distinct attribute from the pass-through "id"
    rows = normalize(headers, keys, project_records)
    assert all(set(r) == set(headers) | {"id"} for r in rows)
    assert rows[0]["Proyecto"] == "BH-L1056"
    assert rows[0]["Id"] == 6873 and rows[0]["id"] == 6873


def test_row_order_preserved(project_records):
    rows = normalize(["code"], ["code"], project_records)
    assert [r["code"] for r in rows] == ["BH-L1056", "BH-L1057"]
    assert [r["id"] for r in rows] == [6873, 6874]


def test_length_mismatch_fails():
    with pytest.raises(ConfigurationError, match="length mismatch"):
        normalize(["a", "b"], ["x"], [{"x": 1}])


def test_length_mismatch_fails_even_without_records():
    with pytest.raises(ConfigurationError):
        normalize(["a", "b"], ["x"], [])


def test_unknown_filter_key_fails():
    with pytest.raises(ConfigurationError, match="unknown filter key") as exc:
        normalize(["a"], ["nonexistent"], [{"a": 1}])
    assert exc.value.key == "nonexistent"
    assert "nonexistent" in str(exc.value)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        normalize(["a"], ["nope"], [{"a": 1}])


def test_empty_records_skip_key_validation():
    assert normalize(["a", "b"], ["nope", "missing"], []) == []


def test_end_to_end_example_normalize():
    records = [{"code": "B", "title": "Z", "id": 1}, {"code": "A", "title": "Y", "id": 2}]
    rows = normalize(["code", "title"], ["code", "title"], records)
    assert rows == [{"code": "B", "title": "Z", "id": 1}, {"code": "A", "title": "Y", "id": 2}]


def test_missing_value_on_later_record_is_none():
    # only the first record is the schema; later records may lack a key
    records = [{"a": 1, "b": 2, "id": 1}, {"a": 3, "id": 2}]
    rows = normalize(["A", "B"], ["a", "b"], records)
    assert rows[1] == {"A": 3, "B": None, "id": 2}


def test_first_record_policy_rejects_key_only_on_later_record():
    records = [{"a": 1}, {"a": 2, "b": 3}]
    with pytest.raises(ConfigurationError):
        normalize(["B"], ["b"], records)


def test_union_policy_accepts_key_on_any_record():
    records = [{"a": 1}, {"a": 2, "b": 3}]
    rows = normalize(["B"], ["b"], records, schema_policy=SchemaPolicy.UNION)
    assert [r["B"] for r in rows] == [None, 3]


def test_explicit_schema_overrides_records():
    records = [{"a": 1}]
    rows = normalize(["B"], ["b"], records, schema_keys=["a", "b"])
    assert rows == [{"B": None, "id": 0}]
    with pytest.raises(ConfigurationError):
        normalize(["A"], ["a"], records, schema_keys=["b"])


def test_zero_columns_yield_id_only_rows():
    rows = normalize([], [], [{"id": 7, "x": 1}, {"x": 2}])
    assert rows == [{"id": 7}, {"id": 1}]


def test_missing_id_falls_back_to_position():
    rows = normalize(["x"], ["x"], [{"x": "a"}, {"x": "b"}])
    assert [r["id"] for r in rows] == [0, 1]


def test_id_attribute_takes_mapped_value():
    rows = normalize(["id"], ["code"], [{"code": "C1", "id": 99}])
    assert rows == [{"id": "C1"}]


def test_duplicate_attribute_last_write_wins():
    rows = normalize(["a", "a"], ["x", "y"], [{"x": 1, "y": 2, "id": 1}])
    assert rows == [{"a": 2, "id": 1}]


def test_duplicate_filter_key_feeds_several_attributes():
    rows = normalize(["a", "b"], ["x", "x"], [{"x": 5, "id": 1}])
    assert rows == [{"a": 5, "b": 5, "id": 1}]


def test_duplicate_ids_are_logged(caplog):
    normalize(["x"], ["x"], [{"x": 1, "id": 1}, {"x": 2, "id": 1}])
    assert "duplicate row ids" in caplog.text


def test_input_records_untouched(project_records):
    before = [dict(r) for r in project_records]
    rows = normalize(["code"], ["code"], project_records)
    rows[0]["code"] = "changed"
    assert project_records == before


def test_column_mapping_from_pairs():
    m = ColumnMapping.from_pairs({"Code": "code", "Title": "title"})
    assert m.attributes == ("Code", "Title")
    assert m.filter_keys == ("code", "title")
    assert m.pairs() == [("Code", "code"), ("Title", "title")]


def test_column_mapping_checks_lengths():
    with pytest.raises(ConfigurationError):
        ColumnMapping(attributes=["a"], filter_keys=[])


def test_normalizer_class_matches_function(project_records):
    m = ColumnMapping(attributes=["code"], filter_keys=["code"])
    assert ColumnNormalizer().normalize(m, project_records) == normalize(["code"], ["code"], project_records)


def test_length_mismatch_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(ConfigurationError):
            normalize(["a", "b"], ["x"], [{"x": 1}])
    assert "length mismatch" in caplog.text
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_unknown_filter_key_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        with pytest.raises(ConfigurationError):
            normalize(["a"], ["nonexistent"], [{"a": 1}])
    assert "unknown filter key" in caplog.text
    assert "nonexistent" in caplog.text
    assert any(r.levelno == logging.WARNING for r in caplog.records)
