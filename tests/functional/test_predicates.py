from mimic.functional.predicates import contains, false, falsy, true, truthy


def test_contains_loose_by_default():
    assert contains([1, 2, 3], 2)
    assert contains([1, 2, 3], "2")
    assert contains(["10", "20"], 10.0)
    assert not contains([1, 2, 3], 4)
    assert not contains([], 1)


def test_contains_strict():
    assert contains([1, 2, 3], 2, strict=True)
    assert not contains([1, 2, 3], "2", strict=True)
    assert not contains([1, 2, 3], 2.0, strict=True)
    assert not contains([0, ""], False, strict=True)


def test_contains_searches_mapping_values():
    holdings = {"AAPL": 10, "MSFT": 0}
    assert contains(holdings, 10)
    assert not contains(holdings, "AAPL")


def test_contains_stops_on_generators():
    values = iter([1, 2, 3, 4])
    assert contains(values, 2)
    assert next(values) == 3


def test_true_and_false_look_for_identical_element():
    assert true([True, False])
    assert true([0, "x", True])
    assert not true([1, "yes"])
    assert false([True, False])
    assert not false([0, "", None])


def test_truthy_and_falsy_look_for_matching_element():
    assert truthy([0, "", "a"])
    assert not truthy([0, "", None, []])
    assert falsy([1, "a", 0])
    assert not falsy([1, "a", [0], True])


def test_truth_predicates_on_empty_collection():
    assert not true([])
    assert not false([])
    assert not truthy([])
    assert not falsy([])


def test_truth_predicates_on_mappings():
    assert truthy({"a": 0, "b": "yes"})
    assert falsy({"a": 1, "b": None})
    assert not true({"a": 1})
