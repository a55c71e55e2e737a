"""ScoringField: weight shares, absent values, required validators, set_weight."""

from decimal import Decimal
from fractions import Fraction

import pytest

from quality_score import ScoringField, WeightTypeError


def test_required_field_invalid_when_value_absent():
    """Field-level required: None -> score 0, not-defined message, valid=False."""
    expected = {"score": 0, "messages": ["Field Test is not defined."], "valid": False}
    field = ScoringField("Test", 1, True)

    assert field.score(None) == expected


def test_optional_field_valid_when_value_absent():
    expected = {"score": 0, "messages": ["Field Test is not defined."], "valid": True}
    field = ScoringField("Test", 1, False)

    assert field.score(None) == expected


def test_absent_value_skips_validators():
    """Validators are not called for an absent value."""
    calls = []
    field = ScoringField("Test").validator(lambda v: calls.append(v) or True, "never")

    result = field.score(None)
    assert calls == []
    assert result["messages"] == ["Field Test is not defined."]


@pytest.mark.parametrize("value", [0, False, "", [], {}])
def test_falsy_values_count_as_present(value):
    field = ScoringField("Test", 2).validator(lambda v: False, "failed")

    result = field.score(value)
    assert result == {"score": 1, "messages": ["failed"], "valid": True}


def test_failed_required_validator_invalidates_field():
    expected = {"score": 0, "messages": ["Validator Failed"], "valid": False}
    field = ScoringField("Test")
    field.validator(lambda value: False, "Validator Failed", True)

    assert field.score("abcd") == expected


def test_failed_required_validator_zeroes_other_passes():
    """Passing validators still count for nothing once a required one fails; only failing messages kept."""
    field = (
        ScoringField("Test", 4)
        .validator(lambda v: True, "should not appear")
        .validator(lambda v: False, "required failed", True)
        .validator(lambda v: False, "optional failed")
    )

    result = field.score("abcd")
    assert result == {"score": 0, "messages": ["required failed", "optional failed"], "valid": False}


def test_all_validators_pass_scores_full_weight():
    expected = {"score": 1, "messages": [], "valid": True}
    field = ScoringField("Test")
    field.validator(lambda value: True, "Validator should pass", True)

    assert field.score("abcd") == expected


def test_two_thirds_when_half_of_validators_pass():
    """Weight 3 with two validators: presence share + one passing share = 2."""
    expected = {"score": 2, "messages": ["Validator should fail"], "valid": True}
    field = ScoringField("Test", 3)
    field.validator(lambda value: True, "Validator should pass")
    field.validator(lambda value: False, "Validator should fail")

    assert field.score("abcd") == expected


@pytest.mark.parametrize("weight,count", [(1, 2), (0.7, 5), (10, 6), (1.1, 9)])
def test_full_pass_scores_exact_weight(weight, count):
    field = ScoringField("Test", weight)
    for _ in range(count):
        field.validator(lambda v: True, "pass")

    assert field.score("x")["score"] == weight


def test_full_fail_without_required_scores_presence_share():
    field = ScoringField("Test", 8)
    for _ in range(3):
        field.validator(lambda v: False, "fail")

    result = field.score("x")
    assert result["score"] == 2
    assert result["messages"] == ["fail", "fail", "fail"]
    assert result["valid"] is True


def test_no_message_on_failure_adds_nothing():
    field = ScoringField("Test", 2).validator(lambda v: False)

    assert field.score("x") == {"score": 1, "messages": [], "valid": True}


def test_messages_follow_declaration_order():
    field = ScoringField("Test")
    for msg in ["first", "second", "third"]:
        field.validator(lambda v: False, msg)

    assert field.score(1)["messages"] == ["first", "second", "third"]


def test_predicate_result_is_coerced_to_bool():
    field = ScoringField("Test", 3).validator(lambda v: "truthy").validator(lambda v: 0, "zero")

    assert field.score("x") == {"score": 2, "messages": ["zero"], "valid": True}


def test_zero_weight_scores_zero_but_reports_messages():
    field = ScoringField("Test", 0).validator(lambda v: True).validator(lambda v: False, "fail")

    assert field.score("x") == {"score": 0, "messages": ["fail"], "valid": True}


def test_predicate_receives_the_value():
    seen = []
    field = ScoringField("Test").validator(lambda v: seen.append(v) or True)

    field.score({"nested": 1})
    assert seen == [{"nested": 1}]


def test_predicate_errors_propagate():
    def boom(value):
        raise RuntimeError("predicate failed")

    field = ScoringField("Test").validator(boom, "boom")
    with pytest.raises(RuntimeError):
        field.score("x")


def test_validator_and_set_weight_are_chainable():
    field = ScoringField("Test")
    assert field.validator(lambda v: True, "m") is field
    assert field.set_weight(5) is field
    assert len(field.validators) == 1


def test_set_weight_modifies_weight():
    field = ScoringField("Test")

    assert field.weight == 1
    field.set_weight(2)
    assert field.weight == 2
    field.set_weight(1.5)
    assert field.weight == 1.5


@pytest.mark.parametrize("bad", ["string", None, True, [1], {"w": 1}])
def test_set_weight_rejects_non_numeric(bad):
    field = ScoringField("Test", 4)

    with pytest.raises(TypeError):
        field.set_weight(bad)
    assert field.weight == 4


def test_weight_type_error_is_type_error():
    with pytest.raises(WeightTypeError) as exc_info:
        ScoringField("Test").set_weight("abc")
    assert isinstance(exc_info.value, TypeError)
    assert "abc" in str(exc_info.value)


def test_constructor_rejects_non_numeric_weight():
    with pytest.raises(WeightTypeError):
        ScoringField("Test", "heavy")


def test_decimal_weight_is_accepted():
    field = ScoringField("Test").set_weight(Decimal("1.5"))
    field.validator(lambda v: False, "fail").validator(lambda v: True)

    assert field.weight == Decimal("1.5")
    assert field.score("x")["score"] == Decimal("1.0")
    assert ScoringField("Test", Decimal("2")).score("x")["score"] == Decimal("2")


def test_fraction_weight_keeps_exact_shares():
    field = ScoringField("Test", Fraction(1, 1)).validator(lambda v: False).validator(lambda v: True)

    assert field.score("x")["score"] == Fraction(2, 3)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")])
def test_non_finite_weight_rejected(bad):
    field = ScoringField("Test", 4)

    with pytest.raises(WeightTypeError) as exc_info:
        field.set_weight(bad)
    assert "finite" in str(exc_info.value)
    assert field.weight == 4
    with pytest.raises(WeightTypeError):
        ScoringField("Test", bad)
