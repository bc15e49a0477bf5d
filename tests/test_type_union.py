"""
Tests for union (list) type declarations.

Covers short-circuiting, wording order and duplicates, and the difference
between type-name members and sub-schema members when collecting wordings.
"""

import itertools

import pytest

from schematype.constraints import TypeConstraint, UnknownTypeAtomError, ValidationOutcome
from schematype.errors import ErrorCollector


@pytest.mark.parametrize("members", list(itertools.permutations(["string", "null", "boolean"])))
def test_single_matching_member_in_any_position(constraint: TypeConstraint, errors: ErrorCollector, members):
    constraint.check(None, {"type": list(members)})
    assert errors.is_valid()


def test_no_matching_member(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check(1.5, {"type": ["integer", "string", "null"]})
    assert errors.errors[0].message == "Double value found, but an integer, a string or a null is required"


def test_duplicate_members_keep_duplicate_wordings(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check(5, {"type": ["string", "string"]})
    assert errors.errors[0].message == "Integer value found, but a string or a string is required"


def test_atom_wordings_collected_after_match(constraint: TypeConstraint):
    outcome = constraint.validate_types_array(5, ["integer", "string", "null"])
    assert outcome == ValidationOutcome(is_valid=True, wordings=("an integer", "a string", "a null"))


def test_subschema_wording_skipped_after_match(constraint: TypeConstraint):
    outcome = constraint.validate_types_array(5, ["integer", {"type": "string"}, "null"])
    assert outcome == ValidationOutcome(is_valid=True, wordings=("an integer", "a null"))


def test_subschema_wording_collected_before_match(constraint: TypeConstraint):
    outcome = constraint.validate_types_array(5, [{"type": "string"}, "integer"])
    assert outcome == ValidationOutcome(is_valid=True, wordings=("an object", "an integer"))


def test_subschema_member_words_as_object(constraint: TypeConstraint, errors: ErrorCollector):
    """A failing sub-schema member is worded "an object", not by its inner type."""
    constraint.check(5, {"type": [{"type": "string"}]})

    assert len(errors) == 1
    assert errors.errors[0].message == "Integer value found, but an object is required"


def test_subschema_member_can_match(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check("x", {"type": ["integer", {"type": "string"}]})
    assert errors.is_valid()


def test_subschema_errors_stay_isolated(constraint: TypeConstraint, errors: ErrorCollector):
    """Errors raised inside a sub-schema member never reach the outer sink."""
    constraint.check("x", {"type": [{"type": "integer"}, "string"]})
    assert errors.is_valid()


def test_nested_union_subschema(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check(None, {"type": [{"type": ["integer", "null"]}]})
    assert errors.is_valid()


def test_any_member_matches_without_wording(constraint: TypeConstraint):
    outcome = constraint.validate_types_array([1], ["string", "any"])
    assert outcome == ValidationOutcome(is_valid=True, wordings=("a string",))


def test_unknown_member_is_a_fault(constraint: TypeConstraint, errors: ErrorCollector):
    with pytest.raises(UnknownTypeAtomError):
        constraint.check(5, {"type": ["integer", "banana"]})
    assert errors.errors == []


def test_empty_union_is_invalid(constraint: TypeConstraint):
    assert constraint.validate_types_array(5, []) == ValidationOutcome(is_valid=False)


def test_object_and_array_members_follow_classification(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check({"a": 1}, {"type": ["array", "object"]})
    constraint.check([1], {"type": ["array", "object"]})
    constraint.check("x", {"type": ["array", "object"]})

    assert len(errors) == 1
    assert errors.errors[0].message == "String value found, but an array or an object is required"


def test_email_member_uses_string_wording(constraint: TypeConstraint, errors: ErrorCollector):
    constraint.check(5, {"type": ["email", "null"]})
    assert errors.errors[0].message == "Integer value found, but a string or a null is required"
