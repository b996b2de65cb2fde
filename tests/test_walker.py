from dataclasses import dataclass, field
from typing import Any

import pytest

from simplejrpc.gvalid.errors import RuleViolation, ValidationError, ValidationErrors
from simplejrpc.gvalid.field import FieldInfo, Validator
from simplejrpc.gvalid.rules import MinLengthValidator, RangeValidator, RequiredValidator
from simplejrpc.gvalid.visitor import ValidatorVisitor
from simplejrpc.gvalid.walker import StructWalker


class IntOnly(Validator):
    def validate(self, field: FieldInfo, value: Any) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise self.new_validation_error(field.name, "Please enter a numeric type").with_message()


def make_walker(tag_name: str = "validate") -> StructWalker:
    visitor = ValidatorVisitor()
    visitor.register_validator("required", RequiredValidator())
    visitor.register_validator("min_length", MinLengthValidator())
    visitor.register_validator("range", RangeValidator())
    return StructWalker(visitor, tag_name)


@dataclass
class User:
    username: str = field(default="", metadata={"validate": "min_length:6#The length is too small"})
    age: Any = field(default=None, metadata={"validate": "required#Age missing|range:18,100"})
    email: str = field(default="", metadata={"validate": "required#Email address is required"})


@dataclass
class Base:
    ident: str = field(default="", metadata={"validate": "required#ident missing"})


@dataclass
class Child(Base):
    label: str = field(default="", metadata={"validate": "required#label missing"})


def test_valid_object_passes():
    walker = make_walker()
    assert walker.walk(User("abcggg", 20.0, "user@example.com")) is None
    with pytest.raises(RuleViolation):
        walker.walk(User("abcggg", 20.0, ""))


def test_first_failing_field_is_reported():
    walker = make_walker()
    with pytest.raises(RuleViolation) as info:
        walker.walk(User("abc", None, ""))
    assert str(info.value) == "The length is too small"


def test_later_rule_on_field_is_reported():
    walker = make_walker()
    with pytest.raises(RuleViolation) as info:
        walker.walk(User("abcggg", 16.0, "user@example.com"))
    assert "18" in str(info.value) and "100" in str(info.value)


def test_non_dataclass_is_not_validated():
    walker = make_walker()
    assert walker.walk({"email": ""}) is None
    assert walker.walk(User) is None
    with pytest.raises(RuleViolation):
        walker.walk(User("abcggg", 20.0, ""))


def test_inherited_fields_come_first():
    walker = make_walker()
    with pytest.raises(RuleViolation) as info:
        walker.walk(Child())
    assert str(info.value) == "ident missing"
    with pytest.raises(RuleViolation) as info:
        walker.walk(Child(ident="x"))
    assert str(info.value) == "label missing"


def test_register_validator_extends_visitor():
    @dataclass
    class Example:
        age: Any = field(default=None, metadata={"myvalidate": "int#Test verification error return"})

    walker = make_walker("myvalidate")
    assert walker.walk(Example("123")) is None
    walker.register_validator("int", IntOnly())
    assert walker.walk(Example(12)) is None
    with pytest.raises(RuleViolation) as info:
        walker.walk(Example("123"))
    assert str(info.value) == "Test verification error return"


def test_other_tag_names_are_ignored():
    walker = make_walker("myvalidate")
    assert walker.walk(User("", None, "")) is None
    with pytest.raises(RuleViolation):
        make_walker().walk(User("", None, ""))


def test_field_info_passed_to_visitor():
    seen: list[FieldInfo] = []

    class Recording:
        def visit(self, info: FieldInfo) -> None:
            seen.append(info)

        def register_validator(self, tag, validator) -> None:
            pass

    user = User("abcggg", 20.0, "user@example.com")
    StructWalker(Recording(), "validate").walk(user)
    assert [info.name for info in seen] == ["username", "age", "email"]
    assert [info.value for info in seen] == ["abcggg", 20.0, "user@example.com"]
    assert all(info.parent is user and info.tag_name == "validate" for info in seen)
    assert seen[2].tags == {"validate": "required#Email address is required"}


def test_validation_errors_reduced_to_first():
    class Failing:
        def visit(self, info: FieldInfo) -> None:
            raise ValidationErrors([ValidationError("a", "x"), ValidationError("b", "y")])

        def register_validator(self, tag, validator) -> None:
            pass

    with pytest.raises(ValidationError) as info:
        StructWalker(Failing(), "validate").walk(User())
    assert info.value.field == "a"
    assert str(info.value) == "a: x"