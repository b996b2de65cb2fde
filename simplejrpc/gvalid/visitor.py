"""Applies the validation rules declared in a field's tag."""

from __future__ import annotations

from simplejrpc.gvalid.field import FieldInfo, Validator


class ValidatorVisitor:
    """Holds validators by rule name and applies them to fields.

    A rule string looks like ``"rule1:opt1,opt2|rule2#custom message|rule3"``.
    Rules run in order, and the first failure is raised. Rules without a
    registered validator are skipped.
    """

    def __init__(self) -> None:
        self.validators: dict[str, Validator] = {}

    def register_validator(self, tag: str, validator: Validator) -> None:
        """Use ``validator`` for rules named ``tag``."""
        self.validators[tag] = validator

    def visit(self, field: FieldInfo) -> None:
        """Run every rule in the field's tag; raise the first failure."""
        if not field.tag_name:
            return
        tag = field.tags.get(field.tag_name, "")
        if not tag:
            return

        for rule in tag.split("|"):
            custom_label = ""
            if "#" in rule:
                rule, custom_label = rule.split("#", 1)
            name, sep, raw_options = rule.partition(":")
            options = raw_options.split(",") if sep else []

            validator = self.validators.get(name)
            if validator is None:
                continue
            if custom_label:
                validator.use_message(custom_label)
            field.tag_options = options
            validator.validate(field, field.value)