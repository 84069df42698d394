import pytest

from promptline.validator import (
    DefaultValidator,
    ValidationResult,
    Validator,
    incomplete_brackets,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(([[]]))", False),
        ("(([[]]", True),
        ("{[}]", True),
        ("{[]}{()}", False),
    ],
)
def test_incomplete_brackets(text, expected):
    assert incomplete_brackets(text) is expected


def test_unmatched_closing_is_ignored():
    assert incomplete_brackets(")]}") is False


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('echo "hello', ValidationResult.INCOMPLETE),
        ('echo "hello"', ValidationResult.COMPLETE),
        ("ls (", ValidationResult.INCOMPLETE),
        ("ls ()", ValidationResult.COMPLETE),
        ("", ValidationResult.COMPLETE),
    ],
)
def test_default_validator(text, expected):
    assert DefaultValidator().validate(text) is expected


def test_validator_is_abstract():
    with pytest.raises(TypeError):
        Validator()


class _ContinuationValidator(Validator):
    def __init__(self, fallback):
        self.fallback = fallback

    def validate(self, line):
        if line.endswith("\\"):
            return ValidationResult.INCOMPLETE
        return self.fallback.validate(line)


def test_custom_validator_delegating_to_default():
    fallback = DefaultValidator()
    validator = _ContinuationValidator(fallback)

    assert validator.validate("ls \\") is ValidationResult.INCOMPLETE
    assert fallback.validate("ls \\") is ValidationResult.COMPLETE
    assert validator.validate("ls (") is ValidationResult.INCOMPLETE
    assert validator.validate("ls ()") is ValidationResult.COMPLETE