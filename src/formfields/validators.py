"""
Validators for formfields.

A validator inspects a field's string value and returns a (passed, message)
pair. Validators hold no mutable state, so one instance can be shared by
any number of fields and requests.
"""

import enum
import re
from typing import Optional, Pattern, Tuple, Union


class ValidatorKind(enum.Enum):
    """Tag used by fields to pick out validators with special handling."""

    REQUIRED = 'required'
    FORMAT = 'format'


class Validator:
    """
    Base class for validators.

    Subclasses implement clean_data(). A validator whose kind is
    ValidatorKind.REQUIRED short-circuits field validation when it fails.
    """

    kind = ValidatorKind.FORMAT
    default_message = 'Invalid value.'

    def __init__(self, message: Optional[str] = None):
        self.message = message if message is not None else self.default_message

    def clean_data(self, value: str) -> Tuple[bool, str]:
        """
        Check a value.

        Args:
            value: Current field value

        Returns:
            Tuple of (passed, message). The message is empty when passed.
        """
        raise NotImplementedError

    def __call__(self, value: str) -> Tuple[bool, str]:
        return self.clean_data(value)

    def _result(self, passed: bool) -> Tuple[bool, str]:
        return (True, '') if passed else (False, self.message)

    def __repr__(self) -> str:
        return f'{type(self).__name__}(message={self.message!r})'


class Required(Validator):
    """Fails when the value is empty after stripping surrounding whitespace."""

    kind = ValidatorKind.REQUIRED
    default_message = 'This field is required.'

    def clean_data(self, value: str) -> Tuple[bool, str]:
        return self._result(bool(value and value.strip()))


class Regexp(Validator):
    """Passes when the whole value matches a regular expression."""

    def __init__(self, pattern: Union[str, Pattern], flags: int = 0,
                 message: Optional[str] = None):
        super().__init__(message)
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        self.pattern = pattern

    def clean_data(self, value: str) -> Tuple[bool, str]:
        return self._result(self.pattern.fullmatch(value or '') is not None)


# Local part: alphanumeric runs joined by single '.', '_' or '-'.
# Domain: alphanumeric labels (inner hyphens allowed), at least one dot.
EMAIL_PATTERN = re.compile(
    r'[A-Za-z0-9]+(?:[._-][A-Za-z0-9]+)*'
    r'@'
    r'[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*'
    r'(?:\.[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*)+'
)


class Email(Regexp):
    """
    Practical email shape check.

    Not RFC 5322 complete. Values carrying markup such as
    '<script>alert(1);</script>@test.com' fail simply because they do not
    match the address grammar; this is not a sanitizer.
    """

    default_message = 'Invalid email address.'

    def __init__(self, message: Optional[str] = None):
        super().__init__(EMAIL_PATTERN, message=message)


class Length(Validator):
    """
    Checks the character count of a value.

    Args:
        min: Minimum length, or None for no lower bound
        max: Maximum length, or None for no upper bound
        message: Failure message; defaults to one describing the bounds

    Raises:
        ValueError: If neither bound is given or min exceeds max
    """

    def __init__(self, min: Optional[int] = None, max: Optional[int] = None,
                 message: Optional[str] = None):
        if min is None and max is None:
            raise ValueError('Length requires at least one of min or max')
        if min is not None and max is not None and min > max:
            raise ValueError(f'Invalid length bounds: min={min} > max={max}')

        self.min = min
        self.max = max

        if message is None:
            if max is None:
                message = f'Field must be at least {min} characters long.'
            elif min is None:
                message = f'Field cannot be longer than {max} characters.'
            else:
                message = f'Field must be between {min} and {max} characters long.'
        super().__init__(message)

    def clean_data(self, value: str) -> Tuple[bool, str]:
        length = len(value or '')
        if self.min is not None and length < self.min:
            return self._result(False)
        if self.max is not None and length > self.max:
            return self._result(False)
        return self._result(True)
