"""
Tests for validators.
"""

import re

import pytest
from formfields.validators import (
    Email,
    Length,
    Regexp,
    Required,
    Validator,
    ValidatorKind,
)


EMAIL_CASES = [
    ('username@example.com', True),
    ('aa.bb@example.com', True),
    ('aa_bb@example.com', True),
    ('aa-bb@example.com', True),
    ('aa123@example.com', True),
    ('AabB@example.com', True),
    ('Aa123.bb123@example.edu.cn', True),
    ('a@example.com', True),
    ('aa@example', False),
    ('<script>alert(1);</script>@test.com', False),
    ('aabbcc', False),
    ('aa@.com', False),
    ('aa.@xx.com', False),
    ('aa@', False),
    ('aa@bb@.example.com', False),
]


class TestRequired:
    """Test the required validator."""

    def test_kind(self):
        assert Required().kind is ValidatorKind.REQUIRED

    @pytest.mark.parametrize('value', ['', ' ', '\t\n', '   '])
    def test_rejects_blank(self, value):
        ok, message = Required().clean_data(value)
        assert not ok
        assert message == 'This field is required.'

    @pytest.mark.parametrize('value', ['x', ' x ', '0'])
    def test_accepts_non_blank(self, value):
        assert Required().clean_data(value) == (True, '')

    def test_custom_message(self):
        ok, message = Required(message='Name is required').clean_data('')
        assert message == 'Name is required'


class TestEmail:
    """Test the email format validator."""

    @pytest.mark.parametrize('email,expected', EMAIL_CASES)
    def test_clean_data(self, email, expected):
        ok, _ = Email().clean_data(email)
        assert ok == expected

    def test_message(self):
        assert Email().clean_data('aabbcc') == (False, 'Invalid email address.')

    def test_kind(self):
        assert Email().kind is ValidatorKind.FORMAT

    def test_shared_instance(self):
        email = Email()
        assert email('a@example.com') == (True, '')
        assert email('aa@') == (False, 'Invalid email address.')
        assert email('a@example.com') == (True, '')


class TestLength:
    """Test the length validator."""

    def test_min(self):
        length = Length(min=3)
        assert length.clean_data('abc') == (True, '')
        assert length.clean_data('ab') == (False, 'Field must be at least 3 characters long.')

    def test_max(self):
        length = Length(max=5)
        assert length.clean_data('abcde')[0]
        assert length.clean_data('abcdef') == (False, 'Field cannot be longer than 5 characters.')

    def test_range(self):
        length = Length(min=2, max=4)
        assert not length.clean_data('a')[0]
        assert length.clean_data('abc')[0]
        assert length.clean_data('abcde')[1] == 'Field must be between 2 and 4 characters long.'

    def test_requires_bound(self):
        with pytest.raises(ValueError, match='at least one'):
            Length()

    def test_invalid_bounds(self):
        with pytest.raises(ValueError, match='Invalid length bounds'):
            Length(min=5, max=2)


class TestRegexp:
    """Test the regular expression validator."""

    def test_full_match(self):
        digits = Regexp(r'\d+', message='Digits only')
        assert digits.clean_data('123') == (True, '')
        assert digits.clean_data('123a') == (False, 'Digits only')

    def test_compiled_pattern(self):
        word = Regexp(re.compile('[a-z]+', re.IGNORECASE))
        assert word.clean_data('Hello')[0]

    def test_flags(self):
        assert Regexp('[a-z]+', flags=re.IGNORECASE).clean_data('ABC')[0]


class TestCustomValidator:
    """Test that subclasses plug into the same contract."""

    def test_subclass(self):
        class NotAdmin(Validator):
            default_message = 'Reserved name.'

            def clean_data(self, value):
                return self._result(value != 'admin')

        validator = NotAdmin()
        assert validator.kind is ValidatorKind.FORMAT
        assert validator.clean_data('admin') == (False, 'Reserved name.')
        assert validator.clean_data('bob') == (True, '')

    def test_base_not_implemented(self):
        with pytest.raises(NotImplementedError):
            Validator().clean_data('x')
