"""
Form fields for server-rendered HTML forms.

Each field renders its label, input element and error messages, and runs
its validators over the current value. Field instances carry per-request
state (value and errors) and must not be shared between requests.

Trust boundary: values, labels, names and extra attributes are inserted
into markup verbatim. Escape untrusted text (see formfields.html) before
it reaches a field.
"""

import logging
from typing import Iterable, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Union

from markupsafe import Markup

from .html import build_tag, join_attrs, markup
from .validators import Validator, ValidatorKind

logger = logging.getLogger(__name__)

ERROR_CLASS = 'help-block'


class Choice(NamedTuple):
    """An option of a select field."""

    value: str
    label: str


class BaseField:
    """
    State and behaviour shared by all field types.

    Subclasses only provide render_input().
    """

    input_type = ''
    error_class = ERROR_CLASS

    def __init__(self, name: str, label: str = '', value: str = '',
                 validators: Sequence[Validator] = ()):
        if not name:
            raise ValueError('Field name must not be empty')

        self._name = name
        self.label = label
        self.value = value
        self.validators = tuple(validators)
        self._errors: List[str] = []

    @property
    def name(self) -> str:
        return self._name

    def render_label(self, *attrs: str) -> Markup:
        """Render a <label> pointing at this field. attrs are appended raw."""
        return markup(f'<label for="{self.name}"{join_attrs(attrs)}>{self.label}</label>')

    def render_input(self, *attrs: str) -> Markup:
        raise NotImplementedError

    def render_errors(self) -> Markup:
        """Render each error message in its own <span>."""
        return markup(''.join(
            f'<span class="{self.error_class}">{error}</span>' for error in self._errors
        ))

    def render(self, *attrs: str) -> Markup:
        """
        Render label, input and errors, one per line.

        Args:
            *attrs: Raw attribute strings for the input element

        Returns:
            Markup fragment
        """
        parts = [self.render_label(), self.render_input(*attrs)]
        if self.has_errors():
            parts.append(self.render_errors())
        return markup('\n'.join(parts))

    def validate(self) -> bool:
        """
        Run the validator chain over the current value.

        A failing required-kind validator stops validation with just its
        message. Otherwise every validator runs in order and each failure
        adds its message. Errors from earlier calls are kept; call
        reset_errors() first to start from a clean slate.

        Returns:
            True if every validator passed
        """
        value = self.get_value()

        for validator in self.validators:
            if validator.kind is ValidatorKind.REQUIRED:
                ok, message = validator.clean_data(value)
                if not ok:
                    logger.debug('Field %r failed required check', self.name)
                    self._errors.append(message)
                    return False

        result = True
        for validator in self.validators:
            ok, message = validator.clean_data(value)
            if not ok:
                logger.debug('Field %r failed %s', self.name, type(validator).__name__)
                result = False
                self._errors.append(message)

        return result

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> str:
        return self.value

    def set_value(self, value: str) -> None:
        self.value = value

    def is_name(self, name: str) -> bool:
        return self.name == name

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    @property
    def errors(self) -> List[str]:
        """Accumulated error messages, oldest first."""
        return list(self._errors)

    def add_error(self, error: str) -> None:
        """Attach a message not produced by a validator, e.g. a cross-field check."""
        self._errors.append(error)

    def reset_errors(self) -> None:
        self._errors.clear()

    def __repr__(self) -> str:
        return f'{type(self).__name__}(name={self.name!r})'


class TextField(BaseField):
    """Single line <input type="text"> with the current value preset."""

    input_type = 'text'

    def render_input(self, *attrs: str) -> Markup:
        return markup(build_tag('input', {
            'type': self.input_type,
            'value': self.value,
            'name': self.name,
            'id': self.name,
        }, attrs))


class PasswordField(BaseField):
    """
    <input type="password">.

    The value is accepted and validated but never rendered back.
    """

    input_type = 'password'

    def __init__(self, name: str, label: str = '', validators: Sequence[Validator] = ()):
        super().__init__(name, label, '', validators)

    def render_input(self, *attrs: str) -> Markup:
        return markup(build_tag('input', {
            'type': self.input_type,
            'name': self.name,
            'id': self.name,
        }, attrs))


class TextArea(BaseField):
    """<textarea> with the value as element content."""

    def render_input(self, *attrs: str) -> Markup:
        open_tag = build_tag('textarea', {'id': self.name, 'name': self.name}, attrs)
        return markup(f'{open_tag}{self.value}</textarea>')


class SelectField(BaseField):
    """
    <select> over a fixed list of choices.

    Args:
        name: Field name, used for name and id attributes
        label: Label text
        choices: Choice instances or (value, label) pairs
        default: Initial value; the matching option renders selected
        validators: Validator chain

    Raises:
        ValueError: If a choice is not a (value, label) pair
    """

    def __init__(self, name: str, label: str,
                 choices: Iterable[Union[Choice, Tuple[str, str]]],
                 default: str = '', validators: Sequence[Validator] = ()):
        super().__init__(name, label, default, validators)
        self.choices = tuple(self._to_choice(choice) for choice in choices)

    @staticmethod
    def _to_choice(choice) -> Choice:
        if isinstance(choice, Choice):
            return choice
        if isinstance(choice, str):
            raise ValueError(f'Invalid choice: {choice!r} (expected (value, label))')
        try:
            value, label = choice
        except (TypeError, ValueError):
            raise ValueError(f'Invalid choice: {choice!r} (expected (value, label))') from None
        return Choice(value, label)

    def render_input(self, *attrs: str) -> Markup:
        options = []
        for choice in self.choices:
            selected = ' selected' if choice.value == self.value else ''
            options.append(f'<option value="{choice.value}"{selected}>{choice.label}</option>')

        open_tag = build_tag('select', {'id': self.name, 'name': self.name}, attrs)
        return markup(f'{open_tag}{"".join(options)}</select>')


class HiddenField(BaseField):
    """
    <input type="hidden">.

    Has no label by default; render() emits only the input.
    """

    input_type = 'hidden'

    def __init__(self, name: str, value: str = '', validators: Sequence[Validator] = ()):
        super().__init__(name, '', value, validators)

    def render_input(self, *attrs: str) -> Markup:
        return markup(build_tag('input', {
            'type': self.input_type,
            'value': self.value,
            'name': self.name,
            'id': self.name,
        }, attrs))

    def render(self, *attrs: str) -> Markup:
        return self.render_input(*attrs)


def find_field(fields: Iterable[BaseField], name: str) -> Optional[BaseField]:
    """Return the first field answering to name, or None."""
    for field in fields:
        if field.is_name(name):
            return field
    return None


def bind_values(fields: Iterable[BaseField], data: Mapping[str, str]) -> List[BaseField]:
    """
    Copy submitted values onto fields by name.

    Fields whose name is missing from data keep their current value.

    Args:
        fields: Fields to bind
        data: Submitted values keyed by field name

    Returns:
        The fields that received a value
    """
    bound = []
    for field in fields:
        if field.name in data:
            field.set_value(data[field.name])
            bound.append(field)

    logger.debug('Bound %d of submitted %d values', len(bound), len(data))
    return bound
