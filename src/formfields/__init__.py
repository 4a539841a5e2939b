"""
formfields - Form fields with validator chains for server-rendered HTML.

Licensed under the MIT License.

Usage:

    from formfields import TextField, PasswordField, Required, Email

    email = TextField('email', 'Email', validators=[Required(), Email()])
    password = PasswordField('password', 'Password', validators=[Required()])

    bind_values([email, password], request.form)
    if not email.validate():
        print(email.errors)

    html = email.render_label() + email.render_input('class="wide"') + email.render_errors()

Field values and extra attributes are inserted into markup unescaped.
Escape untrusted text with escape_html() / escape_attr() first.
"""

__version__ = "0.1.0"

from formfields.fields import (
    BaseField,
    Choice,
    HiddenField,
    PasswordField,
    SelectField,
    TextArea,
    TextField,
    bind_values,
    find_field,
)
from formfields.html import escape_attr, escape_html
from formfields.validators import Email, Length, Regexp, Required, Validator, ValidatorKind

__all__ = [
    # Fields
    'BaseField',
    'Choice',
    'HiddenField',
    'PasswordField',
    'SelectField',
    'TextArea',
    'TextField',
    'bind_values',
    'find_field',
    # Validators
    'Validator',
    'ValidatorKind',
    'Required',
    'Email',
    'Length',
    'Regexp',
    # Escaping
    'escape_html',
    'escape_attr',
]
