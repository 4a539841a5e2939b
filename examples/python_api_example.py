#!/usr/bin/env python3
"""
Example: Using formfields to render and validate a sign-up form
"""

from formfields import (
    PasswordField,
    SelectField,
    TextField,
    Email,
    Length,
    Required,
    bind_values,
    escape_attr,
)


def build_fields():
    """Fields for one request; validators could be shared module-wide."""
    return [
        TextField('email', 'Email', validators=[Required(), Email()]),
        PasswordField('password', 'Password', validators=[Required(), Length(min=8)]),
        PasswordField('confirm', 'Confirm password', validators=[Required()]),
        SelectField('plan', 'Plan', [('free', 'Free'), ('pro', 'Pro')], 'free'),
    ]


def handle_post(form_data):
    """Bind submitted values, validate, and render the form back."""
    fields = build_fields()
    bind_values(fields, form_data)

    valid = all([field.validate() for field in fields])

    password, confirm = fields[1], fields[2]
    if password.get_value() != confirm.get_value():
        confirm.add_error('Passwords do not match.')
        valid = False

    # Submitted text is echoed into value="..." unescaped, so escape it first
    for field in fields:
        field.set_value(escape_attr(field.get_value()))

    html = '\n'.join(field.render('class="form-control"') for field in fields)
    return valid, html


if __name__ == '__main__':
    ok, html = handle_post({
        'email': 'user@example',
        'password': 'secret',
        'confirm': 'secret!',
        'plan': 'pro',
    })
    print(f"Valid: {ok}")
    print(html)
