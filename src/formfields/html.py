"""
Markup helpers for formfields.

Field rendering inserts values and caller-supplied attributes verbatim.
Use escape_html() and escape_attr() on untrusted text before handing it
to a field.
"""

from typing import Dict, Iterable, Optional

from markupsafe import Markup


def join_attrs(attrs: Iterable[str]) -> str:
    """
    Join raw attribute strings for appending to an opening tag.

    Args:
        attrs: Attribute strings such as 'class="wide"' or 'required'

    Returns:
        Empty string, or the attributes prefixed by a single space
    """
    attrs = [attr for attr in attrs if attr]
    return ' ' + ' '.join(attrs) if attrs else ''


def build_tag(tag: str, attrs: Dict[str, Optional[str]], extra: Iterable[str] = ()) -> str:
    """
    Build an opening HTML tag.

    Attribute values are inserted as given, without escaping.

    Args:
        tag: Tag name
        attrs: Ordered attributes (value=None for boolean attributes)
        extra: Raw attribute strings appended after attrs

    Returns:
        Opening tag string
    """
    attr_parts = []
    for key, value in attrs.items():
        if value is None:
            # Boolean attribute
            attr_parts.append(key)
        else:
            attr_parts.append(f'{key}="{value}"')

    return f'<{tag}{join_attrs(attr_parts)}{join_attrs(extra)}>'


def markup(text: str) -> Markup:
    """Mark an assembled fragment as safe for template embedding."""
    return Markup(text)


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    if not text:
        return ''
    return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
            .replace("'", '&#x27;'))


def escape_attr(text: str) -> str:
    """Escape HTML attribute values."""
    if not text:
        return ''
    return (text
            .replace('&', '&amp;')
            .replace('"', '&quot;')
            .replace('<', '&lt;')
            .replace('>', '&gt;'))
