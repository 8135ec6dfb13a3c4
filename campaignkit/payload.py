# Copyright 2013-2015 Rackspace US, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Payload serializers.

Two formats are supported:

- XML documents with a fixed layout, driven by a :class:`fields.Schema`:

      <Root>
        <Section><Field>value</Field><Empty/>...</Section>
        ...
      </Root>

  (rendered without whitespace). Field order always follows the schema.

- URL-encoded form bodies (`key=value&key=value`).
"""

from urllib import parse
from xml.sax import saxutils

from campaignkit import fields


def text(value):
    """Render a field value as element text.

    Booleans become `true`/`false`, integral floats lose their decimal
    part and None becomes an empty string.
    """
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_flag_set(value):
    """Return True if a boolean flag field is on.

    Flags may arrive as real booleans or as already rendered text.
    """
    if isinstance(value, str):
        return value.strip().lower() not in ('', 'false', '0')
    return bool(value)


def element(tag, value):
    """Render one element; empty values render self-closing."""
    if not isinstance(value, bool) and fields.is_blank(value):
        return '<%s/>' % tag
    rendered = text(value)
    if rendered == '':
        return '<%s/>' % tag
    return '<%s>%s</%s>' % (tag, saxutils.escape(rendered), tag)


def render_section(section, values):
    """Render a :class:`fields.Section` with values from `values`."""
    parts = ['<%s>' % section.tag]
    for field in section:
        if field.only_if and not is_flag_set(values.get(field.only_if)):
            continue
        parts.append(element(field.name, values.get(field.name)))
    parts.append('</%s>' % section.tag)
    return ''.join(parts)


def to_xml(root, schema, values, trailing=None):
    """Serialize `values` into an XML document laid out by `schema`.

    :param root: tag of the document element
    :param schema: a :class:`fields.Schema`
    :param values: dict of field name to value
    :keyword trailing: iterable of already rendered XML fragments appended
        after the schema sections (ex. repeated info blocks)
    :returns: the XML document as a string
    """
    parts = ['<%s>' % root]
    for section in schema.sections:
        parts.append(render_section(section, values))
    parts.extend(trailing or [])
    parts.append('</%s>' % root)
    return ''.join(parts)


def to_form(params):
    """Serialize pairs into an URL-encoded form body.

    :param params: dict or iterable of (key, value) pairs; order is kept
    """
    if hasattr(params, 'items'):
        params = params.items()
    return '&'.join('%s=%s' % (parse.quote_plus(str(key)),
                               parse.quote_plus(text(value)))
                    for key, value in params)
