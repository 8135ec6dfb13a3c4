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

"""Field schemas and validation for integration payloads.

Every integration declares its fields once, as an ordered :class:`Schema`
made of :class:`Section` objects. The schema supplies the default value of
each field, the order fields are serialized in, and the set of names a caller
is allowed to override.

Validation is a single pass over the required field list followed by a list
of format :class:`Rule` objects. Every violated rule is reported; the pass
never stops at the first problem.

Example:

    from campaignkit import fields

    schema = fields.Schema('Example', [
        fields.Section('ContactInfo', [
            fields.Field('FirstName'),
            fields.Field('Zip'),
        ]),
    ])
    values = schema.merge({'FirstName': 'John'})
    errors = fields.validate(values, ['FirstName', 'Zip'])
    # ['Zip is required']
"""

import logging

import voluptuous as volup

from campaignkit import exceptions

LOG = logging.getLogger(__name__)

RECURRING_PERIODS = ('MONT', 'WEEK', 'BIWK', 'FRWK', 'QTER', 'SMYR', 'YEAR')


def is_blank(value):
    """Return True if the value counts as empty for a required field.

    None, empty strings, zero-length collections and numeric zero are blank.
    The string "0" is text, not a number, so it is not blank.
    `False` is numeric zero too, so a required boolean must be true.
    """
    if value is None:
        return True
    if isinstance(value, (int, float)):
        return value == 0
    try:
        return len(value) == 0
    except TypeError:
        return False


def is_present(value):
    """Return True if the value is set at all (even to zero)."""
    return value is not None


def is_filled(value):
    """Return True if the value is set and not blank."""
    return not is_blank(value)


class Field(object):

    """A named slot in an integration payload.

    :param name: case sensitive field (and XML element) name
    :keyword default: value used when the caller does not supply one
    :keyword type: python type of the value; used to coerce text input
        such as command line arguments
    :keyword only_if: name of a boolean field; when set, this field is only
        serialized while that flag is true
    """

    def __init__(self, name, default='', type=str, only_if=None):
        self.name = name
        self.default = default
        self.type = type
        self.only_if = only_if

    def __repr__(self):
        """Show the field name and default."""
        return 'Field(%s, default=%r)' % (self.name, self.default)

    def coerce(self, text):
        """Convert a text value to this field's type."""
        if text is None or self.type is str:
            return text
        if self.type is bool:
            return str(text).strip().lower() in ('1', 'true', 'yes', 'on')
        if text == '':
            return None
        return self.type(text)


class Section(object):

    """An ordered group of fields rendered under one XML element."""

    def __init__(self, tag, fields):
        self.tag = tag
        self.fields = list(fields)

    def __iter__(self):
        return iter(self.fields)

    @property
    def names(self):
        """Field names in serialization order."""
        return [field.name for field in self.fields]


class Schema(object):

    """The fixed field layout of one integration.

    :param name: integration name, used in error messages
    :param sections: ordered list of :class:`Section`
    :keyword open: when true, callers may add fields that are not declared
        (they are kept after the declared fields)
    """

    def __init__(self, name, sections, open=False):
        self.name = name
        self.sections = list(sections)
        self.open = open
        self._fields = {}
        for section in self.sections:
            for field in section:
                self._fields[field.name] = field

    def __contains__(self, name):
        return name in self._fields

    def __getitem__(self, name):
        return self._fields[name]

    @property
    def names(self):
        """All declared field names in serialization order."""
        return [name for section in self.sections for name in section.names]

    def defaults(self):
        """Return a new dict of field defaults."""
        return {field.name: field.default
                for section in self.sections for field in section}

    def merge(self, data=None):
        """Merge caller values over the defaults.

        Caller values win. Unknown names raise
        :class:`~campaignkit.exceptions.UnknownFieldError` unless the schema
        is open.
        """
        values = self.defaults()
        for name, value in (data or {}).items():
            if name not in self._fields and not self.open:
                raise exceptions.UnknownFieldError(name, self.name)
            values[name] = value
        return values

    def coerce(self, data):
        """Coerce a dict of text values using the declared field types."""
        coerced = {}
        for name, value in data.items():
            if name in self._fields:
                coerced[name] = self._fields[name].coerce(value)
            else:
                coerced[name] = value
        return coerced


class Rule(object):

    """A format check for one field.

    :param field: name of the field to check
    :param validator: a voluptuous validator (anything `voluptuous.Schema`
        accepts)
    :param message: error text reported when the value is rejected
    :keyword when: predicate deciding if the value should be checked at all
        (defaults to :func:`is_filled`)
    """

    def __init__(self, field, validator, message, when=is_filled):
        self.field = field
        self.schema = volup.Schema(validator)
        self.message = message
        self.when = when

    def __repr__(self):
        return 'Rule(%s)' % self.field

    def check(self, fields):
        """Return the error message for `fields`, or None if it passes."""
        value = fields.get(self.field)
        if not self.when(value):
            return None
        try:
            self.schema(value)
        except volup.Invalid as exc:
            LOG.debug("%s rejected by %r: %s", self.field, self, exc)
            return self.message
        return None


def _whole_number(value):
    """Truncate a number (or numeric text) to an int."""
    try:
        return int(float(value))
    except OverflowError as exc:
        raise ValueError(str(exc))


def _number_text(value):
    """Render a value as text; integral floats lose their decimal part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


EXPIRATION_MONTH = Rule(
    'ExpMonth',
    volup.All(volup.Coerce(str), volup.Match(r'^(0[1-9]|1[012])$')),
    'Invalid Expiration Month. Must be a two-digit number 01-12.')

EXPIRATION_YEAR = Rule(
    'ExpYear',
    volup.All(volup.Coerce(str), volup.Match(r'^\d{2}$')),
    'Invalid Expiration Year. Must be a two-digit number 00-99.')

CYCLE = Rule(
    'Cycle',
    volup.All(volup.Coerce(_number_text), volup.Match(r'^(19|20)\d\d$')),
    'Invalid cycle. Must be four-digit year.')

RECURRING_PERIOD = Rule(
    'RecurringPeriod',
    volup.In(RECURRING_PERIODS),
    'Invalid recurring period. Must be one of: %s.'
    % ', '.join(RECURRING_PERIODS))

RECURRING_TERM = Rule(
    'RecurringTerm',
    volup.All(volup.Coerce(_whole_number), volup.Range(min=1, max=24)),
    'Invalid recurring term. Must be a number 1-24.')

AMOUNT = Rule(
    'Amount',
    volup.All(volup.Coerce(float), volup.Range(min=1.0)),
    'Invalid contribution amount. Must be greater than or equal to 1.',
    when=is_present)


def validate(fields, required, rules=()):
    """Validate a field set and return a list of error messages.

    :param fields: dict of field name to value
    :param required: iterable of field names that must not be blank
    :keyword rules: iterable of :class:`Rule` applied after the required
        checks, in order
    :returns: list of human readable messages; empty if the fields are valid
    """
    errors = []
    for name in required:
        if is_blank(fields.get(name)):
            errors.append("%s is required" % name)
    for rule in rules:
        message = rule.check(fields)
        if message:
            errors.append(message)
    return errors
