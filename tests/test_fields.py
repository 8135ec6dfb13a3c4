# pylint: disable=C0103,C0111,R0904

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

"""Tests for campaignkit.fields."""

import unittest

from campaignkit import exceptions
from campaignkit import fields

MONTH_ERROR = 'Invalid Expiration Month. Must be a two-digit number 01-12.'
YEAR_ERROR = 'Invalid Expiration Year. Must be a two-digit number 00-99.'
CYCLE_ERROR = 'Invalid cycle. Must be four-digit year.'
AMOUNT_ERROR = ('Invalid contribution amount. Must be greater than or equal '
                'to 1.')
TERM_ERROR = 'Invalid recurring term. Must be a number 1-24.'
PERIOD_ERROR = ('Invalid recurring period. Must be one of: MONT, WEEK, BIWK, '
                'FRWK, QTER, SMYR, YEAR.')

ALL_RULES = (
    fields.RECURRING_PERIOD,
    fields.RECURRING_TERM,
    fields.EXPIRATION_MONTH,
    fields.EXPIRATION_YEAR,
    fields.CYCLE,
    fields.AMOUNT,
)


class TestBlank(unittest.TestCase):

    def test_blank_values(self):
        for value in (None, '', [], {}, 0, 0.0, False):
            self.assertTrue(fields.is_blank(value), value)

    def test_filled_values(self):
        for value in ('0', 'x', [0], 1, 0.5, True):
            self.assertFalse(fields.is_blank(value), value)

    def test_present(self):
        self.assertTrue(fields.is_present(0))
        self.assertFalse(fields.is_present(None))


class TestField(unittest.TestCase):

    def test_coerce_str(self):
        self.assertEqual(fields.Field('Zip').coerce('02139'), '02139')

    def test_coerce_int(self):
        field = fields.Field('Cycle', default=None, type=int)
        self.assertEqual(field.coerce('2012'), 2012)
        self.assertIsNone(field.coerce(''))

    def test_coerce_bool(self):
        field = fields.Field('OptIn', default=False, type=bool)
        self.assertTrue(field.coerce('true'))
        self.assertTrue(field.coerce('1'))
        self.assertFalse(field.coerce('false'))
        self.assertFalse(field.coerce('no'))


class TestSchema(unittest.TestCase):

    def setUp(self):
        self.schema = fields.Schema('Test', [
            fields.Section('A', [fields.Field('One'),
                                 fields.Field('Two', default=2, type=int)]),
            fields.Section('B', [fields.Field('Three', default=None)]),
        ])

    def test_names_in_order(self):
        self.assertEqual(self.schema.names, ['One', 'Two', 'Three'])
        self.assertEqual(self.schema.sections[0].names, ['One', 'Two'])

    def test_defaults(self):
        self.assertEqual(self.schema.defaults(),
                         {'One': '', 'Two': 2, 'Three': None})

    def test_merge_overrides(self):
        merged = self.schema.merge({'Two': 5})
        self.assertEqual(merged, {'One': '', 'Two': 5, 'Three': None})

    def test_merge_does_not_share_state(self):
        self.schema.merge({'One': 'x'})
        self.assertEqual(self.schema.merge()['One'], '')

    def test_merge_unknown(self):
        with self.assertRaises(exceptions.UnknownFieldError) as ctx:
            self.schema.merge({'Four': 4})
        self.assertEqual(ctx.exception.field, 'Four')
        self.assertIn('Test', str(ctx.exception))

    def test_unknown_field_is_key_error(self):
        self.assertRaises(KeyError, self.schema.merge, {'Four': 4})

    def test_merge_open(self):
        schema = fields.Schema('Open', self.schema.sections, open=True)
        self.assertEqual(schema.merge({'Four': 4})['Four'], 4)

    def test_coerce(self):
        self.assertEqual(self.schema.coerce({'Two': '7', 'Other': 'x'}),
                         {'Two': 7, 'Other': 'x'})

    def test_contains(self):
        self.assertIn('Three', self.schema)
        self.assertNotIn('Four', self.schema)
        self.assertEqual(self.schema['Two'].default, 2)


class TestValidate(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(fields.validate({'Zip': '12345'}, ['Zip']), [])

    def test_required(self):
        values = {'FirstName': '', 'LastName': None, 'Amount': 0,
                  'Zip': '0'}
        self.assertEqual(
            fields.validate(values, ['FirstName', 'LastName', 'Email',
                                     'Amount', 'Zip']),
            ['FirstName is required', 'LastName is required',
             'Email is required', 'Amount is required'])

    def test_expiration_month(self):
        for month in ('01', '09', '10', '12'):
            self.assertEqual(
                fields.validate({'ExpMonth': month}, [],
                                [fields.EXPIRATION_MONTH]), [], month)
        for month in ('00', '13', '1', 'ab', '012'):
            self.assertEqual(
                fields.validate({'ExpMonth': month}, [],
                                [fields.EXPIRATION_MONTH]),
                [MONTH_ERROR], month)

    def test_expiration_year(self):
        self.assertEqual(fields.validate({'ExpYear': '00'}, [],
                                         [fields.EXPIRATION_YEAR]), [])
        self.assertEqual(fields.validate({'ExpYear': '2013'}, [],
                                         [fields.EXPIRATION_YEAR]),
                         [YEAR_ERROR])

    def test_cycle(self):
        self.assertEqual(fields.validate({'Cycle': 2012}, [],
                                         [fields.CYCLE]), [])
        self.assertEqual(fields.validate({'Cycle': '1999'}, [],
                                         [fields.CYCLE]), [])
        for cycle in (1899, '12', 2112):
            self.assertEqual(fields.validate({'Cycle': cycle}, [],
                                             [fields.CYCLE]),
                             [CYCLE_ERROR], cycle)

    def test_amount(self):
        self.assertEqual(fields.validate({'Amount': 1.0}, [],
                                         [fields.AMOUNT]), [])
        self.assertEqual(fields.validate({'Amount': '25.50'}, [],
                                         [fields.AMOUNT]), [])
        self.assertEqual(fields.validate({'Amount': 0.99}, [],
                                         [fields.AMOUNT]), [AMOUNT_ERROR])
        self.assertEqual(fields.validate({'Amount': 'ten'}, [],
                                         [fields.AMOUNT]), [AMOUNT_ERROR])

    def test_amount_skipped_when_missing(self):
        self.assertEqual(fields.validate({'Amount': None}, [],
                                         [fields.AMOUNT]), [])

    def test_zero_amount_reports_both(self):
        self.assertEqual(fields.validate({'Amount': 0.0}, ['Amount'],
                                         [fields.AMOUNT]),
                         ['Amount is required', AMOUNT_ERROR])

    def test_recurring(self):
        self.assertEqual(
            fields.validate({'RecurringPeriod': 'WEEK',
                             'RecurringTerm': 24}, [],
                            [fields.RECURRING_PERIOD,
                             fields.RECURRING_TERM]), [])
        self.assertEqual(
            fields.validate({'RecurringPeriod': 'DAILY',
                             'RecurringTerm': 25}, [],
                            [fields.RECURRING_PERIOD,
                             fields.RECURRING_TERM]),
            [PERIOD_ERROR, TERM_ERROR])

    def test_recurring_term_out_of_float_range(self):
        for term in ('inf', '1e400', float('inf'), 'nan'):
            self.assertEqual(
                fields.validate({'RecurringTerm': term}, [],
                                [fields.RECURRING_TERM]),
                [TERM_ERROR], term)

    def test_cycle_integral_float(self):
        self.assertEqual(fields.validate({'Cycle': 2012.0}, [],
                                         [fields.CYCLE]), [])
        self.assertEqual(fields.validate({'Cycle': 2012.5}, [],
                                         [fields.CYCLE]), [CYCLE_ERROR])

    def test_zero_text_is_filled(self):
        self.assertEqual(fields.validate({'Zip': '0'}, ['Zip']), [])

    def test_blank_values_skip_format_rules(self):
        values = {'RecurringPeriod': '', 'RecurringTerm': None,
                  'ExpMonth': None, 'ExpYear': '', 'Cycle': None,
                  'Amount': None}
        self.assertEqual(fields.validate(values, [], ALL_RULES), [])

    def test_accumulates_in_order(self):
        values = {'RecurringPeriod': 'X', 'RecurringTerm': 0.5,
                  'ExpMonth': '13', 'ExpYear': '1', 'Cycle': '12',
                  'Amount': 0.5}
        self.assertEqual(fields.validate(values, ['Zip'], ALL_RULES), [
            'Zip is required',
            PERIOD_ERROR,
            TERM_ERROR,
            MONTH_ERROR,
            YEAR_ERROR,
            CYCLE_ERROR,
            AMOUNT_ERROR,
        ])


if __name__ == '__main__':
    unittest.main()
