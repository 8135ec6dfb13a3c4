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

"""Tests for campaignkit.ngp.volunteer."""

import unittest

import mock

from campaignkit import exceptions
from campaignkit import invoker
from campaignkit import outcome
from campaignkit.ngp import volunteer

CONTACT = {
    'FirstName': 'John',
    'LastName': 'Doe',
    'Email': 'john.doe@fakegmail.com',
    'Address1': '100 Elm Street',
    'Zip': '12345',
}


class TestNgpVolunteerSignUp(unittest.TestCase):

    def setUp(self):
        self.client = mock.Mock()
        self.service = self.client.service.VolunteerSignUp
        self.invoker = invoker.SoapInvoker('http://x/?wsdl',
                                           client=self.client)

    def signup(self, data=None, info=None):
        return volunteer.NgpVolunteerSignUp(
            'creds', info=info, data=CONTACT if data is None else data,
            invoker=self.invoker)

    def test_no_donation_fields(self):
        self.assertRaises(exceptions.UnknownFieldError, self.signup,
                          dict(CONTACT, MainType='I'))

    def test_required(self):
        v = self.signup({})
        result = v.save()
        self.assertEqual(result.kind, outcome.Outcome.INVALID)
        self.assertEqual(v.get_errors(), [
            'FirstName is required',
            'LastName is required',
            'Email is required',
            'Address1 is required',
            'Zip is required',
        ])
        self.service.assert_not_called()

    def test_volunteer_info_block(self):
        self.assertEqual(
            volunteer.volunteer_info(12, 'Weekends & nights'),
            '<VolunteerInfo><Code>12</Code>'
            '<Note>Weekends &amp; nights</Note></VolunteerInfo>')

    def test_generate_xml(self):
        v = self.signup(info={12: 'Phone bank'})
        v.add_volunteer_info(14, '')
        xml = v.generate_xml()
        self.assertTrue(xml.startswith(
            '<VolunteerSignUp><ContactInfo><LastName>Doe</LastName>'))
        self.assertTrue(xml.endswith(
            '<OptIn>false</OptIn></ContactInfo>'
            '<VolunteerInfo><Code>12</Code><Note>Phone bank</Note>'
            '</VolunteerInfo>'
            '<VolunteerInfo><Code>14</Code><Note></Note></VolunteerInfo>'
            '</VolunteerSignUp>'))

    def test_add_volunteer_info_replaces(self):
        v = self.signup(info={12: 'a'})
        v.add_volunteer_info(12, 'b')
        self.assertEqual(v.volunteer_info, {12: 'b'})

    def test_success(self):
        self.service.return_value = ('<VolunteerSignUp><successMsg>0'
                                     '</successMsg></VolunteerSignUp>')
        v = self.signup()
        self.assertTrue(v.save())
        self.service.assert_called_once_with(credentials='creds',
                                             data=v.generate_xml())

    def test_failure_message(self):
        self.service.return_value = ('<VolunteerSignUp><successMsg>-1'
                                     '</successMsg></VolunteerSignUp>')
        v = self.signup()
        result = v.save()
        self.assertFalse(result)
        self.assertEqual(result.status, '-1')
        self.assertEqual(result.kind, outcome.Outcome.RESULT)

    def test_fault(self):
        self.service.return_value = ''
        v = self.signup()
        self.assertFalse(v.save())
        self.assertTrue(v.has_fault())


if __name__ == '__main__':
    unittest.main()
