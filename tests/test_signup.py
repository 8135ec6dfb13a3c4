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

"""Tests for campaignkit.ngp.signup."""

import unittest

import mock

from campaignkit import exceptions
from campaignkit import invoker
from campaignkit import outcome
from campaignkit.ngp import signup

DATA = {
    'lastName': 'Doe',
    'firstName': 'John',
    'email': 'john.doe@gmail.com',
    'zip': '12345',
}


class TestParseSignup(unittest.TestCase):

    def test_bool(self):
        self.assertTrue(signup.parse_signup(True))
        self.assertFalse(signup.parse_signup(False))

    def test_text(self):
        self.assertTrue(signup.parse_signup('true'))
        self.assertFalse(signup.parse_signup('false'))

    def test_wrapped(self):
        reply = mock.Mock(spec=['EmailSignUpResult'])
        reply.EmailSignUpResult = True
        self.assertTrue(signup.parse_signup(reply).success)

    def test_unexpected(self):
        self.assertRaises(TypeError, signup.parse_signup, None)


class TestNgpSignUp(unittest.TestCase):

    def setUp(self):
        self.client = mock.Mock()
        self.service = self.client.service.EmailSignUp
        self.invoker = invoker.SoapInvoker('http://x/?wsdl',
                                           client=self.client)

    def test_requires_credentials(self):
        self.assertRaises(exceptions.ConfigurationError, signup.NgpSignUp,
                          None)

    def test_requires_wsdl(self):
        self.assertRaises(exceptions.ConfigurationError, signup.NgpSignUp,
                          'creds', wsdl='')

    def test_nothing_required_by_default(self):
        s = signup.NgpSignUp('creds', invoker=self.invoker)
        self.assertTrue(s.is_valid())

    def test_required_fields(self):
        s = signup.NgpSignUp('creds', data={'email': 'a@b.c'},
                             invoker=self.invoker)
        s.set_required_fields(['email', 'zip'])
        result = s.save()
        self.assertEqual(result.kind, outcome.Outcome.INVALID)
        self.assertEqual(s.get_errors(), ['zip is required'])
        self.service.assert_not_called()

    def test_save(self):
        self.service.return_value = True
        s = signup.NgpSignUp('creds', data=DATA, invoker=self.invoker)
        self.assertTrue(s.save())
        self.service.assert_called_once_with(credentials='creds', **DATA)
        self.assertIs(s.get_result(), True)

    def test_rejected(self):
        self.service.return_value = False
        s = signup.NgpSignUp('creds', data=DATA, invoker=self.invoker)
        result = s.save()
        self.assertFalse(result)
        self.assertEqual(result.kind, outcome.Outcome.RESULT)
        self.assertFalse(s.has_fault())
        self.assertFalse(s.has_errors())

    def test_fault(self):
        self.service.side_effect = OSError('unreachable')
        s = signup.NgpSignUp('creds', data=DATA, invoker=self.invoker)
        self.assertFalse(s.save())
        self.assertTrue(s.has_fault())
        self.assertIsNone(s.get_result())


if __name__ == '__main__':
    unittest.main()
