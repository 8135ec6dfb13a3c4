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

"""NGP email signups.

Usage:

    signup = NgpSignUp('credentials-string', data={
        'lastName': 'Doe',
        'firstName': 'John',
        'email': 'john.doe@gmail.com',
        'zip': '12345',
    })
    signup.set_required_fields(['email', 'zip'])
    if not signup.save():
        errors = signup.get_errors()
        fault = signup.get_fault()
"""

from campaignkit import client
from campaignkit import fields
from campaignkit import invoker as remote
from campaignkit import ngp
from campaignkit import outcome

OPERATION = 'EmailSignUp'

SCHEMA = fields.Schema('NgpSignUp', [
    fields.Section('EmailSignUp', [
        fields.Field('lastName'),
        fields.Field('firstName'),
        fields.Field('email'),
        fields.Field('zip'),
    ]),
])


def parse_signup(reply):
    """EmailSignUpResult is a plain boolean."""
    result = remote.unwrap(reply, 'EmailSignUpResult')
    if isinstance(result, str):
        result = result.strip().lower() == 'true'
    elif not isinstance(result, bool):
        raise TypeError("Unexpected EmailSignUpResult %r" % (result,))
    return outcome.BusinessResult(result, reply, success=result, raw=reply)


class NgpSignUp(client.Integration):

    """Add an email address to the NGP signup list.

    No fields are required until :meth:`set_required_fields` is called.
    """

    schema = SCHEMA

    def __init__(self, credentials, data=None, wsdl=ngp.CONTRIBUTION_WSDL,
                 timeout=None, invoker=None):
        client.require_settings('NgpSignUp', credentials=credentials,
                                wsdl=wsdl)
        super(NgpSignUp, self).__init__(data)
        self.credentials = credentials
        self.invoker = invoker or remote.SoapInvoker(wsdl, timeout=timeout)

    def save(self):
        """Submit the signup; the outcome is truthy if NGP accepted it."""
        return self._submit(self._send)

    def _send(self):
        arguments = dict(self.fields, credentials=self.credentials)
        return self.invoker.invoke(OPERATION, arguments, parse_signup)
