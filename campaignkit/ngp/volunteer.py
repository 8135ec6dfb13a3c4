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

"""NGP volunteer signups.

Volunteer codes are numeric ids configured in NGP; each one may carry a
free text note.

Usage:

    v = NgpVolunteerSignUp(
        'credentials',
        info={12: 'Can phone bank on weekends'},
        data={
            'FirstName': 'John',
            'LastName': 'Doe',
            'Email': 'john.doe@fakegmail.com',
            'Address1': '100 Elm Street',
            'Zip': '12345',
        })
    if v.save():
        pass
    elif v.has_errors():
        errors = v.get_errors()  # show to user
    elif v.has_fault():
        fault = v.get_fault()  # log for review
    else:
        result = v.get_result()  # log for review
"""

from xml.sax import saxutils

from campaignkit import client
from campaignkit import fields
from campaignkit import invoker as remote
from campaignkit import ngp
from campaignkit import outcome
from campaignkit import payload

OPERATION = 'VolunteerSignUp'
SUCCESS = '0'

SCHEMA = fields.Schema('NgpVolunteerSignUp', [
    fields.Section('ContactInfo', ngp.contact_fields()),
])


def volunteer_info(code, note):
    """Render one VolunteerInfo block."""
    return ('<VolunteerInfo><Code>%s</Code><Note>%s</Note></VolunteerInfo>'
            % (saxutils.escape(payload.text(code)),
               saxutils.escape(payload.text(note))))


def parse_volunteer(reply):
    """Success is signalled by a successMsg element containing 0."""
    raw = remote.unwrap(reply, 'VolunteerSignUpResult')
    body = remote.parse_xml(raw)
    status = body.findtext('successMsg')
    return outcome.BusinessResult(status, body, success=status == SUCCESS,
                                  raw=raw)


class NgpVolunteerSignUp(client.Integration):

    """Sign a contact up for one or more volunteer activities.

    :param credentials: NGP credentials string
    :keyword info: dict of volunteer code to note
    :keyword data: dict of contact field names and values
    """

    schema = SCHEMA
    required_fields = ('FirstName', 'LastName', 'Email', 'Address1', 'Zip')

    def __init__(self, credentials, info=None, data=None,
                 wsdl=ngp.VOLUNTEER_WSDL, timeout=None, invoker=None):
        client.require_settings('NgpVolunteerSignUp', credentials=credentials,
                                wsdl=wsdl)
        super(NgpVolunteerSignUp, self).__init__(data)
        self.credentials = credentials
        self.volunteer_info = dict(info or {})
        self.invoker = invoker or remote.SoapInvoker(wsdl, timeout=timeout)

    def add_volunteer_info(self, code, note):
        """Add (or replace) the note for a volunteer code."""
        self.volunteer_info[code] = note

    def generate_xml(self):
        """Render the VolunteerSignUp data document."""
        trailing = [volunteer_info(code, note)
                    for code, note in self.volunteer_info.items()]
        return payload.to_xml(OPERATION, self.schema, self.fields,
                              trailing=trailing)

    def save(self):
        """Submit the signup; the outcome is truthy if successMsg is 0."""
        return self._submit(self._send)

    def _send(self):
        arguments = {
            'credentials': self.credentials,
            'data': self.generate_xml(),
        }
        return self.invoker.invoke(OPERATION, arguments, parse_volunteer)
