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

"""NGP online contributions.

Usage:

    from campaignkit.ngp import donation

    d = donation.NgpDonation('credentials-string', send_email=False, data={
        'LastName': 'Doe',
        'FirstName': 'John',
        'Address1': '100 Elm Street',
        'Zip': '27514',
        'Cycle': 2012,
        'Amount': 10,
        'CreditCardNumber': '4111111111111111',
        'ExpYear': '13',
        'ExpMonth': '02',
    })
    result = d.save()
    if result:
        pass  # VendorResult/Result was 0
    elif d.has_errors():
        errors = d.get_errors()  # bad local data, nothing was sent
    elif d.has_fault():
        fault = d.get_fault()  # could not talk to NGP
    else:
        status = result.status  # vendor result code, ex. a declined card
        message = result.message
"""

import logging

from campaignkit import client
from campaignkit import fields
from campaignkit import invoker as remote
from campaignkit import ngp
from campaignkit import outcome
from campaignkit import payload

LOG = logging.getLogger(__name__)

OPERATION = 'PostVerisignTransaction'
SUCCESS = 0

SCHEMA = fields.Schema('NgpDonation', [
    fields.Section('ContactInfo', ngp.contact_fields() + [
        fields.Field('MainType', default='I'),
        fields.Field('Organization'),
    ]),
    fields.Section('ContributionInfo', [
        # election year the donation is for
        fields.Field('Cycle', default=None, type=int),
        fields.Field('Member'),
        fields.Field('Attribution'),
        fields.Field('Source'),
        fields.Field('Period', default='G'),
        fields.Field('RecurringContrib', default=False, type=bool),
        fields.Field('RecurringContribNote'),
        fields.Field('Amount', default=0.0, type=float),
        fields.Field('Account'),
        fields.Field('Attend'),
        fields.Field('RecurringPeriod', default='MONT',
                     only_if='RecurringContrib'),
        fields.Field('RecurringTerm', default=1, type=int,
                     only_if='RecurringContrib'),
    ]),
    fields.Section('VerisignInfo', [
        fields.Field('CreditCardNumber'),
        fields.Field('ExpYear', default=None),
        fields.Field('ExpMonth', default=None),
        fields.Field('CVV'),
    ]),
])


def parse_transaction(reply):
    """Turn a PostVerisignTransaction reply into a BusinessResult."""
    raw = remote.unwrap(reply, 'PostVerisignTransactionResult')
    body = remote.parse_xml(raw)
    status = int(body.findtext('VendorResult/Result'))
    return outcome.BusinessResult(
        status, body,
        success=status == SUCCESS,
        message=body.findtext('VendorResult/Message'),
        raw=raw)


class NgpDonation(client.Integration):

    """Submit a credit card contribution to NGP.

    :param credentials: NGP encrypted credentials string
    :keyword send_email: notify the contributor after the donation is
        accepted
    :keyword data: dict of field names and values; see SCHEMA
    :keyword wsdl: service WSDL URL
    :keyword timeout: seconds to wait for NGP
    :keyword invoker: a :class:`campaignkit.invoker.SoapInvoker` to call
        through
    """

    schema = SCHEMA
    required_fields = (
        'FirstName',
        'LastName',
        'Address1',
        'Zip',
        'Cycle',
        'Amount',
        'CreditCardNumber',
        'ExpYear',
        'ExpMonth',
    )
    rules = (
        fields.RECURRING_PERIOD,
        fields.RECURRING_TERM,
        fields.EXPIRATION_MONTH,
        fields.EXPIRATION_YEAR,
        fields.CYCLE,
        fields.AMOUNT,
    )

    def __init__(self, credentials, send_email=False, data=None,
                 wsdl=ngp.CONTRIBUTION_WSDL, timeout=None, invoker=None):
        client.require_settings('NgpDonation', credentials=credentials,
                                wsdl=wsdl)
        super(NgpDonation, self).__init__(data)
        self.credentials = credentials
        self.send_email = send_email
        self.invoker = invoker or remote.SoapInvoker(wsdl, timeout=timeout)

    def generate_xml(self):
        """Render the PostVerisignTransaction data document."""
        return payload.to_xml(OPERATION, self.schema, self.fields)

    def save(self):
        """Submit the contribution.

        :returns: an outcome; truthy only when NGP returned result code 0
        """
        return self._submit(self._send)

    def _send(self):
        arguments = {
            'credentials': self.credentials,
            'data': self.generate_xml(),
            'sendEmail': 'true' if self.send_email else 'false',
        }
        return self.invoker.invoke(OPERATION, arguments, parse_transaction)
