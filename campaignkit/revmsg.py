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

"""Revolution Messaging SMS subscriber lists.

Subscribe or unsubscribe a user to the subscriber list identified by its
UUID.

Available attributes:

    phone (required)
    email (required)
    zip (required)
    lname
    fname
    name
    tags (comma-delimited list)
    any other attribute is stored as a custom field

Use one of `name` or (`fname` and `lname`), not both.

Usage (subscribe):

    msg = RevMsg('your-uuid')
    if not msg.subscribe({'phone': '0001112222',
                          'email': 'john.smith@gmail.com',
                          'zip': '12345',
                          'name': 'John Smith'}):
        api_response = msg.get_response()  # JSON string
        errors = msg.get_errors()
        details = msg.get_error_details()

Usage (unsubscribe):

    msg = RevMsg('your-uuid')
    msg.unsubscribe('0001112222')
"""

import json
import logging

from campaignkit import client
from campaignkit import fields
from campaignkit import invoker as remote
from campaignkit import outcome

LOG = logging.getLogger(__name__)

DEFAULT_API = 'http://api.revmsg.net/json/v1/'

SCHEMA = fields.Schema('RevMsg', [
    fields.Section('subscriber', [
        fields.Field('phone', default=None),
        fields.Field('email', default=None),
        fields.Field('zip', default=None),
    ]),
], open=True)


def parse_reply(response):
    """Interpret the JSON body of a RevMsg reply.

    `{"error": true, "message": "..."}` is a business failure; anything
    else is success.
    """
    body = json.loads(response.text)
    if not isinstance(body, dict):
        raise ValueError("Unexpected JSON reply %r" % (body,))
    failed = bool(body.get('error'))
    return outcome.BusinessResult(
        response.status_code, body,
        success=not failed,
        message=body.get('message') if failed else None,
        raw=response.text)


class RevMsg(client.Integration):

    """Client for one Revolution Messaging subscriber list.

    :param uuid: the subscriber list UUID
    :keyword api: base URL of the JSON API
    :keyword timeout: seconds to wait for the API (defaults to 5)
    :keyword invoker: a :class:`campaignkit.invoker.HttpInvoker`
    """

    schema = SCHEMA
    required_fields = ('phone', 'email', 'zip')

    def __init__(self, uuid, api=DEFAULT_API, timeout=None, invoker=None):
        client.require_settings('RevMsg', uuid=uuid, api=api)
        super(RevMsg, self).__init__()
        self.uuid = uuid
        self.api = api if api.endswith('/') else api + '/'
        self.invoker = invoker or remote.HttpInvoker(timeout=timeout)

    def _reset(self):
        super(RevMsg, self)._reset()
        self.error_details = {}
        self.response = None

    @property
    def subscribe_url(self):
        return '%s%s/' % (self.api, self.uuid)

    @property
    def unsubscribe_url(self):
        return '%s%s/true' % (self.api, self.uuid)

    def subscribe(self, user_info):
        """Subscribe a user.

        :param user_info: dict with at least phone, email and zip
        :returns: an outcome; truthy if the API reported no error
        """
        return self._submit(
            lambda: self._post(self.subscribe_url, user_info),
            values=user_info)

    def unsubscribe(self, phone):
        """Remove the user with this phone number (digits only)."""
        return self._submit(
            lambda: self._post(self.unsubscribe_url, {'phone': phone}),
            validate=False)

    def _post(self, url, params):
        result = self.invoker.invoke(url, params, parse_reply)
        if result.kind == outcome.Outcome.RESULT:
            self.response = result.raw
            if not result.success:
                self.error_details = result.body
        elif result.kind == outcome.Outcome.FAULT:
            self.error_details = dict(result.details)
        return result

    def get_response(self):
        """The raw JSON reply of the last call, if any."""
        return self.response

    def get_error_details(self):
        """Details of the last failure.

        The parsed reply for API errors, transport details (url, HTTP status)
        for faults, an empty dict otherwise.
        """
        return self.error_details
