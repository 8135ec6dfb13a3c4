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

"""Results of a client call.

Every call returns exactly one of:

- :class:`LocalValidationFailed`: the input was rejected before any network
  traffic.
- :class:`TransportFault`: the remote service could not be reached, replied
  with a SOAP fault or replied with something that could not be parsed.
- :class:`BusinessResult`: the remote service processed the request. Its
  `success` flag reflects the service's own status; any other status is left
  for the caller to interpret.

Outcomes are truthy only for a successful business result:

    outcome = donation.save()
    if outcome:
        ...
    elif outcome.kind == outcome.FAULT:
        LOG.error("NGP unreachable: %s", outcome.fault)
"""


class Outcome(object):

    """Base class for call outcomes."""

    INVALID = 'invalid'
    FAULT = 'fault'
    RESULT = 'result'

    kind = None
    success = False

    def __bool__(self):
        return bool(self.success)


class LocalValidationFailed(Outcome):

    """The input never left the process because it is not valid."""

    kind = Outcome.INVALID

    def __init__(self, errors):
        self.errors = list(errors)

    def __repr__(self):
        return 'LocalValidationFailed(%r)' % self.errors


class TransportFault(Outcome):

    """The call failed at the network or protocol level.

    :param fault: the underlying exception (ex. `suds.WebFault` or
        `requests.RequestException`)
    :keyword details: optional dict of extra diagnostic data
    """

    kind = Outcome.FAULT

    def __init__(self, fault, details=None):
        self.fault = fault
        self.details = details or {}

    def __repr__(self):
        return 'TransportFault(%r)' % (self.fault,)

    @property
    def message(self):
        """Text of the underlying fault."""
        return str(self.fault)


class BusinessResult(Outcome):

    """The remote system answered.

    :param status: the service's status value (vendor result code, boolean
        result flag, ...)
    :param body: the parsed reply (an XML element or a dict)
    :keyword success: True if the service reported success
    :keyword message: optional status description from the service
    :keyword raw: the unparsed reply
    """

    kind = Outcome.RESULT

    def __init__(self, status, body, success=False, message=None, raw=None):
        self.status = status
        self.body = body
        self.success = success
        self.message = message
        self.raw = raw

    def __repr__(self):
        return ('BusinessResult(status=%r, success=%r)'
                % (self.status, self.success))
