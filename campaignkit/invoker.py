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

"""Remote invokers.

An invoker performs exactly one network call and classifies what happened:

- transport or protocol failure -> :class:`outcome.TransportFault`
- a reply the integration's `parse` callback understands ->
  :class:`outcome.BusinessResult`

Calls are never retried. The `parse` callback receives the reply and returns
a :class:`outcome.BusinessResult`; if it raises one of MALFORMED_ERRORS the
reply is reported as a fault instead.

Usage:

    invoker = SoapInvoker('https://example.com/service.asmx?wsdl')
    outcome = invoker.invoke('EmailSignUp', {'credentials': '...'},
                             parse=parse_signup)
"""

import logging
from xml.etree import ElementTree

import requests
import suds
import suds.client
import suds.transport

from campaignkit import exceptions
from campaignkit import outcome
from campaignkit import payload
from campaignkit.utils import dicts

LOG = logging.getLogger(__name__)

DEFAULT_SOAP_TIMEOUT = 30
DEFAULT_HTTP_TIMEOUT = 5
FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

SOAP_ERRORS = (
    suds.WebFault,
    suds.MethodNotFound,
    suds.ServiceNotFound,
    suds.TypeNotFound,
    suds.transport.TransportError,
    OSError,
)

MALFORMED_ERRORS = (
    AttributeError,
    ElementTree.ParseError,
    KeyError,
    TypeError,
    ValueError,
)


def parse_xml(text):
    """Parse an XML reply string into an element.

    Raises :class:`exceptions.MalformedResponse` for empty replies.
    """
    if text is None or not str(text).strip():
        raise exceptions.MalformedResponse("Empty XML reply", raw=text)
    return ElementTree.fromstring(str(text))


def unwrap(reply, name):
    """Return the `name` member of a SOAP reply.

    suds unwraps single-member document/literal replies by default, in which
    case the reply already is the value.
    """
    return getattr(reply, name, reply)


def _classify(parse, reply):
    """Run an integration parser over a reply."""
    try:
        return parse(reply)
    except MALFORMED_ERRORS + (exceptions.MalformedResponse,) as exc:
        LOG.warning("Unable to parse reply: %s", exc)
        if isinstance(exc, exceptions.MalformedResponse):
            return outcome.TransportFault(exc)
        return outcome.TransportFault(
            exceptions.MalformedResponse(str(exc), raw=reply))


class SoapInvoker(object):

    """Calls one operation of a SOAP service.

    :param wsdl: URL of the service WSDL
    :keyword timeout: seconds to wait for the service (defaults to
        DEFAULT_SOAP_TIMEOUT)
    :keyword client: an existing `suds.client.Client` (built lazily from the
        WSDL when not supplied)
    """

    def __init__(self, wsdl, timeout=None, client=None):
        self.wsdl = wsdl
        self.timeout = timeout or DEFAULT_SOAP_TIMEOUT
        self._client = client

    @property
    def client(self):
        """The suds client; fetches the WSDL on first use."""
        if self._client is None:
            LOG.debug("Loading WSDL %s", self.wsdl)
            self._client = suds.client.Client(self.wsdl, timeout=self.timeout)
        return self._client

    def invoke(self, operation, arguments, parse):
        """Call `operation` with keyword `arguments` and classify the reply.

        :returns: :class:`outcome.TransportFault` or whatever `parse`
            returns
        """
        LOG.debug("Calling SOAP operation %s", operation,
                  extra={'data': dicts.redact(arguments)})
        try:
            method = getattr(self.client.service, operation)
            reply = method(**arguments)
        except SOAP_ERRORS as exc:
            LOG.error("SOAP operation %s failed: %s", operation, exc)
            return outcome.TransportFault(exc)
        except Exception as exc:  # pylint: disable=W0703
            LOG.exception("Unexpected error calling SOAP operation %s",
                          operation)
            return outcome.TransportFault(exc)
        return _classify(parse, reply)


class HttpInvoker(object):

    """Sends one form encoded POST request.

    :keyword timeout: seconds to wait for the service (defaults to
        DEFAULT_HTTP_TIMEOUT)
    :keyword session: a `requests.Session` to send with
    """

    def __init__(self, timeout=None, session=None):
        self.timeout = timeout or DEFAULT_HTTP_TIMEOUT
        self.session = session or requests.Session()

    def invoke(self, url, params, parse):
        """POST `params` to `url` and classify the reply.

        `parse` receives the `requests.Response`.
        """
        body = payload.to_form(params)
        LOG.debug("POST %s", url, extra={'data': dicts.redact(dict(params))})
        try:
            response = self.session.post(
                url, data=body, timeout=self.timeout,
                headers={'Content-Type': FORM_CONTENT_TYPE})
        except requests.RequestException as exc:
            LOG.error("POST %s failed: %s", url, exc)
            return outcome.TransportFault(exc, details={'url': url})
        if not response.text:
            LOG.error("POST %s returned an empty reply (HTTP %s)", url,
                      response.status_code)
            return outcome.TransportFault(
                exceptions.MalformedResponse('Unable to contact API'),
                details={'url': url, 'status_code': response.status_code})
        return _classify(parse, response)
