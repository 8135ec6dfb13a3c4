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

"""Base class shared by all integration clients.

A client runs one cycle per request:

    Idle -> Validating -> Invalid -> Idle
                       -> Valid -> Invoking -> Fault -> Idle
                                            -> Responded -> Idle

Each cycle replaces the previous errors, fault and result. The three failure
surfaces can be queried separately after any call:

    has_errors()  local validation errors (the network was never used)
    has_fault()   transport or protocol fault
    get_result()  the remote system's reply, success or not
"""

import logging

from campaignkit import exceptions
from campaignkit import fields
from campaignkit import outcome

LOG = logging.getLogger(__name__)


class Integration(object):

    """Field handling, validation and outcome bookkeeping for a client.

    Subclasses set `schema`, `required_fields` and `rules` and implement
    their call methods on top of :meth:`_submit`.
    """

    schema = None
    required_fields = ()
    rules = ()

    def __init__(self, data=None):
        self.fields = self.schema.merge(data)
        self.required = list(self.required_fields)
        self._reset()

    def _reset(self):
        self.errors = []
        self.fault = None
        self.result = None
        self.outcome = None

    def set_required_fields(self, names):
        """Replace the required field list."""
        self.required = list(names)

    def add_required_fields(self, names):
        """Append names to the required field list."""
        self.required.extend(names)

    def update_fields(self, data):
        """Override some field values, keeping the others."""
        for name in data:
            if name not in self.schema and not self.schema.open:
                raise exceptions.UnknownFieldError(name, self.schema.name)
        self.fields.update(data)

    def validate(self, values=None):
        """Return validation errors for `values` (defaults to the fields)."""
        return fields.validate(self.fields if values is None else values,
                               self.required, self.rules)

    def is_valid(self, values=None):
        """Run a validation pass; errors are kept for :meth:`get_errors`."""
        self.errors = self.validate(values)
        return not self.errors

    def get_errors(self):
        """Errors from the last validation pass."""
        return self.errors

    def has_errors(self):
        return bool(self.errors)

    def get_fault(self):
        """The exception behind the last transport fault, if any."""
        return self.fault

    def has_fault(self):
        return self.fault is not None

    def get_result(self):
        """The parsed reply of the last call that reached the service."""
        return self.result

    def get_outcome(self):
        """The outcome of the last call."""
        return self.outcome

    def _record(self, result):
        """Store an outcome in the accessor state and return it."""
        self.outcome = result
        if result.kind == outcome.Outcome.INVALID:
            self.errors = result.errors
        elif result.kind == outcome.Outcome.FAULT:
            self.fault = result.fault
        else:
            self.result = result.body
        LOG.info("%s call finished: %r", type(self).__name__, result)
        return result

    def _submit(self, send, values=None, validate=True):
        """Run one validate -> send cycle.

        :param send: callable performing the remote call; returns an outcome
        :keyword values: field values to validate (defaults to the fields)
        :keyword validate: skip local validation when False
        """
        self._reset()
        if validate and not self.is_valid(values):
            LOG.debug("%s input rejected: %s", type(self).__name__,
                      self.errors)
            return self._record(outcome.LocalValidationFailed(self.errors))
        return self._record(send())


def require_settings(name, **settings):
    """Raise ConfigurationError if any of the settings is missing."""
    missing = sorted(key for key, value in settings.items() if not value)
    if missing:
        raise exceptions.ConfigurationError(
            "%s requires %s to be set" % (name, ', '.join(missing)))
