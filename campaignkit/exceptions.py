# Copyright (c) 2011-2015 Rackspace US, Inc.
#
# All Rights Reserved.
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.
"""campaignkit exceptions.

Exceptions are only raised for programming and configuration mistakes
(unknown fields, missing credentials). Failures while talking to a remote
service are never raised out of a client's call methods; they are returned
as outcomes (see :mod:`campaignkit.outcome`).
"""

__all__ = (
    'CampaignKitException',
    'ConfigurationError',
    'UnknownFieldError',
    'CampaignKitConfigException',
    'MalformedResponse',
)


class CampaignKitException(Exception):

    """Base exception for all exceptions raised by the campaignkit package."""


class ConfigurationError(CampaignKitException):

    """A client was created without the settings it needs to run."""


class UnknownFieldError(CampaignKitException, KeyError):

    """A value was supplied for a field the integration does not define."""

    def __init__(self, field, integration=None):
        """Customize Exception Constructor."""
        super(UnknownFieldError, self).__init__(field)
        self.field = field
        self.integration = integration

    def __str__(self):
        """Include custom data in string."""
        if self.integration:
            return ("'%s' is not a known field for %s"
                    % (self.field, self.integration))
        return "'%s' is not a known field" % self.field


class CampaignKitConfigException(CampaignKitException):

    """Errors raised by campaignkit/config."""


class MalformedResponse(CampaignKitException):

    """A remote service replied with something that could not be parsed.

    Instances describe a transport fault; they are reported through
    :class:`campaignkit.outcome.TransportFault` and not raised to callers.
    """

    def __init__(self, message, raw=None):
        """Customize Exception Constructor."""
        super(MalformedResponse, self).__init__(message)
        self.raw = raw
