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
"""CLI utilities."""

import argparse
import sys


CampaignKitHelpFormatter = type('CampaignKitHelpFormatter',
                                (argparse.ArgumentDefaultsHelpFormatter,
                                 argparse.RawTextHelpFormatter), {})


class HelpfulParser(argparse.ArgumentParser):

    """An argparser that won't leave you hanging."""

    def __init__(self, *args, **kwargs):
        """Set formatter_class if it is not explicitly specified."""
        kwargs.setdefault('formatter_class', CampaignKitHelpFormatter)
        super(HelpfulParser, self).__init__(*args, **kwargs)

    def error(self, message, print_help=False):
        """Point the user at --help along with the error."""
        if 'required' in message.lower():
            message = ("%s. Try getting help with `%s --help`"
                       % (message, self.prog))
        if print_help:
            self.print_help()
        else:
            self.print_usage()
        sys.stderr.write('\nerror: %s\n' % message)
        sys.exit(2)


def kwarg(string, separator='='):
    """Return a dict from a delimited string.

    Only the first separator splits, so values may contain it
    (ex. `Note=a=b`).
    """
    if separator not in string:
        raise argparse.ArgumentTypeError(
            "Separator '%s' not in value '%s'" % (separator, string))
    if string.strip().startswith(separator):
        raise argparse.ArgumentTypeError(
            "Value '%s' starts with separator '%s'" % (string, separator))
    key, value = string.split(separator, 1)
    return {key.strip(): value}


def merge_kwargs(pairs):
    """Merge a list of single item dicts (from :func:`kwarg`) in order."""
    merged = {}
    for pair in pairs or []:
        merged.update(pair)
    return merged
