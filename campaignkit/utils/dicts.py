# Copyright (c) 2011-2015 Rackspace US, Inc.
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

"""Helpers for built-in `dict` class."""

import re

MASK = '*****'

SENSITIVE_KEYS = [
    'credentials',
    'CreditCardNumber',
    'CVV',
    re.compile('password', re.IGNORECASE),
]


def key_match(key, filter_keys):
    """Determine whether or not key is in filter_keys.

    `filter_keys` may hold plain keys and compiled regular expressions.
    """
    if key in filter_keys:
        return True
    if key is None:
        return False
    for reg_expr in [pattern for pattern in filter_keys
                     if hasattr(pattern, "search")
                     and callable(getattr(pattern, "search"))]:
        if reg_expr.search(key):
            return True
    return False


def redact_markup(text, filter_keys=None, mask=MASK):
    """Mask the text of sensitive elements in an XML string.

    Only plain (non regex) keys are treated as element names.
    """
    if filter_keys is None:
        filter_keys = SENSITIVE_KEYS
    for key in filter_keys:
        if not isinstance(key, str):
            continue
        text = re.sub(r"<%s>[^<]+</%s>" % (re.escape(key), re.escape(key)),
                      "<%s>%s</%s>" % (key, mask, key), text)
    return text


def redact(data, filter_keys=None, mask=MASK):
    """Return a copy of `data` with sensitive values masked.

    Nested dicts and lists are copied too and sensitive elements inside XML
    strings are masked. Blank values are left as they are so the output
    still shows which fields were supplied.

    :param data: a dict (or list) to copy
    :keyword filter_keys: keys considered sensitive (defaults to
        SENSITIVE_KEYS)
    :keyword mask: text used in place of sensitive values
    """
    if filter_keys is None:
        filter_keys = SENSITIVE_KEYS
    if isinstance(data, list):
        return [redact(value, filter_keys, mask) for value in data]
    if isinstance(data, str):
        return redact_markup(data, filter_keys, mask)
    if not isinstance(data, dict):
        return data
    clean = {}
    for key, value in data.items():
        if key_match(key, filter_keys) and value not in (None, ''):
            clean[key] = mask
        else:
            clean[key] = redact(value, filter_keys, mask)
    return clean
