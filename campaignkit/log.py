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
#
"""Logging setup for campaignkit programs.

Named `log` so as not to conflict with stdlib logging.

Library modules only ever call `logging.getLogger(__name__)`; programs call
:func:`configure` once with their parsed settings:

    from campaignkit import config
    from campaignkit import log

    conf = config.Config(prog='app', options=log.OPTIONS + my_options)
    conf.parse()
    log.configure(conf)

With --debug, the `data` passed in a log call's `extra` is appended to the
message. Clients redact that data before logging it.
"""
import logging
import logging.config
import os
import sys

from campaignkit import config

OPTIONS = [
    config.Option("--logconfig",
                  help="Optional logging configuration file",
                  group="logging"),
    config.Option("-d", "--debug",
                  default=False,
                  action="store_true",
                  help="turn on debug output, including redacted request "
                  "payloads. Log output includes source file path and line "
                  "numbers",
                  group="logging"),
    config.Option("-v", "--verbose",
                  default=False,
                  action="store_true",
                  help="turn up logging to DEBUG (default is WARNING)",
                  group="logging"),
    config.Option("-q", "--quiet",
                  default=False,
                  action="store_true",
                  help="turn down logging to ERROR (default is WARNING)",
                  group="logging"),
]

# (setting, level, format); the first setting that is on wins
MODES = [
    ('debug', logging.DEBUG,
     '%(pathname)s:%(lineno)d: %(levelname)-8s %(message)s'),
    ('verbose', logging.DEBUG, '%(name)-30s: %(levelname)-8s %(message)s'),
    ('quiet', logging.ERROR, '%(message)s'),
]
DEFAULT_MODE = (None, logging.WARNING, logging.BASIC_FORMAT)

getLogger = logging.getLogger  # pylint: disable=C0103


def _mode(conf):
    for mode in MODES:
        if conf.get(mode[0]) is True:
            return mode
    return DEFAULT_MODE


def log_level(conf):
    """Return the console log level for the settings in `conf`."""
    return _mode(conf)[1]


def _get_debug_formatter(conf):
    setting, _, fmt = _mode(conf)
    if setting == 'debug':
        return DebugFormatter(fmt)
    return logging.Formatter(fmt)


def configure(conf, default_config=None):
    """Configure logging from a logging config file or the console settings.

    :param conf: mapping with the values of OPTIONS (ex. a config.Config)
    :keyword default_config: logging config file used when --logconfig is
        not set
    """
    for path in (conf.get('logconfig'), default_config):
        if path and os.path.isfile(path):
            logging.config.fileConfig(path, disable_existing_loggers=False)
            return
    init_console_logging(conf)


def init_console_logging(conf):
    """Log to stderr at the level chosen by --debug, --verbose or --quiet."""
    root = logging.getLogger()
    console = find_console_handler(root) or logging.StreamHandler()
    level = log_level(conf)
    console.setLevel(level)
    console.setFormatter(_get_debug_formatter(conf))
    root.addHandler(console)
    root.setLevel(level)


class DebugFormatter(logging.Formatter):

    """Appends the `data` passed in a log call's `extra`, if any."""

    def format(self, record):
        message = super(DebugFormatter, self).format(record)
        data = getattr(record, 'data', None)
        if data is None:
            return message
        return "%s. DEBUG DATA=%s" % (message, data)


def find_console_handler(logger):
    """Return the handler writing to stderr, if `logger` has one."""
    for handler in logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                getattr(handler, 'stream', None) is sys.stderr):
            return handler
    return None
