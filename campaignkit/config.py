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
# pylint: disable=W0212

r"""Client settings.

Credentials, service URLs and timeouts are looked up in several sources.
Later sources win:

- option defaults
- an ini file (`<prog>.ini` in the working directory, or `--ini PATH`)
- the keyring, when the `keyring` package is installed
- environment variables (`env=` on the option, or `<PROG>_<OPTION_NAME>`)
- command-line arguments

Example campaignkit.ini file:

    [campaignkit]
    revmsg_uuid = 0a1b2c3d

    [ngp]
    ngp_credentials = encrypted-string

Example:

    from campaignkit import config

    conf = config.Config(prog='campaignkit', options=[
        config.Option('--ngp-credentials', env='NGP_CREDENTIALS',
                      ini_section='ngp'),
        config.Option('--timeout', type=int, default=30),
    ])
    conf.parse()
    print(conf.ngp_credentials)
"""

import argparse
import collections
import configparser
import copy
import logging
import os
import sys

try:
    import keyring
except ImportError:
    keyring = None  # pylint: disable=C0103

from campaignkit import exceptions

LOG = logging.getLogger(__name__)

# Option kwargs that are not passed through to argparse
SOURCE_KWARGS = ('env', 'ini_section', 'group')


class Option(object):

    """One setting and where to find it.

    Takes the same arguments as `argparse.ArgumentParser.add_argument` plus:

        env:          environment variable holding the value
        ini_section:  ini file section searched before the `prog` section
        group:        argument group title used in --help output
    """

    def __init__(self, *args, **kwargs):
        self.args = args
        self.kwargs = kwargs

    def __copy__(self):
        return type(self)(*self.args, **dict(self.kwargs))

    def __repr__(self):
        parts = list(self.args)
        parts.extend('%s=%s' % item for item in self.kwargs.items())
        return 'Option(%s)' % ', '.join(parts)

    @property
    def name(self):
        """Setting name, from the long flag (ex. `--ngp-wsdl` -> ngp_wsdl)."""
        longs = [arg for arg in self.args if arg.startswith('--')]
        if longs:
            return longs[0][2:].replace('-', '_')
        plain = [arg for arg in self.args if not arg.startswith('-')]
        return plain[0].replace('-', '_') if plain else None

    @property
    def dest(self):
        return self.kwargs.get('dest', self.name)

    @property
    def type(self):
        """Callable used to convert text values from env, ini or keyring."""
        return self.kwargs.get('type', str)

    @property
    def default(self):
        return self.kwargs.get('default')

    @property
    def required(self):
        return bool(self.kwargs.get('required'))

    def env_names(self, namespace):
        """Environment variables checked for this option, in order."""
        names = []
        if self.kwargs.get('env'):
            names.append(self.kwargs['env'])
        names.append('%s_%s' % (namespace.upper(), self.name.upper()))
        return names

    def ini_sections(self, namespace):
        """Ini sections checked for this option, in order."""
        return [section for section in (self.kwargs.get('ini_section'),
                                        namespace) if section]

    def add_argument(self, parser, permissive=False, **override_kwargs):
        """Add this option to an argparse parser.

        :keyword permissive: do not mark the argument as required (the value
            may come from another source).
        """
        kwargs = {key: value for key, value in self.kwargs.items()
                  if key not in SOURCE_KWARGS}
        if self.kwargs.get('env') and kwargs.get('help'):
            kwargs['help'] += ' (or set %s)' % self.kwargs['env']
        if permissive:
            kwargs.pop('required', None)
        kwargs.update(override_kwargs)
        group = self.kwargs.get('group')
        if group:
            found = [grp for grp in parser._action_groups
                     if grp.title == group]
            parser = found[0] if found else parser.add_argument_group(group)
        return parser.add_argument(*self.args, **kwargs)


class Config(collections.ChainMap):

    """Settings merged from all sources.

    After :meth:`parse`, `maps` holds one dict per source, highest
    precedence first (cli, env, keyring, ini, defaults). Values are
    available as items or attributes (`conf['timeout']`, `conf.timeout`).
    """

    def __init__(self, options=None, ini_paths=None, argv=None,
                 **parser_kwargs):
        """Initialize with a list of :class:`Option`.

        :keyword ini_paths: ini files to read in addition to `<prog>.ini`
        :keyword argv: argument strings, without the program name (defaults
            to sys.argv[1:])
        :keyword parser_kwargs: passed to `argparse.ArgumentParser`
        """
        self._options = list(options or [])
        self._ini_paths = list(ini_paths or [])
        self._argv = argv
        self._parser_kwargs = parser_kwargs
        self.ini_config = None
        super(Config, self).__init__(self.get_defaults())

    def __getattr__(self, attr):
        if attr.startswith('_') or attr == 'maps':
            raise AttributeError(attr)
        if attr in self:
            return self[attr]
        raise AttributeError("'config' object has no attribute '%s'" % attr)

    def __repr__(self):
        return '<Config %s>' % ', '.join(
            '%s=%s' % (key, self[key]) for key in self)

    @property
    def options(self):
        return list(self._options)

    @property
    def prog(self):
        """Program name; also the default ini section and env prefix."""
        return (self._parser_kwargs.get('prog') or
                os.path.basename(sys.argv[0]) or 'campaignkit')

    @property
    def default_ini(self):
        return '%s.ini' % self.prog

    def get_defaults(self):
        """Return dict of option defaults."""
        return {option.dest: option.default for option in self._options}

    def build_parser(self, options=None, permissive=False,
                     **override_kwargs):
        """Return an argparse parser for `options` (defaults to all).

        :keyword permissive: do not enforce required arguments
        :keyword override_kwargs: override the parser constructor kwargs
        """
        kwargs = dict(self._parser_kwargs,
                      formatter_class=self._parser_kwargs.get(
                          'formatter_class',
                          argparse.ArgumentDefaultsHelpFormatter),
                      fromfile_prefix_chars='@')
        kwargs.update(override_kwargs)
        parser = argparse.ArgumentParser(**kwargs)
        for option in self._options if options is None else options:
            option.add_argument(parser, permissive=permissive)
        return parser

    def parse_cli(self, argv=None, permissive=False):
        """Return the settings actually given on the command line.

        Arguments that are not settings (subcommands, field values) are
        ignored when `permissive` and rejected otherwise.
        """
        if argv is None:
            argv = sys.argv[1:] if self._argv is None else self._argv
        suppressed = []
        for option in self._options:
            clone = copy.copy(option)
            clone.kwargs['default'] = argparse.SUPPRESS
            suppressed.append(clone)
        parser = self.build_parser(suppressed, permissive=True,
                                   add_help=False, allow_abbrev=False)
        parsed, extras = parser.parse_known_args(argv)
        if extras and not permissive:
            raise exceptions.CampaignKitConfigException(
                "Unrecognized arguments: %s" % ', '.join(extras))
        return vars(parsed)

    def parse_env(self, env=None, namespace=None):
        """Return the settings found in environment variables."""
        env = os.environ if env is None else env
        namespace = namespace or self.prog
        results = {}
        for option in self._options:
            for name in option.env_names(namespace):
                if name in env:
                    results[option.dest] = option.type(env[name])
                    break
        return results

    def parse_ini(self, paths=None, namespace=None):
        """Return the settings found in ini files.

        :keyword paths: files to read; defaults to the `ini_paths` given at
            construction plus `<prog>.ini` if it exists
        """
        namespace = namespace or self.prog
        if paths is None:
            paths = list(self._ini_paths)
            if (os.path.isfile(self.default_ini) and
                    self.default_ini not in paths):
                paths.append(self.default_ini)
        self.ini_config = configparser.ConfigParser(interpolation=None)
        found = self.ini_config.read(paths)
        LOG.debug("Read ini files %s", found)
        results = {}
        for option in self._options:
            for section in option.ini_sections(namespace):
                if self.ini_config.has_option(section, option.name):
                    results[option.dest] = option.type(
                        self.ini_config.get(section, option.name))
                    break
        return results

    def parse_keyring(self, namespace=None):
        """Return the settings stored in the keyring, if available."""
        if keyring is None:
            return {}
        namespace = namespace or self.prog
        results = {}
        for option in self._options:
            secret = keyring.get_password(namespace, option.name)
            if secret:
                results[option.dest] = option.type(secret)
        return results

    def parse(self, argv=None, keyring_namespace=None):
        """Load settings from all sources and check required ones.

        :returns: self
        """
        cli = self.parse_cli(argv=argv, permissive=True)
        ini_path = cli.pop('ini', None)
        if ini_path and ini_path not in self._ini_paths:
            self._ini_paths.insert(0, ini_path)
        self.maps = [
            cli,
            self.parse_env(),
            self.parse_keyring(keyring_namespace),
            self.parse_ini(),
            self.get_defaults(),
        ]
        missing = [option.name for option in self._options
                   if option.required and self.get(option.dest) is None]
        if missing:
            raise SystemExit("'%s' is required. See --help for more info."
                             % missing[0])
        return self
