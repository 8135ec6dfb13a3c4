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

"""campaignkit's command line interface.

Examples:

    export NGP_CREDENTIALS=...
    campaignkit donate FirstName=John LastName=Doe Address1="100 Elm" \\
        Zip=27514 Cycle=2012 Amount=10 CreditCardNumber=4111111111111111 \\
        ExpYear=13 ExpMonth=02

    campaignkit volunteer --info 12="Phone banking" --info 14= \\
        FirstName=John ...

    campaignkit sms-subscribe --revmsg-uuid 0a1b2c phone=0001112222 \\
        email=john@example.com zip=12345

    campaignkit distance 51.5074 -0.1278 48.8566 2.3522

Exit status is 0 when the service reported success, 1 otherwise and 2 for
usage or configuration errors.
"""

import logging
import sys

from campaignkit import config
from campaignkit import exceptions
from campaignkit import geo
from campaignkit import log
from campaignkit import ngp
from campaignkit import revmsg
from campaignkit.ngp import donation
from campaignkit.ngp import signup
from campaignkit.ngp import volunteer
from campaignkit.utils import cli as cli_utils

LOG = logging.getLogger(__name__)

OPTIONS = log.OPTIONS + [
    config.Option(
        '--ini', metavar='PATH',
        help=('Source some or all of the options from this ini file. '
              'Defaults to campaignkit.ini in your current working '
              'directory.'),
    ),
    config.Option(
        '--ngp-credentials',
        help='NGP encrypted credentials string.',
        env='NGP_CREDENTIALS',
        ini_section='ngp',
        group='NGP',
    ),
    config.Option(
        '--ngp-contribution-wsdl',
        help='WSDL of the NGP online contribution service.',
        default=ngp.CONTRIBUTION_WSDL,
        ini_section='ngp',
        group='NGP',
    ),
    config.Option(
        '--ngp-volunteer-wsdl',
        help='WSDL of the NGP volunteer signup service.',
        default=ngp.VOLUNTEER_WSDL,
        ini_section='ngp',
        group='NGP',
    ),
    config.Option(
        '--revmsg-uuid',
        help='Revolution Messaging subscriber list UUID.',
        env='REVMSG_UUID',
        ini_section='revmsg',
        group='Revolution Messaging',
    ),
    config.Option(
        '--revmsg-api',
        help='Revolution Messaging JSON API base URL.',
        default=revmsg.DEFAULT_API,
        ini_section='revmsg',
        group='Revolution Messaging',
    ),
    config.Option(
        '--timeout', '-t',
        help='Seconds to wait for the remote service.',
        type=int,
    ),
]

CONFIG = config.Config(
    prog='campaignkit',
    options=OPTIONS,
    formatter_class=cli_utils.CampaignKitHelpFormatter,
)


def build_parser():
    """Return the `campaignkit` argument parser with all subcommands."""
    parser = cli_utils.HelpfulParser(
        prog='campaignkit',
        description='Submit donations, signups and SMS subscriptions.',
    )
    common = CONFIG.build_parser(add_help=False, permissive=True)
    subparsers = parser.add_subparsers(
        title='commands',
        description='Available commands',
        dest='command',
    )
    subparsers.required = True

    cmd = subparsers.add_parser('donate', parents=[common],
                                help='Submit an NGP contribution')
    cmd.add_argument('--send-email', action='store_true',
                     help='Have NGP email the contributor a receipt')
    _add_field_args(cmd)
    cmd.set_defaults(_func=run_donate)

    cmd = subparsers.add_parser('signup', parents=[common],
                                help='Submit an NGP email signup')
    cmd.add_argument('--require', metavar='FIELD', action='append',
                     help='A field that must be supplied (repeatable)')
    _add_field_args(cmd)
    cmd.set_defaults(_func=run_signup)

    cmd = subparsers.add_parser('volunteer', parents=[common],
                                help='Submit an NGP volunteer signup')
    cmd.add_argument('--info', metavar='CODE=NOTE', action='append',
                     type=cli_utils.kwarg,
                     help='A volunteer code and note (repeatable)')
    _add_field_args(cmd)
    cmd.set_defaults(_func=run_volunteer)

    cmd = subparsers.add_parser('sms-subscribe', parents=[common],
                                help='Subscribe to an SMS list')
    _add_field_args(cmd)
    cmd.set_defaults(_func=run_sms_subscribe)

    cmd = subparsers.add_parser('sms-unsubscribe', parents=[common],
                                help='Unsubscribe from an SMS list')
    cmd.add_argument('phone', help='Phone number (digits only)')
    cmd.set_defaults(_func=run_sms_unsubscribe)

    cmd = subparsers.add_parser('distance', parents=[common],
                                help='Distance in km between two points')
    for name in ('lat1', 'lon1', 'lat2', 'lon2'):
        cmd.add_argument(name, type=float)
    cmd.set_defaults(_func=run_distance)
    return parser


def _add_field_args(parser):
    parser.add_argument('fields', metavar='FIELD=VALUE', nargs='*',
                        type=cli_utils.kwarg,
                        help='Field values, ex. FirstName=John')


def _field_values(schema, args):
    """Return typed field values from parsed `FIELD=VALUE` arguments."""
    return schema.coerce(cli_utils.merge_kwargs(args.fields))


def run_donate(conf, args):
    values = _field_values(donation.SCHEMA, args)
    client = donation.NgpDonation(
        conf.get('ngp_credentials'), send_email=args.send_email,
        data=values, wsdl=conf.get('ngp_contribution_wsdl'),
        timeout=conf.get('timeout'))
    return client, client.save()


def run_signup(conf, args):
    values = _field_values(signup.SCHEMA, args)
    client = signup.NgpSignUp(
        conf.get('ngp_credentials'), data=values,
        wsdl=conf.get('ngp_contribution_wsdl'),
        timeout=conf.get('timeout'))
    client.set_required_fields(args.require or [])
    return client, client.save()


def run_volunteer(conf, args):
    values = _field_values(volunteer.SCHEMA, args)
    client = volunteer.NgpVolunteerSignUp(
        conf.get('ngp_credentials'),
        info=cli_utils.merge_kwargs(args.info), data=values,
        wsdl=conf.get('ngp_volunteer_wsdl'), timeout=conf.get('timeout'))
    return client, client.save()


def _sms_client(conf):
    return revmsg.RevMsg(conf.get('revmsg_uuid'),
                         api=conf.get('revmsg_api'),
                         timeout=conf.get('timeout'))


def run_sms_subscribe(conf, args):
    client = _sms_client(conf)
    return client, client.subscribe(cli_utils.merge_kwargs(args.fields))


def run_sms_unsubscribe(conf, args):
    client = _sms_client(conf)
    return client, client.unsubscribe(args.phone)


def run_distance(conf, args):
    print('%.3f' % geo.get_distance(args.lat1, args.lon1,
                                    args.lat2, args.lon2))
    return None, None


def report(client, result, stream=None):
    """Print a human readable summary of a call outcome.

    :returns: the process exit status
    """
    stream = stream or sys.stdout
    if result is None:
        return 0
    if result.kind == result.INVALID:
        for error in client.get_errors():
            print('error: %s' % error, file=stream)
    elif result.kind == result.FAULT:
        print('fault: %s' % result.message, file=stream)
    else:
        print('status: %s' % (result.status,), file=stream)
        if result.message:
            print('message: %s' % result.message, file=stream)
    print('success' if result else 'failed', file=stream)
    return 0 if result else 1


def main(argv=None):
    """Entry point for the `campaignkit` command."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    conf = CONFIG.parse(argv=argv)
    log.configure(conf)
    try:
        client, result = args._func(conf, args)
    except (exceptions.CampaignKitException, ValueError) as exc:
        LOG.debug("Unable to run %s", args.command, exc_info=True)
        parser.error(str(exc))
    return report(client, result)


if __name__ == '__main__':

    sys.exit(main())
