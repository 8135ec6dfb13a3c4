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

"""Clients for the NGP online services (donations and signups).

All NGP services are SOAP services authenticated by an encrypted
credentials string issued by NGP.
"""

from campaignkit import fields

CONTRIBUTION_WSDL = ('https://services.myngp.com/ngponlineservices/'
                     'onlinecontribservice.asmx?wsdl')
VOLUNTEER_WSDL = ('http://services.myngp.com/ngponlineservices/'
                  'VolunteerSignUpService.asmx?wsdl')


def contact_fields():
    """Return the contact fields shared by donations and volunteer signups."""
    return [
        fields.Field('LastName'),
        fields.Field('FirstName'),
        fields.Field('MiddleName'),
        fields.Field('Prefix'),
        fields.Field('Suffix'),
        fields.Field('Address1'),
        fields.Field('Address2'),
        fields.Field('Address3'),
        fields.Field('City'),
        fields.Field('State'),
        fields.Field('Zip'),
        fields.Field('Salutation'),
        fields.Field('Email'),
        fields.Field('HomePhone'),
        fields.Field('WorkPhone'),
        fields.Field('WorkExtension'),
        fields.Field('FaxPhone'),
        fields.Field('Employer'),
        fields.Field('Occupation'),
        fields.Field('OptIn', default=False, type=bool),
    ]
