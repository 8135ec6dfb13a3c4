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
"""Package attributes and metadata."""

__all__ = (
    '__title__',
    '__summary__',
    '__url__',
    '__version__',
    '__author__',
    '__email__',
    '__license__',
    '__copyright__',
    '__keywords__',
)


__title__ = 'campaignkit'
__summary__ = ('campaignkit is a collection of small clients for '
               'campaign donation, signup and SMS services')
__url__ = 'https://github.com/newmediacampaigns/campaignkit'
__version__ = '0.1.0'
__author__ = 'New Media Campaigns'
__email__ = 'dev@newmediacampaigns.com'
__keywords__ = ['ngp', 'donation', 'signup', 'sms', 'soap', 'campaign']
__license__ = 'Apache License, Version 2.0'
__copyright__ = 'Copyright New Media Campaigns (c) 2011-2015'
