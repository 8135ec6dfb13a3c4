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

"""Great-circle distance between two lat/lng points."""

import math

EARTH_RADIUS_KM = 6371


def to_radians(degrees):
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def get_distance(lat1, lon1, lat2, lon2):
    """Return the haversine distance in kilometers."""
    d_lat = to_radians(lat2 - lat1)
    d_lon = to_radians(lon2 - lon1)
    a = (math.sin(d_lat / 2) ** 2 +
         math.cos(to_radians(lat1)) * math.cos(to_radians(lat2)) *
         math.sin(d_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
