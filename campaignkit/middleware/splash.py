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

"""Splash page WSGI Middleware.

Sends first time visitors to a splash page. The page they were trying to
reach is remembered in an entrance cookie so the splash page can offer a
"continue" link back to it. Visiting the splash page sets the flag cookie,
after which the visitor is no longer redirected until it expires.

The continue link is available to the splash page view as
`environ['splash.continue_url']`.

Example:

    import bottle
    from campaignkit.middleware import splash

    app = bottle.default_app()
    chain = splash.SplashMiddleware(app, 'seen-splash', '/splash/',
                                    expires_days=7,
                                    exempt_regexes=['^/static/'])
    bottle.run(app=chain)
"""

import datetime
import logging
import re

import webob
import webob.exc

LOG = logging.getLogger(__name__)

CONTINUE_URL_KEY = 'splash.continue_url'


class SplashMiddleware(object):  # pylint: disable=R0903

    """Redirects visitors without the flag cookie to a splash page."""

    def __init__(self, app, cookie_name, splash_url, expires_days=30,
                 entrance_cookie='splash-entrance', exempt_regexes=None):
        """Configure the redirect.

        :param cookie_name: name of the flag cookie set by the splash page
        :param splash_url: path (or URL) of the splash page
        :keyword expires_days: lifetime of both cookies, in days
        :keyword entrance_cookie: cookie remembering the requested path
        :keyword exempt_regexes: iterable of regexes matched against the path
            of requests that are never redirected (ex. static assets)
        """
        self.app = app
        self.cookie_name = cookie_name
        self.splash_url = splash_url
        self.splash_path = webob.Request.blank(splash_url).path
        self.expires_days = expires_days
        self.entrance_cookie = entrance_cookie
        self.exempt_regexes = [re.compile(r) for r in exempt_regexes or ()]

    @property
    def max_age(self):
        return datetime.timedelta(days=self.expires_days)

    def is_exempt(self, path):
        """Return True if requests for `path` are never redirected."""
        return any(r.match(path) for r in self.exempt_regexes)

    def __call__(self, environ, start_response):
        """Handle WSGI Request."""
        request = webob.Request(environ)
        if request.path == self.splash_path:
            return self.splash_page(request, environ, start_response)
        if (request.cookies.get(self.cookie_name) or
                self.is_exempt(request.path)):
            return self.app(environ, start_response)
        LOG.debug("No '%s' cookie. Redirecting %s to splash page",
                  self.cookie_name, request.path)
        response = webob.exc.HTTPFound(location=self.splash_url)
        response.set_cookie(self.entrance_cookie, request.path,
                            max_age=self.max_age, path='/')
        return response(environ, start_response)

    def splash_page(self, request, environ, start_response):
        """Serve the splash page and mark the visitor as having seen it."""
        environ[CONTINUE_URL_KEY] = (
            request.cookies.get(self.entrance_cookie) or '/')
        cookie = webob.Response()
        cookie.set_cookie(self.cookie_name, 'true', max_age=self.max_age,
                          path='/')
        return self.app(
            environ,
            self.start_response_callback(start_response,
                                         cookie.headers.getall('Set-Cookie')))

    @staticmethod
    def start_response_callback(start_response, cookies):
        """Intercept upstream start_response and adds our headers."""
        def callback(status, headers, exc_info=None):
            """Add our cookies to response using a closure."""
            headers.extend(('Set-Cookie', value) for value in cookies)
            # Call upstream start_response
            return start_response(status, headers, exc_info)
        return callback
