import contextlib
import json
import logging
import urllib.request as urllib
from urllib.error import HTTPError

logger = logging.getLogger(__name__)


class Response(object):
    """Status line, headers and raw body of one API reply.

    The body is decoded only when ``json()`` or ``text`` is accessed.
    """

    def __init__(self, status, reason, headers, body):
        self.status = status
        self.reason = reason
        self.headers = headers
        self.body = body or b''
        self._json = None
        self._parsed = False

    @property
    def ok(self):
        return 200 <= self.status < 300

    @property
    def text(self):
        return self.body.decode('utf8', 'ignore')

    def json(self):
        if not self._parsed:
            text = self.text
            self._json = json.loads(text) if text.strip() else None
            self._parsed = True
        return self._json

    def __repr__(self):
        return '<Response [%d]>' % self.status


def api_request(url, data=None, headers=None, https_proxy=None, method=None):
    request = urllib.Request(url, method=method)

    for name, value in (headers or {}).items():
        request.add_header(name, value)

    if data is not None:
        request.add_header('Content-Type', 'application/json')
        request.data = bytes(data.encode('utf8'))

    logger.debug('API request: %s %s', request.get_method(), request.get_full_url())

    if https_proxy:
        opener = urllib.build_opener(
            urllib.HTTPHandler(),
            urllib.HTTPSHandler(),
            urllib.ProxyHandler({'https': https_proxy}),
        )
        open_url = opener.open
    else:
        open_url = urllib.urlopen

    try:
        with contextlib.closing(open_url(request)) as response:
            result = Response(response.status, response.reason, response.headers, response.read())

    except HTTPError as err:
        with contextlib.closing(err):
            result = Response(err.code, err.reason, err.headers, err.read())

    logger.debug('API response: %d for %s %s', result.status, request.get_method(), url)
    return result
