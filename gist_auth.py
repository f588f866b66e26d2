from types import MappingProxyType

from gist_exceptions import MissingCredentialsException
from gist_settings import ACCEPT, API_VERSION, USER_AGENT

VALID = 'valid'
INVALID = 'invalid'

INVALID_TOKEN = 'MY_DUMMY_TOKEN'


def _headers(token):
    return MappingProxyType({
        'Authorization': 'Bearer ' + token,
        'Accept': ACCEPT,
        'X-GitHub-Api-Version': API_VERSION,
        'User-Agent': USER_AGENT,
    })


def valid_headers(settings):
    if not settings.token:
        raise MissingCredentialsException('GITHUB_GIST_TOKEN is not set')

    return _headers(settings.token)


def invalid_headers(settings):
    return _headers(INVALID_TOKEN)


class CredentialSets(object):
    """Both header variants, built once and shared read-only"""

    def __init__(self, settings):
        try:
            self._valid = valid_headers(settings)
        except MissingCredentialsException:
            self._valid = None
        self._invalid = invalid_headers(settings)

    def headers(self, selector=VALID):
        if selector == VALID:
            if self._valid is None:
                raise MissingCredentialsException('GITHUB_GIST_TOKEN is not set')
            return self._valid
        if selector == INVALID:
            return self._invalid

        raise ValueError('Unknown credential set: %r' % (selector,))

    @property
    def has_valid(self):
        return self._valid is not None
