import json
import logging
from urllib.parse import urlencode

from gist_auth import INVALID, VALID, CredentialSets
from gist_exceptions import CleanupNotAllowedException
from gist_helpers import listed_gist_ids
from gist_request import api_request
from gist_settings import MAX_PER_PAGE, Settings, clamp_per_page

__all__ = [
    'VALID', 'INVALID', 'GistConnection',
    'create_gist', 'update_gist', 'delete_gist', 'get_gist', 'list_gists',
    'star_gist', 'unstar_gist', 'is_gist_starred', 'delete_all_gists',
]

logger = logging.getLogger(__name__)


class GistConnection(object):
    """Endpoint, credential sets and proxy that every call goes through"""

    def __init__(self, settings=None, credentials=None):
        self.settings = settings if settings is not None else Settings()
        self.credentials = credentials if credentials is not None else CredentialSets(self.settings)

    @property
    def api_url(self):
        return self.settings.API_URL

    @property
    def https_proxy(self):
        return self.settings.https_proxy

    def headers(self, credentials=VALID):
        return self.credentials.headers(credentials)

    def call(self, method, url, payload=None, credentials=VALID):
        data = json.dumps(payload) if payload is not None else None
        return api_request(url, data, headers=self.headers(credentials),
                           https_proxy=self.https_proxy, method=method)


def create_gist(connection, payload, credentials=VALID):
    return connection.call('POST', connection.settings.GISTS_URL, payload, credentials)


def update_gist(connection, gist_id, payload, credentials=VALID):
    return connection.call('PATCH', connection.settings.gist_url(gist_id), payload, credentials)


def delete_gist(connection, gist_id, credentials=VALID):
    return connection.call('DELETE', connection.settings.gist_url(gist_id), credentials=credentials)


def get_gist(connection, gist_id, credentials=VALID):
    return connection.call('GET', connection.settings.gist_url(gist_id), credentials=credentials)


def list_gists(connection, credentials=VALID, per_page=None, page=None):
    url = connection.settings.GISTS_URL

    query = {}
    per_page = clamp_per_page(per_page) if per_page is not None else connection.settings.per_page
    if per_page:
        query['per_page'] = per_page
    if page:
        query['page'] = page
    if query:
        url += '?' + urlencode(query)

    return connection.call('GET', url, credentials=credentials)


def star_gist(connection, gist_id, credentials=VALID):
    return connection.call('PUT', connection.settings.star_url(gist_id), credentials=credentials)


def unstar_gist(connection, gist_id, credentials=VALID):
    return connection.call('DELETE', connection.settings.star_url(gist_id), credentials=credentials)


def is_gist_starred(connection, gist_id, credentials=VALID):
    return connection.call('GET', connection.settings.star_url(gist_id), credentials=credentials)


def delete_all_gists(connection, allow=None):
    """Delete every gist of the authenticated account.

    Refuses unless ``allow`` is true or, when ``allow`` is None, the
    connection settings opt in with GIST_ALLOW_DELETE_ALL. Gists that are
    already gone (404) count as deleted.
    """
    if allow is None:
        allow = connection.settings.allow_delete_all
    if not allow:
        raise CleanupNotAllowedException('Bulk gist deletion is disabled; set GIST_ALLOW_DELETE_ALL to enable it')

    deleted = []

    while True:
        response = list_gists(connection, per_page=MAX_PER_PAGE)
        if response.status != 200:
            logger.error('Listing gists failed with %d, stopping cleanup', response.status)
            break

        gist_ids = listed_gist_ids(response.json())
        if not gist_ids:
            break

        removed = 0
        for gist_id in gist_ids:
            if gist_id in deleted:
                continue

            result = delete_gist(connection, gist_id)
            if result.status in (204, 404):
                deleted.append(gist_id)
                removed += 1
            else:
                logger.warning('Could not delete gist %s: %d', gist_id, result.status)

        if not removed:
            break

    logger.info('Deleted %d gist(s)', len(deleted))
    return deleted
