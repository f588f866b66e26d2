import logging
import os
from urllib.parse import quote

from dotenv import load_dotenv

DEFAULT_API_URL = 'https://api.github.com'
API_VERSION = '2022-11-28'
ACCEPT = 'application/vnd.github+json'
USER_AGENT = ('Mozilla/5.0 (Macintosh; Intel Mac OS X 11_0) AppleWebKit/537.36 '
              '(KHTML, like Gecko) Chrome/110.0.3659.806 Safari/537.36')
MAX_PER_PAGE = 100

logger = logging.getLogger(__name__)


def _flag(value):
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def environment_settings():
    """Read harness settings from the environment (and a local .env file)"""
    load_dotenv()
    return {
        'api_url': os.getenv('GIST_API_ENDPOINT', DEFAULT_API_URL),
        'enterprise_url': os.getenv('GIST_ENTERPRISE_URL'),
        'token': os.getenv('GITHUB_GIST_TOKEN'),
        'https_proxy': os.getenv('GIST_HTTPS_PROXY'),
        'per_page': os.getenv('GIST_PER_PAGE'),
        'allow_delete_all': os.getenv('GIST_ALLOW_DELETE_ALL', ''),
        'log_level': os.getenv('GIST_LOG_LEVEL', 'INFO'),
    }


class Settings(object):
    def __init__(self, **overrides):
        self.loaded_settings = environment_settings()
        self.loaded_settings.update(overrides)
        self.get = self.loaded_settings.get
        self.load()

    def load(self):
        self.API_URL = (self.get('api_url') or DEFAULT_API_URL).rstrip('/')

        # Enterprise support
        if self.get('enterprise_url'):
            self.API_URL = self.get('enterprise_url').rstrip('/') + '/api/v3'

        self.GISTS_URL = self.API_URL + '/gists'

        self.token = self.get('token') or None
        self.https_proxy = self.get('https_proxy') or None
        self.allow_delete_all = _flag(self.get('allow_delete_all'))
        self.per_page = clamp_per_page(self.get('per_page'))

    def gist_url(self, gist_id):
        return '%s/%s' % (self.GISTS_URL, quote(str(gist_id), safe=''))

    def star_url(self, gist_id):
        return self.gist_url(gist_id) + '/star'


def clamp_per_page(per_page):
    if per_page in (None, ''):
        return None

    try:
        per_page = int(per_page)
    except (TypeError, ValueError):
        logger.warning('Ignoring non-integer per_page value %r', per_page)
        return None

    if per_page < 1:
        logger.warning('per_page must be at least 1, got %d', per_page)
        return 1
    if per_page > MAX_PER_PAGE:
        logger.warning('GitHub API does not support a per_page value higher than %d', MAX_PER_PAGE)
        return MAX_PER_PAGE

    return per_page


def configure_logging(level=None):
    level = level or os.getenv('GIST_LOG_LEVEL', 'INFO')
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
