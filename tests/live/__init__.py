"""Scenarios against the live Gist API.

Skipped unless GITHUB_GIST_TOKEN is set (directly or through a .env file).
Every scenario creates its own gists and deletes them on teardown.
"""
from unittest import SkipTest, TestCase

import gist
from gist_helpers import file_names, gist_resource_urls
from gist_settings import Settings, configure_logging


class LiveGistTestCase(TestCase):
    @classmethod
    def setUpClass(cls):
        settings = Settings()
        if not settings.token:
            raise SkipTest('GITHUB_GIST_TOKEN is not set')

        configure_logging(settings.get('log_level'))
        cls.connection = gist.GistConnection(settings)

    def create_gist(self, payload):
        """Create a gist for this scenario and return its id and body"""
        response = gist.create_gist(self.connection, payload)
        self.assertEqual(response.status, 201)
        body = response.json()
        self.addCleanup(gist.delete_gist, self.connection, body['id'])
        return body['id'], body

    def assertErrorBody(self, response, status, message):
        self.assertEqual(response.status, status)
        body = response.json()
        self.assertIn(message, body['message'])
        return body

    def assertGistBody(self, body, payload):
        gist_id = body['id']

        self.assertEqual(body['description'], payload['description'])
        self.assertEqual(body['public'], payload['public'])

        expected_names = [name for name, data in payload['files'].items() if data is not None]
        self.assertEqual(file_names(body), expected_names)
        for name in expected_names:
            self.assertEqual(body['files'][name]['type'], 'text/plain')
            self.assertEqual(body['files'][name]['language'], 'Text')
            self.assertIn(gist_id, body['files'][name]['raw_url'])

        for name, url in gist_resource_urls(self.connection.api_url, gist_id).items():
            self.assertEqual(body[name], url)
        for name in ('git_pull_url', 'git_push_url', 'html_url'):
            self.assertIn(gist_id, body[name])

        self.assertFalse(body['truncated'])
        self.assertEqual(body['comments'], 0)
        self.assertTrue(body['comments_enabled'])
