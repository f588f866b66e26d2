from unittest import TestCase

import gist_helpers
from tests.stubs import github_api


class TestGistHelpers(TestCase):
    def test_gist_payload(self):
        payload = gist_helpers.gist_payload('some description', True, {
            'some_file1.txt': 'some content',
            'some_file2.txt': 'another content',
        })
        self.assertEqual(payload, {
            'description': 'some description',
            'public': True,
            'files': {
                'some_file1.txt': {'content': 'some content'},
                'some_file2.txt': {'content': 'another content'},
            },
        })
        self.assertEqual(list(payload['files']), ['some_file1.txt', 'some_file2.txt'])

    def test_gist_payload_keeps_delete_marker(self):
        payload = gist_helpers.gist_payload('', False, {'old.txt': None, 'empty.txt': ''})
        self.assertIsNone(payload['files']['old.txt'])
        self.assertEqual(payload['files']['empty.txt'], {'content': ''})

    def test_file_names(self):
        self.assertEqual(gist_helpers.file_names(github_api.GIST_LIST[1]), ['file_one.py', 'file_two.py'])
        self.assertEqual(gist_helpers.file_names({'files': None}), [])
        self.assertEqual(gist_helpers.file_names({}), [])

    def test_gist_resource_urls(self):
        urls = gist_helpers.gist_resource_urls(github_api.API_URL + '/', github_api.CREATED_GIST['id'])
        for name, url in urls.items():
            self.assertEqual(url, github_api.CREATED_GIST[name])

    def test_listed_gist_ids(self):
        gist_ids = gist_helpers.listed_gist_ids(github_api.GIST_LIST + [{'files': {'a.txt': {}}}])
        self.assertEqual(gist_ids, ['gist1', 'gist2', 'gist3'])
        self.assertEqual(gist_helpers.listed_gist_ids(None), [])
