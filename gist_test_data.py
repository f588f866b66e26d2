import copy

from gist_helpers import gist_payload

CREATE_GIST_TEST_DATA = {
    'valid_public_gist': gist_payload('Public Gist', True, {
        'public-gist.txt': 'This is a test public gist.',
    }),
    'valid_private_gist': gist_payload('Private Gist', False, {
        'private-gist.txt': 'This is a test private gist.',
    }),
    'empty_description': gist_payload('', True, {
        'empty-desc.txt': 'This is a valid gist.',
    }),
    'no_files': gist_payload('Missing file', True, {}),
    'empty_file_content': gist_payload('Empty file content', True, {
        'empty.txt': '',
    }),
    'multiple_files': gist_payload('Public Gist', True, {
        'public-gist-1.txt': 'This is a test public gist 1.',
        'public-gist-2.txt': 'This is a test public gist 2.',
    }),
}

UPDATE_GIST_TEST_DATA = {
    'update_description_and_content': gist_payload('Updated Public Gist', True, {
        'public-gist.txt': 'This is a updated test public gist.',
    }),
    'rename_file': gist_payload('Public Gist', True, {
        'new-public-gist.txt': 'This is a test public gist.',
        'public-gist.txt': None,
    }),
    'delete_file': gist_payload('Public Gist', True, {
        'public-gist.txt': None,
    }),
    'update_multiple_files': gist_payload('Updated Public Gist', True, {
        'public-gist-1.txt': 'This is a updated test public gist 1.',
        'public-gist-2.txt': 'This is a updated test public gist 2.',
    }),
}

ERROR_MESSAGES = {
    'validation_failed_message': 'Validation Failed',
    'validation_failed_code': 'missing_field',
    'validation_failed_field': 'files',
    'unauthorized_message': 'Bad credentials',
    'not_found_message': 'Not Found',
}


def create_gist_data(name):
    return copy.deepcopy(CREATE_GIST_TEST_DATA[name])


def update_gist_data(name):
    return copy.deepcopy(UPDATE_GIST_TEST_DATA[name])


def error_messages():
    return dict(ERROR_MESSAGES)
