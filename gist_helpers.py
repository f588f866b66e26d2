def gist_payload(description, public, files):
    """Build a create/update body from ``{filename: text}``.

    A ``None`` text is kept as ``None``, which tells an update to delete
    that file.
    """
    file_data = dict(
        (filename, None if text is None else {'content': text})
        for filename, text in list(files.items())
    )
    return {'description': description, 'public': public, 'files': file_data}


def file_names(gist):
    return list((gist.get('files') or {}).keys())


def gist_resource_urls(api_url, gist_id):
    gist_url = '%s/gists/%s' % (api_url.rstrip('/'), gist_id)
    return {
        'url': gist_url,
        'forks_url': gist_url + '/forks',
        'commits_url': gist_url + '/commits',
        'comments_url': gist_url + '/comments',
    }


def listed_gist_ids(all_gists):
    return [gist['id'] for gist in all_gists or [] if gist.get('id')]
