class GistHarnessException(Exception):
    pass


class MissingCredentialsException(GistHarnessException):
    pass


class CleanupNotAllowedException(GistHarnessException):
    pass
