"""Flask configuration."""

import os

SECRET_KEY = os.environ.get('SECRET_KEY', 'asdf1234')
"""Signs the session cookie. Must be overridden in production."""

SERVER_NAME = os.environ.get('PORTAL_SERVER_NAME')

LOGFILE = os.environ.get('LOGFILE')
LOGLEVEL = int(os.environ.get('LOGLEVEL', 20))
LOG_JSON = bool(int(os.environ.get('LOG_JSON', '1')))
"""If 1, log records are written as JSON objects."""

SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI',
                                         'sqlite://')
SQLALCHEMY_TRACK_MODIFICATIONS = False
CREATE_DB = bool(int(os.environ.get('CREATE_DB', 0)))
"""If 1, tables are created when the application starts."""

PASSWORD_SCHEMES = os.environ.get('PASSWORD_SCHEMES', 'pbkdf2_sha256')
"""Space-delimited passlib schemes; the first is used for new hashes."""

CLIENT_SECRET_LENGTH = int(os.environ.get('CLIENT_SECRET_LENGTH', 48))
"""Length of generated client identifiers and secrets."""

SESSION_COOKIE_NAME = os.environ.get('SESSION_COOKIE_NAME', 'portal_session')
SESSION_COOKIE_SECURE = \
    bool(int(os.environ.get('AUTH_SESSION_COOKIE_SECURE', '1')))
SESSION_COOKIE_HTTPONLY = True

DEFAULT_LOGIN_REDIRECT_URL = os.environ.get('DEFAULT_LOGIN_REDIRECT_URL', '/')
