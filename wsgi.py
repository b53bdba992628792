"""Web Server Gateway Interface entry-point."""

import os

from portal.factory import create_web_app

__flask_app__ = create_web_app()


def application(environ, start_response):    # type: ignore
    """WSGI application."""
    for key, value in environ.items():
        # Keep SERVER_NAME as configured; a container host name passed in by
        # the server is no use for building URLs.
        if key == 'SERVER_NAME':
            continue
        os.environ[key] = str(value)
        __flask_app__.config[key] = str(value)
    return __flask_app__(environ, start_response)
