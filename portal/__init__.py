"""
API client portal

The portal is a Flask application where people register a user account, log
in, and manage the API clients they own. Each client has a name, an HTTPS
callback URL, and a generated client identifier and secret.

The application is layered:

- :mod:`portal.features` holds one module per use case. Each provides a
  ``Form`` that validates submitted data and a ``Service`` that carries out
  the operation. Both return a :class:`portal.result.Result` rather than
  raising.
- :mod:`portal.services` integrates with the database, password hashing,
  and secret generation.
- :mod:`portal.controllers` turns results into response data, and
  :mod:`portal.routes` exposes them over HTTP.

"""
