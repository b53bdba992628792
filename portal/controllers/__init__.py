"""
Request controllers for the portal.

Controllers sit between the routes and the features: they assemble a feature
service, call it, and turn every :class:`portal.result.Result` the service
documents into response data, a status code, and headers. A result shape
that a controller does not recognize is a programming error and is raised as
an :class:`werkzeug.exceptions.InternalServerError`.
"""
