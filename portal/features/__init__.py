"""
Features of the API client portal.

Each feature module provides a ``Form``, which validates raw input against a
:class:`portal.schema.Schema` and any checks that need the datastore, and a
``Service``, which runs the form and then performs the side effects of the
feature. Services are the only place where state is changed. Both return a
:class:`portal.result.Success` or :class:`portal.result.Failure`; expected
failures are never raised.
"""
