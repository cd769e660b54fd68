"""
Service layer.

``event_fields``, ``event_formatting`` and ``event_ordering`` are pure
helpers over request-scoped data.  ``event_service`` wires them into
the list and detail pipelines on top of ``ticketmaster_client``.
``account_service`` handles registration and sign in.
"""
