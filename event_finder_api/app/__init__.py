"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds
configuration, logging, errors and the credential store; ``schemas``
defines the response and request bodies; ``services`` contains the
event normalisation pipeline, the upstream client and the account
logic; ``api`` exposes versioned routers.
"""

from .main import app  # noqa: F401
