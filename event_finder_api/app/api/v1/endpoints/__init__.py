"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (events, discovery,
accounts).  The routers are aggregated in ``router.py``.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, Request, status


GENERIC_ERROR = "Internal server error."


def forwarded_params(request: Request) -> Dict[str, Any]:
    """Caller query parameters, ready to pass upstream.

    A repeated parameter keeps every value, in order, as a list; httpx
    sends a list back out as repeated keys.
    """
    params: Dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key not in params:
            params[key] = value
        elif isinstance(params[key], list):
            params[key].append(value)
        else:
            params[key] = [params[key], value]
    return params


def internal_error(logger: logging.Logger, exc: Exception) -> HTTPException:
    """Log ``exc`` with its traceback and return a generic 500."""
    logger.exception("Request failed with %s: %s", type(exc).__name__, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=GENERIC_ERROR
    )
