"""
Centralized exception handling decorator for API route functions.

The forecast engine itself degrades gracefully instead of raising, so anything
reaching this decorator is either a deliberate :class:`fastapi.HTTPException`
or a defect. The former is propagated untouched; the latter is logged with its
traceback and turned into a ``500`` whose detail is the exception message.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable, TypeVar, cast

from fastapi import HTTPException

F = TypeVar("F", bound=Callable[..., Any])

log = logging.getLogger(__name__)


def _internal_error(func: Callable[..., Any], exc: Exception) -> HTTPException:
    log.exception("unhandled error in %s: %s", func.__name__, exc)
    return HTTPException(status_code=500, detail=str(exc))


def handle_exceptions(func: F) -> F:
    """Decorator that converts uncaught exceptions to HTTP errors.

    Works with both regular and async route handlers.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                raise _internal_error(func, exc) from exc

        return cast(F, async_wrapper)

    @wraps(func)
    def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            raise _internal_error(func, exc) from exc

    return cast(F, sync_wrapper)
