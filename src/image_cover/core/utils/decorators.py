"""
Common decorators for record lifecycle phases.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from aws_lambda_powertools import Logger

from image_cover.core.models.errors import CoverError
from image_cover.core.models.state import LifecycleState

logger = Logger(service="image-cover-lifecycle", UTC=True)

ResultT = TypeVar("ResultT")


class PhaseOwnerProtocol(Protocol):
    """Object whose methods are lifecycle phases."""

    state: LifecycleState

    def finish_operation(self) -> None: ...


def _log_error(
    message: str,
    *,
    phase: str,
    record: Any,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        phase: Name of the lifecycle phase
        record: Record the phase ran for
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra: dict[str, Any] = {
        "phase": phase,
        "record_type": type(record).__name__,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if isinstance(exc, CoverError):
        log_extra["error_code"] = exc.error_code
        log_extra["details"] = exc.details

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def lifecycle_phase(
    state: LifecycleState,
) -> Callable[[Callable[..., ResultT]], Callable[..., ResultT]]:
    """
    Decorator for public lifecycle phase methods.

    Provides:
    - State transition on entry, DONE on success, FAILED on error
    - Structured logging of entry, exit and failures
    - Per-operation cleanup (resolved paths are forgotten) even on error

    Errors are always re-raised; known CoverErrors are logged as warnings,
    anything else with a traceback.

    Example:
        @lifecycle_phase(LifecycleState.SAVING)
        def save_image(self, record):
            ...
    """

    def decorator(func: Callable[..., ResultT]) -> Callable[..., ResultT]:
        @wraps(func)
        def wrapper(self: PhaseOwnerProtocol, record: Any, *args: Any, **kwargs: Any) -> ResultT:
            self.state = state
            logger.debug(
                "Lifecycle phase started",
                extra={"phase": func.__name__, "record_type": type(record).__name__},
            )

            try:
                result = func(self, record, *args, **kwargs)

            except CoverError as exc:
                self.state = LifecycleState.FAILED
                _log_error(
                    "Lifecycle phase failed",
                    phase=func.__name__,
                    record=record,
                    exc=exc,
                )
                raise

            except Exception as exc:
                self.state = LifecycleState.FAILED
                _log_error(
                    "Unexpected error in lifecycle phase",
                    phase=func.__name__,
                    record=record,
                    exc=exc,
                    level="exception",
                )
                raise

            finally:
                self.finish_operation()

            self.state = LifecycleState.DONE
            logger.debug(
                "Lifecycle phase finished",
                extra={"phase": func.__name__, "result": result},
            )
            return result

        return wrapper

    return decorator
