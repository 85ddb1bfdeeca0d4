"""BaseService — shared invocation wrapper for helper-backed services.

Every service receives a :class:`UtilkitConfig` at construction time
(loaded via walk-up discovery when omitted) and runs core helpers
through :meth:`BaseService._run`, which turns contract violations into
failed results instead of exceptions.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from utilkit.config.logging import get_logger
from utilkit.config.models import UtilkitConfig
from utilkit.config.settings import load_config
from utilkit.core.errors import InvalidArgumentError
from utilkit.services.result import INVALID_ARGUMENT, ServiceError, ServiceResult

logger = get_logger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class StringService(BaseService):
            def slugify(self, text: str) -> ServiceResult:
                return self._run("slugify", slugify, text)
    """

    def __init__(self, config: UtilkitConfig | None = None) -> None:
        self._config = config if config is not None else load_config()

    @property
    def config(self) -> UtilkitConfig:
        return self._config

    def _run(self, op: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> ServiceResult:
        """Call *func* and wrap its return value in a ServiceResult.

        INVARIANT: Only InvalidArgumentError becomes a failed result;
        anything else propagates to the caller.
        """
        start = time.perf_counter()
        try:
            value = func(*args, **kwargs)
        except InvalidArgumentError as exc:
            logger.debug("operation rejected", op=op, reason=str(exc))
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=INVALID_ARGUMENT,
                    message=str(exc),
                    detail=exc.report().model_dump(),
                ),
            )
        duration_ms = round((time.perf_counter() - start) * 1000, 3)
        logger.debug("operation complete", op=op, duration_ms=duration_ms)
        return ServiceResult(
            ok=True,
            op=op,
            data={"result": value},
            meta={"duration_ms": duration_ms},
        )
