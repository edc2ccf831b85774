"""
Pastoral Admin Backend — Service Base
=======================================

What:  Logger injection and the single place where unexpected failures are
       logged and turned into InternalError.
"""

import logging
from typing import Any, Optional

from pastoral_admin.exceptions import InternalError


class BaseService:
    """
    Common constructor for the domain services.

    Services receive their repositories and a logger explicitly; when no
    logger is passed they log under their own module name.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(type(self).__module__)

    def _internal(self, action: str, exc: BaseException, **context: Any) -> InternalError:
        """
        Log a failed step with its cause and return the opaque error to raise.

        The cause stays in the log and in InternalError.context; the client
        only ever sees the generic message.
        """
        ctx = {key: str(value) for key, value in context.items()}
        self.logger.error(
            "Failed to %s: %s: %s %s",
            action,
            type(exc).__name__,
            exc,
            ctx,
            exc_info=exc,
        )
        ctx["action"] = action
        ctx["error_type"] = type(exc).__name__
        return InternalError(context=ctx)
