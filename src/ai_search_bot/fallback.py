"""Result-or-default combinator for best-effort operations."""

import logging
from collections.abc import Awaitable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def or_default(operation: Awaitable[T | None], default: T, *, label: str) -> T:
    """Await ``operation`` and substitute ``default`` if it fails or yields nothing.

    Any ``Exception`` raised by the operation is logged and swallowed. A
    result of ``None`` or an empty string is treated the same as a failure.

    Args:
        operation: The awaitable to run.
        default: Value returned on failure or empty result.
        label: Short description used in log messages.

    Returns:
        The operation's result, or ``default``.
    """
    try:
        result = await operation
    except Exception as e:
        logger.warning("%s failed, using default: %s", label, e)
        return default

    if result is None or result == "":
        logger.info("%s returned nothing, using default", label)
        return default
    return result
