"""Message channel that prints to a text stream, for local runs."""

import sys
from typing import TextIO

from ai_search_bot.data import MessagePayload

SEPARATOR = "-" * 60


class ConsoleChannel:
    """Write each payload body to a stream, separated by a rule.

    Args:
        stream: Output stream (defaults to stdout at send time).
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    async def send(self, target: int | str, payload: MessagePayload) -> None:
        stream = self._stream or sys.stdout
        stream.write(f"{payload.body}\n{SEPARATOR}\n")
        stream.flush()
