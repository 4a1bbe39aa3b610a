"""Ordered, paced delivery of a composed response with single-message fallback."""

import asyncio
import logging
from collections.abc import Sequence

from ai_search_bot.data import DeliveryOutcome, MessagePayload, PayloadSection
from ai_search_bot.fallback import or_default
from ai_search_bot.messaging.base import MessageChannel

logger = logging.getLogger(__name__)

SECTION_PAUSE_SECONDS = 0.3
RESULT_PAUSE_SECONDS = 0.4


class DeliverySequencer:
    """Send payloads strictly in order, pausing between sends.

    Chat clients may reorder messages that arrive in quick succession, so
    each send waits for the previous one and a fixed pause separates them:
    ``result_pause`` between two result payloads, ``section_pause`` otherwise.
    If any send fails, the rest of the sequence is abandoned and the
    combined fallback payload is sent once instead.

    Args:
        channel: Messaging channel to send through.
        section_pause: Seconds to wait around header, overview and footer.
        result_pause: Seconds to wait between consecutive result payloads.
    """

    def __init__(
        self,
        channel: MessageChannel,
        *,
        section_pause: float = SECTION_PAUSE_SECONDS,
        result_pause: float = RESULT_PAUSE_SECONDS,
    ) -> None:
        self._channel = channel
        self._section_pause = section_pause
        self._result_pause = result_pause

    async def deliver(
        self,
        target: int | str,
        payloads: Sequence[MessagePayload],
        fallback: MessagePayload,
    ) -> DeliveryOutcome:
        """Deliver the sequence, or the fallback payload if the sequence fails.

        Args:
            target: Chat identifier.
            payloads: Ordered payloads from the composer.
            fallback: Single combined payload used if any send fails.

        Returns:
            Which path delivered the response, or ``FAILED`` if neither did.
        """
        sent = await or_default(
            self._send_sequence(target, payloads),
            False,
            label=f"Multi-message delivery to {target}",
        )
        if sent:
            return DeliveryOutcome.SEQUENCE

        fallback_sent = await or_default(
            self._send_one(target, fallback),
            False,
            label=f"Fallback delivery to {target}",
        )
        if fallback_sent:
            return DeliveryOutcome.FALLBACK
        logger.error("Could not deliver results to %s", target)
        return DeliveryOutcome.FAILED

    def pause_before(self, previous: MessagePayload, current: MessagePayload) -> float:
        if previous.section == PayloadSection.RESULT and current.section == PayloadSection.RESULT:
            return self._result_pause
        return self._section_pause

    async def _send_sequence(self, target: int | str, payloads: Sequence[MessagePayload]) -> bool:
        previous: MessagePayload | None = None
        for payload in payloads:
            if previous is not None:
                pause = self.pause_before(previous, payload)
                if pause > 0:
                    await asyncio.sleep(pause)
            await self._channel.send(target, payload)
            previous = payload
        return True

    async def _send_one(self, target: int | str, payload: MessagePayload) -> bool:
        await self._channel.send(target, payload)
        return True
