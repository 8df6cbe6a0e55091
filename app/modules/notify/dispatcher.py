"""Turns a notification into IRC actions."""

from enum import Enum
from typing import Protocol

from infrastructure.clients.irc.text import target_fits
from infrastructure.logging import get_module_logger
from modules.notify.models import Notification, is_valid_channel_name

logger = get_module_logger()


class DeliveryOutcome(Enum):
    """Outcome of a dispatch that did not raise.

    Both outcomes mean the queue item is finished with and can be deleted.
    """

    DELIVERED = "delivered"
    DISCARDED = "discarded"


class ChatSession(Protocol):
    """The session operations the dispatcher relies on."""

    def join_channel(self, name: str) -> bool: ...

    def send(self, target: str, message: str) -> None: ...


class DeliveryDispatcher:
    """Validates a notification and delivers it through a chat session.

    Session errors are not caught here; the consumer decides whether the
    item is retried.
    """

    def __init__(self, session: ChatSession) -> None:
        self._session = session

    def dispatch(self, notification: Notification) -> DeliveryOutcome:
        channel = notification.channel
        if channel and not is_valid_channel_name(channel):
            logger.warning(
                "notification_discarded", reason="invalid_channel", channel=channel
            )
            return DeliveryOutcome.DISCARDED

        target = notification.target
        if not target:
            logger.info("notification_discarded", reason="no_target")
            return DeliveryOutcome.DISCARDED

        if not target_fits(target):
            logger.warning(
                "notification_discarded", reason="target_too_long", target=target
            )
            return DeliveryOutcome.DISCARDED

        logger.info("sending_notification", target=target, channel=channel)
        if channel:
            self._session.join_channel(channel)
        self._session.send(target, notification.message)
        return DeliveryOutcome.DELIVERED
