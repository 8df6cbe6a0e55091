"""Queue-to-IRC notification delivery."""

from modules.notify.bridge import NotificationBridge
from modules.notify.consumer import MAX_RETRIES, QueueConsumer
from modules.notify.dispatcher import DeliveryDispatcher, DeliveryOutcome
from modules.notify.errors import (
    NotificationDecodeError,
    NotifyBridgeError,
    QueueServiceError,
)
from modules.notify.factory import create_bridge
from modules.notify.models import Notification, QueueItem, is_valid_channel_name
from modules.notify.queue import NotificationQueue, PollConfig

__all__ = [
    "MAX_RETRIES",
    "DeliveryDispatcher",
    "DeliveryOutcome",
    "Notification",
    "NotificationBridge",
    "NotificationDecodeError",
    "NotificationQueue",
    "NotifyBridgeError",
    "PollConfig",
    "QueueConsumer",
    "QueueItem",
    "QueueServiceError",
    "create_bridge",
    "is_valid_channel_name",
]
