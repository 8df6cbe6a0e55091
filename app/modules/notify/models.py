"""Notification and queue item models.

`Notification` is the JSON contract producers put on the queue, validated
with Pydantic. `QueueItem` is the read-only envelope the queue service
wraps around it.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from modules.notify.errors import NotificationDecodeError

# Leading '#' or '&', then 1-199 characters that are not space, comma or BEL
CHANNEL_NAME_PATTERN = re.compile(r"[#&][^ ,\x07]{1,199}")


def is_valid_channel_name(name: str) -> bool:
    """Check a channel name against the IRC channel-name grammar."""
    return CHANNEL_NAME_PATTERN.fullmatch(name) is not None


class Notification(BaseModel):
    """A message to post to an IRC user or channel.

    When both `user` and `channel` are set, the channel is joined and the
    message goes to the user.
    """

    model_config = ConfigDict(extra="ignore")

    channel: Optional[str] = None
    user: Optional[str] = None
    message: str

    @property
    def target(self) -> Optional[str]:
        """The nick or channel the message is sent to."""
        return self.user or self.channel or None


@dataclass(frozen=True)
class QueueItem:
    """A received queue message.

    Attributes:
        message_id: Queue-assigned message identifier
        receipt_handle: Handle required to delete this receipt of the message
        body: Raw UTF-8 message body (JSON notification)
        attempt_count: Approximate number of times the message was received
    """

    message_id: str
    receipt_handle: str
    body: str
    attempt_count: int

    @classmethod
    def from_sqs_message(cls, message: Dict[str, Any]) -> "QueueItem":
        """Build a QueueItem from an SQS ReceiveMessage entry."""
        attributes = message.get("Attributes") or {}
        return cls(
            message_id=message.get("MessageId", ""),
            receipt_handle=message["ReceiptHandle"],
            body=message.get("Body", ""),
            attempt_count=int(attributes.get("ApproximateReceiveCount", 1)),
        )

    def decode(self) -> Notification:
        """Parse the body into a Notification.

        Raises:
            NotificationDecodeError: body is not JSON of the notification shape
        """
        try:
            return Notification.model_validate_json(self.body)
        except ValidationError as e:
            raise NotificationDecodeError(
                f"message {self.message_id} is not a valid notification: {e}"
            ) from e
