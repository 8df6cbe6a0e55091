"""Unit tests for modules.notify.models."""

import pytest

from modules.notify.errors import NotificationDecodeError
from modules.notify.models import Notification, QueueItem, is_valid_channel_name


@pytest.mark.unit
class TestChannelNames:
    @pytest.mark.parametrize("name", ["#ops", "&local", "#a", "#" + "x" * 199])
    def test_valid_channel_names(self, name):
        assert is_valid_channel_name(name)

    @pytest.mark.parametrize(
        "name",
        ["ops", "#", "#has space", "#a,b", "#bell\x07", "#" + "x" * 200, "+modeless"],
    )
    def test_invalid_channel_names(self, name):
        assert not is_valid_channel_name(name)


@pytest.mark.unit
class TestNotification:
    def test_target_prefers_user(self):
        notification = Notification(channel="#ops", user="bob", message="hi")
        assert notification.target == "bob"

    def test_target_falls_back_to_channel(self):
        assert Notification(channel="#ops", message="hi").target == "#ops"

    def test_target_none_without_recipient(self):
        assert Notification(message="hi").target is None

    def test_empty_strings_are_not_targets(self):
        assert Notification(channel="", user="", message="hi").target is None

    def test_unknown_fields_ignored(self):
        notification = Notification.model_validate(
            {"channel": "#ops", "message": "hi", "priority": "high"}
        )
        assert notification.channel == "#ops"


@pytest.mark.unit
class TestQueueItem:
    def test_from_sqs_message(self):
        item = QueueItem.from_sqs_message(
            {
                "MessageId": "m-1",
                "ReceiptHandle": "rh-1",
                "Body": '{"user": "bob", "message": "hi"}',
                "Attributes": {"ApproximateReceiveCount": "3"},
            }
        )
        assert item.message_id == "m-1"
        assert item.receipt_handle == "rh-1"
        assert item.attempt_count == 3

    def test_from_sqs_message_without_attributes_counts_one_attempt(self):
        item = QueueItem.from_sqs_message({"ReceiptHandle": "rh", "Body": "{}"})
        assert item.attempt_count == 1
        assert item.message_id == ""

    def test_decode_valid_body(self, queue_item_factory):
        item = queue_item_factory(body='{"channel": "#ops", "message": "deployed"}')
        notification = item.decode()
        assert notification.channel == "#ops"
        assert notification.message == "deployed"
        assert notification.user is None

    @pytest.mark.parametrize(
        "body",
        ["not json", '{"channel": "#ops"}', "[1, 2]", '{"message": 42}', ""],
    )
    def test_decode_invalid_body_raises(self, queue_item_factory, body):
        item = queue_item_factory(body=body)
        with pytest.raises(NotificationDecodeError):
            item.decode()
