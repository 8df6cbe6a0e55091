"""AWS SQS client implementation.

Provides the queue operations the notification bridge consumes: resolving
a queue by name, long-poll receiving a batch, and deleting a message by
receipt handle. All calls go through `execute_aws_api_call` and return an
`OperationResult`.
"""

from typing import Optional

from botocore.config import Config  # type: ignore
import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()

# Extra socket read headroom on top of the long-poll wait
READ_TIMEOUT_MARGIN_SECONDS = 10


class SqsClient:
    """Client for AWS SQS operations.

    Args:
        session_provider: SessionProvider supplying region/endpoint/role
        default_role_arn: Optional role to assume for every call
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_role_arn: Optional[str] = None,
    ) -> None:
        self._session_provider = session_provider
        self._default_role_arn = default_role_arn
        self._service_name = "sqs"

    def _client_kwargs(self, read_timeout: Optional[int] = None) -> dict:
        client_kwargs = self._session_provider.build_client_kwargs(
            service_name=self._service_name,
            role_arn=self._default_role_arn,
        )
        if read_timeout is not None:
            client_config = dict(client_kwargs["client_config"] or {})
            client_config["config"] = Config(read_timeout=read_timeout)
            client_kwargs["client_config"] = client_config
        return client_kwargs

    def create_queue(self, queue_name: str) -> OperationResult:
        """Create the queue or resolve it when it already exists.

        CreateQueue is idempotent for an existing queue with the same
        attributes, so this doubles as a lookup by name.

        Returns:
            OperationResult whose `data` is the queue URL.
        """
        if not queue_name:
            raise ValueError("queue_name must not be empty")
        logger.info("creating_queue", service="sqs", queue_name=queue_name)
        result = execute_aws_api_call(
            self._service_name,
            "create_queue",
            QueueName=queue_name,
            **self._client_kwargs(),
        )
        if result.is_success:
            return OperationResult.success(
                data=result.data["QueueUrl"], message="queue resolved"
            )
        return result

    def receive_messages(
        self,
        queue_url: str,
        max_number_of_messages: int = 10,
        wait_time_seconds: int = 20,
        visibility_timeout: int = 30,
    ) -> OperationResult:
        """Long-poll a batch of messages, including their receive counts.

        Args:
            queue_url: The URL of the SQS queue.
            max_number_of_messages: Maximum messages to return (1-10).
            wait_time_seconds: Long-poll wait before returning empty (0-20).
            visibility_timeout: Seconds the returned messages stay hidden.

        Returns:
            OperationResult whose `data` is a (possibly empty) list of
            message dicts.
        """
        logger.debug(
            "receiving_messages",
            service="sqs",
            queue_url=queue_url,
            max_number_of_messages=max_number_of_messages,
            wait_time_seconds=wait_time_seconds,
        )
        result = execute_aws_api_call(
            self._service_name,
            "receive_message",
            QueueUrl=queue_url,
            AttributeNames=["ApproximateReceiveCount"],
            MaxNumberOfMessages=max_number_of_messages,
            VisibilityTimeout=visibility_timeout,
            WaitTimeSeconds=wait_time_seconds,
            **self._client_kwargs(
                read_timeout=wait_time_seconds + READ_TIMEOUT_MARGIN_SECONDS
            ),
        )
        if result.is_success:
            return OperationResult.success(
                data=result.data.get("Messages", []),
                message="messages received",
            )
        return result

    def delete_message(self, queue_url: str, receipt_handle: str) -> OperationResult:
        """Delete a message from the queue by its receipt handle."""
        logger.debug("deleting_message", service="sqs", queue_url=queue_url)
        return execute_aws_api_call(
            self._service_name,
            "delete_message",
            QueueUrl=queue_url,
            ReceiptHandle=receipt_handle,
            **self._client_kwargs(),
        )
