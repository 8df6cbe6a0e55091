"""Infrastructure AWS clients public API.

DI-friendly AWS clients built on the shared executor:

    from infrastructure.clients.aws import SessionProvider, SqsClient

    sqs = SqsClient(SessionProvider(region="ca-central-1"))
    result = sqs.create_queue("irc-notifications")
    if result.is_success:
        queue_url = result.data
"""

from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.sqs import SqsClient

__all__ = [
    "SessionProvider",
    "SqsClient",
]
