"""AWS integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for services (default: ca-central-1)
        AWS_ENDPOINT_URL: Custom endpoint URL (LocalStack, testing)
        SQS_ROLE_ARN: Role to assume for SQS calls (cross-account queues)

    Example:
        ```python
        from infrastructure.configuration import settings

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    AWS_ENDPOINT_URL: str | None = Field(default=None, alias="AWS_ENDPOINT_URL")
    SQS_ROLE_ARN: str | None = Field(default=None, alias="SQS_ROLE_ARN")

    @property
    def SERVICE_ROLE_MAP(self) -> dict[str, str]:
        """Mapping of service names to their associated role ARNs.

        Returns:
            Dict mapping service identifiers to role ARNs
        """
        if not self.SQS_ROLE_ARN:
            return {}
        return {"sqs": self.SQS_ROLE_ARN}
