"""Region, endpoint and role configuration shared by AWS clients."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class SessionProvider:
    """Produces the keyword arguments `execute_aws_api_call` needs.

    Attributes:
        region: AWS region for sessions and clients
        service_role_map: service name -> role ARN to assume for that service
        endpoint_url: custom endpoint (LocalStack)
    """

    region: Optional[str] = None
    service_role_map: Dict[str, str] = field(default_factory=dict)
    endpoint_url: Optional[str] = None

    def get_role_arn_for_service(self, service_name: str) -> Optional[str]:
        return (self.service_role_map or {}).get(service_name)

    def build_client_kwargs(
        self,
        service_name: Optional[str] = None,
        role_arn: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build session_config/client_config/role_arn for one call.

        An explicit `role_arn` wins over the service's mapped role.
        """
        if role_arn is None and service_name:
            role_arn = self.get_role_arn_for_service(service_name)

        region = {"region_name": self.region} if self.region else {}
        client_config: Dict[str, Any] = dict(region)
        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            service_name=service_name,
            region=self.region,
            endpoint_url=self.endpoint_url,
            role_arn=role_arn,
        )
        return {
            "session_config": region or None,
            "client_config": client_config or None,
            "role_arn": role_arn,
        }
