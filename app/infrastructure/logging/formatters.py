"""Custom structlog processors.

Each factory returns a processor with the structlog signature
`(logger, method_name, event_dict) -> event_dict`.
"""

from typing import Any, Callable, Dict, Iterable

EventDict = Dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

# Keys containing any of these (case-insensitive) are redacted. Receipt
# handles grant delete access to a received queue message.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "authorization",
        "credential",
        "receipt_handle",
    }
)

REDACTED = "***REDACTED***"


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Stamp every entry with the application name and version (git sha)."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["app_name"] = app_name
        event_dict["app_version"] = app_version
        return event_dict

    return processor


def _is_sensitive(key: str, patterns: Iterable[str]) -> bool:
    key = key.lower()
    return any(pattern in key for pattern in patterns)


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Redact values whose key looks like a secret.

    None values are left alone so "no password configured" stays visible.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return {
            key: mask_value
            if value is not None and _is_sensitive(key, patterns)
            else value
            for key, value in event_dict.items()
        }

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Cut string values longer than `max_length`.

    Notification bodies are arbitrary producer text.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
