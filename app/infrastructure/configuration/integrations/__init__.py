"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.integrations.irc import IrcSettings

__all__ = [
    "AwsSettings",
    "IrcSettings",
]
