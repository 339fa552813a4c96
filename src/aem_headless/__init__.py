"""Python client for the AEM headless GraphQL endpoint."""

from .core.errors import SDKError
from .sdk.client import AEMHeadless

__all__ = ["AEMHeadless", "SDKError"]
