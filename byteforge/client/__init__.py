"""
HTTP client for the content API
"""
from byteforge.client.content_client import ContentClient, ContentClientError

__all__ = ["ContentClient", "ContentClientError"]
