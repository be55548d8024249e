"""
Content API client for the GraphQL gateway.

This module turns GraphQL documents into lists of loosely-typed records:
- one POST per request, no retry and no circuit breaker
- transport and query failures raised as extraction errors at this boundary
- offset/limit pagination helpers for the transformers
"""

from typing import Any, Dict, List, Optional
import logging

import httpx

from core.config import settings
from core.exceptions import (
    APIExtractionError,
    AuthenticationError,
    GraphQLQueryError,
    NetworkError,
)

logger = logging.getLogger(__name__)


def _operation_name(query: str) -> str:
    """First token after the operation keyword, for error context."""
    tokens = query.replace("(", " ").replace("{", " ").split()
    for index, token in enumerate(tokens[:-1]):
        if token in ("query", "mutation"):
            return tokens[index + 1]
    return "anonymous"


class GraphQLExtractor:
    """
    Issue GraphQL queries against the content gateway.

    The extractor owns its httpx client unless one is injected, and is used
    as an async context manager:

        async with GraphQLExtractor() as client:
            rows = await client.fetch_page(query, "videos", offset=0, limit=100)

    Attributes:
        api_url: Gateway endpoint
        client_name: Sent as x-graphql-client-name
        client_version: Sent as x-graphql-client-version
        timeout: Request timeout in seconds, None to wait indefinitely
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        client_name: Optional[str] = None,
        client_version: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        self.api_url = api_url or settings.API_URL
        self.client_name = client_name or settings.API_CLIENT_NAME
        self.client_version = client_version if client_version is not None else settings.GIT_COMMIT_SHA
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-graphql-client-name": self.client_name,
            "x-graphql-client-version": self.client_version,
        }

    async def __aenter__(self) -> "GraphQLExtractor":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()

    async def aclose(self):
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def query(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run one GraphQL document and return its data object.

        Raises:
            NetworkError: Connection failures and timeouts
            AuthenticationError: HTTP 401 or 403
            APIExtractionError: Any other HTTP error or a non-JSON body
            GraphQLQueryError: The response carries an errors array
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)

        operation = _operation_name(query)
        payload = {"query": query, "variables": variables or {}}

        try:
            response = await self._client.post(self.api_url, json=payload, headers=self.headers)
        except httpx.TransportError as e:
            raise NetworkError(
                f"Request to content API failed for {operation}",
                context={"api_url": self.api_url, "operation": operation},
                original_exception=e
            )

        if response.status_code in (401, 403):
            raise AuthenticationError(
                f"Content API rejected the client for {operation}",
                context={
                    "api_url": self.api_url,
                    "operation": operation,
                    "status_code": response.status_code
                }
            )

        if response.status_code >= 400:
            raise APIExtractionError(
                f"Content API returned HTTP {response.status_code} for {operation}",
                context={
                    "api_url": self.api_url,
                    "operation": operation,
                    "status_code": response.status_code,
                    "response_body": response.text[:500]  # Truncate
                }
            )

        try:
            body = response.json()
        except ValueError as e:
            raise APIExtractionError(
                "Failed to parse JSON response",
                context={
                    "api_url": self.api_url,
                    "operation": operation,
                    "response_body": response.text[:500]
                },
                original_exception=e
            )

        if not isinstance(body, dict):
            raise APIExtractionError(
                f"Content API returned a non-object JSON body for {operation}",
                context={
                    "api_url": self.api_url,
                    "operation": operation,
                    "response_body": response.text[:500]
                }
            )

        if body.get("errors"):
            messages = [error.get("message", "") for error in body["errors"]]
            raise GraphQLQueryError(
                f"Query {operation} failed: {'; '.join(messages)}",
                context={"api_url": self.api_url, "operation": operation, "errors": messages}
            )

        return body.get("data") or {}

    async def fetch_all(
        self,
        query: str,
        root_field: str,
        variables: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Fetch a whole unpaginated collection."""
        data = await self.query(query, variables)
        records = data.get(root_field) or []
        logger.debug(f"Fetched {len(records)} {root_field}")
        return records

    async def fetch_page(
        self,
        query: str,
        root_field: str,
        offset: int,
        limit: int,
        variables: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Fetch one page; an empty list means the collection is exhausted."""
        page_variables = {**(variables or {}), "offset": offset, "limit": limit}
        data = await self.query(query, page_variables)
        records = data.get(root_field) or []
        logger.debug(f"Fetched {len(records)} {root_field} at offset {offset}")
        return records
