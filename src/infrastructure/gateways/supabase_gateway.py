"""
Infrastructure Gateway - Supabase REST

This module implements read access to the hosted data backend through its
PostgREST interface (``/rest/v1/<table>``). Row-level security on the backend
scopes every query to the tenant identified by the bearer token.
"""

from typing import Any, Dict, List, Optional

import httpx
import structlog

from src.domain.entities.errors import DataBackendError

logger = structlog.get_logger(__name__)

RANGE_NOT_SATISFIABLE = 416


class SupabaseGateway:
    """Thin async client for PostgREST table reads."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        page_size: int = 1000,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Project URL (e.g., "https://abc.supabase.co")
            api_key: Project API key sent in the ``apikey`` header
            timeout: Request timeout in seconds
            page_size: Rows requested per page
        """
        if page_size <= 0:
            raise ValueError("page_size must be positive")

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.page_size = page_size

    def _headers(self, access_token: Optional[str]) -> Dict[str, str]:
        headers = {"apikey": self.api_key, "Accept": "application/json"}
        # The API key is never sent as the bearer
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def select(
        self,
        table: str,
        *,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        columns: str = "*",
        access_token: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Read every row of ``table`` matching the equality filters.

        Pages through the table with ``Range`` headers until a short page is
        returned.

        Args:
            table: Table name
            filters: Column equality filters (``{"status": "completed"}``)
            order: PostgREST order clause (e.g., ``"created_at.asc"``)
            columns: Columns to select
            access_token: Caller's bearer token; omitted from the request when None

        Returns:
            List of rows as dictionaries

        Raises:
            DataBackendError: When the request fails or the payload is not a list
        """
        url = f"{self.base_url}/rest/v1/{table}"
        params: Dict[str, str] = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order:
            params["order"] = order

        rows: List[Dict[str, Any]] = []
        offset = 0

        logger.debug("supabase.select.start", table=table, filters=filters)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                while True:
                    headers = self._headers(access_token)
                    headers["Range-Unit"] = "items"
                    headers["Range"] = f"{offset}-{offset + self.page_size - 1}"

                    response = await client.get(url, params=params, headers=headers)
                    # Offset past the last row when the row count is a multiple
                    # of the page size
                    if response.status_code == RANGE_NOT_SATISFIABLE and rows:
                        break
                    response.raise_for_status()

                    page = response.json()
                    if not isinstance(page, list):
                        raise DataBackendError(
                            f"Unexpected payload from table '{table}'",
                            details={"payload_type": type(page).__name__},
                        )

                    rows.extend(page)
                    if len(page) < self.page_size:
                        break
                    offset += self.page_size

        except DataBackendError:
            raise

        except httpx.HTTPStatusError as e:
            logger.error(
                "supabase.select.http_error",
                table=table,
                status_code=e.response.status_code,
                response_text=e.response.text,
            )
            raise DataBackendError(
                f"Data backend HTTP error {e.response.status_code} on '{table}'",
                status_code=e.response.status_code,
            ) from e

        except httpx.RequestError as e:
            logger.error("supabase.select.request_error", table=table, error=str(e))
            raise DataBackendError(
                f"Data backend request failed on '{table}': {e}"
            ) from e

        logger.debug("supabase.select.done", table=table, rows=len(rows))
        return rows

    async def ping(self) -> None:
        """
        Check that the REST endpoint answers.

        Raises:
            DataBackendError: When the endpoint is unreachable or errors
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.base_url}/rest/v1/", headers=self._headers(None)
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise DataBackendError(
                f"Data backend HTTP error {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise DataBackendError(f"Data backend unreachable: {e}") from e
