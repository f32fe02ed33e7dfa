"""RentLedger API HTTP client for fetching payments and properties"""

import httpx
from typing import Any, Dict, List
from rentledger.domain.models import Payment, Property
from rentledger.domain.exceptions import PaymentsAPIError
from rentledger.config import settings


def _records(data: Any, key: str) -> List[Dict[str, Any]]:
    """Upstream returns either a bare array or an object wrapping one"""
    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise PaymentsAPIError(f"Unexpected {key} payload from RentLedger API")
    return data


class RentLedgerClient:
    """Client for the upstream RentLedger REST API"""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.rentledger_api_base
        self.timeout = timeout or settings.http_timeout_seconds

    async def _get(self, path: str, user_id: str) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.get(
                    f"{self.base_url}{path}",
                    params={"user_id": user_id},
                )
                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException as e:
                raise PaymentsAPIError(f"RentLedger API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise PaymentsAPIError(f"RentLedger API error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise PaymentsAPIError(f"RentLedger API unreachable: {e}") from e
            except ValueError as e:
                raise PaymentsAPIError(f"Invalid JSON from RentLedger API: {e}") from e

    async def get_payments(self, user_id: str) -> List[Payment]:
        """
        Fetch a tenant's rent payments.

        Raises:
            PaymentsAPIError: On timeout, HTTP errors, or invalid response
            ValidationError: A payment record has no due date or a bad date
        """
        data = await self._get("/api/payments", user_id)
        try:
            return [Payment.from_record(record) for record in _records(data, "payments")]
        except (AttributeError, TypeError) as e:
            raise PaymentsAPIError(f"Invalid payment data from RentLedger API: {e}") from e

    async def get_properties(self, user_id: str) -> List[Property]:
        """
        Fetch a tenant's properties.

        Raises:
            PaymentsAPIError: On timeout, HTTP errors, or invalid response
            ValidationError: A property record has no id or a bad date
        """
        data = await self._get("/api/properties", user_id)
        try:
            return [Property.from_record(record) for record in _records(data, "properties")]
        except (AttributeError, TypeError) as e:
            raise PaymentsAPIError(f"Invalid property data from RentLedger API: {e}") from e
