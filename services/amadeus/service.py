"""One-shot Amadeus calls for the proxy endpoints."""

from __future__ import annotations

from typing import Any

from core.config import get_settings
from core.result import Result
from services.amadeus.client import AmadeusClient, AmadeusResponse
from services.amadeus.errors import AmadeusError


async def amadeus_request(
    path: str,
    params: dict[str, Any],
) -> Result[AmadeusResponse, AmadeusError]:
    """
    Acquire a token and perform a single GET against Amadeus.

    A fresh client is created and closed for every call, so the function
    is safe to run from ``async_to_sync`` in any request thread.

    Args:
        path: Amadeus API path.
        params: Query parameters.

    Returns:
        Result containing the AmadeusResponse or AmadeusError.
    """
    client = AmadeusClient.from_settings(get_settings().amadeus)
    try:
        return await client.request(path, params)
    finally:
        await client.close()
