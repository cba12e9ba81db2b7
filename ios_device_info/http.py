import logging
import ssl
from typing import List

import aiohttp
import certifi

from .catalog import SourceUnavailable, entries_from_document
from .models import CatalogEntry

_LOGGER = logging.getLogger(__name__)


async def _extract_failure_message(response) -> str:
    try:
        data = await response.json()
        if "message" in data:
            return data["message"]
    except Exception:  # pylint: disable=broad-except
        pass
    return await response.text()


async def http_get_catalog(url: str) -> List[CatalogEntry]:
    """Requests a catalog document over HTTP and parses it.
    Hand the result to MappingCatalogSource to use it"""
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    conn = aiohttp.TCPConnector(ssl=ssl_context)
    message = "Failed for an unknown reason"
    try:
        async with aiohttp.ClientSession(connector=conn) as session:
            async with session.get(
                url=url,
                headers={"Accept": "application/json"},
            ) as response:
                _LOGGER.debug("http catalog request %s -> %s", url, response.status)
                if response.status == 200:
                    data = await response.json()
                    return entries_from_document(data)

                message = await _extract_failure_message(response)
    except aiohttp.ClientError as exc:
        raise SourceUnavailable(f"failed to get device catalog: {exc}") from exc
    raise SourceUnavailable(f"failed to get device catalog: {message}")
