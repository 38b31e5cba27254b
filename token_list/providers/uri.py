"""
Remote token list loader.

Downloads a token list with a single HTTP GET and feeds the body through
the offline pipeline in ``token_list.services.loader``. This is the only
module that needs ``httpx`` (install the ``http`` extra).

No retries, no caching, no custom headers. A timeout is applied only when
``Settings.fetch_timeout_seconds`` is set; callers that want their own
timeouts, proxies or transports pass a configured client instead, which is
used as-is and left open.

Log records emitted while a list is fetched and parsed carry a
``token_list_uri`` context variable, which ``setup_logging`` merges into
each line.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
import structlog

from ..config import Settings, settings as default_settings
from ..errors import TokenListNetworkError
from ..services.loader import from_bytes
from ..types.models import TokenList

logger = logging.getLogger(__name__)


def _client_options(cfg: Settings) -> dict:
    return {
        "timeout": httpx.Timeout(cfg.fetch_timeout_seconds),
        "follow_redirects": cfg.follow_redirects,
    }


def _transport_error(uri: str, exc: Exception) -> TokenListNetworkError:
    logger.warning("Token list download failed for %s: %s", uri, exc)
    return TokenListNetworkError(f"Failed to fetch token list from {uri}: {exc}", uri=uri)


def _parse_response(uri: str, response: httpx.Response, cfg: Settings) -> TokenList:
    if response.status_code != 200:
        logger.warning("Token list download from %s returned HTTP %d", uri, response.status_code)
        # The body of an error response is never parsed.
        raise TokenListNetworkError(
            f"Fetching token list from {uri} returned HTTP {response.status_code}",
            uri=uri,
            status_code=response.status_code,
        )
    logger.debug("Downloaded token list from %s (%d bytes)", uri, len(response.content))
    return from_bytes(response.content, settings=cfg)


async def from_uri(
    uri: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> TokenList:
    """Download, parse and validate the token list at ``uri``.

    Raises:
        TokenListNetworkError: transport failure or a non-200 response.
        TokenListParseError: body is not UTF-8 JSON of the right shape.
        TokenListValidationError: document breaks a domain rule.
    """
    cfg = settings or default_settings
    with structlog.contextvars.bound_contextvars(token_list_uri=uri):
        try:
            if client is None:
                async with httpx.AsyncClient(**_client_options(cfg)) as owned:
                    response = await owned.get(uri)
            else:
                response = await client.get(uri)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _transport_error(uri, exc) from exc

        return _parse_response(uri, response, cfg)


def from_uri_blocking(
    uri: str,
    *,
    client: Optional[httpx.Client] = None,
    settings: Optional[Settings] = None,
) -> TokenList:
    """Blocking counterpart of :func:`from_uri`."""
    cfg = settings or default_settings
    with structlog.contextvars.bound_contextvars(token_list_uri=uri):
        try:
            if client is None:
                with httpx.Client(**_client_options(cfg)) as owned:
                    response = owned.get(uri)
            else:
                response = client.get(uri)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise _transport_error(uri, exc) from exc

        return _parse_response(uri, response, cfg)


__all__ = [
    "from_uri",
    "from_uri_blocking",
]
