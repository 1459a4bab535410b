"""AnalysisClient — abstract base for the product-analysis endpoints."""
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from owlverload_client.constants import (
    AUTH_SCHEME,
    CONTENT_TYPE_JSON,
    MSG_DECODE_ERROR,
    MSG_EMPTY_TOKEN,
    MSG_REQUEST_OK,
    MSG_REQUEST_START,
    MSG_SERVER_ERROR,
    MSG_TRANSPORT_ERROR,
)
from owlverload_client.errors import ServerError, TransportError, ValidationError

logger = logging.getLogger(__name__)


def _error_message(body: Any, default: str) -> str:
    match body:
        case {"message": str() as message} if message:
            return message
        case _:
            return default


class AnalysisClient(ABC):

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    @abstractmethod
    async def analyze(self, subject: Any, auth_token: str) -> dict[str, Any]:
        """Send ``subject`` for analysis and return the response body. Raises AnalysisError."""
        ...

    async def _post(
        self,
        path: str,
        body: dict[str, Any],
        auth_token: str,
        default_message: str,
    ) -> dict[str, Any]:
        match auth_token:
            case str() if auth_token.strip():
                pass
            case _:
                raise ValidationError(MSG_EMPTY_TOKEN)

        headers = {
            "Content-Type": CONTENT_TYPE_JSON,
            "Authorization": f"{AUTH_SCHEME} {auth_token}",
        }
        logger.debug(MSG_REQUEST_START, path)
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, transport=self._transport, timeout=None
            ) as client:
                response = await client.post(path, json=body, headers=headers)
        except httpx.HTTPError as e:
            logger.error(MSG_TRANSPORT_ERROR, path, e)
            raise TransportError(str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(MSG_DECODE_ERROR, path, response.status_code, e)
            raise TransportError(str(e)) from e

        match response.is_success:
            case True:
                logger.info(MSG_REQUEST_OK, path, response.status_code)
                return data
            case False:
                message = _error_message(data, default_message)
                logger.error(MSG_SERVER_ERROR, path, response.status_code, message)
                raise ServerError(message, response.status_code)
