import logging
import numbers
from typing import Any, Dict, Optional, Union

import requests
from pydantic import ValidationError
from typing_extensions import Protocol

from .constants import API_KEY_HEADER, BASE_URL, get_error_message
from .errors import MessariRequestError
from .schemas import FailureStatus, QueryFailure, QueryResult, QuerySuccess, ResponseStatus

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything that can turn an endpoint into a classified result."""

    def get(self, endpoint: str) -> QueryResult:
        ...


def _is_error_code(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _normalize_error_code(value: Union[int, float]) -> Union[int, float]:
    # JSON may carry 404.0
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def classify_envelope(payload: Any) -> QueryResult:
    """
    Classify a decoded Messari envelope.

    A numeric ``status.error_code`` marks the response as failed; its
    message is resolved through the known error table rather than taken
    from the response.

    Raises:
        MessariRequestError: If the envelope has no usable ``status``, or a
            success envelope has no ``data``.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("status"), dict):
        raise MessariRequestError("Malformed response: missing status object")

    status = payload["status"]
    error_code = status.get("error_code")

    try:
        if _is_error_code(error_code):
            error_code = _normalize_error_code(error_code)
            if status.get("error_message"):
                logger.warning(f"Messari reported error {error_code}: {status['error_message']}")
            return QueryFailure(
                status=FailureStatus(
                    timestamp=status.get("timestamp"),
                    elapsed=status.get("elapsed"),
                    error_code=error_code,
                    error_message=get_error_message(error_code),
                )
            )

        if "data" not in payload:
            raise MessariRequestError("Malformed response: missing data")

        return QuerySuccess(
            status=ResponseStatus(
                timestamp=status.get("timestamp"),
                elapsed=status.get("elapsed"),
            ),
            data=payload["data"],
        )
    except ValidationError as e:
        raise MessariRequestError(f"Malformed response status: {e}") from e


class RequestsTransport:
    """Default transport: one ``requests.get`` per call."""

    def __init__(self, api_key: str, base_url: str = BASE_URL, timeout: Optional[float] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _build_headers(self) -> Dict[str, str]:
        return {API_KEY_HEADER: self.api_key}

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str) -> QueryResult:
        """
        Fetch ``endpoint`` and classify the decoded envelope.

        The HTTP status code is not inspected: Messari reports failures
        inside the JSON body.

        Raises:
            MessariRequestError: On network failure, a body that is not JSON,
                or a malformed envelope.
        """
        url = self.build_url(endpoint)

        try:
            response = requests.get(url, headers=self._build_headers(), timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout: GET {endpoint}")
            raise MessariRequestError("Request timeout") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise MessariRequestError(f"Request error: {str(e)}") from e

        logger.info(f"GET {endpoint} -> {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Could not decode response for {endpoint}: HTTP {response.status_code}")
            raise MessariRequestError(
                f"Invalid JSON response: HTTP {response.status_code}"
            ) from e

        return classify_envelope(payload)
