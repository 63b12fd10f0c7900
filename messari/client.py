import logging
from typing import Any, Iterable, Optional, Union

from pydantic import ValidationError

from .constants import BASE_URL, SortOrder, get_error_message
from .endpoint import asset_fields, build_endpoint, collection_fields
from .errors import MessariConfigError, MessariRequestError
from .request_types import EndpointOptions, MetricName
from .schemas import (
    Asset,
    ClientConfig,
    FailureStatus,
    QueryFailure,
    QueryResult,
    QuerySuccess,
)
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)


def mask_secret(secret: str, visible: int = 4) -> str:
    """Hide all but the first ``visible`` characters of a secret."""
    if len(secret) <= visible:
        return "*" * len(secret)
    return secret[:visible] + "*" * (len(secret) - visible)


def _pagination(
    page: Optional[int],
    limit: Optional[int],
    sort: Optional[Union[SortOrder, str]],
) -> EndpointOptions:
    options: EndpointOptions = {}
    if page is not None:
        options["page"] = page
    if limit is not None:
        options["limit"] = limit
    if sort is not None:
        options["sort"] = sort
    return options


class MessariClient:
    """
    Client for the Messari data API.

    Every method performs one GET and returns a ``QueryResult``:
    ``QuerySuccess`` (``ok`` is True, ``data`` set) or ``QueryFailure``
    (``ok`` is False, ``status.error_code`` and ``status.error_message``
    set). Errors reported by Messari never raise; only configuration
    problems (``MessariConfigError``) and transport faults
    (``MessariRequestError``) do.
    """

    def __init__(
        self,
        api_key: str,
        transport: Optional[Transport] = None,
        base_url: str = BASE_URL,
        timeout: Optional[float] = None,
    ):
        if not isinstance(api_key, str) or not api_key.strip():
            raise MessariConfigError("An API key must be provided as a non-empty string")

        try:
            self._config = ClientConfig(api_key=api_key, base_url=base_url, timeout=timeout)
        except ValidationError as e:
            raise MessariConfigError(f"Invalid client configuration: {e}") from e

        self._transport = transport or RequestsTransport(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            timeout=self._config.timeout,
        )
        logger.info(f"Messari client configured (key={mask_secret(api_key)})")

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _request(self, endpoint: str) -> QueryResult:
        result = self._transport.get(endpoint)
        if not result.ok:
            return self._error_result(result)
        return result

    @staticmethod
    def _error_result(failure: QueryFailure) -> QueryFailure:
        """Rebuild a failure so every method reports the same message per code."""
        code = failure.status.error_code
        logger.warning(f"Request failed with error code {code}")
        return QueryFailure(
            status=FailureStatus(
                timestamp=failure.status.timestamp,
                elapsed=failure.status.elapsed,
                error_code=code,
                error_message=get_error_message(code),
            )
        )

    @staticmethod
    def _reshape(result: QuerySuccess, data: Any) -> QuerySuccess:
        return QuerySuccess(status=result.status, data=data)

    def get_asset(
        self,
        asset_key: str,
        metrics: Optional[Iterable[MetricName]] = None,
    ) -> QueryResult:
        """
        Get the basic metadata for an asset.

        Args:
            asset_key: The asset's ID, slug or symbol.
            metrics: Optional metric groups (e.g. ``MetricGroup.SUPPLY``)
                to merge into the identity fields.

        Returns:
            On success, a dict of the identity fields, plus one key per
            requested metric group when ``metrics`` is given.
        """
        if not metrics:
            return self._request(build_endpoint(f"v1/assets/{asset_key}"))

        fields = asset_fields(metrics)
        result = self._request(
            build_endpoint(f"v1/assets/{asset_key}/metrics", {"fields": fields})
        )
        if not result.ok:
            return result

        data = result.data
        try:
            Asset.model_validate(data)
        except ValidationError as e:
            raise MessariRequestError(f"Malformed asset payload for {asset_key}") from e

        # values pass through as sent; fields starts with the identity fields
        return self._reshape(result, {field: data.get(field) for field in fields})

    def get_asset_metrics(self, asset_key: str) -> QueryResult:
        """Get every quantitative metric group for an asset."""
        return self._request(build_endpoint(f"v1/assets/{asset_key}/metrics"))

    def get_asset_market_data(self, asset_key: str) -> QueryResult:
        """
        Get the latest market data for an asset.

        Returns:
            On success, the nested ``market_data`` object only.
        """
        result = self._request(build_endpoint(f"v1/assets/{asset_key}/metrics/market-data"))
        if not result.ok:
            return result

        if not isinstance(result.data, dict) or "market_data" not in result.data:
            raise MessariRequestError(f"Malformed market data payload for {asset_key}")

        return self._reshape(result, result.data["market_data"])

    def list_markets(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[Union[SortOrder, str]] = None,
    ) -> QueryResult:
        """List the supported market pairs and their exchanges."""
        return self._request(build_endpoint("v1/markets", _pagination(page, limit, sort)))

    def list_all_assets(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[Union[SortOrder, str]] = None,
        metrics: Optional[Iterable[MetricName]] = None,
    ) -> QueryResult:
        """
        List assets with their metrics.

        Args:
            page: Page index (1-based).
            limit: Number of records per page (1-500, default 20).
            sort: Sort order, currently only ``SortOrder.ID``.
            metrics: Restrict each asset's ``metrics`` to these groups.
        """
        options = _pagination(page, limit, sort)
        if metrics:
            options["fields"] = collection_fields(metrics)
        return self._request(build_endpoint("v2/assets", options))

    def list_all_news(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[Union[SortOrder, str]] = None,
    ) -> QueryResult:
        """Get the latest news and analysis for all assets."""
        return self._request(build_endpoint("v1/news", _pagination(page, limit, sort)))

    def list_asset_news(
        self,
        asset_key: str,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort: Optional[Union[SortOrder, str]] = None,
    ) -> QueryResult:
        return self._request(
            build_endpoint(f"v1/news/{asset_key}", _pagination(page, limit, sort))
        )
