from typing import Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ResponseStatus(BaseModel):
    """
    The ``status`` object of every Messari response.

    On a successful response ``error_code`` and ``error_message`` are None,
    so callers may branch on either ``result.ok`` or
    ``result.status.error_code``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    timestamp: str
    elapsed: Optional[float] = None
    error_code: Optional[Union[int, float]] = None
    error_message: Optional[str] = None


class FailureStatus(ResponseStatus):
    """
    Status of a request the remote service reported as failed.

    ``timestamp`` is kept when the remote sent one.
    """

    timestamp: Optional[str] = None
    error_code: Union[int, float]
    error_message: str


class QuerySuccess(BaseModel, Generic[T]):
    """
    Successful result.

    ``data`` keeps the decoded payload as-is. Expected shape per method:
    - get_asset: dict with id, serial_id, name, slug, symbol
      (plus one key per requested metric group)
    - get_asset_metrics: dict with the identity fields and every metric group
    - get_asset_market_data: dict with price_usd, volume_last_24_hours, ohlcv_*...
    - list_markets: list of dicts with exchange_name, pair, price_usd...
    - list_all_assets: list of asset dicts with a nested ``metrics`` dict
    - list_all_news / list_asset_news: list of dicts with id, title, content, author...
    """

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    status: ResponseStatus
    data: T


class QueryFailure(BaseModel):
    """Failed result. Carries no data."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    status: FailureStatus


QueryResult = Union[QuerySuccess[Any], QueryFailure]


class Asset(BaseModel):
    """
    Identity fields shared by every asset payload.

    Reference: https://messari.io/api/docs#tag/Assets
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    serial_id: Optional[int] = None
    name: str
    slug: str
    symbol: Optional[str] = None


class ClientConfig(BaseModel):
    """
    Client configuration, validated once at construction.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str
    timeout: Optional[float] = None
