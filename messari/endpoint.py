from enum import Enum
from typing import Any, Iterable, List, Optional

from .constants import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    IDENTITY_FIELDS,
    MAX_LIMIT,
    QueryParams,
)
from .request_types import EndpointOptions, MetricName


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def format_page(page: Any) -> int:
    """Clamp a page number to >= 1."""
    if not _is_int(page) or page < 1:
        return DEFAULT_PAGE
    return page


def format_limit(limit: Any) -> int:
    """
    Clamp a page size to [1, MAX_LIMIT].

    Missing, non-integer and non-positive values fall back to DEFAULT_LIMIT.
    """
    if not _is_int(limit) or limit < 1:
        return DEFAULT_LIMIT
    if limit > MAX_LIMIT:
        return MAX_LIMIT
    return limit


def remove_duplicates(items: Iterable[Any]) -> List[Any]:
    """Drop repeated items, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def asset_fields(metrics: Iterable[MetricName]) -> List[str]:
    """
    Field selection for a single asset: identity fields followed by the
    plain metric group names.
    """
    return remove_duplicates(IDENTITY_FIELDS + [_text(metric) for metric in metrics])


def collection_fields(metrics: Iterable[MetricName]) -> List[str]:
    """
    Field selection for asset listings, where metric groups are nested
    under ``metrics/``.
    """
    return remove_duplicates(
        IDENTITY_FIELDS + [f"metrics/{_text(metric)}" for metric in metrics]
    )


def build_endpoint(base_path: str, options: Optional[EndpointOptions] = None) -> str:
    """
    Compose ``base_path`` with a query string built from ``options``.

    Args:
        base_path: Relative path with identifiers already interpolated,
            e.g. ``v1/assets/bitcoin/metrics``.
        options: Optional page/limit/sort/fields. Keys with a ``None``
            value are skipped.

    Returns:
        ``base_path`` unchanged when there is nothing to serialize,
        otherwise ``base_path?key=value&...`` with parameters in
        page, limit, sort, fields order.

    A request carrying any pagination key always gets a ``limit``
    (DEFAULT_LIMIT when none was given).
    """
    if not options:
        return base_path

    present = {
        key: options.get(key)
        for key in QueryParams.ORDER
        if options.get(key) is not None
    }
    paginated = any(key in present for key in QueryParams.PAGINATION)

    params = []
    if QueryParams.PAGE in present:
        params.append(f"{QueryParams.PAGE}={format_page(present[QueryParams.PAGE])}")
    if paginated:
        params.append(f"{QueryParams.LIMIT}={format_limit(present.get(QueryParams.LIMIT))}")
    if QueryParams.SORT in present:
        params.append(f"{QueryParams.SORT}={_text(present[QueryParams.SORT])}")

    requested = present.get(QueryParams.FIELDS, [])
    if isinstance(requested, str):
        requested = [requested]
    fields = remove_duplicates(_text(field) for field in requested)
    if fields:
        params.append(f"{QueryParams.FIELDS}={','.join(fields)}")

    if not params:
        return base_path

    return f"{base_path}?{'&'.join(params)}"
