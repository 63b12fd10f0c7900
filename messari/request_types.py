from typing import List, Union

from typing_extensions import TypedDict

from .constants import MetricGroup, SortOrder

MetricName = Union[MetricGroup, str]


class PaginationOptions(TypedDict, total=False):
    """
    Pagination accepted by collection endpoints.
    """

    page: int
    limit: int
    sort: Union[SortOrder, str]


class EndpointOptions(PaginationOptions, total=False):
    """
    Everything the endpoint builder knows how to serialize.
    """

    fields: List[str]
