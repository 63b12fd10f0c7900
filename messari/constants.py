from enum import Enum

BASE_URL = "https://data.messari.io/api/"
API_KEY_HEADER = "x-messari-api-key"

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 500

# Always requested first when selecting fields
IDENTITY_FIELDS = ["id", "serial_id", "name", "slug", "symbol"]


class MetricGroup(str, Enum):
    """
    Metric groups that can be selected on asset endpoints.
    """

    ALL_TIME_HIGH = "all_time_high"
    BLOCKCHAIN_STATS_24_HOURS = "blockchain_stats_24_hours"
    CYCLE_LOW = "cycle_low"
    DEVELOPER_ACTIVITY = "developer_activity"
    EXCHANGE_FLOWS = "exchange_flows"
    MARKET_DATA_LIQUIDITY = "market_data_liquidity"
    MARKET_DATA = "market_data"
    MARKETCAP = "marketcap"
    MINER_FLOWS = "miner_flows"
    MINING_STATS = "mining_stats"
    MISC_DATA = "misc_data"
    ON_CHAIN_DATA = "on_chain_data"
    REDDIT = "reddit"
    RISK_METRICS = "risk_metrics"
    ROI_DATA = "roi_data"
    ROI_BY_YEAR = "roi_by_year"
    SUPPLY_ACTIVITY = "supply_activity"
    SUPPLY = "supply"
    TOKEN_SALE_STATS = "token_sale_stats"


class SortOrder(str, Enum):
    """
    Sort orders accepted by paginated endpoints.
    """

    ID = "id"


class QueryParams:
    """
    Query parameter names, in the order they are serialized.
    """

    PAGE = "page"
    LIMIT = "limit"
    SORT = "sort"
    FIELDS = "fields"

    ORDER = (PAGE, LIMIT, SORT, FIELDS)
    PAGINATION = (PAGE, LIMIT, SORT)


UNKNOWN_ERROR_MESSAGE = "Unknown error"

ERROR_MESSAGES = {
    400: "Bad request",
    401: "Unauthorized (authentication)",
    403: "Forbidden (authorization)",
    404: "Asset not found",
    429: "Too many requests (rate limit)",
    500: "An Internal server error occurred",
}


def get_error_message(error_code: int) -> str:
    """Resolve a remote error code to its human-readable message."""
    return ERROR_MESSAGES.get(error_code, UNKNOWN_ERROR_MESSAGE)
