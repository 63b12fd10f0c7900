import logging

import pandas as pd

from .schemas import QueryResult

logger = logging.getLogger(__name__)


def result_to_frame(result: QueryResult) -> pd.DataFrame:
    """
    Flatten a successful result's data into a DataFrame.

    Nested objects become dotted columns, e.g. ``metrics.market_data.price_usd``.

    Raises:
        ValueError: If the result is a failure.
    """
    if not result.ok:
        raise ValueError(
            f"Cannot build a DataFrame from a failed result "
            f"({result.status.error_code}: {result.status.error_message})"
        )

    data = result.data
    if data is None:
        return pd.DataFrame()
    if isinstance(data, dict):
        data = [data]

    df = pd.json_normalize(data)
    logger.info(f"Built DataFrame with {len(df)} rows and {len(df.columns)} columns")
    return df
