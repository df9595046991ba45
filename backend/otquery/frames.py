import pandas as pd
from typing import Dict, List, Union

from .constants import INTERACTION_COLUMNS
from .schemas import ErrorResult, InteractionRow, SearchResult


def interactions_to_frame(
    rows: Union[List[InteractionRow], ErrorResult]
) -> pd.DataFrame:
    """One row per interaction; an empty lookup still carries the five columns."""
    if isinstance(rows, ErrorResult):
        raise ValueError(f"Cannot tabulate an error result: {rows.error}")
    records = [row.model_dump() for row in rows]
    return pd.DataFrame.from_records(records, columns=INTERACTION_COLUMNS)


def search_to_frames(
    result: Union[SearchResult, ErrorResult]
) -> Dict[str, pd.DataFrame]:
    """Turn each category list (and the hit list) into its own DataFrame."""
    if isinstance(result, ErrorResult):
        raise ValueError(f"Cannot tabulate an error result: {result.error}")
    frames: Dict[str, pd.DataFrame] = {}
    for key, items in result.items():
        frames[key] = pd.DataFrame.from_records([item.model_dump() for item in items])
    return frames
