# csv2table/frames.py
from typing import List, Optional

import pandas as pd

from csv2table.parser import Table


def unique_column_names(header: List[Optional[str]]) -> List[str]:
    """
    Turn a header row into DataFrame column names.
    Blank names become "Column N"; repeats get a " (N)" suffix, bumped until unused.
    """
    columns: List[str] = []
    for i, name in enumerate(header):
        name = name or f"Column {i + 1}"
        candidate = name
        n = i + 1
        while candidate in columns:
            candidate = f"{name} ({n})"
            n += 1
        columns.append(candidate)
    return columns


def rows_to_frame(rows: Table, has_header: bool) -> pd.DataFrame:
    """Build a preview DataFrame; ragged rows are padded by pandas."""
    df = pd.DataFrame(rows)
    if not has_header or df.empty:
        return df

    # st.dataframe rejects duplicate column names
    df.columns = unique_column_names(list(df.iloc[0]))
    return df.iloc[1:].reset_index(drop=True)
