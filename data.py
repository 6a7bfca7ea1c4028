from typing import List
import pandas as pd
from constants import DEFAULT_DATA


def read_column(data_path, column: str) -> List[int]:
    df = pd.read_csv(data_path)
    if column not in df.columns:
        raise ValueError(f'column {column} not found in {data_path}')
    values = df[column]
    if values.isna().any():
        raise ValueError(f'column {column} has missing values')
    if not pd.api.types.is_integer_dtype(values):
        raise ValueError(
            f'column {column} holds {values.dtype} values, expected integers'
            )
    return [int(item) for item in values]


def load_data(cfg) -> List[int]:
    if not cfg.data_path:
        return list(DEFAULT_DATA)
    return read_column(cfg.data_path, cfg.data_column)
