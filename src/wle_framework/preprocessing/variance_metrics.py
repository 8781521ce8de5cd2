"""Helper functions for near-zero-variance screening of columns."""

import pandas as pd

DEFAULT_FREQ_CUT = 95 / 5
DEFAULT_UNIQUE_CUT = 10.0


def compute_frequency_ratio(values: pd.Series) -> float:
    """
    Ratio of the most common value's count to the second most common value's count.

    Missing values are ignored. Columns with fewer than two distinct values get 0.

    Args:
        values: Column to inspect

    Returns:
        Frequency ratio
    """
    counts = values.dropna().value_counts()
    if len(counts) < 2:
        return 0.0
    return float(counts.iloc[0] / counts.iloc[1])


def compute_near_zero_variance_metrics(df: pd.DataFrame,
                                       freq_cut: float = DEFAULT_FREQ_CUT,
                                       unique_cut: float = DEFAULT_UNIQUE_CUT) -> pd.DataFrame:
    """
    Compute per-column near-zero-variance metrics.

    A column is flagged when it has at most one distinct non-missing value, or
    when its frequency ratio exceeds freq_cut while its percentage of distinct
    values (over all rows) is at most unique_cut.

    Args:
        df: Table to screen
        freq_cut: Frequency ratio threshold
        unique_cut: Percent-unique threshold

    Returns:
        DataFrame indexed by column name with columns
        freq_ratio, percent_unique, zero_var, nzv
    """
    if len(df) == 0:
        raise ValueError("Cannot compute variance metrics on an empty table")

    rows = []
    for column in df.columns:
        values = df[column]
        n_unique = values.dropna().nunique()
        freq_ratio = compute_frequency_ratio(values)
        percent_unique = 100.0 * n_unique / len(values)
        zero_var = n_unique <= 1
        nzv = zero_var or (freq_ratio > freq_cut and percent_unique <= unique_cut)
        rows.append({
            'column': column,
            'freq_ratio': freq_ratio,
            'percent_unique': percent_unique,
            'zero_var': bool(zero_var),
            'nzv': bool(nzv)
        })

    return pd.DataFrame(rows).set_index('column')

