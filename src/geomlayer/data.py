"""
Layer Data Helpers
==================
Layer data is a ``pandas.DataFrame`` of scaled aesthetics with two reserved
columns: ``PANEL`` (categorical panel id) and ``group`` (group id).

Functions:
    is_empty: Whether a frame has no rows or no columns.
    panel_levels: Panel ids a frame is laid out over, in level order.
    split_by_panel: One partition per panel level, empty panels included.
    split_by_group: One partition per distinct group value, sorted.
    remove_missing: Drop rows with missing values in selected columns.
"""
from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def is_empty(data: Optional[pd.DataFrame]) -> bool:
    return data is None or data.shape[0] == 0 or data.shape[1] == 0


def panel_levels(data: pd.DataFrame) -> list[Hashable]:
    """
    Panel ids of ``data``.

    A categorical ``PANEL`` column keeps all of its categories, including the
    ones no row refers to. Any other column contributes its sorted distinct
    values.
    """
    if "PANEL" not in data.columns:
        return []
    panel = data["PANEL"]
    if isinstance(panel.dtype, pd.CategoricalDtype):
        return list(panel.cat.categories)
    return sorted(pd.unique(panel.dropna()))


def split_by_panel(data: pd.DataFrame) -> Iterator[tuple[Hashable, pd.DataFrame]]:
    """
    Partition ``data`` by ``PANEL``, yielding an (id, frame) pair for every
    panel level, in level order. Levels without rows yield an empty frame.
    """
    panel = data["PANEL"]
    for level in panel_levels(data):
        yield level, data.loc[(panel == level).to_numpy()]


def split_by_group(data: pd.DataFrame) -> list[pd.DataFrame]:
    """Partition ``data`` by the raw value of ``group``, in sorted order."""
    if "group" not in data.columns:
        return [data]
    return [frame for _, frame in data.groupby("group", sort=True, observed=True)]


def _incomplete(values: pd.DataFrame, finite: bool) -> np.ndarray:
    if values.shape[1] == 0:
        return np.zeros(values.shape[0], dtype=bool)
    missing = values.isna().to_numpy().any(axis=1)
    if finite:
        numeric = values.select_dtypes(include="number")
        if numeric.shape[1]:
            missing |= ~np.isfinite(numeric.to_numpy(dtype=float)).all(axis=1)
    return missing


def remove_missing(
    df: pd.DataFrame,
    na_rm: bool = False,
    vars: Optional[Iterable[str]] = None,
    name: str = "",
    finite: bool = False
) -> pd.DataFrame:
    """
    Remove rows with missing values in the selected columns.

    Args:
        df: Layer data.
        na_rm: Drop silently when True, otherwise log a warning with the count.
        vars: Columns to check. Columns absent from ``df`` are ignored.
            Defaults to all columns.
        name: Label of the caller, added to the warning.
        finite: Also treat infinite values as missing.

    Returns:
        ``df`` without the incomplete rows.
    """
    columns = list(df.columns) if vars is None else [v for v in dict.fromkeys(vars) if v in df.columns]
    missing = _incomplete(df[columns], finite)

    if missing.any():
        df = df.loc[~missing]
        if not na_rm:
            kind = "non-finite" if finite else "missing"
            label = f" ({name})" if name else ""
            logger.warning(f"Removed {int(missing.sum())} rows containing {kind} values{label}.")
    return df


def broadcast(value: Any, n: int) -> list[Any]:
    """Recycle a length-1 value (or pass through a length-n one) to ``n`` rows."""
    if aes_length(value) == 1:
        scalar = value if _is_scalar(value) else list(value)[0]
        return [scalar] * n
    return list(value)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, bytes, tuple)) or np.ndim(value) == 0


def aes_length(value: Any) -> int:
    """
    Length of an aesthetic value. Strings and tuples (RGBA colours) count as
    a single value.
    """
    if _is_scalar(value):
        return 1
    return len(value)
