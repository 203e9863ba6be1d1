"""CSV writers for summary tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def write_dataframe_csv(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write a DataFrame to CSV, creating parent directories."""

    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(destination, index=False)
    return destination


__all__ = ["write_dataframe_csv"]
