"""Unit tests for dataio.tables."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from spectral_whitening.dataio.tables import write_dataframe_csv


def test_write_dataframe_csv_creates_parent_directories(tmp_path: Path) -> None:
    frame = pd.DataFrame({"index": [0, 1], "flatness_after": [0.55, 0.61]})
    destination = tmp_path / "reports" / "nested" / "summary.csv"

    written = write_dataframe_csv(frame, destination)

    assert written == destination
    assert pd.read_csv(written).equals(frame)
