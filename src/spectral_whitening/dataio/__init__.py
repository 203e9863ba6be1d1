"""Record model and table writers."""

from spectral_whitening.dataio.records import HeaderStats, Record, Representation, WidthUnit
from spectral_whitening.dataio.tables import write_dataframe_csv

__all__ = ["HeaderStats", "Record", "Representation", "WidthUnit", "write_dataframe_csv"]
