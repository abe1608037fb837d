"""DataFrame-backed series used to resolve hover points and visible windows."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Tuple

import numpy as np
import pandas as pd

from ..config import DEFAULT_X_COLUMN, DEFAULT_Y_COLUMN
from ..tracking.contexts import DataPoint


class SeriesDataError(Exception):
    """Raised when a series cannot be built or queried."""


class SeriesData:
    """A plotted series in x order.

    One DataPoint is built per row and reused for every lookup, so the same
    row always yields the same object.
    """

    def __init__(
        self,
        df: pd.DataFrame,
        *,
        x_column: str = DEFAULT_X_COLUMN,
        y_column: str = DEFAULT_Y_COLUMN,
        data_column: Optional[str] = None,
    ):
        """Initialize the series.

        Args:
            df: DataFrame holding the series
            x_column: Column with x values (numeric or datetime)
            y_column: Column with y values
            data_column: Column attached as DataPoint.data; the whole row
                (as a dict) is attached when omitted
        """
        missing = [c for c in (x_column, y_column, data_column) if c is not None and c not in df.columns]
        if missing:
            raise SeriesDataError(f"Missing column(s): {', '.join(missing)}")

        self.x_column = x_column
        self.y_column = y_column
        self.data_column = data_column

        x_values = self._x_to_numeric(df[x_column])
        frame = df.assign(_x_numeric=x_values)
        # Rows without a usable x position cannot be hovered or windowed
        frame = frame.dropna(subset=["_x_numeric"]).sort_values("_x_numeric", kind="stable")
        frame = frame.reset_index(drop=True)

        self._x = frame["_x_numeric"].astype(float)
        self._x_array = self._x.to_numpy()
        self._points: List[DataPoint] = self._build_points(frame.drop(columns=["_x_numeric"]))

        dropped = len(df) - len(frame)
        if dropped:
            print(f"[Series] Dropped {dropped} row(s) without a numeric '{x_column}' value")
        print(f"[Series] Loaded {len(self._points)} points (x: '{x_column}', y: '{y_column}')")

    def __len__(self) -> int:
        return len(self._points)

    def points(self) -> List[DataPoint]:
        """Return all data points in x order."""
        return list(self._points)

    def nearest(self, x: float, max_distance: Optional[float] = None) -> Optional[DataPoint]:
        """Find the data point whose x is closest to ``x``.

        Args:
            x: Query position in the series' x units
            max_distance: Ignore points farther away than this (optional)

        Returns:
            The nearest DataPoint, or None if the series is empty or no point
            lies within max_distance
        """
        if not self._points:
            return None

        query = self._query_to_numeric(x)
        distances = np.abs(self._x_array - query)
        idx = int(np.argmin(distances))

        if max_distance is not None and distances[idx] > max_distance:
            return None
        return self._points[idx]

    def visible_window(self, x_min: float, x_max: float) -> Tuple[Optional[DataPoint], Optional[DataPoint]]:
        """Return the first and last points with ``x_min <= x <= x_max``.

        Raises:
            SeriesDataError: If x_min is greater than x_max
        """
        low = self._query_to_numeric(x_min)
        high = self._query_to_numeric(x_max)
        if low > high:
            raise SeriesDataError(f"Invalid x window: {x_min} > {x_max}")

        positions = np.flatnonzero(self._x.between(low, high).to_numpy())
        if len(positions) == 0:
            return None, None
        return self._points[positions[0]], self._points[positions[-1]]

    def x_range(self) -> Tuple[Optional[float], Optional[float]]:
        """Return the smallest and largest x values (None for an empty series)."""
        if not self._points:
            return None, None
        return float(self._x_array[0]), float(self._x_array[-1])

    def _build_points(self, frame: pd.DataFrame) -> List[DataPoint]:
        points = []
        for (_, row), x in zip(frame.iterrows(), self._x_array):
            if self.data_column is not None:
                data = row[self.data_column]
            else:
                data = row.to_dict()
            y = pd.to_numeric(row[self.y_column], errors="coerce")
            y = float(y) if pd.notna(y) else float("nan")
            points.append(DataPoint(x=float(x), y=y, data=data))
        return points

    @staticmethod
    def _x_to_numeric(column: pd.Series) -> pd.Series:
        if pd.api.types.is_datetime64_any_dtype(column):
            # Datetimes are positioned by POSIX seconds
            return column.map(lambda value: value.timestamp() if pd.notna(value) else np.nan)
        return pd.to_numeric(column, errors="coerce")

    @staticmethod
    def _query_to_numeric(value) -> float:
        if isinstance(value, (datetime, np.datetime64)):
            return pd.Timestamp(value).timestamp()
        return float(value)
