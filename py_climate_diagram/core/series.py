"""
Monthly input series and the chart data store.

This module implements:
- Validation of the twelve-value temperature and precipitation series
- Parsing of data-entry text (empty fields are "unset", not a magic value)
- The chart data store that keeps the last-known values between updates
"""

import math
import numpy as np
import structlog
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Sequence, Union

logger = structlog.get_logger()

MONTHS_PER_YEAR = 12

# Built-in sample data shown before anything has been entered
DEFAULT_TEMPERATURES = [8.0, 9.0, 10.0, 13.0, 18.0, 21.0, 23.0, 22.0, 20.0, 15.0, 10.5, 7.0]
DEFAULT_PRECIPITATION = [80.0, 90.0, 70.0, 66.0, 58.0, 36.0, 17.0, 24.0, 60.0, 120.0, 110.0, 96.0]


class ClimateDiagramError(ValueError):
    """Base class for rejected diagram input."""


class SeriesLengthError(ClimateDiagramError):
    """A monthly series does not hold exactly twelve values."""


class SeriesValueError(ClimateDiagramError):
    """A monthly value is not a finite number."""


class Month(IntEnum):
    """Month index as used on the month axis."""

    JANUARY = 0
    FEBRUARY = 1
    MARCH = 2
    APRIL = 3
    MAY = 4
    JUNE = 5
    JULY = 6
    AUGUST = 7
    SEPTEMBER = 8
    OCTOBER = 9
    NOVEMBER = 10
    DECEMBER = 11


class SeriesKind(str, Enum):
    """Which of the two series a value belongs to."""

    TEMPERATURE = "temperature"
    PRECIPITATION = "precipitation"


def validate_series(values: Iterable[float], kind: SeriesKind = SeriesKind.TEMPERATURE) -> np.ndarray:
    """
    Convert a monthly series to a float array, rejecting malformed input.

    Args:
        values: Twelve numbers, January first
        kind: Series the values belong to (used in error messages)

    Returns:
        Array of shape (12,) with dtype float64

    Raises:
        SeriesLengthError: If the series is not exactly twelve values long
        SeriesValueError: If any value is not a finite number
    """
    values = list(values)
    if len(values) != MONTHS_PER_YEAR:
        raise SeriesLengthError(
            f"{SeriesKind(kind).value} series needs {MONTHS_PER_YEAR} values, got {len(values)}"
        )

    result = np.empty(MONTHS_PER_YEAR, dtype=np.float64)
    for month, value in enumerate(values):
        if isinstance(value, bool) or value is None:
            raise SeriesValueError(f"{SeriesKind(kind).value} for {Month(month).name} is not a number")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise SeriesValueError(
                f"{SeriesKind(kind).value} for {Month(month).name} is not a number: {value!r}"
            ) from e
        if not math.isfinite(number):
            raise SeriesValueError(f"{SeriesKind(kind).value} for {Month(month).name} is not finite")
        result[month] = number

    return result


def parse_entry(text: Optional[str]) -> Optional[float]:
    """
    Parse the text of a single data-entry field.

    Empty fields return None so the caller keeps the last-known value.
    Both "10.5" and "10,5" are accepted.
    """
    if text is None:
        return None

    text = text.strip()
    if not text:
        return None

    try:
        value = float(text.replace(",", "."))
    except ValueError as e:
        raise SeriesValueError(f"Cannot parse monthly value: {text!r}") from e

    if not math.isfinite(value):
        raise SeriesValueError(f"Monthly value is not finite: {text!r}")
    return value


@dataclass(frozen=True)
class MonthlyEntry:
    """One value coming from the data-entry side. None means unset."""

    month: Month
    kind: SeriesKind
    value: Optional[float] = None


@dataclass(frozen=True)
class ChartState:
    """Immutable snapshot of everything a rebuild needs."""

    temperatures: tuple
    precipitation: tuple
    location_name: str = ""
    location_height: int = 0

    @property
    def location_label(self) -> str:
        return f"{self.location_name} ({self.location_height} m)"


class ChartDataStore:
    """Holds the two monthly series and location info between rebuilds."""

    def __init__(
        self,
        temperatures: Optional[Sequence[float]] = None,
        precipitation: Optional[Sequence[float]] = None,
        location_name: str = "",
        location_height: int = 0,
    ):
        """
        Initialize the store.

        Args:
            temperatures: Monthly mean temperatures in °C (defaults to sample data)
            precipitation: Monthly precipitation sums in mm (defaults to sample data)
            location_name: Name of the station
            location_height: Station height in metres
        """
        self._temperatures = validate_series(
            DEFAULT_TEMPERATURES if temperatures is None else temperatures,
            SeriesKind.TEMPERATURE,
        )
        self._precipitation = validate_series(
            DEFAULT_PRECIPITATION if precipitation is None else precipitation,
            SeriesKind.PRECIPITATION,
        )
        self.location_name = location_name
        self.location_height = int(location_height)

    @property
    def temperatures(self) -> np.ndarray:
        return self._temperatures.copy()

    @property
    def precipitation(self) -> np.ndarray:
        return self._precipitation.copy()

    def set_series(self, kind: SeriesKind, values: Sequence[float]) -> None:
        """Replace a whole series."""
        series = validate_series(values, kind)
        if SeriesKind(kind) == SeriesKind.TEMPERATURE:
            self._temperatures = series
        else:
            self._precipitation = series

    def apply_entries(self, entries: Iterable[MonthlyEntry]) -> int:
        """
        Write data-entry values into the series.

        Entries without a value leave the last-known value in place. A
        rejected batch leaves both series untouched.

        Returns:
            Number of values written
        """
        temperatures = self._temperatures.copy()
        precipitation = self._precipitation.copy()

        written = 0
        for entry in entries:
            if entry.value is None:
                continue

            label = f"{SeriesKind(entry.kind).value} for {Month(entry.month).name}"
            if isinstance(entry.value, bool):
                raise SeriesValueError(f"{label} is not a number")
            try:
                value = float(entry.value)
            except (TypeError, ValueError) as e:
                raise SeriesValueError(f"{label} is not a number: {entry.value!r}") from e
            if not math.isfinite(value):
                raise SeriesValueError(f"{label} is not finite")

            if SeriesKind(entry.kind) == SeriesKind.TEMPERATURE:
                temperatures[int(entry.month)] = value
            else:
                precipitation[int(entry.month)] = value
            written += 1

        # Only a fully valid batch replaces the stored series
        self._temperatures = temperatures
        self._precipitation = precipitation

        logger.debug("Applied monthly entries", written=written)
        return written

    def set_location(self, name: str) -> None:
        self.location_name = name

    def set_location_height(self, height: Union[str, int]) -> None:
        """Set the station height; text input must be an integer."""
        self.location_height = int(height)

    @property
    def location_label(self) -> str:
        return f"{self.location_name} ({self.location_height} m)"

    def snapshot(self) -> ChartState:
        """Freeze the current values for a rebuild."""
        return ChartState(
            temperatures=tuple(float(v) for v in self._temperatures),
            precipitation=tuple(float(v) for v in self._precipitation),
            location_name=self.location_name,
            location_height=self.location_height,
        )


def entries_from_series(kind: SeriesKind, values: Sequence[Optional[float]]) -> List[MonthlyEntry]:
    """Turn a list of twelve optional values into entries for apply_entries."""
    values = list(values)
    if len(values) != MONTHS_PER_YEAR:
        raise SeriesLengthError(
            f"{SeriesKind(kind).value} series needs {MONTHS_PER_YEAR} values, got {len(values)}"
        )
    return [MonthlyEntry(Month(i), SeriesKind(kind), value) for i, value in enumerate(values)]
