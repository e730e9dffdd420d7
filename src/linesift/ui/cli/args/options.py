"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final

from linesift.features.statistics import StatisticsMode


@final
@dataclass(slots=True)
class FilterArgs:
    """Command line arguments for a filtering run."""

    inputs: list[Path]
    output_dir: Path
    prefix: str
    append: bool
    statistics: StatisticsMode
    encoding: str = "utf-8"


__all__ = ["FilterArgs"]
