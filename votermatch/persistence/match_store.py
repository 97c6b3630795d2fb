"""
File-based input and output for matching runs.

Inputs are JSON arrays of flat objects (owners, voters). Ranked matches
are written to a JSON array and to a CSV with one column per match field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

import pandas as pd

from ..config import OwnerFieldMap
from ..exceptions import DataPersistenceError
from ..logger import get_logger
from ..models import MATCH_FIELD_LABELS, MatchRecord, OwnerRecord, VoterRecord

logger = get_logger(__name__)

PathLike = Union[str, Path]


def match_columns(rows: Sequence[dict[str, Any]]) -> List[str]:
    """
    CSV column order: union of row keys in first-seen order.

    With no rows, the standard match columns (without the optional owner
    type) are used so the header is still written.
    """
    if not rows:
        return [label for attr, label in MATCH_FIELD_LABELS if attr != "owner_type"]

    columns: List[str] = []
    seen = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                columns.append(key)

    # Keep the standard order even when "OWNER type" first shows up late
    order = {label: i for i, (_, label) in enumerate(MATCH_FIELD_LABELS)}
    return sorted(columns, key=lambda c: order.get(c, len(order)))


class MatchStore:
    """
    JSON/CSV storage for one run's inputs and outputs.

    Layout:
    - <output_dir>/<output_name>.json (ranked matches)
    - <output_dir>/<output_name>.csv (same matches, tabular)
    """

    def __init__(self, output_dir: PathLike):
        """
        Initialize the store.

        Args:
            output_dir: Directory the match files are written to
        """
        self.output_dir = Path(output_dir)

    def _ensure_output_dir(self) -> Path:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DataPersistenceError(
                f"Cannot create output directory: {e}",
                file_path=str(self.output_dir),
                operation="save",
            ) from e
        return self.output_dir

    # ---- loading ---------------------------------------------------------

    @staticmethod
    def load_records(path: PathLike) -> List[dict[str, Any]]:
        """
        Load a JSON array of objects.

        Raises:
            DataPersistenceError: File unreadable, not JSON, or not an array of objects
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise DataPersistenceError(
                f"Cannot read input file: {e}", file_path=str(path), operation="load"
            ) from e
        except json.JSONDecodeError as e:
            raise DataPersistenceError(
                f"Invalid JSON: {e}", file_path=str(path), operation="load"
            ) from e

        if not isinstance(data, list):
            raise DataPersistenceError(
                "Expected a JSON array of records", file_path=str(path), operation="load"
            )
        for index, record in enumerate(data):
            if not isinstance(record, dict):
                raise DataPersistenceError(
                    f"Record {index} is not a JSON object",
                    file_path=str(path),
                    operation="load",
                )

        logger.debug(f"Loaded {len(data)} records from {path}")
        return data

    def load_owners(
        self,
        path: PathLike,
        field_map: Optional[OwnerFieldMap] = None
    ) -> List[OwnerRecord]:
        """
        Load owner records.

        Args:
            path: Owner JSON file
            field_map: Column names to read (default: name/address/zip)
        """
        return [OwnerRecord.from_dict(r, field_map) for r in self.load_records(path)]

    def load_voters(self, path: PathLike) -> List[VoterRecord]:
        """Load voter records."""
        return [VoterRecord.from_dict(r) for r in self.load_records(path)]

    # ---- saving ----------------------------------------------------------

    def save_json(self, matches: Iterable[MatchRecord], path: PathLike) -> Path:
        """Write matches as a JSON array, replacing any existing file."""
        path = Path(path)
        rows = [m.to_dict() for m in matches]
        try:
            path.write_text(
                json.dumps(rows, ensure_ascii=False, indent=2),
                encoding="utf-8"
            )
        except OSError as e:
            raise DataPersistenceError(
                f"Cannot write JSON output: {e}", file_path=str(path), operation="save"
            ) from e
        return path

    def save_csv(self, matches: Iterable[MatchRecord], path: PathLike) -> Path:
        """Write matches as CSV, one row per match, replacing any existing file."""
        path = Path(path)
        rows = [m.to_dict() for m in matches]
        # object dtype keeps ints/strings as-is instead of coercing to float
        df = pd.DataFrame(rows, columns=match_columns(rows), dtype=object)
        try:
            df.to_csv(path, index=False, encoding="utf-8")
        except OSError as e:
            raise DataPersistenceError(
                f"Cannot write CSV output: {e}", file_path=str(path), operation="save"
            ) from e
        return path

    def save_matches(
        self,
        matches: Sequence[MatchRecord],
        output_name: str
    ) -> Tuple[Path, Path]:
        """
        Save ranked matches to <output_name>.json and <output_name>.csv.

        Returns:
            (json_path, csv_path)
        """
        output_dir = self._ensure_output_dir()
        json_path = self.save_json(matches, output_dir / f"{output_name}.json")
        csv_path = self.save_csv(matches, output_dir / f"{output_name}.csv")
        logger.info(f"Wrote {len(matches)} matches to {json_path} and {csv_path}")
        return json_path, csv_path

    @staticmethod
    def read_csv(path: PathLike) -> pd.DataFrame:
        """Read a match CSV back with every value as a string."""
        return pd.read_csv(path, dtype=str, keep_default_na=False)
