"""
Listing Batch Processor.

Runs marketplace item dumps (JSON files, ZIP archives or directories of
either) through exclusion, override and categorization, and exports the
index records, failures and category counts to pandas.
"""

import json
import logging
import zipfile
import io
import os
from typing import Dict, List, Optional, Tuple, Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
import traceback

import pandas as pd

from listing_engine.categorisation.context import CategoryResult
from listing_engine.categorisation.engine import ListingCategorizer
from listing_engine.config.override_loader import OverrideEntry, load_override_json
from listing_engine.indexing.normalize_item import normalize_listing_detailed

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Marketplace exports are mostly UTF-8; older dumps were saved from Excel.
SOURCE_ENCODINGS = ("utf-8", "cp1252", "latin-1")


class InvalidJsonStructureError(Exception):
    """Raised when JSON structure cannot be normalized to a list of listings."""
    pass


@dataclass
class ProcessingError:
    """One input file that could not be indexed."""
    file_name: str
    error_type: str
    error_message: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


@dataclass
class FileResult:
    """Index records produced from one input file."""
    file_name: str
    records: List[Dict] = field(default_factory=list)
    total_listings: int = 0
    excluded_tips: int = 0
    excluded_custom: int = 0
    skipped_no_key: int = 0
    overridden: int = 0


@dataclass
class BatchStats:
    """Counters for one batch run."""
    total_files: int = 0
    processed: int = 0
    successful: int = 0
    failed: int = 0

    # Listing counts
    total_listings: int = 0
    indexed: int = 0
    excluded_tips: int = 0
    excluded_custom: int = 0
    skipped_no_key: int = 0
    overridden: int = 0
    category_counts: Dict[str, int] = field(default_factory=dict)

    # Timing
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    @property
    def excluded(self) -> int:
        return self.excluded_tips + self.excluded_custom

    @property
    def processing_time(self) -> float:
        """Wall-clock seconds between start and end."""
        if not (self.start_time and self.end_time):
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    @property
    def success_rate(self) -> float:
        """Share of files indexed without error, in percent."""
        return 100.0 * self.successful / self.total_files if self.total_files else 0.0

    def add_file_result(self, file_result: FileResult) -> None:
        self.total_listings += file_result.total_listings
        self.indexed += len(file_result.records)
        self.excluded_tips += file_result.excluded_tips
        self.excluded_custom += file_result.excluded_custom
        self.skipped_no_key += file_result.skipped_no_key
        self.overridden += file_result.overridden
        for record in file_result.records:
            category = record.get("category")
            if category:
                self.category_counts[category] = self.category_counts.get(category, 0) + 1


@dataclass
class BatchResult:
    """Stats, per-file records, failures and category counts of a batch."""
    stats: BatchStats
    results: List[FileResult]
    errors: List[ProcessingError]
    error_summary: Dict[str, int] = field(default_factory=dict)
    category_summary: Dict[str, Dict] = field(default_factory=dict)

    @property
    def records(self) -> List[Dict]:
        return [record for file_result in self.results for record in file_result.records]

    @staticmethod
    def merge_results(earlier: 'BatchResult', later: 'BatchResult') -> 'BatchResult':
        """
        Combine two batch runs, e.g. a cumulative result and a newly indexed dump.

        Counters are summed, the time window spans both runs and the category
        summary is rebuilt from the combined records.

        Args:
            earlier: Result accumulated so far
            later: Result to fold in

        Returns:
            New BatchResult; neither input is modified
        """
        stats = BatchStats(
            start_time=_pick_time(min, earlier.stats.start_time, later.stats.start_time),
            end_time=_pick_time(max, earlier.stats.end_time, later.stats.end_time),
            category_counts=_sum_counts(earlier.stats.category_counts, later.stats.category_counts),
        )
        for counter in _STAT_COUNTERS:
            setattr(stats, counter, getattr(earlier.stats, counter) + getattr(later.stats, counter))

        combined = BatchResult(
            stats=stats,
            results=earlier.results + later.results,
            errors=earlier.errors + later.errors,
            error_summary=_sum_counts(earlier.error_summary, later.error_summary),
        )
        combined.category_summary = summarize_records(combined.records)
        return combined


_STAT_COUNTERS = (
    "total_files", "processed", "successful", "failed", "total_listings",
    "indexed", "excluded_tips", "excluded_custom", "skipped_no_key", "overridden",
)


def _pick_time(choose: Callable, first: Optional[datetime], second: Optional[datetime]) -> Optional[datetime]:
    present = [t for t in (first, second) if t is not None]
    return choose(present) if present else None


def _sum_counts(first: Dict[str, int], second: Dict[str, int]) -> Dict[str, int]:
    totals = dict(first)
    for key, count in second.items():
        totals[key] = totals.get(key, 0) + count
    return totals


def summarize_records(records: List[Dict], categorizer: Optional[ListingCategorizer] = None) -> Dict[str, Dict]:
    """Per-category totals with subcategory counts for a list of index records."""
    categorizer = categorizer or ListingCategorizer()
    category_results = [
        CategoryResult(record.get("category"), list(record.get("subcategories", [])))
        for record in records
    ]
    return categorizer.get_category_summary(category_results)


class ListingBatchProcessor:
    """Batch processor for marketplace listing dumps."""

    def __init__(
        self,
        overrides: Optional[Dict[str, OverrideEntry]] = None,
        override_path: Optional[str] = None,
        debug_mode: bool = False,
    ):
        """
        Initialize the batch processor.

        Args:
            overrides: Manual category overrides keyed by item id
            override_path: JSON override document to load (merged over overrides)
            debug_mode: Attach score traces to categorization results
        """
        self.overrides = dict(overrides or {})
        if override_path:
            self.overrides.update(load_override_json(override_path))

        self.categorizer = ListingCategorizer(debug_mode=debug_mode)

        logger.info(f"Initialized listing batch processor: {len(self.overrides)} manual overrides")

    def process_batch(
        self,
        files: List[Tuple[str, bytes]],
        progress_callback: Optional[Callable[[int, int, str], None]] = None
    ) -> BatchResult:
        """
        Index every listing dump in files.

        A file that fails to parse or validate is recorded in the result's
        errors under its error type; the remaining files are still indexed.

        Args:
            files: (filename, raw bytes) pairs
            progress_callback: Called before each file with (position, total, message)

        Returns:
            BatchResult
        """
        stats = BatchStats(
            total_files=len(files),
            start_time=datetime.now()
        )

        results = []
        errors = []
        error_types = {}

        logger.info(f"Indexing {len(files)} listing dumps")

        for idx, (filename, content) in enumerate(files):
            error_type = None
            try:
                if progress_callback:
                    progress_callback(idx + 1, len(files), f"Indexing {filename}")

                logger.debug(f"[{idx + 1}/{len(files)}] {filename}")

                file_result = self._process_single_file(filename=filename, content=content)

                results.append(file_result)
                stats.processed += 1
                stats.successful += 1
                stats.add_file_result(file_result)

            except json.JSONDecodeError as e:
                error_type, message = "JSON_PARSE_ERROR", f"Invalid JSON: {e}"
                logger.error(f"{filename}: not valid JSON ({e})")

            except KeyError as e:
                error_type, message = "MISSING_DATA", f"Missing required field: {e}"
                logger.error(f"{filename}: missing field {e}")

            except ValueError as e:
                error_type, message = "DATA_VALIDATION_ERROR", str(e)
                logger.error(f"{filename}: rejected listing data ({e})")

            except InvalidJsonStructureError as e:
                error_type, message = "INVALID_JSON_STRUCTURE", str(e)
                logger.error(f"{filename}: unrecognised dump layout ({e})")

            except Exception as e:
                error_type, message = "PROCESSING_ERROR", f"{type(e).__name__}: {e}"
                logger.error(f"{filename}: indexing failed\n{traceback.format_exc()}")

            if error_type:
                errors.append(ProcessingError(
                    file_name=filename,
                    error_type=error_type,
                    error_message=message
                ))
                stats.failed += 1
                stats.processed += 1
                error_types[error_type] = error_types.get(error_type, 0) + 1

        stats.end_time = datetime.now()

        logger.info(
            f"Batch processing complete: {stats.successful}/{stats.total_files} files, "
            f"{stats.indexed} listings indexed, {stats.excluded} excluded, "
            f"time: {stats.processing_time:.1f}s"
        )

        records = [record for file_result in results for record in file_result.records]
        return BatchResult(
            stats=stats,
            results=results,
            errors=errors,
            error_summary=error_types,
            category_summary=summarize_records(records, self.categorizer),
        )

    @staticmethod
    def _decode_json(content: bytes):
        """Parse JSON bytes, retrying legacy Windows encodings before latin-1."""
        for encoding in SOURCE_ENCODINGS[:-1]:
            try:
                return json.loads(content.decode(encoding))
            except UnicodeDecodeError:
                logger.debug(f"Content is not {encoding}, trying next encoding")
        # latin-1 maps every byte, so this last decode cannot fail
        return json.loads(content.decode(SOURCE_ENCODINGS[-1]))

    def _process_single_file(self, filename: str, content: bytes) -> FileResult:
        """Decode one dump and turn each listing into an index record."""
        data = self._decode_json(content)

        listings = self._normalize_json_structure(data, filename)

        if not listings:
            raise ValueError("No listings found in file")

        self._validate_listings(listings)

        file_result = FileResult(file_name=filename, total_listings=len(listings))
        for item in listings:
            outcome = normalize_listing_detailed(item, self.overrides, self.categorizer)
            if outcome.key is None:
                file_result.skipped_no_key += 1
            elif outcome.excluded == "tip":
                file_result.excluded_tips += 1
            elif outcome.excluded == "custom":
                file_result.excluded_custom += 1
            else:
                if outcome.overridden:
                    file_result.overridden += 1
                file_result.records.append(outcome.record)

        return file_result

    def _validate_listings(self, listings: List[Dict]) -> None:
        """Validate listing data."""
        for idx, item in enumerate(listings):
            if not isinstance(item, dict):
                raise ValueError(f"Listing {idx} is not an object")
            for text_field in ("name", "description"):
                value = item.get(text_field)
                if value is not None and not isinstance(value, str):
                    raise ValueError(f"Listing {idx} has non-text '{text_field}': {value!r}")

    def _normalize_json_structure(self, data, filename: str) -> List[Dict]:
        """
        Return the listings held by a decoded dump.

        Accepts a bare list of listings or an object carrying them under
        "items" (the crawler's snapshot format).

        Raises:
            InvalidJsonStructureError: Empty list, or no usable "items" list
        """
        if isinstance(data, list):
            if len(data) == 0:
                raise InvalidJsonStructureError(f"Empty array in JSON file: {filename}")
            logger.debug(f"{filename}: Root-level array with {len(data)} items")
            return data

        if isinstance(data, dict):
            items = data.get("items")
            if items is None:
                raise InvalidJsonStructureError(
                    f"No 'items' list in {filename}. Keys found: {list(data.keys())}"
                )
            if not isinstance(items, list):
                raise InvalidJsonStructureError(
                    f"'items' in {filename} is {type(items).__name__}, expected list"
                )
            logger.debug(f"{filename}: Dictionary format with {len(items)} items")
            return items

        raise InvalidJsonStructureError(
            f"{filename} holds a JSON {type(data).__name__}; expected a list of listings "
            f"or an object with an 'items' list"
        )

    def load_files_from_paths(self, paths: List[str]) -> List[Tuple[str, bytes]]:
        """
        Read listing dumps from disk.

        Directories are walked one level at a time in name order; ZIP
        archives contribute their JSON members; other files are skipped.

        Args:
            paths: JSON, ZIP or directory paths

        Returns:
            (filename, raw bytes) pairs ready for process_batch
        """
        loaded = []

        for path in paths:
            path = Path(path)
            if path.is_dir():
                loaded.extend(self.load_files_from_paths(sorted(str(p) for p in path.iterdir())))
                continue

            filename = path.name
            if filename.lower().endswith(".zip"):
                members = self._extract_zip(path.read_bytes())
                loaded.extend(members)
                logger.info(f"{filename}: {len(members)} JSON dumps in archive")

            elif filename.lower().endswith(".json"):
                loaded.append((filename, path.read_bytes()))

            else:
                logger.warning(f"{filename}: not a JSON or ZIP file, skipped")

        logger.info(f"Loaded {len(loaded)} listing dumps")
        return loaded

    def _extract_zip(self, content: bytes) -> List[Tuple[str, bytes]]:
        """JSON members of an archive, keyed by base name."""
        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            return [
                (os.path.basename(info.filename), archive.read(info))
                for info in archive.infolist()
                if not info.is_dir() and info.filename.lower().endswith(".json")
            ]

    def results_to_dataframe(self, results: List[FileResult]) -> pd.DataFrame:
        """
        Convert index records to a pandas DataFrame, one row per listing.

        Args:
            results: List of FileResult objects

        Returns:
            pandas DataFrame
        """
        rows = []
        for file_result in results:
            for record in file_result.records:
                rows.append({
                    "File Name": file_result.file_name,
                    "Ref": record.get("refNum"),
                    "Name": record.get("name", ""),
                    "Category": record.get("category", ""),
                    "Subcategories": "; ".join(record.get("subcategories", [])),
                    "Seller": record.get("sellerName", ""),
                })

        return pd.DataFrame(rows, columns=["File Name", "Ref", "Name", "Category", "Subcategories", "Seller"])

    def errors_to_dataframe(self, errors: List[ProcessingError]) -> pd.DataFrame:
        """
        One row per failed file.

        Args:
            errors: ProcessingError records from a batch

        Returns:
            pandas DataFrame (columns present even when there are no errors)
        """
        rows = [
            (error.file_name, error.error_type, error.error_message, error.timestamp)
            for error in errors
        ]
        return pd.DataFrame(rows, columns=["File Name", "Error Type", "Error Message", "Timestamp"])

    def summary_to_dataframe(self, category_summary: Dict[str, Dict]) -> pd.DataFrame:
        """One row per category/subcategory pair, plus a total row per category."""
        rows = []
        for category, entry in category_summary.items():
            rows.append({"Category": category, "Subcategory": "", "Count": entry["count"]})
            for sub, count in entry["subcategories"].items():
                rows.append({"Category": category, "Subcategory": sub, "Count": count})

        return pd.DataFrame(rows, columns=["Category", "Subcategory", "Count"])


def main(input_path: str, out_csv: str, override_path: Optional[str] = None) -> BatchResult:
    processor = ListingBatchProcessor(override_path=override_path)
    files = processor.load_files_from_paths([input_path])
    batch = processor.process_batch(files)

    processor.results_to_dataframe(batch.results).to_csv(out_csv, index=False)
    logger.info(f"Wrote {batch.stats.indexed} listings to {out_csv}")

    if batch.errors:
        errors_csv = str(Path(out_csv).with_suffix("")) + "_errors.csv"
        processor.errors_to_dataframe(batch.errors).to_csv(errors_csv, index=False)
        logger.warning(f"{len(batch.errors)} files failed; see {errors_csv}")

    return batch


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 3:
        raise SystemExit(
            "Usage:\n"
            "  python listing_batch_processor.py <input.json|input.zip|dir> <out.csv> [overrides.json]\n"
        )

    main(
        input_path=sys.argv[1],
        out_csv=sys.argv[2],
        override_path=sys.argv[3] if len(sys.argv) >= 4 else None,
    )
