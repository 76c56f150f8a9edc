"""
Parallel processing module for the scanner package.

Decodes and fingerprints images on a thread pool. Each worker thread builds
its own PerceptualHasher once, in the pool initializer, and keeps it in
thread-local storage for every path it processes.
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Callable, Any

from ..config import DEFAULT_WORKERS
from ..exceptions import DecodeError
from ..models import HashConfig, ImageRecord
from .decoding import decode_image
from .dependencies import HAS_TQDM, _tqdm_class
from .hashing import PerceptualHasher

_logger = logging.getLogger(__name__)

_worker_state = threading.local()


def _init_worker(config: HashConfig) -> None:
    """Pool initializer: give the current worker thread its own hasher."""
    _worker_state.hasher = PerceptualHasher(config)


def process_path(filepath: str | Path, hasher: PerceptualHasher) -> Optional[ImageRecord]:
    """
    Decode and fingerprint a single file.

    Args:
        filepath: Path to the image
        hasher: Hasher owned by the calling worker

    Returns:
        ImageRecord, or None if the file could not be decoded
    """
    filepath = str(filepath)
    try:
        decoded = decode_image(filepath)
    except DecodeError as e:
        _logger.debug(str(e))
        return None

    fingerprint = hasher.hash_image(decoded.image)
    return ImageRecord(path=filepath, dimensions=decoded.dimensions, fingerprint=fingerprint)


def _process_in_worker(filepath: str) -> Optional[ImageRecord]:
    return process_path(filepath, _worker_state.hasher)


def hash_images_parallel(
    filepaths: list[str],
    config: Optional[HashConfig] = None,
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    show_progress: bool = False,
    logger: Optional[logging.Logger] = None,
) -> list[ImageRecord]:
    """
    Decode and fingerprint multiple images in parallel.

    Files that fail to decode are left out of the result; they never abort
    the run or change the records produced for other files.

    Args:
        filepaths: List of image paths to process
        config: Hash configuration shared by every worker
        max_workers: Number of worker threads
        progress_callback: Optional callback(current, total) for progress updates
        show_progress: Whether to show tqdm progress bar
        logger: Optional logger for status messages

    Returns:
        List of ImageRecord objects, in completion order

    Raises:
        ValueError: If max_workers is less than 1
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    if not filepaths:
        return []

    config = config or HashConfig()
    total = len(filepaths)
    records: list[ImageRecord] = []
    skipped = 0

    if logger:
        logger.info(f"Fingerprinting {total:,} files ({config.describe()}, {max_workers} workers)")

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(total=total, desc="Hashing images", unit="img", ncols=80)

    # Batch progress callbacks to reduce overhead (every 1000 files or 1 second)
    last_callback_time = time.time()
    callback_batch_size = 1000
    callback_interval = 1.0  # seconds

    with ThreadPoolExecutor(
        max_workers=max_workers,
        initializer=_init_worker,
        initargs=(config,),
    ) as executor:
        futures = {
            executor.submit(_process_in_worker, str(path)): path
            for path in filepaths
        }

        for i, future in enumerate(as_completed(futures)):
            try:
                record = future.result()
            except Exception as e:
                _logger.warning(f"Failed to process {futures[future]}: {e}")
                record = None

            if record is None:
                skipped += 1
            else:
                records.append(record)

            if pbar is not None:
                pbar.update(1)

            if progress_callback:
                current_time = time.time()
                should_callback = (
                    (i + 1) % callback_batch_size == 0 or
                    current_time - last_callback_time >= callback_interval or
                    i == total - 1  # Always callback on last item
                )
                if should_callback:
                    progress_callback(i + 1, total)
                    last_callback_time = current_time

    if pbar is not None:
        pbar.close()

    if skipped and logger:
        logger.warning(f"Could not decode {skipped:,} of {total:,} files")

    return records


__all__ = ['hash_images_parallel', 'process_path']
