"""
CLI workflow orchestration for imgcollide.

Provides the CLIOrchestrator class that coordinates the CLI workflow from
argument parsing through the final report.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import DirectoryReadError
from ..models import HashConfig
from ..scanner import list_files, hash_images_parallel, group_collisions
from ..user_config import get_user_config
from ..utils.exporters import export_results
from ..utils.validators import validate_directory, validate_side, validate_workers
from .arg_parser import parse_arguments
from .reporting import print_collision_report, summarize


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Configure logging for the CLI.

    Args:
        verbose: Enable verbose (DEBUG level) logging

    Returns:
        Configured logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    return logging.getLogger(__name__)


class CLIOrchestrator:
    """
    Orchestrates the CLI workflow.

    Phases: setup, validation, configuration, listing, hashing, grouping
    and reporting.
    """

    def __init__(self, argv: Optional[list[str]] = None):
        self.argv = argv
        self.logger = None
        self.args = None
        self.config: Optional[HashConfig] = None
        self.workers = 0
        self.files: list[str] = []
        self.records = []
        self.groups = []

    def run(self) -> int:
        """
        Execute the complete CLI workflow.

        Returns:
            Exit code (0 for success, 1 for error)
        """
        self._setup_phase()

        exit_code = self._validate_phase()
        if exit_code != 0:
            return exit_code

        exit_code = self._scan_phase()
        if exit_code != 0:
            return exit_code

        self._hash_phase()
        self._detect_phase()
        return self._report_phase()

    def _setup_phase(self) -> None:
        """Parse arguments and setup logging."""
        self.args = parse_arguments(self.argv)
        self.logger = setup_logging(self.args.verbose)

    def _validate_phase(self) -> int:
        """
        Validate options and build the hash configuration.

        Returns:
            0 for success, 1 for validation error
        """
        user_config = get_user_config()

        is_valid, error = validate_directory(str(self.args.path))
        if not is_valid:
            self.logger.error(error)
            return 1

        side = self.args.resolution if self.args.resolution is not None else user_config.default_side
        is_valid, error = validate_side(side)
        if not is_valid:
            self.logger.error(error)
            return 1

        workers = self.args.workers if self.args.workers is not None else user_config.default_workers
        is_valid, error = validate_workers(workers)
        if not is_valid:
            self.logger.error(error)
            return 1

        use_dct = None if self.args.no_dct is None else not self.args.no_dct
        self.config = user_config.hash_config(side=int(side), use_dct=use_dct)
        self.workers = int(workers)
        return 0

    def _scan_phase(self) -> int:
        """
        List the files to fingerprint.

        Returns:
            0 for success, 1 if the directory cannot be read
        """
        try:
            self.files = list_files(self.args.path)
        except DirectoryReadError as e:
            self.logger.error(str(e))
            return 1

        self.logger.info(f"Found {len(self.files):,} files in {self.args.path}")
        return 0

    def _hash_phase(self) -> None:
        """Decode and fingerprint every file."""
        self.records = hash_images_parallel(
            self.files,
            config=self.config,
            max_workers=self.workers,
            show_progress=not self.args.no_progress,
            logger=self.logger,
        )

    def _detect_phase(self) -> None:
        self.groups = group_collisions(self.records)
        self.logger.info(f"Found {summarize(self.groups)}")

    def _report_phase(self) -> int:
        """
        Print the report and handle exports.

        Returns:
            0 for success, 1 if the export file cannot be written
        """
        print_collision_report(self.groups)

        if self.args.export:
            try:
                export_results(self.groups, self.args.export, self.args.export_format)
            except OSError as e:
                self.logger.error(f"Cannot write export file {self.args.export}: {e}")
                return 1
            self.logger.info(f"Results exported to: {self.args.export}")

        return 0


__all__ = ['CLIOrchestrator', 'setup_logging']
