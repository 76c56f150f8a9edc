"""
Utilities package for imgcollide.

Provides:
- validators: Input validation for CLI options
- exporters: Export collision groups to files
"""

from __future__ import annotations

from . import validators
from . import exporters

from .validators import validate_directory, validate_side, validate_workers
from .exporters import export_results

__all__ = [
    # Submodules
    'validators',
    'exporters',
    # Validators
    'validate_directory',
    'validate_side',
    'validate_workers',
    # Exporters
    'export_results',
]
