# -*- coding: utf-8 -*-

"""Top-level package for acquisition_summary."""

from .exceptions import UnknownSummaryFieldError
from .metadata_labels import SummaryMetadataLabels
from .summary_metadata import SummaryMetadata, SummaryMetadataBuilder

__all__ = [
    "SummaryMetadata",
    "SummaryMetadataBuilder",
    "SummaryMetadataLabels",
    "UnknownSummaryFieldError",
]

__version__ = "0.1.0"
