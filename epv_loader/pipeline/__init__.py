"""
Pipeline stages for the EPV loader.

Generator -> progress logger -> CSV encoder -> COPY sink, chained as plain
synchronous iterators. The table initializer runs once before the chain starts.
"""

from epv_loader.pipeline.csv_encoder import encode_csv, record_to_row
from epv_loader.pipeline.generator import generate_records, make_record
from epv_loader.pipeline.progress import log_progress
from epv_loader.pipeline.schema import COLUMNS, TABLE_NAME, ensure_table
from epv_loader.pipeline.sink import copy_into_table, copy_statement

__all__ = [
    # Constants
    "COLUMNS",
    "TABLE_NAME",
    # Stages
    "generate_records",
    "make_record",
    "log_progress",
    "encode_csv",
    "record_to_row",
    "copy_into_table",
    "copy_statement",
    # Setup
    "ensure_table",
]
