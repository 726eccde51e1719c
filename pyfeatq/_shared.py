"""
Shared configuration and utilities for pyfeatq modules.

Thread-safety note:
`CONFIG` is process-global and not synchronized for concurrent mutation.
Set it up once from the controlling thread; the query, naming and sorting
functions only read it.
"""

import logging as _logging
import os as _os
import time as _time
from contextlib import contextmanager
from pathlib import Path as _Path

import numpy as _numpy
import pandas as _pandas

_logger = _logging.getLogger(__name__)

INTERVAL_COLUMNS = ["chrom", "start", "end"]

# Configuration dictionary
CONFIG = {
    'chrom_prefix': 'chr',          # Prefix toggled between naming conventions
    'hash_digest': 'md5',           # hashlib algorithm for cache keys
    'hash_size': 6,                 # Hex characters kept from the digest
    'path_delimiter': '/',          # Separator of sharded cache paths
    'cache_dir': _os.environ.get(
        'PYFEATQ_CACHE_DIR',
        str(_Path.home() / '.cache' / 'pyfeatq'),
    ),
    'debug': False,                 # Log timings of queries
}


@contextmanager
def _timed(desc):
    """Log the wall time of the enclosed block at debug level.

    Only active when ``CONFIG['debug']`` is set. Yields a dict whose
    ``'ms'`` entry holds the elapsed time once the block exits.
    """
    result = {'ms': None}
    if not CONFIG.get('debug'):
        yield result
        return
    start = _time.perf_counter()
    try:
        yield result
    finally:
        result['ms'] = (_time.perf_counter() - start) * 1000.0
        _logger.debug("%s took %.3f ms", desc, result['ms'])


def _chrom_name(chrom):
    """Accept a chromosome name or an object carrying one in ``name``."""
    if isinstance(chrom, str):
        return chrom
    name = getattr(chrom, "name", None)
    if isinstance(name, str):
        return name
    raise TypeError(
        f"chromosome must be a string or have a string 'name', got {type(chrom).__name__}"
    )


def _empty_intervals():
    return _pandas.DataFrame({
        "chrom": _pandas.Series([], dtype=object),
        "start": _numpy.array([], dtype=_numpy.int64),
        "end": _numpy.array([], dtype=_numpy.int64),
    })


def _require_columns(df, columns, label="intervals"):
    if not isinstance(df, _pandas.DataFrame):
        raise TypeError(f"{label} must be a pandas DataFrame")
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{label} is missing column(s): {', '.join(missing)}")
