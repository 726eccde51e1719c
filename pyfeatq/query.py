"""Feature queries tolerant of the chromosome naming convention."""

import logging as _logging

from ._shared import (
    INTERVAL_COLUMNS,
    _chrom_name,
    _empty_intervals,
    _numpy,
    _pandas,
    _timed,
)
from .naming import chrom_alias

_logger = _logging.getLogger(__name__)

_EXHAUSTED = object()


class FeatureIterator:
    """
    Lazy, forward-only sequence of features with explicit release.

    Wraps the iterable returned by a feature source. ``has_next()`` peeks
    one record ahead without consuming it. ``close()`` releases the
    underlying iterator exactly once; use the iterator as a context manager
    so release happens on every exit path.

    Not safe for concurrent consumption: one consumer per iterator.

    Parameters
    ----------
    iterable : iterable
        Records produced by the source.
    close : callable, optional
        Extra release callback invoked once on ``close()``.
    """

    def __init__(self, iterable, close=None):
        self._it = iter(iterable)
        self._on_close = close
        self._next = _EXHAUSTED
        self._closed = False

    def has_next(self):
        if self._closed:
            return False
        if self._next is _EXHAUSTED:
            self._next = next(self._it, _EXHAUSTED)
        return self._next is not _EXHAUSTED

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        item = self._next
        self._next = _EXHAUSTED
        return item

    @property
    def closed(self):
        return self._closed

    def close(self):
        if self._closed:
            return
        self._closed = True
        self._next = _EXHAUSTED
        try:
            close_it = getattr(self._it, "close", None)
            if close_it is not None:
                close_it()
        finally:
            if self._on_close is not None:
                self._on_close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def _as_feature_iterator(result):
    if isinstance(result, FeatureIterator):
        return result
    return FeatureIterator(result)


def _probe(features):
    # Release the iterator if peeking fails, then let the error through.
    try:
        return features.has_next()
    except BaseException:
        features.close()
        raise


def query_features(source, chrom, start, end):
    """
    Query a feature source, retrying once with the alternate chromosome name.

    The source is queried with ``chrom``. If that yields no features, the
    result is closed and the source is queried again with
    ``chrom_alias(chrom)``; the second result is returned as is, even when
    it is empty too. A chromosome with no features in the interval is
    therefore indistinguishable from a naming-convention miss.

    Errors raised by the source (e.g. ``OSError``) are propagated
    unchanged and never retried.

    Parameters
    ----------
    source : object
        Feature source with a ``query(contig, start, end)`` method returning
        an iterable of features (see :class:`pyfeatq.PysamFeatureSource`).
    chrom : str or Chromosome
        Chromosome name, or an object with a ``name`` attribute.
    start, end : int
        Interval to query, in the source's coordinates.

    Returns
    -------
    FeatureIterator
        Lazy sequence of features. The caller must close it.

    See Also
    --------
    query_features_df : Same query collected into a DataFrame.
    chrom_alias : The alternate spelling used for the retry.

    Examples
    --------
    >>> import pyfeatq as fq
    >>> class Source:
    ...     def query(self, contig, start, end):
    ...         return iter([(contig, 10)] if contig == "chr1" else [])
    >>> with fq.query_features(Source(), "1", 0, 100) as features:
    ...     list(features)
    [('chr1', 10)]
    """
    name = _chrom_name(chrom)
    with _timed(f"Querying {name}:{start}-{end}"):
        features = _as_feature_iterator(source.query(name, start, end))
        if _probe(features):
            return features
        features.close()

        alt = chrom_alias(name)
        _logger.debug("No features on %s:%d-%d, retrying as %s", name, start, end, alt)
        features = _as_feature_iterator(source.query(alt, start, end))
        _probe(features)
        return features


def features_to_df(features):
    """
    Collect features into an intervals DataFrame.

    Parameters
    ----------
    features : iterable
        Records exposing ``contig`` and ``start`` and, optionally, ``end``.
        Records without ``end`` get ``end = start + 1``.

    Returns
    -------
    DataFrame
        Columns ``chrom``, ``start``, ``end`` in input order.
    """
    chroms = []
    starts = []
    ends = []
    for feature in features:
        chroms.append(feature.contig)
        starts.append(feature.start)
        end = getattr(feature, "end", None)
        ends.append(feature.start + 1 if end is None else end)
    if not chroms:
        return _empty_intervals()
    return _pandas.DataFrame({
        "chrom": chroms,
        "start": _numpy.asarray(starts, dtype=_numpy.int64),
        "end": _numpy.asarray(ends, dtype=_numpy.int64),
    })[INTERVAL_COLUMNS]


def query_features_df(source, chrom, start, end):
    """Run :func:`query_features` and return the features as a DataFrame."""
    with query_features(source, chrom, start, end) as features:
        return features_to_df(features)
