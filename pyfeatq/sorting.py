"""Sort-order validation of feature streams."""

from ._shared import _numpy, _require_columns


class UnsortedInputError(ValueError):
    """
    A feature starts before the previous one on the same contig.

    Attributes
    ----------
    file_name : str or None
        Identity of the offending file.
    last_contig, last_start : str, int
        The previous record.
    contig, start : str, int
        The record that broke the order.
    """

    def __init__(self, file_name, last_contig, last_start, contig, start):
        self.file_name = file_name
        self.last_contig = last_contig
        self.last_start = last_start
        self.contig = contig
        self.start = start
        msg = (
            "Input file is not sorted by start position. "
            f"We saw a record with a start of {contig}:{start} "
            f"after a record with a start of {last_contig}:{last_start}"
        )
        if file_name is not None:
            msg += f" (file: {file_name})"
        super().__init__(msg)

    def __reduce__(self):
        return (
            type(self),
            (self.file_name, self.last_contig, self.last_start, self.contig, self.start),
        )


class SortedStreamGuard:
    """
    Check that features arrive sorted by start within each contig.

    Feed every consumed feature to :meth:`check`. Only consecutive records
    on the same contig are compared; a change of contig never raises.
    One guard per stream.

    Parameters
    ----------
    file_name : str, optional
        Identity reported in :class:`UnsortedInputError`.

    Examples
    --------
    >>> from collections import namedtuple
    >>> import pyfeatq as fq
    >>> F = namedtuple("F", "contig start")
    >>> guard = fq.SortedStreamGuard("a.vcf.gz")
    >>> guard.check(F("1", 500))
    >>> guard.check(F("2", 1))
    >>> guard.last
    ('2', 1)
    """

    def __init__(self, file_name=None):
        self.file_name = file_name
        self._last = None

    @property
    def last(self):
        """The (contig, start) of the last accepted feature, or None."""
        return self._last

    def check(self, feature):
        contig = feature.contig
        start = feature.start
        if self._last is not None:
            last_contig, last_start = self._last
            if contig == last_contig and start < last_start:
                raise UnsortedInputError(self.file_name, last_contig, last_start, contig, start)
        self._last = (contig, start)

    def reset(self):
        self._last = None


def check_sorted(features, file_name=None):
    """
    Yield ``features`` unchanged, raising once one is out of order.

    Raises
    ------
    UnsortedInputError
        When a feature starts before its predecessor on the same contig.
        Features before the offending one have already been yielded.
    """
    guard = SortedStreamGuard(file_name)
    for feature in features:
        guard.check(feature)
        yield feature


def check_sorted_df(intervals, file_name=None):
    """
    Validate the row order of an intervals table.

    Applies the :class:`SortedStreamGuard` rule to consecutive rows of a
    DataFrame with ``chrom`` and ``start`` columns.

    Parameters
    ----------
    intervals : DataFrame
        Rows in file order.
    file_name : str, optional
        Identity reported in the error.

    Raises
    ------
    UnsortedInputError
        On the first row whose start is lower than the previous row's on
        the same chromosome.
    """
    _require_columns(intervals, ["chrom", "start"])
    if len(intervals) < 2:
        return
    chroms = intervals["chrom"].astype(str).to_numpy()
    starts = intervals["start"].to_numpy()
    bad = (chroms[1:] == chroms[:-1]) & (starts[1:] < starts[:-1])
    hits = _numpy.flatnonzero(bad)
    if hits.size:
        i = int(hits[0])
        raise UnsortedInputError(
            file_name, str(chroms[i]), int(starts[i]), str(chroms[i + 1]), int(starts[i + 1])
        )
