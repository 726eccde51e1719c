"""Indexed feature files opened with pysam."""

import logging as _logging
from typing import Any, NamedTuple

import pysam

from .cache import file_extension
from .entities import FeatureFileKind
from .query import FeatureIterator

_logger = _logging.getLogger(__name__)

_KIND_BY_EXTENSION = {
    ".vcf.gz": FeatureFileKind.VCF,
    ".bcf": FeatureFileKind.VCF,
    ".bed.gz": FeatureFileKind.BED,
    ".gff.gz": FeatureFileKind.GFF,
    ".gff3.gz": FeatureFileKind.GFF,
    ".gtf.gz": FeatureFileKind.GFF,
    ".bam": FeatureFileKind.BAM,
    ".cram": FeatureFileKind.BAM,
}


class Feature(NamedTuple):
    """A record from an indexed file, in 0-based half-open coordinates."""

    contig: str
    start: int
    end: int
    record: Any = None


def _bed_feature(row):
    return Feature(row[0], int(row[1]), int(row[2]), row)


def _gff_feature(row):
    # GFF columns 4-5 are 1-based closed
    return Feature(row[0], int(row[3]) - 1, int(row[4]), row)


def _variant_feature(record):
    return Feature(record.contig, record.start, record.stop, record)


def _alignment_feature(segment):
    return Feature(segment.reference_name, segment.reference_start, segment.reference_end, segment)


_FEATURE_BUILDERS = {
    FeatureFileKind.BED: _bed_feature,
    FeatureFileKind.GFF: _gff_feature,
    FeatureFileKind.VCF: _variant_feature,
    FeatureFileKind.BAM: _alignment_feature,
}


def infer_kind(path):
    """Return the FeatureFileKind of ``path`` based on its extension."""
    ext = file_extension(str(path)).lower()
    kind = _KIND_BY_EXTENSION.get(ext)
    if kind is None:
        raise ValueError(f"Cannot infer feature file kind from extension '{ext}' of {path}")
    return kind


class PysamFeatureSource:
    """
    Feature source backed by a pysam file handle.

    Adapts ``pysam.TabixFile`` (BED/GFF), ``pysam.VariantFile`` (VCF/BCF)
    and ``pysam.AlignmentFile`` (BAM/CRAM) to ``query(contig, start, end)``.
    A contig absent from the file's index yields an empty result rather
    than pysam's ``ValueError``, so that :func:`pyfeatq.query_features` can
    retry with the other naming convention.

    Parameters
    ----------
    handle : pysam file object
        Open handle; a ``TabixFile`` must be opened with ``parser=pysam.asTuple()``.
    kind : FeatureFileKind
        Layout of the records.
    name : str, optional
        File identity used in diagnostics. Defaults to the handle's filename.
    """

    def __init__(self, handle, kind, name=None):
        kind = FeatureFileKind(kind)
        self._handle = handle
        self._to_feature = _FEATURE_BUILDERS[kind]
        self.kind = kind
        if name is None:
            filename = getattr(handle, "filename", None)
            if isinstance(filename, bytes):
                filename = filename.decode()
            name = filename
        self.name = name
        if kind is FeatureFileKind.VCF:
            contigs = handle.header.contigs
        elif kind is FeatureFileKind.BAM:
            contigs = handle.references
        else:
            contigs = handle.contigs
        self._contigs = frozenset(contigs)

    @property
    def contigs(self):
        return self._contigs

    def query(self, contig, start, end):
        if contig not in self._contigs:
            return FeatureIterator(())
        records = self._handle.fetch(contig, start, end)
        return FeatureIterator(self._to_feature(r) for r in records)

    def close(self):
        self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"PysamFeatureSource(kind={self.kind.value!r}, name={self.name!r})"


def open_feature_source(path, kind=None, index=None):
    """
    Open an indexed feature file as a :class:`PysamFeatureSource`.

    Parameters
    ----------
    path : str or Path
        Local path or URL of the file.
    kind : FeatureFileKind or str, optional
        File layout. Inferred from the extension if None.
    index : str or Path, optional
        Explicit index location (``.tbi``, ``.csi``, ``.bai``, ``.crai``).

    Returns
    -------
    PysamFeatureSource

    Raises
    ------
    ValueError
        If ``kind`` is None and the extension is not recognised.
    OSError
        If pysam cannot open the file or its index.
    """
    path = str(path)
    kind = infer_kind(path) if kind is None else FeatureFileKind(kind)
    index = None if index is None else str(index)
    _logger.debug("Opening %s as %s (index: %s)", path, kind.value, index)

    if kind is FeatureFileKind.VCF:
        handle = pysam.VariantFile(path, index_filename=index)
    elif kind is FeatureFileKind.BAM:
        handle = pysam.AlignmentFile(path, index_filename=index)
    else:
        handle = pysam.TabixFile(path, index=index, parser=pysam.asTuple())
    return PysamFeatureSource(handle, kind, name=path)
