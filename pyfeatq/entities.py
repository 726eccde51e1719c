"""Chromosome and feature file records, and the factory for unregistered files."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .cache import file_extension, remove_file_extension


class FeatureFileKind(str, enum.Enum):
    """Indexed feature file layouts."""

    VCF = "vcf"
    BED = "bed"
    GFF = "gff"
    BAM = "bam"


class ResourceType(str, enum.Enum):
    """Where a file lives."""

    FILE = "file"
    URL = "url"
    S3 = "s3"


@dataclass(frozen=True)
class Chromosome:
    name: str
    size: int = 0
    reference_id: int | None = None


@dataclass
class IndexFile:
    path: str
    resource_type: ResourceType = ResourceType.FILE


@dataclass
class FeatureFile:
    """A feature file known to the backend, registered or not."""

    kind: FeatureFileKind
    path: str
    index: IndexFile | None = None
    reference_id: int | None = None
    compressed: bool = False
    resource_type: ResourceType = ResourceType.FILE
    name: str | None = None


def _display_name(file_url):
    base = file_url.rstrip("/").rsplit("/", 1)[-1]
    return remove_file_extension(base, file_extension(base))


def _unregistered(kind, file_url, index_url, chromosome):
    return FeatureFile(
        kind=kind,
        path=file_url,
        index=IndexFile(index_url, resource_type=ResourceType.URL),
        reference_id=chromosome.reference_id,
        compressed=False,
        resource_type=ResourceType.URL,
        name=_display_name(file_url),
    )


def _unregistered_vcf(file_url, index_url, chromosome):
    return _unregistered(FeatureFileKind.VCF, file_url, index_url, chromosome)


def _unregistered_bed(file_url, index_url, chromosome):
    return _unregistered(FeatureFileKind.BED, file_url, index_url, chromosome)


def _unregistered_gff(file_url, index_url, chromosome):
    return _unregistered(FeatureFileKind.GFF, file_url, index_url, chromosome)


def _unregistered_bam(file_url, index_url, chromosome):
    return _unregistered(FeatureFileKind.BAM, file_url, index_url, chromosome)


_UNREGISTERED_FACTORIES = {
    FeatureFileKind.VCF: _unregistered_vcf,
    FeatureFileKind.BED: _unregistered_bed,
    FeatureFileKind.GFF: _unregistered_gff,
    FeatureFileKind.BAM: _unregistered_bam,
}


def unregistered_file(kind, file_url, index_url, chromosome):
    """
    Describe a remote feature file that is not registered in the backend.

    Used to query files by URL without importing them first. The result
    is an uncompressed, URL-typed :class:`FeatureFile` whose index points
    at ``index_url`` and whose reference is the chromosome's.

    Parameters
    ----------
    kind : FeatureFileKind or str
        File layout; selects the factory.
    file_url, index_url : str
        Locations of the file and of its index.
    chromosome : Chromosome
        Chromosome the file is queried on.

    Returns
    -------
    FeatureFile

    Raises
    ------
    ValueError
        If ``kind`` is not a known FeatureFileKind.
    """
    try:
        kind = FeatureFileKind(kind)
    except ValueError as exc:
        raise ValueError(f"Unknown feature file kind: {kind!r}") from exc
    return _UNREGISTERED_FACTORIES[kind](file_url, index_url, chromosome)
