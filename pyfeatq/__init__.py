"""
pyfeatq - chromosome-name tolerant queries over indexed genomic feature files
"""

__version__ = '0.1.0'

from . import _shared
from ._shared import CONFIG
from .cache import (
    cache_path,
    file_extension,
    hash_path,
    presigned_url_expiry,
    remove_file_extension,
    url_hash,
)
from .entities import (
    Chromosome,
    FeatureFile,
    FeatureFileKind,
    IndexFile,
    ResourceType,
    unregistered_file,
)
from .naming import (
    chrom_alias,
    chrom_contains,
    chrom_file,
    chrom_match,
    chrom_resolve,
    chroms_equivalent,
    chroms_normalize,
)
from .parsing import parse_bool_array, parse_float_array, parse_int_array
from .query import FeatureIterator, features_to_df, query_features, query_features_df
from .sorting import (
    SortedStreamGuard,
    UnsortedInputError,
    check_sorted,
    check_sorted_df,
)
from .sources import Feature, PysamFeatureSource, infer_kind, open_feature_source

__all__ = [
    # Configuration
    'CONFIG',

    # Chromosome naming
    'chrom_alias',
    'chroms_equivalent',
    'chrom_match',
    'chrom_resolve',
    'chrom_contains',
    'chroms_normalize',
    'chrom_file',

    # Feature queries
    'FeatureIterator',
    'query_features',
    'query_features_df',
    'features_to_df',

    # Feature sources
    'Feature',
    'PysamFeatureSource',
    'infer_kind',
    'open_feature_source',

    # Cache paths and file names
    'url_hash',
    'hash_path',
    'cache_path',
    'file_extension',
    'remove_file_extension',
    'presigned_url_expiry',

    # Sort-order validation
    'SortedStreamGuard',
    'UnsortedInputError',
    'check_sorted',
    'check_sorted_df',

    # Entities
    'Chromosome',
    'IndexFile',
    'FeatureFile',
    'FeatureFileKind',
    'ResourceType',
    'unregistered_file',

    # Array strings
    'parse_int_array',
    'parse_float_array',
    'parse_bool_array',
]
