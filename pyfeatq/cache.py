"""Hash-sharded locations for downloaded files, and file name helpers."""

import datetime as _datetime
import hashlib
import os
from pathlib import Path

from ._shared import CONFIG

_GZ_EXTENSION = ".gz"
_SEGMENT_WIDTH = 2


def url_hash(url):
    """
    Return the short hex digest used as the cache key of a URL.

    The first ``CONFIG['hash_size']`` (6) characters of the
    ``CONFIG['hash_digest']`` (md5) hex digest of the UTF-8 encoded string.
    The key only spreads files over directories; it is not an integrity
    check and collisions are not handled. Changing the digest or size
    relocates every previously cached file.

    Parameters
    ----------
    url : str
        Any identifying string, typically the source URL. The empty string
        is accepted and hashed like any other.

    Returns
    -------
    str
        Lowercase hex string.

    Examples
    --------
    >>> import pyfeatq as fq
    >>> fq.url_hash("")
    'd41d8c'
    """
    if not isinstance(url, str):
        raise TypeError(f"url must be a string, got {type(url).__name__}")
    digest = hashlib.new(CONFIG['hash_digest'], url.encode("utf-8")).hexdigest()
    return digest[:CONFIG['hash_size']]


def hash_path(hash):
    """
    Expand a hash into a sharded directory path.

    Consecutive two-character groups become path segments, with a leading
    and trailing delimiter. An odd trailing character forms the last
    segment.

    Examples
    --------
    >>> import pyfeatq as fq
    >>> fq.hash_path("abcdef")
    '/ab/cd/ef/'
    """
    if not hash:
        raise ValueError("hash cannot be empty")
    delimiter = CONFIG['path_delimiter']
    segments = [hash[i:i + _SEGMENT_WIDTH] for i in range(0, len(hash), _SEGMENT_WIDTH)]
    return delimiter + delimiter.join(segments) + delimiter


def cache_path(url, root=None):
    """
    Return the directory under which the download of ``url`` is cached.

    Parameters
    ----------
    url : str
        Source URL (or any identifying string).
    root : str or Path, optional
        Cache root. Defaults to ``CONFIG['cache_dir']``.

    Returns
    -------
    Path
        ``root`` joined with the sharded path of ``url_hash(url)``. Nothing
        is created on disk.
    """
    root = Path(CONFIG['cache_dir'] if root is None else root)
    parts = [p for p in hash_path(url_hash(url)).split(CONFIG['path_delimiter']) if p]
    return root.joinpath(*parts)


def file_extension(file_name):
    """Return the extension of ``file_name``, keeping a ``.gz`` suffix (``.vcf.gz``)."""
    compressed = file_name.endswith(_GZ_EXTENSION)
    if compressed:
        file_name = file_name[:-len(_GZ_EXTENSION)]
    ext = os.path.splitext(os.path.basename(file_name))[1]
    return ext + _GZ_EXTENSION if compressed else ext


def remove_file_extension(file_name, extension):
    """
    Strip ``extension`` from ``file_name``.

    Both arguments are trimmed first. Returns None for a blank file name,
    and the trimmed file name unchanged when the extension is blank or
    does not match. The extension is expected to start with a dot.
    """
    fn = file_name.strip() if file_name else ""
    ext = extension.strip() if extension else ""
    if not fn:
        return None
    if not ext or not fn.endswith(ext):
        return fn
    return fn[:-len(ext)].strip()


def presigned_url_expiry(now=None):
    """Return the expiry time (one day from ``now``) for presigned download URLs."""
    if now is None:
        now = _datetime.datetime.now(_datetime.timezone.utc)
    return now + _datetime.timedelta(days=1)
