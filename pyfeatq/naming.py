"""Chromosome naming conventions (``"1"`` vs ``"chr1"``)."""

from pathlib import Path

from ._shared import CONFIG, _chrom_name, _pandas, _require_columns


def chrom_alias(name):
    """
    Return the alternate spelling of a chromosome name.

    Strips the configured prefix (``"chr"`` by default) when present and
    prepends it otherwise, so that ``chrom_alias(chrom_alias(x)) == x``.
    Names starting with the prefix twice (``"chrchr2"``) are outside that
    guarantee: only one prefix is stripped, giving ``"chr2"``.
    Only this single prefix is recognised; other aliases such as ``"MT"``
    and ``"chrM"`` are not related.

    Parameters
    ----------
    name : str
        Chromosome name.

    Returns
    -------
    str
        The naming-equivalent alternate name.

    See Also
    --------
    chroms_equivalent : Test whether two names refer to the same chromosome.
    chrom_resolve : Look up a chromosome-keyed mapping under either spelling.

    Examples
    --------
    >>> import pyfeatq as fq
    >>> fq.chrom_alias("chr1")
    '1'
    >>> fq.chrom_alias("X")
    'chrX'
    """
    if not isinstance(name, str):
        raise TypeError(f"chromosome name must be a string, got {type(name).__name__}")
    prefix = CONFIG['chrom_prefix']
    if name.startswith(prefix):
        return name[len(prefix):]
    return prefix + name


def chroms_equivalent(name1, name2):
    """Return True if the two names are equal or differ only by the prefix."""
    name1 = _chrom_name(name1)
    name2 = _chrom_name(name2)
    return name1 == name2 or chrom_alias(name1) == name2 or chrom_alias(name2) == name1


def chrom_match(names, name):
    """
    Return the spelling of ``name`` that is present in ``names``.

    The given spelling is tried first, then its alias.

    Parameters
    ----------
    names : container of str
        Any container supporting ``in`` (dict, set, list, pandas Index).
    name : str or Chromosome
        Chromosome name, or an object with a ``name`` attribute.

    Returns
    -------
    str or None
        The matching key, or None if neither spelling is present.
    """
    name = _chrom_name(name)
    if name in names:
        return name
    alt = chrom_alias(name)
    if alt in names:
        return alt
    return None


def chrom_resolve(mapping, name, default=None):
    """
    Look up a chromosome-keyed mapping, tolerating the naming convention.

    Returns ``mapping[name]`` if present, otherwise ``mapping[chrom_alias(name)]``
    if present, otherwise ``default``. Absence is a normal outcome and does
    not raise. The mapping is only read.

    Parameters
    ----------
    mapping : Mapping
        Chromosome name to entity.
    name : str or Chromosome
        Chromosome name to look up.
    default : object, optional
        Value returned when neither spelling is present.

    Returns
    -------
    object
        The mapped entity or ``default``.

    See Also
    --------
    chrom_contains : Presence check with the same two-step lookup.

    Examples
    --------
    >>> import pyfeatq as fq
    >>> fq.chrom_resolve({"chr1": 248956422}, "1")
    248956422
    >>> fq.chrom_resolve({}, "1") is None
    True
    """
    key = chrom_match(mapping, name)
    if key is None:
        return default
    return mapping[key]


def chrom_contains(container, name):
    """Return True if ``container`` holds ``name`` under either spelling."""
    return chrom_match(container, name) is not None


def chroms_normalize(intervals, chroms):
    """
    Rewrite the ``chrom`` column of an intervals table to a reference spelling.

    Parameters
    ----------
    intervals : DataFrame
        Table with a ``chrom`` column (other columns are kept as is).
    chroms : container of str
        Chromosome names as spelled by the reference (a list, set, dict
        keys or pandas Index).

    Returns
    -------
    DataFrame
        A copy of ``intervals`` whose ``chrom`` values are spelled as in
        ``chroms``.

    Raises
    ------
    ValueError
        If some chromosome matches neither spelling.

    Examples
    --------
    >>> import pandas as pd
    >>> import pyfeatq as fq
    >>> df = pd.DataFrame({"chrom": ["1", "chrX"], "start": [0, 10], "end": [5, 20]})
    >>> fq.chroms_normalize(df, ["chr1", "X"])["chrom"].tolist()
    ['chr1', 'X']
    """
    _require_columns(intervals, ["chrom"])
    if not isinstance(chroms, (set, frozenset, dict, _pandas.Index)):
        chroms = set(chroms)

    renames = {}
    unknown = []
    for chrom in _pandas.unique(intervals["chrom"].astype(str)):
        match = chrom_match(chroms, chrom)
        if match is None:
            unknown.append(chrom)
        else:
            renames[chrom] = match
    if unknown:
        raise ValueError(f"Unknown chromosome(s): {', '.join(sorted(unknown))}")

    out = intervals.copy()
    out["chrom"] = out["chrom"].astype(str).map(renames)
    return out


def chrom_file(directory, chrom, suffix=""):
    """Return the per-chromosome file under ``directory`` in either spelling, or None."""
    directory = Path(directory)
    name = _chrom_name(chrom)
    for candidate_name in (name, chrom_alias(name)):
        candidate = directory / f"{candidate_name}{suffix}"
        if candidate.exists():
            return candidate
    return None
