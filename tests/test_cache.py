import datetime
import hashlib
import re
from pathlib import Path

import pytest

import pyfeatq as fq


def test_url_hash_is_md5_prefix():
    url = "http://example.org/a.bam"
    assert fq.url_hash(url) == hashlib.md5(url.encode()).hexdigest()[:6]


def test_url_hash_is_deterministic():
    url = "s3://bucket/sample.vcf.gz"
    assert len({fq.url_hash(url) for _ in range(5)}) == 1


def test_url_hash_of_empty_string():
    # md5("") = d41d8cd98f00b204e9800998ecf8427e
    assert fq.url_hash("") == "d41d8c"
    assert fq.hash_path(fq.url_hash("")) == "/d4/1d/8c/"


def test_url_hash_rejects_bytes():
    with pytest.raises(TypeError):
        fq.url_hash(b"http://example.org/a.bam")


def test_sharded_path_layout():
    path = fq.hash_path(fq.url_hash("http://example.org/a.bam"))
    assert path.startswith("/") and path.endswith("/")
    segments = path.strip("/").split("/")
    assert len(segments) == 3
    assert all(re.fullmatch(r"[0-9a-f]{2}", s) for s in segments)
    assert "".join(segments) == fq.url_hash("http://example.org/a.bam")


def test_hash_path():
    assert fq.hash_path("abcdef") == "/ab/cd/ef/"
    assert fq.hash_path("abcde") == "/ab/cd/e/"
    assert fq.hash_path("ab") == "/ab/"


def test_hash_path_empty():
    with pytest.raises(ValueError, match="empty"):
        fq.hash_path("")


def test_hash_size_is_configurable(monkeypatch):
    monkeypatch.setitem(fq.CONFIG, "hash_size", 8)
    assert fq.url_hash("") == "d41d8cd9"
    assert fq.hash_path(fq.url_hash("")) == "/d4/1d/8c/d9/"


def test_cache_path(tmp_path):
    path = fq.cache_path("", root=tmp_path)
    assert path == tmp_path / "d4" / "1d" / "8c"
    assert not path.exists()


def test_cache_path_default_root(monkeypatch, tmp_path):
    monkeypatch.setitem(fq.CONFIG, "cache_dir", str(tmp_path / "cache"))
    assert fq.cache_path("") == Path(tmp_path / "cache" / "d4" / "1d" / "8c")


@pytest.mark.parametrize(
    "name,expected",
    [
        ("sample.vcf.gz", ".vcf.gz"),
        ("reads.bam", ".bam"),
        ("dir.v2/genes.gtf.gz", ".gtf.gz"),
        ("archive.gz", ".gz"),
        ("README", ""),
    ],
)
def test_file_extension(name, expected):
    assert fq.file_extension(name) == expected


@pytest.mark.parametrize(
    "name,ext,expected",
    [
        ("sample.vcf", ".vcf", "sample"),
        ("  sample.vcf  ", " .vcf ", "sample"),
        ("sample.vcf", ".bed", "sample.vcf"),
        ("sample.vcf", "  ", "sample.vcf"),
        ("sample.vcf", None, "sample.vcf"),
        ("   ", ".vcf", None),
        (None, ".vcf", None),
    ],
)
def test_remove_file_extension(name, ext, expected):
    assert fq.remove_file_extension(name, ext) == expected


def test_presigned_url_expiry():
    now = datetime.datetime(2024, 1, 31, 12, tzinfo=datetime.timezone.utc)
    assert fq.presigned_url_expiry(now) == datetime.datetime(2024, 2, 1, 12, tzinfo=datetime.timezone.utc)
    assert fq.presigned_url_expiry() > datetime.datetime.now(datetime.timezone.utc)
