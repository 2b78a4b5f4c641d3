from pathlib import Path

import pytest

from blobvault.config import AppConfig
from blobvault.domain.errors import InvalidExtension, MissingExtension
from blobvault.features.blobs.digest import digest
from blobvault.features.blobs.paths import MAX_EXTENSION_LENGTH, PathDeriver, extension_of

DOMAIN = "https://cdn.example.test/assets"


@pytest.mark.parametrize(
    ("filename", "ext"),
    [
        ("a.txt", "txt"),
        ("photo.JPG", "JPG"),
        ("archive.tar.gz", "gz"),
        ("C:\\Users\\me\\report.PDF", "PDF"),
        ("dir/sub/notes.md", "md"),
    ],
)
def test_extension_of(filename: str, ext: str) -> None:
    assert extension_of(filename) == ext


@pytest.mark.parametrize("filename", ["README", ".bashrc", "trailing.", ""])
def test_extension_of_missing(filename: str) -> None:
    with pytest.raises(MissingExtension):
        extension_of(filename)


def test_derive_layout(tmp_path: Path) -> None:
    d = digest(b"hello")
    hx = d.hex
    derived = PathDeriver(tmp_path, DOMAIN).derive(d, "TXT")

    assert derived.storage_path == tmp_path / hx[:2] / hx[2:4] / f"{hx}.txt"
    assert derived.access_uri == f"{DOMAIN}/{hx[:2]}/{hx[2:4]}/{hx}.txt"
    assert derived.relative.parts[0] == hx[:2]
    assert derived.relative.parts[1] == hx[2:4]
    assert derived.relative.stem == hx


def test_derive_keeps_non_ascii_extension(tmp_path: Path) -> None:
    derived = PathDeriver(tmp_path, DOMAIN).derive(digest(b"x"), extension_of("notes.Données"))
    assert derived.storage_path.suffix == ".données"


@pytest.mark.parametrize("ext", ["a/b", "a\\b", "t\x00xt", "t\nxt", "x" * (MAX_EXTENSION_LENGTH + 1)])
def test_derive_rejects_unsafe_extension(tmp_path: Path, ext: str) -> None:
    with pytest.raises(InvalidExtension):
        PathDeriver(tmp_path, DOMAIN).derive(digest(b"x"), ext)


def test_derive_accepts_extension_at_length_cap(tmp_path: Path) -> None:
    ext = "x" * MAX_EXTENSION_LENGTH
    assert PathDeriver(tmp_path, DOMAIN).derive(digest(b"x"), ext).access_uri.endswith(ext)


def test_configured_domain_has_no_trailing_slash(tmp_path: Path) -> None:
    cfg = AppConfig(storage_root=tmp_path, access_domain=DOMAIN + "/")
    derived = PathDeriver(cfg.storage_root, cfg.access_domain).derive(digest(b"x"), "bin")
    assert "//" not in derived.access_uri.removeprefix("https://")


def test_same_content_same_extension_same_path(tmp_path: Path) -> None:
    deriver = PathDeriver(tmp_path, DOMAIN)
    assert deriver.derive(digest(b"abc"), "png") == deriver.derive(digest(b"abc"), "png")


def test_addresses_are_disjoint(tmp_path: Path) -> None:
    deriver = PathDeriver(tmp_path, DOMAIN)
    a = deriver.derive(digest(b"one"), "png")
    b = deriver.derive(digest(b"two"), "png")
    c = deriver.derive(digest(b"one"), "jpg")
    assert len({a.storage_path, b.storage_path, c.storage_path}) == 3


def test_derive_rejects_empty_extension(tmp_path: Path) -> None:
    with pytest.raises(MissingExtension):
        PathDeriver(tmp_path, DOMAIN).derive(digest(b"x"), "")
