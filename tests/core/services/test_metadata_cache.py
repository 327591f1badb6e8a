from pathlib import Path

import pytest

from random_note_viewer.core.models import NoteRecord
from random_note_viewer.core.services.metadata_cache import (
    MetadataCache,
    parse_frontmatter,
    split_frontmatter,
)


def write_note(tmp_path: Path, name: str, text: str, mtime: float = 1.0) -> NoteRecord:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return NoteRecord(path=path, vault_root=tmp_path, mtime=mtime)


def test_split_frontmatter():
    raw, body = split_frontmatter("---\ntitle: A\ntags: [x]\n---\n# Heading\n")
    assert raw == "title: A\ntags: [x]"
    assert body == "# Heading\n"


def test_split_without_frontmatter():
    text = "# Just a note\n---\nnot: frontmatter\n---\n"
    assert split_frontmatter(text) == (None, text)


def test_split_handles_bom_and_crlf():
    raw, body = split_frontmatter("\ufeff---\r\nkey: v\r\n---\r\nbody")
    assert raw.strip() == "key: v"
    assert body == "body"


def test_parse_frontmatter_keeps_types_and_order():
    data = parse_frontmatter("---\nb: 2\na: [[Note]]\nc: '[[Note]]'\nlist:\n  - x\n  - y\n---\n")
    assert list(data) == ["b", "a", "c", "list"]
    assert data["b"] == 2
    assert data["c"] == "[[Note]]"
    assert data["list"] == ["x", "y"]


@pytest.mark.parametrize(
    "text",
    [
        "no frontmatter",
        "---\n---\nbody",
        "---\n- just\n- a list\n---\n",
        "---\nkey: [unclosed\n---\n",
    ],
)
def test_parse_frontmatter_absent_cases(text):
    assert parse_frontmatter(text) is None


def test_cache_parses_once_per_mtime(tmp_path):
    reads = []

    def reader(path):
        reads.append(path)
        return path.read_text(encoding="utf-8")

    cache = MetadataCache(reader=reader)
    record = write_note(tmp_path, "a.md", "---\nstatus: draft\n---\nbody")

    assert cache.get_metadata(record) == {"status": "draft"}
    assert cache.get_metadata(record) == {"status": "draft"}
    assert len(reads) == 1

    (tmp_path / "a.md").write_text("---\nstatus: done\n---\n", encoding="utf-8")
    newer = NoteRecord(path=record.path, vault_root=tmp_path, mtime=2.0)
    assert cache.get_metadata(newer) == {"status": "done"}
    assert len(reads) == 2


def test_cache_treats_empty_mapping_as_absent(tmp_path):
    cache = MetadataCache()
    record = write_note(tmp_path, "a.md", "---\n{}\n---\nbody")
    assert cache.get_metadata(record) is None


def test_cache_missing_file_is_absent(tmp_path):
    cache = MetadataCache()
    record = NoteRecord(path=tmp_path / "gone.md", vault_root=tmp_path, mtime=1.0)
    assert cache.get_metadata(record) is None
    assert len(cache) == 0


def test_prune_and_clear(tmp_path):
    cache = MetadataCache()
    a = write_note(tmp_path, "a.md", "---\nk: 1\n---\n")
    b = write_note(tmp_path, "b.md", "---\nk: 2\n---\n")
    cache.update(a)
    cache.update(b)

    cache.prune([a])
    assert len(cache) == 1

    cache.clear()
    assert len(cache) == 0
