import pytest

from random_note_viewer.core.exceptions import NoteReadError
from random_note_viewer.core.models import NoteRecord
from random_note_viewer.core.services.vault_storage import VaultStorage


def test_read_returns_text(tmp_path):
    path = tmp_path / "Note.md"
    path.write_text("héllo", encoding="utf-8")
    record = NoteRecord(path=path, vault_root=tmp_path)

    assert VaultStorage().read(record) == "héllo"


def test_missing_file_raises_read_error(tmp_path):
    record = NoteRecord(path=tmp_path / "Ghost Note.md", vault_root=tmp_path)

    with pytest.raises(NoteReadError) as info:
        VaultStorage().read(record)

    assert info.value.path == "Ghost Note.md"
    assert isinstance(info.value.cause, OSError)
    assert str(info.value).startswith("[Ghost Note.md]")


def test_undecodable_file_raises_read_error(tmp_path):
    path = tmp_path / "bin.md"
    path.write_bytes(b"\xff\xfe\xfa")
    record = NoteRecord(path=path, vault_root=tmp_path)

    with pytest.raises(NoteReadError):
        VaultStorage(encoding="utf-8").read(record)
