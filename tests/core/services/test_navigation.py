from random_note_viewer.core.services.navigation import NoteNavigator
from random_note_viewer.core.services.vault_query import VaultQuery


def make_query(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "Target Note.md").write_text("x", encoding="utf-8")
    query = VaultQuery(tmp_path)
    query.refresh()
    return query


def test_internal_target_opens_file_uri(tmp_path):
    opened = []
    nav = NoteNavigator(make_query(tmp_path), opener=opened.append)

    nav.open("Target Note")

    assert len(opened) == 1
    assert opened[0].startswith("file://")
    assert opened[0].endswith("Target%20Note.md")


def test_urls_open_directly(tmp_path):
    opened = []
    nav = NoteNavigator(make_query(tmp_path), opener=opened.append)

    nav.open("https://example.com")
    nav.open("mailto:someone@example.com")

    assert opened == ["https://example.com", "mailto:someone@example.com"]


def test_unresolved_target_logs_warning(tmp_path, caplog):
    opened = []
    nav = NoteNavigator(make_query(tmp_path), opener=opened.append)

    with caplog.at_level("WARNING"):
        nav.open("Nope", "sub/Target Note.md")
        nav.open("")

    assert opened == []
    assert "Unresolved link 'Nope'" in caplog.text


def test_opener_failure_is_logged_not_raised(tmp_path, caplog):
    def opener(url):
        raise OSError("no browser")

    nav = NoteNavigator(make_query(tmp_path), opener=opener)
    with caplog.at_level("ERROR"):
        nav.open("https://example.com")
    assert "no browser" in caplog.text
