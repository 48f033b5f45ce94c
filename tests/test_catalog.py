from __future__ import annotations

from pathlib import Path

import pytest

from dance_timeline.domain.errors import MissingTagsError, UnhandledEscapeError
from dance_timeline.io.catalog import TagStore, load_catalog, parse_catalog_lines

CATALOG = """\
<?xml version="1.0" encoding="UTF-8"?>
<VirtualDJ_Database Version="2023">
 <Song FilePath="/music/Tango (Live) 3.mp3" FileSize="4242">
  <Tags Author="Orquesta" Title="Tango (Live) 3" Genre="Tango" Bpm="0.5" />
  <Infos SongLength="180.5" />
 </Song>
 <Song FilePath="/music/Rock &amp; Roll.mp3" FileSize="99">
  <Tags Title="Rock &amp; Roll" User2="Bugg" />
 </Song>
</VirtualDJ_Database>
"""


def test_parse_catalog_reads_tags_per_file() -> None:
    store = parse_catalog_lines(CATALOG.splitlines())

    assert len(store) == 2
    assert store["/music/Tango (Live) 3.mp3"]["Title"] == "Tango (Live) 3"
    assert store["/music/Tango (Live) 3.mp3"]["Author"] == "Orquesta"


def test_file_paths_are_decoded_but_tag_values_are_raw() -> None:
    store = parse_catalog_lines(CATALOG.splitlines())

    tags = store["/music/Rock & Roll.mp3"]
    assert tags["Title"] == "Rock &amp; Roll"
    assert tags["User2"] == "Bugg"


def test_later_tag_blocks_overwrite_earlier_values() -> None:
    lines = [
        '<Song FilePath="/music/a.mp3">',
        '<Tags Title="First" Author="X" />',
        '<Tags Title="Second" />',
        '<Song FilePath="/music/b.mp3">',
        '<Tags Title="B" />',
        '<Song FilePath="/music/a.mp3">',
        '<Tags User2="Polka" />',
    ]
    store = parse_catalog_lines(lines)

    assert dict(store["/music/a.mp3"]) == {
        "Title": "Second",
        "Author": "X",
        "User2": "Polka",
    }
    assert dict(store["/music/b.mp3"]) == {"Title": "B"}


def test_empty_attribute_values_are_kept_empty() -> None:
    lines = ['<Song FilePath="/music/a.mp3">', '<Tags User2="" Title="Vals" />']
    store = parse_catalog_lines(lines)

    assert store["/music/a.mp3"]["User2"] == ""
    assert store["/music/a.mp3"]["Title"] == "Vals"


def test_tag_block_before_any_file_is_ignored() -> None:
    store = parse_catalog_lines(['<Tags Title="Orphan" />'])
    assert len(store) == 0


def test_missing_path_is_an_error() -> None:
    store = parse_catalog_lines(CATALOG.splitlines())

    with pytest.raises(MissingTagsError) as excinfo:
        store["/music/unknown.mp3"]
    assert excinfo.value.value == "/music/unknown.mp3"


def test_tag_store_is_read_only() -> None:
    store = TagStore({"/music/a.mp3": {"Title": "A"}})

    with pytest.raises(TypeError):
        store["/music/a.mp3"]["Title"] = "B"  # type: ignore[index]


def test_bad_escape_in_file_path_fails() -> None:
    with pytest.raises(UnhandledEscapeError):
        parse_catalog_lines(['<Song FilePath="/music/Caf&eacute;.mp3">'])


def test_load_catalog_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "database.xml"
    path.write_text(CATALOG, encoding="utf-8")

    store = load_catalog(path)
    assert "/music/Tango (Live) 3.mp3" in store


def test_get_returns_default_for_unknown_path() -> None:
    store = TagStore({"/music/a.mp3": {"Title": "A"}})

    assert dict(store.get("/music/a.mp3") or {}) == {"Title": "A"}
    assert store.get("/music/unknown.mp3") is None
    assert "/music/unknown.mp3" not in store
