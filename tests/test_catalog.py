import logging

import pytest

from art_space.catalog import CATALOG, ArtworkEntry, lookup


def test_catalog_has_three_ordered_entries() -> None:
    assert [entry.id for entry in CATALOG] == [1, 2, 3]


@pytest.mark.parametrize("artwork_id", [1, 2, 3])
def test_lookup_returns_matching_references(artwork_id: int) -> None:
    entry = lookup(artwork_id)
    assert entry.id == artwork_id
    assert entry.image_ref == f"art_{artwork_id}.png"
    assert entry.title_ref == f"artwork{artwork_id}_title"
    assert entry.artist_year_ref == f"artwork{artwork_id}_artist_year"


@pytest.mark.parametrize("artwork_id", [0, 4, -1, 99])
def test_lookup_out_of_range_falls_back_to_first(artwork_id: int, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="art_space.catalog"):
        entry = lookup(artwork_id)
    assert entry == CATALOG[0]
    assert "falling back" in caplog.text


def test_entries_are_immutable() -> None:
    with pytest.raises(AttributeError):
        CATALOG[0].id = 5


def test_display_refs_order() -> None:
    entry = ArtworkEntry(7, "img", "title", "caption")
    assert entry.display_refs == ("img", "title", "caption")
