from quickrank.config import Item
from quickrank.segment import segment, to_searchable


def test_segment_splits_on_whitespace_and_hyphen():
    assert segment("Google Chrome") == ["google", "chrome"]
    assert segment("Visual-Studio   Code") == ["visual", "studio", "code"]


def test_segment_splits_camel_case():
    assert segment("OneDrive") == ["one", "drive"]
    assert segment("myNotesApp") == ["my", "notes", "app"]


def test_segment_drops_empty_fragments():
    assert segment("") == []
    assert segment("  - ") == []
    assert segment("-Foo--Bar-") == ["foo", "bar"]


def test_segment_consecutive_capitals_become_single_letters():
    # every uppercase letter opens a new segment
    assert segment("VLC") == ["v", "l", "c"]


def test_segments_concatenate_to_subsequence_of_name():
    for name in ["Google Chrome", "OneDrive", "my-cool App2Go", "VLC media player"]:
        joined = "".join(segment(name))
        lowered = name.lower()
        pos = 0
        for ch in joined:
            pos = lowered.index(ch, pos) + 1
        assert pos <= len(lowered)


def test_segment_is_deterministic():
    assert segment("Adobe PhotoShop") == segment("Adobe PhotoShop")


def test_to_searchable_builds_normalized_view():
    item = Item(id="chrome", name="Google Chrome")
    entry = to_searchable(item)
    assert entry.id == "chrome"
    assert entry.segments == ("google", "chrome")
    assert entry.normalized == "googlechrome"
    assert entry.item is item
