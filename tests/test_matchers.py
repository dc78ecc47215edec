from quickrank.config import Item
from quickrank.context import create_ranking_context, record_selection
from quickrank.matchers import match_learned, run_matchers
from quickrank.segment import to_searchables


def _entries():
    return to_searchables([
        Item(id="chrome", name="Google Chrome"),
        Item(id="crd", name="Chrome Remote Desktop"),
        Item(id="notes", name="Notes"),
    ])


def test_match_learned_needs_known_query():
    assert match_learned(_entries(), "chr", create_ranking_context()) == []


def test_match_learned_needs_boost_threshold():
    ctx = create_ranking_context()
    record_selection(ctx, "chr", "chrome")
    assert match_learned(_entries(), "chr", ctx) == []
    record_selection(ctx, "chr", "chrome")
    assert [e.id for e in match_learned(_entries(), "chr", ctx)] == ["chrome"]


def test_match_learned_ignores_winner_outside_pool():
    ctx = create_ranking_context()
    record_selection(ctx, "chr", "gone")
    record_selection(ctx, "chr", "gone")
    assert match_learned(_entries(), "chr", ctx) == []


def test_run_matchers_puts_learned_first_without_duplicates():
    ctx = create_ranking_context()
    record_selection(ctx, "chr", "chrome")
    record_selection(ctx, "chr", "chrome")
    out = run_matchers(_entries(), "chr", ctx)
    assert [e.id for e in out] == ["chrome", "crd"]


def test_run_matchers_removes_matched_entries_from_pool():
    seen_pools = []

    def first(entries, query, context):
        return [e for e in entries if e.id == "notes"]

    def second(entries, query, context):
        seen_pools.append([e.id for e in entries])
        return list(entries)

    out = run_matchers(_entries(), "x", create_ranking_context(), matchers=[first, second])
    assert seen_pools == [["chrome", "crd"]]
    assert [e.id for e in out] == ["notes", "chrome", "crd"]
