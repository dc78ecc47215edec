from quickrank.config import MAX_COUNT, MAX_HISTORY_SIZE
from quickrank.context import (
    RankingContext,
    create_ranking_context,
    current_winner,
    record_selection,
)


def test_create_ranking_context_is_empty():
    ctx = create_ranking_context()
    assert ctx.learned == {}
    assert ctx.history == []


def test_record_selection_updates_history_and_counts():
    ctx = create_ranking_context()
    record_selection(ctx, "Chr", "chrome")
    assert ctx.history == ["chrome"]
    # queries are keyed lowercased
    assert ctx.learned == {"chr": {"chrome": 1}}


def test_empty_query_only_touches_history():
    ctx = create_ranking_context()
    record_selection(ctx, "", "notes")
    assert ctx.history == ["notes"]
    assert ctx.learned == {}


def test_counts_saturate_at_max():
    ctx = create_ranking_context()
    for _ in range(10):
        record_selection(ctx, "chr", "chrome")
    assert ctx.learned["chr"]["chrome"] == MAX_COUNT


def test_other_selection_decrements_winner_once():
    ctx = create_ranking_context()
    for _ in range(3):
        record_selection(ctx, "chr", "a")
    record_selection(ctx, "chr", "b")
    assert ctx.learned["chr"] == {"a": 2, "b": 1}
    record_selection(ctx, "chr", "b")
    assert ctx.learned["chr"] == {"a": 1, "b": 2}
    assert current_winner(ctx.learned["chr"]) == ("b", 2)


def test_counts_stay_in_bounds_under_churn():
    ctx = create_ranking_context()
    for i in range(200):
        record_selection(ctx, "q", "abc"[i % 3] if i % 7 else "a")
    for counts in ctx.learned.values():
        assert all(0 <= c <= MAX_COUNT for c in counts.values())


def test_history_is_bounded_and_deduplicated():
    ctx = create_ranking_context()
    for i in range(60):
        record_selection(ctx, "", str(i))
    assert len(ctx.history) == MAX_HISTORY_SIZE
    assert ctx.history == [str(i) for i in reversed(range(10, 60))]

    record_selection(ctx, "", "30")
    assert len(ctx.history) == MAX_HISTORY_SIZE
    assert ctx.history[0] == "30"
    assert ctx.history.count("30") == 1


def test_current_winner_ignores_zero_counts():
    assert current_winner({}) == (None, 0)
    assert current_winner({"a": 0}) == (None, 0)


def test_from_dict_restores_invariants():
    data = {
        "learned": {"Chr": {"a": 9, "b": -2}},
        "history": ["a", "b", "a"] + [f"x{i}" for i in range(60)],
    }
    ctx = RankingContext.from_dict(data)
    assert ctx.learned == {"chr": {"a": 3, "b": 0}}
    assert ctx.history[:3] == ["a", "b", "x0"]
    assert len(ctx.history) == MAX_HISTORY_SIZE


def test_to_dict_round_trip():
    ctx = create_ranking_context()
    record_selection(ctx, "chr", "chrome")
    record_selection(ctx, "", "notes")
    restored = RankingContext.from_dict(ctx.to_dict())
    assert restored == ctx
