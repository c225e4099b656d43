from second_turn.local_index import rank_results
from second_turn.models import LocalIndexRecord


def _record(game_id: str, rank=None, rating=None) -> LocalIndexRecord:
    return LocalIndexRecord(id=game_id, name=f"Game {game_id}", rank=rank, average_rating=rating)


def test_ranked_games_sort_before_unranked() -> None:
    records = [_record("a", rank=5), _record("b", rating=9.0), _record("c", rank=2)]

    assert [record.id for record in rank_results(records)] == ["c", "a", "b"]


def test_unranked_games_sort_by_rating_descending() -> None:
    records = [_record("low", rating=5.5), _record("none"), _record("high", rating=7.25)]

    assert [record.id for record in rank_results(records)] == ["high", "low", "none"]


def test_zero_rank_counts_as_unranked() -> None:
    records = [_record("zero", rank=0, rating=9.9), _record("ranked", rank=4000, rating=5.0)]

    assert [record.id for record in rank_results(records)] == ["ranked", "zero"]


def test_results_are_truncated_to_limit() -> None:
    records = [_record(str(i), rank=i) for i in range(120, 0, -1)]

    ranked = rank_results(records)

    assert len(ranked) == 50
    assert ranked[0].rank == 1
    assert ranked[-1].rank == 50
    assert len(rank_results(records, limit=3)) == 3


def test_ties_keep_input_order() -> None:
    records = [_record("first", rating=7.0), _record("second", rating=7.0)]

    assert [record.id for record in rank_results(records)] == ["first", "second"]
