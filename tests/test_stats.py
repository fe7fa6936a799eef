"""Tests for the dashboard statistics (gametrc_api/utils/stats.py)."""
from sqlalchemy import text

from gametrc_api.schemas.game import GameStatus
from gametrc_api.schemas.stats import GameStats


def test_stats_on_empty_catalog(catalog):
    stats = catalog.stats()

    assert isinstance(stats, GameStats)
    assert stats.total_games == 0
    assert stats.by_status.model_dump() == {
        "not_started": 0, "playing": 0, "completed": 0,
        "dropped": 0, "backlog": 0, "wishlist": 0,
    }
    assert stats.total_playtime_hours == 0.0
    assert stats.average_rating is None
    assert stats.completion_rate == 0.0
    assert stats.games_by_platform == []
    assert stats.games_by_genre == []
    assert stats.games_by_franchise == []
    assert stats.recent_completions == []


def test_completion_rate_excludes_wishlist(catalog, new_game):
    catalog.add(new_game(title="Done", status=GameStatus.COMPLETED, rating=9))
    catalog.add(new_game(title="Someday", status=GameStatus.WISHLIST))
    catalog.add(new_game(title="Now", status=GameStatus.PLAYING, rating=6))

    stats = catalog.stats()

    assert stats.total_games == 3
    assert stats.by_status.completed == 1
    assert stats.by_status.wishlist == 1
    assert stats.by_status.playing == 1
    assert stats.completion_rate == 50.0
    assert stats.average_rating == 7.5


def test_only_wishlist_gives_zero_completion_rate(catalog, new_game):
    catalog.add(new_game(status=GameStatus.WISHLIST))
    catalog.add(new_game(status=GameStatus.WISHLIST))

    stats = catalog.stats()
    assert stats.total_games == 2
    assert stats.completion_rate == 0.0


def test_playtime_sum_treats_missing_as_zero(catalog, new_game):
    catalog.add(new_game(playtime_hours=10.5))
    catalog.add(new_game(playtime_hours=None))
    catalog.add(new_game(playtime_hours=4))

    assert catalog.stats().total_playtime_hours == 14.5


def test_unknown_status_is_counted_in_total_only(catalog, new_game):
    known = catalog.add(new_game(status=GameStatus.DROPPED))
    odd = catalog.add(new_game(status=GameStatus.PLAYING))
    with catalog.store.session() as db:
        db.execute(text("UPDATE games SET status = 'Paused' WHERE id = :id"), {"id": odd.id})
        db.commit()

    stats = catalog.stats()
    assert stats.total_games == 2
    assert stats.by_status.dropped == 1
    assert stats.by_status.playing == 0
    assert stats.by_status.not_started == 0
    assert sum(stats.by_status.model_dump().values()) == 1
    assert catalog.get_by_id(known.id).status == GameStatus.DROPPED


def test_breakdowns_are_ordered_by_count(catalog, new_game):
    catalog.add(new_game(platform="PC", franchise="Diablo", genres=["RPG", "Action"]))
    catalog.add(new_game(platform="PC", franchise="Diablo", genres=["RPG"]))
    catalog.add(new_game(platform="Switch", franchise="Zelda", genres=["Adventure"]))
    catalog.add(new_game(platform="PS5", genres=["RPG"]))

    stats = catalog.stats()

    assert [(c.name, c.count) for c in stats.games_by_platform] == [("PC", 2), ("PS5", 1), ("Switch", 1)]
    assert [(c.name, c.count) for c in stats.games_by_franchise] == [("Diablo", 2), ("Zelda", 1)]
    assert [(c.name, c.count) for c in stats.games_by_genre] == [("RPG", 3), ("Action", 1), ("Adventure", 1)]


def test_franchise_and_genre_breakdowns_are_capped(catalog, new_game):
    for i in range(25):
        catalog.add(new_game(franchise=f"Franchise {i:02d}", genres=[f"Genre {i:02d}"]))

    stats = catalog.stats()
    assert len(stats.games_by_franchise) == 20
    assert len(stats.games_by_genre) == 20
    assert len(stats.games_by_platform) == 1


def test_recent_completions(catalog, new_game):
    for i in range(7):
        catalog.add(new_game(title=f"Done {i}", status=GameStatus.COMPLETED))
    catalog.add(new_game(title="Not done", status=GameStatus.PLAYING))

    stats = catalog.stats()
    assert stats.recent_completions == ["Done 6", "Done 5", "Done 4", "Done 3", "Done 2"]


def test_stats_reflect_latest_writes(catalog, new_game):
    game = catalog.add(new_game(status=GameStatus.PLAYING))
    assert catalog.stats().by_status.playing == 1

    catalog.update(game.id, new_game(status=GameStatus.COMPLETED))
    stats = catalog.stats()
    assert stats.by_status.playing == 0
    assert stats.by_status.completed == 1
    assert stats.completion_rate == 100.0

    catalog.delete(game.id)
    assert catalog.stats().total_games == 0
