"""
Tests for the immutable PlayerRegistry.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import DEFAULT_MU, DEFAULT_SIGMA, Player, PlayerRegistry  # noqa: E402


def test_with_rank_inserts_new_player_with_default_prior():
    registry = PlayerRegistry().with_rank("Alice", 2)

    alice = registry["Alice"]
    assert alice.skill == (DEFAULT_MU, DEFAULT_SIGMA)
    assert alice.rank == 2
    assert DEFAULT_SIGMA == 25.0 / 3.0


def test_with_rank_preserves_existing_skill():
    registry = PlayerRegistry({"Alice": Player("Alice", skill=(30.0, 5.0), rank=1)})

    updated = registry.with_rank("Alice", 3)

    assert updated["Alice"].skill == (30.0, 5.0)
    assert updated["Alice"].rank == 3


def test_updates_return_new_registry_and_leave_original_untouched():
    empty = PlayerRegistry()
    ranked = empty.with_rank("Alice", 1)
    rated = ranked.with_updated_skills([Player("Alice", skill=(27.0, 7.0), rank=1)])

    assert "Alice" not in empty
    assert len(empty) == 0
    assert ranked["Alice"].skill == (DEFAULT_MU, DEFAULT_SIGMA)
    assert rated["Alice"].skill == (27.0, 7.0)


def test_with_updated_skills_only_touches_listed_players():
    registry = PlayerRegistry().with_rank("Alice", 1).with_rank("Bob", 2).with_rank("Carol", 3)

    updated = registry.with_updated_skills([
        Player("Bob", skill=(20.0, 6.0), rank=2),
    ])

    assert updated["Alice"] == registry["Alice"]
    assert updated["Carol"] == registry["Carol"]
    assert updated["Bob"].skill == (20.0, 6.0)


def test_iteration_follows_first_appearance_order():
    registry = (
        PlayerRegistry()
        .with_rank("Zed", 1)
        .with_rank("Amy", 2)
        .with_rank("Zed", 2)
        .with_rank("Bo", 1)
    )

    assert list(registry) == ["Zed", "Amy", "Bo"]
    assert [p.name for p in registry.players()] == ["Zed", "Amy", "Bo"]


def test_names_are_case_sensitive():
    registry = PlayerRegistry().with_rank("alice", 1).with_rank("Alice", 2)

    assert len(registry) == 2
    assert registry.get("ALICE") is None


def test_same_inputs_give_equal_registries():
    first = PlayerRegistry().with_rank("Alice", 1).with_rank("Bob", 2)
    second = PlayerRegistry().with_rank("Alice", 1).with_rank("Bob", 2)

    assert first == second
    assert first is not second
