"""
Pytest fixtures for tests.

Provides a player factory and the canonical ten-player pools used across the
suite. Pools are rebuilt per test so cached strength scores never leak.
"""

import pytest

from domain.models import GameStats, Player, RankTier, Role


def make_player(
    player_id: str,
    main_role: Role | str = Role.MID,
    sub_roles=(),
    tier: RankTier | str = RankTier.GOLD_IV,
    wins: int = 0,
    losses: int = 0,
    name: str | None = None,
) -> Player:
    """Build a player with only the fields a test cares about."""
    return Player(
        id=player_id,
        display_name=name or player_id.upper(),
        rank_tier=tier,
        main_role=main_role,
        sub_roles=frozenset(sub_roles),
        stats=GameStats(total_wins=wins, total_losses=losses),
    )


@pytest.fixture(autouse=True)
def no_debug_trace(monkeypatch):
    """Keep JSONL tracing off unless a test enables it explicitly."""
    monkeypatch.delenv("DEBUG_LOG_PATH", raising=False)


@pytest.fixture
def player_factory():
    return make_player


@pytest.fixture
def identical_pool():
    """Two single-role players per role, all the same tier and record."""
    players = []
    for role in Role:
        for n in (1, 2):
            players.append(make_player(f"{role.value}{n}", main_role=role))
    return players


@pytest.fixture
def exclusive_pool():
    """
    Two single-role players per role, same tier, different records.

    Ten games each, so strength = 1120 + 30 * wins.
    """
    wins = {
        "top1": 7, "top2": 3,
        "jungle1": 5, "jungle2": 6,
        "mid1": 8, "mid2": 2,
        "adc1": 4, "adc2": 9,
        "support1": 1, "support2": 6,
    }
    return [
        make_player(pid, main_role=pid.rstrip("12"), wins=w, losses=10 - w)
        for pid, w in wins.items()
    ]


@pytest.fixture
def flexible_pool():
    """Mixed tiers with sub roles; every role has at least three candidates."""
    return [
        make_player("alice", Role.TOP, {Role.JUNGLE}, RankTier.DIAMOND_II),
        make_player("bob", Role.TOP, {Role.MID}, RankTier.PLATINUM_I),
        make_player("cara", Role.JUNGLE, {Role.TOP}, RankTier.EMERALD_III),
        make_player("dan", Role.JUNGLE, {Role.SUPPORT}, RankTier.GOLD_II),
        make_player("eve", Role.MID, {Role.ADC}, RankTier.MASTER),
        make_player("finn", Role.MID, {Role.JUNGLE}, RankTier.SILVER_I),
        make_player("gail", Role.ADC, {Role.SUPPORT}, RankTier.EMERALD_I),
        make_player("hugo", Role.ADC, {Role.SUPPORT}, RankTier.GOLD_IV, wins=14, losses=8),
        make_player("ivy", Role.SUPPORT, {Role.ADC}, RankTier.PLATINUM_III, wins=3, losses=9),
        make_player("jon", Role.SUPPORT, {Role.TOP}, RankTier.BRONZE_I),
    ]


@pytest.fixture
def jungle_short_pool():
    """Only one player can jungle; mid has three."""
    players = []
    for role in (Role.TOP, Role.MID, Role.ADC, Role.SUPPORT):
        for n in (1, 2):
            players.append(make_player(f"{role.value}{n}", main_role=role))
    players.append(make_player("jungle1", main_role=Role.JUNGLE))
    players.append(make_player("mid3", main_role=Role.MID, tier=RankTier.PLATINUM_IV))
    return players


@pytest.fixture
def greedy_trap_pool():
    """
    Every role has three candidates, so the greedy pass starts at top and locks
    p1 and p2 there. That strands support later, although top={p2, p3},
    jungle={p1, p4}, mid={p5, p6}, adc={p7, p8}, support={p9, p10} is valid.
    """
    return [
        make_player("p1", Role.JUNGLE, {Role.TOP}, RankTier.CHALLENGER),
        make_player("p2", Role.TOP, (), RankTier.DIAMOND_I),
        make_player("p3", Role.TOP, (), RankTier.GOLD_IV),
        make_player("p4", Role.JUNGLE, {Role.SUPPORT}),
        make_player("p5", Role.MID, {Role.JUNGLE}),
        make_player("p6", Role.MID),
        make_player("p7", Role.ADC, {Role.MID}),
        make_player("p8", Role.ADC),
        make_player("p9", Role.SUPPORT, {Role.ADC}),
        make_player("p10", Role.SUPPORT),
    ]
