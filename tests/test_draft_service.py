"""
Tests for captain selection and the captain draft.
"""

import pytest

from domain.models import RankTier, Role
from domain.services.draft_service import DRAFT_PICK_ORDER, CaptainPair, DraftService
from tests.conftest import make_player


class TestSelectCaptains:
    """Tests for DraftService.select_captains."""

    def test_auto_picks_two_strongest(self, flexible_pool):
        """Without ids the two strongest players captain; the weaker picks first."""
        captains = DraftService().select_captains(flexible_pool)
        # eve is master (3400), alice diamond II (3000)
        assert captains.captain_a.id == "alice"
        assert captains.captain_b.id == "eve"

    def test_both_specified_used_as_given(self, flexible_pool):
        """Specified captains are kept in the given order."""
        captains = DraftService().select_captains(flexible_pool, "jon", "eve")
        assert captains.ids == ("jon", "eve")

    def test_single_captain_paired_with_strongest_other(self, flexible_pool):
        """One specified captain is paired with the strongest remaining player."""
        service = DraftService()
        assert service.select_captains(flexible_pool, captain_a_id="jon").ids == ("jon", "eve")
        assert service.select_captains(flexible_pool, captain_b_id="jon").ids == ("eve", "jon")
        assert service.select_captains(flexible_pool, captain_a_id="eve").ids == ("eve", "alice")

    def test_unknown_captain_rejected(self, flexible_pool):
        """Captains must come from the pool."""
        with pytest.raises(ValueError, match="not in the player pool"):
            DraftService().select_captains(flexible_pool, "nobody", "eve")

    def test_same_captain_twice_rejected(self, flexible_pool):
        """Two captains must be two different players."""
        with pytest.raises(ValueError, match="different players"):
            DraftService().select_captains(flexible_pool, "eve", "eve")

    def test_lower_rated_captain_ties_go_to_first(self):
        """On equal strength the first captain counts as lower rated."""
        a = make_player("a")
        b = make_player("b")
        assert DraftService().determine_lower_rated_captain(a, b) is a


class TestRunDraft:
    """Tests for DraftService.run_draft."""

    def test_pick_order_and_rosters(self, flexible_pool):
        """Eight picks follow A B B A B A A B and fill two teams of five."""
        service = DraftService()
        captains = service.select_captains(flexible_pool)
        outcome = service.run_draft(flexible_pool, captains)

        assert [side for side, _ in outcome.picks] == list(DRAFT_PICK_ORDER)
        assert len(outcome.team_a) == 5
        assert len(outcome.team_b) == 5
        assert outcome.team_a[0] is captains.captain_a
        assert outcome.team_b[0] is captains.captain_b
        all_ids = [p.id for p in outcome.team_a + outcome.team_b]
        assert sorted(all_ids) == sorted(p.id for p in flexible_pool)

    def test_need_bonus_beats_small_strength_gap(self):
        """A team lacking support takes a slightly weaker support over a mid."""
        pool = [
            make_player("cap_a", Role.MID, tier=RankTier.GOLD_IV),
            make_player("cap_b", Role.JUNGLE, tier=RankTier.GOLD_IV),
            make_player("mid2", Role.MID, tier=RankTier.PLATINUM_IV),
            make_player("sup", Role.SUPPORT, tier=RankTier.GOLD_I),
        ]
        service = DraftService()
        outcome = service.run_draft(pool, CaptainPair(pool[0], pool[1]))
        assert [p.id for p in outcome.team_a] == ["cap_a", "sup"]
        assert [p.id for p in outcome.team_b] == ["cap_b", "mid2"]

    def test_zero_need_weight_drafts_by_strength(self):
        """Without the need bonus the strongest player goes first."""
        pool = [
            make_player("cap_a", Role.MID, tier=RankTier.GOLD_IV),
            make_player("cap_b", Role.JUNGLE, tier=RankTier.GOLD_IV),
            make_player("mid2", Role.MID, tier=RankTier.PLATINUM_IV),
            make_player("sup", Role.SUPPORT, tier=RankTier.GOLD_I),
        ]
        outcome = DraftService(role_need_weight=0).run_draft(pool, CaptainPair(pool[0], pool[1]))
        assert [p.id for p in outcome.team_a] == ["cap_a", "mid2"]

    def test_pick_value(self):
        """Bonus is the need weight divided by available candidates, per role."""
        service = DraftService(role_need_weight=400)
        flex = make_player("flex", Role.ADC, {Role.SUPPORT}, RankTier.GOLD_IV)
        available = {Role.ADC: 2, Role.SUPPORT: 4, Role.TOP: 1}
        assert service.pick_value(flex, [Role.ADC, Role.SUPPORT, Role.TOP], available) == 1600 + 200 + 100
        assert service.pick_value(flex, [Role.TOP], available) == 1600
