"""
Unit tests for tools/tier_gate.py — Per-engine tier enablement.
"""

import pytest

from models.tiers import ALL_TIERS, Tier
from tools.censor_errors import InvalidTier
from tools.tier_gate import TierGate


class TestTierGate:

    def test_all_enabled_by_default(self, gate):
        assert all(gate.is_enabled(t) for t in ALL_TIERS)
        assert gate.enabled_tiers() == list(ALL_TIERS)

    def test_disable_and_enable(self, gate):
        gate.disable(Tier.POSSIBLY_OFFENSIVE)
        assert gate.is_enabled(Tier.POSSIBLY_OFFENSIVE) is False
        gate.enable(Tier.POSSIBLY_OFFENSIVE)
        assert gate.is_enabled(Tier.POSSIBLY_OFFENSIVE) is True

    def test_accepts_ints_and_names(self, gate):
        gate.disable(2)
        gate.set_enabled("sexual_terms", False)
        assert gate.is_enabled(Tier.COMMON_PROFANITY) is False
        assert gate.is_enabled(3) is False

    def test_every_tier_always_has_an_entry(self, gate):
        gate.disable(Tier.SLURS)
        gate.disable(Tier.SLURS)
        state = gate.as_dict()
        assert set(state) == set(ALL_TIERS)
        assert state[Tier.SLURS] is False

    def test_as_dict_is_copy(self, gate):
        gate.as_dict()[Tier.SLURS] = False
        assert gate.is_enabled(Tier.SLURS)

    @pytest.mark.parametrize("bad", [0, 6, "bogus"])
    def test_invalid_tier(self, gate, bad):
        with pytest.raises(InvalidTier):
            gate.disable(bad)
        with pytest.raises(InvalidTier):
            gate.is_enabled(bad)

    def test_instances_do_not_share_state(self):
        a, b = TierGate(), TierGate()
        a.disable(Tier.SLURS)
        assert b.is_enabled(Tier.SLURS)

    def test_repr_lists_disabled(self, gate):
        gate.disable(Tier.USER_ADDED)
        assert "USER_ADDED" in repr(gate)
