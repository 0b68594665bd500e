"""
TierGate — Per-engine switchboard deciding which tiers count as matches.

Every tier has exactly one on/off entry at all times. Gate state is
independent of the active locale and the custom dictionary.
"""

import logging
from typing import Dict, List

from models.tiers import ALL_TIERS, Tier

logger = logging.getLogger("TierGate")


class TierGate:
    """Fixed-size Tier → enabled mapping, all tiers enabled by default."""

    def __init__(self):
        self._enabled: Dict[Tier, bool] = {tier: True for tier in ALL_TIERS}

    def is_enabled(self, tier) -> bool:
        return self._enabled[Tier.coerce(tier)]

    def set_enabled(self, tier, enabled: bool) -> None:
        """Turn a tier on or off.

        Raises:
            InvalidTier: if `tier` isn't one of the five tiers.
        """
        tier = Tier.coerce(tier)
        self._enabled[tier] = bool(enabled)
        logger.debug(f"Tier {tier.name} {'enabled' if enabled else 'disabled'}")

    def enable(self, tier) -> None:
        self.set_enabled(tier, True)

    def disable(self, tier) -> None:
        self.set_enabled(tier, False)

    def enabled_tiers(self) -> List[Tier]:
        return [tier for tier, on in self._enabled.items() if on]

    def as_dict(self) -> Dict[Tier, bool]:
        """Return a copy of the gate state."""
        return dict(self._enabled)

    def __repr__(self):
        off = [tier.name for tier, on in self._enabled.items() if not on]
        return f"TierGate(disabled=[{', '.join(off)}])"
