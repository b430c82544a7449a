"""Metered action framework.

Every state-changing action is charged against the active player's budget
using the same rule:

1. Rejected outright, nothing changes: the requested amount is negative
   or the player cannot pay the base fee.
2. Fee-only: the base fee is affordable but the transfer precondition
   fails, or base fee plus transfer cost exceeds the budget. Only the base
   fee is charged and the transfer is skipped entirely.
3. Applied: base fee plus transfer cost are charged and the transfer runs.

Fee-only and applied both count as success.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..models.player import Player


class Outcome(Enum):
    REJECTED = "rejected"
    FEE_ONLY = "fee_only"
    APPLIED = "applied"

    @property
    def success(self) -> bool:
        return self is not Outcome.REJECTED


def _always() -> bool:
    return True


def _nothing() -> None:
    return None


@dataclass
class MeteredAction:
    """One instance of the metering rule.

    Attributes:
        name: Short description for logs and history, e.g. "collect 10"
        base_fee: Charged whenever the action is accepted
        amount: Requested amount; negative amounts are rejected
        transfer_cost: Extra charge paid only when the transfer runs
        precondition: Checked before any charge; False means fee-only
        transfer: Applies the state change of a full transfer
    """

    name: str
    base_fee: int
    amount: int = 0
    transfer_cost: int = 0
    precondition: Callable[[], bool] = _always
    transfer: Callable[[], None] = _nothing


@dataclass(frozen=True)
class MeterResult:
    """Outcome of metering one action and the budget actually deducted."""

    outcome: Outcome
    charged: int = 0

    @property
    def success(self) -> bool:
        return self.outcome.success


REJECTED = MeterResult(Outcome.REJECTED)


def meter(player: Player, action: MeteredAction) -> MeterResult:
    """Charge ``player`` for ``action`` and run its transfer when allowed.

    Args:
        player: Acting player, whose budget pays for the action
        action: The action to meter

    Returns:
        MeterResult describing which of the three outcomes happened
    """
    if action.amount < 0 or player.budget < action.base_fee:
        return REJECTED

    total = action.base_fee + action.transfer_cost
    if player.budget >= total and action.precondition():
        player.update_budget(-total)
        action.transfer()
        return MeterResult(Outcome.APPLIED, total)

    player.update_budget(-action.base_fee)
    return MeterResult(Outcome.FEE_ONLY, action.base_fee)
