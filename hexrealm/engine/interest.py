"""Passive interest accrual.

Applied once at the end of every turn to every region, owned or neutral:

    deposit = min(max_deposit, deposit + deposit * interest_percentage // 100)

This is the only mutation of the territory not triggered by a player action.
"""

from ..models.game import Game
from ..models.region import Region


def accrue(region: Region, percentage: int, max_deposit: int) -> int:
    """Apply one round of interest to a region.

    Args:
        region: Region to update
        percentage: Interest in whole percent
        max_deposit: Upper bound on the resulting deposit

    Returns:
        Change in the region's deposit
    """
    before = region.deposit
    after = min(max_deposit, before + before * percentage // 100)
    region.update_deposit(after - before)
    return region.deposit - before


def process_interest(game: Game) -> int:
    """Apply interest to the whole territory.

    Args:
        game: Current game state

    Returns:
        Net change of all deposits combined
    """
    percentage = game.config.interest_percentage
    max_deposit = game.config.max_deposit
    return sum(accrue(region, percentage, max_deposit) for region in game.territory)
