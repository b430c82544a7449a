"""Player actions, each expressed as an instance of the metering rule.

Every function acts for ``game.active_player`` and returns the
MeterResult; turn-state checks belong to the engine, not to this module.

| Action   | Base fee                          | Transfer cost | Transfer precondition      |
|----------|-----------------------------------|---------------|----------------------------|
| move     | 1                                 | 0             | always                     |
| collect  | 1                                 | 0             | amount <= crew deposit     |
| invest   | amount + 1                        | 0             | invest gate at crew region |
| attack   | 1                                 | amount        | target region exists       |
| relocate | 1 + 5 * distance + revision cost  | 0             | always                     |
"""

import logging

from ..models.game import Game
from ..utils.constants import ACTION_FEE, RELOCATE_STEP_COST
from ..utils.geometry import Direction, hex_distance, neighbor
from .metering import REJECTED, MeteredAction, MeterResult, meter
from .queries import can_invest_at

logger = logging.getLogger(__name__)


def move(game: Game, direction: Direction) -> MeterResult:
    """Move the crew one step.

    A step off the grid or into a region owned by the opponent leaves the
    crew where it is; the fee is charged either way.
    """
    player = game.active_player
    origin = game.location_of(player.crew)

    def transfer() -> None:
        dest = neighbor(origin, direction, game.config.rows, game.config.cols)
        if dest is None:
            logger.debug("%s: move %s blocked by grid edge", player.id, direction.name)
            return
        region = game.region_at(dest)
        if region.owner is not None and region.owner != player.id:
            logger.debug("%s: move %s blocked by %s's region", player.id, direction.name, region.owner)
            return
        player.crew = game.index_of(dest)

    return meter(
        player,
        MeteredAction(
            name=f"move {direction.name.lower()}",
            base_fee=ACTION_FEE,
            transfer=transfer,
        ),
    )


def collect(game: Game, amount: int) -> MeterResult:
    """Move ``amount`` from the crew region's deposit into the budget."""
    player = game.active_player
    region = game.territory[player.crew]

    def transfer() -> None:
        region.update_deposit(-amount)
        player.update_budget(amount)

    return meter(
        player,
        MeteredAction(
            name=f"collect {amount}",
            base_fee=ACTION_FEE,
            amount=amount,
            precondition=lambda: amount <= region.deposit,
            transfer=transfer,
        ),
    )


def invest(game: Game, amount: int) -> MeterResult:
    """Move ``amount`` from the budget into the crew region's deposit.

    The whole ``amount + 1`` is the fee: it is paid in full or, when
    unaffordable, not at all. It is also paid when the investment gate
    fails, in which case the deposit is untouched. The deposit is capped at
    the configured maximum, and investing a positive amount in a neutral
    region claims it.
    """
    player = game.active_player
    index = player.crew
    region = game.territory[index]
    cap = game.config.max_deposit

    def transfer() -> None:
        region.update_deposit(min(amount, max(0, cap - region.deposit)))
        if region.is_neutral and amount > 0:
            region.update_owner(player.id)
            logger.info("%s claimed region %s", player.id, region.location)

    return meter(
        player,
        MeteredAction(
            name=f"invest {amount}",
            base_fee=amount + ACTION_FEE,
            amount=amount,
            precondition=lambda: can_invest_at(game, index, player.id),
            transfer=transfer,
        ),
    )


def attack(game: Game, direction: Direction, amount: int) -> MeterResult:
    """Destroy ``amount`` of the deposit adjacent to the crew in ``direction``.

    Destroyed value is not gained by the attacker. A target left with a
    deposit of exactly zero becomes neutral. When ``amount + 1`` is
    unaffordable only the base fee is charged.
    """
    player = game.active_player
    origin = game.location_of(player.crew)
    target = neighbor(origin, direction, game.config.rows, game.config.cols)

    def transfer() -> None:
        region = game.region_at(target)
        region.update_deposit(-amount)
        if region.deposit == 0 and region.owner is not None:
            logger.info("%s neutralized %s's region %s", player.id, region.owner, region.location)
            region.update_owner(None)

    return meter(
        player,
        MeteredAction(
            name=f"attack {direction.name.lower()} {amount}",
            base_fee=ACTION_FEE,
            amount=amount,
            transfer_cost=amount,
            precondition=lambda: target is not None,
            transfer=transfer,
        ),
    )


def relocation_fee(game: Game) -> int:
    """Cost of moving the active player's city center to the crew region."""
    player = game.active_player
    distance = hex_distance(
        game.location_of(player.city_center), game.location_of(player.crew)
    )
    return ACTION_FEE + RELOCATE_STEP_COST * distance + game.config.revision_cost


def relocate(game: Game) -> MeterResult:
    """Move the city center to the region the crew is staged on.

    Regions owned by the opponent cannot become a city center. A neutral
    target is claimed by the relocating player.
    """
    player = game.active_player
    index = player.crew
    region = game.territory[index]

    if region.owner is not None and region.owner != player.id:
        logger.warning("%s cannot relocate onto %s's region %s", player.id, region.owner, region.location)
        return REJECTED

    def transfer() -> None:
        player.relocate(index)
        if region.is_neutral:
            region.update_owner(player.id)

    return meter(
        player,
        MeteredAction(name="relocate", base_fee=relocation_fee(game), transfer=transfer),
    )
