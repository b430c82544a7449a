"""Read-only queries over the game state.

Nothing in this module mutates the game. The two signals are the
targeting aids offered to the active player:

- ``nearby(direction)``: ``100 * distance + digits(deposit)`` of the first
  opponent-owned region along ``direction`` from the crew, or 0.
- ``opponent_signal()``: ``10 * distance + direction code`` of the
  opponent's city center if it lies on one of the six rays from the crew,
  or 0. The nearest hit wins; equal distances go to the lower code.
"""

from typing import Optional

from ..models.game import Game
from ..utils.constants import NEARBY_DISTANCE_WEIGHT, OPPONENT_DISTANCE_WEIGHT
from ..utils.geometry import Direction, neighbors, ray


def digit_count(value: int) -> int:
    """Number of decimal digits of a non-negative value; zero has one digit."""
    return len(str(abs(value)))


def has_adjacent_owned(game: Game, index: int, player_id: str) -> bool:
    """Check whether any neighbour of the region at ``index`` belongs to ``player_id``."""
    location = game.location_of(index)
    for point in neighbors(location, game.config.rows, game.config.cols):
        if game.region_at(point).owner == player_id:
            return True
    return False


def can_invest_at(game: Game, index: int, player_id: str) -> bool:
    """Investment gate: the region is the player's own, or is neutral and borders one.

    A region owned by the opponent never passes.
    """
    owner = game.territory[index].owner
    if owner == player_id:
        return True
    if owner is not None:
        return False
    return has_adjacent_owned(game, index, player_id)


def nearby(game: Game, direction: Direction) -> int:
    """Signal for the closest opponent region along ``direction`` from the active crew.

    Args:
        game: Current game state
        direction: Direction to look in

    Returns:
        ``100 * distance + digits(deposit)``, or 0 if the ray leaves the
        grid without meeting an opponent region
    """
    player = game.active_player
    opponent_id = game.waiting_player.id
    origin = game.location_of(player.crew)

    for distance, point in ray(origin, direction, game.config.rows, game.config.cols):
        region = game.region_at(point)
        if region.owner == opponent_id:
            return NEARBY_DISTANCE_WEIGHT * distance + digit_count(region.deposit)
    return 0


def opponent_signal(game: Game) -> int:
    """Signal pointing from the active crew to the opponent's city center.

    Returns:
        ``10 * distance + direction.code`` for the nearest ray that reaches
        the opponent city center, or 0 if none does
    """
    origin = game.location_of(game.active_player.crew)
    target = game.location_of(game.waiting_player.city_center)

    best: Optional[tuple[int, Direction]] = None
    for direction in Direction:
        for distance, point in ray(origin, direction, game.config.rows, game.config.cols):
            if point == target:
                if best is None or distance < best[0]:
                    best = (distance, direction)
                break

    if best is None:
        return 0
    distance, direction = best
    return OPPONENT_DISTANCE_WEIGHT * distance + direction.code
