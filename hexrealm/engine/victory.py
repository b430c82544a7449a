"""Elimination checking.

A player who owns no region is eliminated:
- Both players eliminated at once -> game.winner = "draw"
- One player eliminated -> the other player wins
- Otherwise the game continues (game.winner = None)
"""

from ..models.game import Game


def check_victory(game: Game) -> bool:
    """Check elimination for both players and record the winner.

    Args:
        game: Current game state

    Returns:
        True if game has a winner (including draw), False otherwise
    """
    first, second = game.players
    first_alive = bool(game.owned_regions(first.id))
    second_alive = bool(game.owned_regions(second.id))

    if not first_alive and not second_alive:
        game.winner = "draw"
        return True
    elif not first_alive:
        game.winner = second.id
        return True
    elif not second_alive:
        game.winner = first.id
        return True
    else:
        game.winner = None
        return False
