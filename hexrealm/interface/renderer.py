"""ASCII map rendering.

This module renders the territory grid as ASCII art from one player's
point of view, marking ownership, city centers and the crew.
"""

from ..models.game import Game


class MapRenderer:
    """Renders the territory as a grid of 2-character cells."""

    def render(self, game: Game, player_id: str) -> str:
        """Render ASCII map from a player's perspective.

        Output format (one row per grid row, 2 chars per cell):
        @H .. .. !H
        @* .. .. ..

        Legend:
        - '..' = neutral region
        - '@.' = your region, '!.' = opponent region
        - 'H' in second position = city center
        - '*' in second position = your crew

        Args:
            game: Current game state
            player_id: Player whose perspective to render

        Returns:
            Multi-line ASCII art string representing the map
        """
        player = game.get_player(player_id)
        centers = {p.city_center for p in game.players}

        lines = []
        for row in range(game.config.rows):
            cells = []
            for col in range(game.config.cols):
                index = row * game.config.cols + col
                cells.append(self._render_cell(game, index, player_id, player.crew, centers))
            lines.append(" ".join(cells))

        return "\n".join(lines)

    def _render_cell(self, game: Game, index: int, player_id: str, crew: int, centers: set[int]) -> str:
        """Render a single region cell.

        Args:
            game: Current game state
            index: Territory index of the region
            player_id: Viewing player
            crew: Territory index of the viewing player's crew
            centers: Territory indices of both city centers

        Returns:
            2-character string representing the region
        """
        owner = game.territory[index].owner
        if owner is None:
            mark = "."
        elif owner == player_id:
            mark = "@"
        else:
            mark = "!"

        if index == crew:
            flag = "*"
        elif index in centers:
            flag = "H"
        else:
            flag = "."

        return mark + flag

    def render_with_coords(self, game: Game, player_id: str) -> str:
        """Render map with column and row labels on the edges."""
        map_str = self.render(game, player_id)

        header = "   " + " ".join(f"{i:2d}" for i in range(game.config.cols))
        lines = map_str.split("\n")
        numbered_lines = [f"{i:2d} {line}" for i, line in enumerate(lines)]

        return header + "\n" + "\n".join(numbered_lines)
