"""
Base player interface for driving the game without a browser.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state and returns the key it would
    press, using browser KeyboardEvent.key names.
    """

    def get_key(self, game_state: GameState) -> Optional[str]:
        """
        Return a key press given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight",
            or None to stay put
        """
        raise NotImplementedError
