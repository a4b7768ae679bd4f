"""
Input protocol - defines interface for keyboard state providers
"""

from typing import Protocol


class InputProtocol(Protocol):
    """
    Protocol for polled keyboard state.

    The game controller only asks whether a key is currently held; how the
    state is collected (pygame events, test doubles...) is up to the provider.
    """

    def is_pressed(self, key: str) -> bool:
        """
        Tell whether a key is currently held down.

        Args:
            key: Key identifier, e.g. "w" or "ArrowUp"

        Returns:
            True if the last event seen for this key was a press
        """
        ...
