"""
Keyboard state tracking for Duel Pong
"""


class InputState:
    """Last known pressed/released state of each key

    Keys are identified by strings (``"w"``, ``"ArrowUp"``...). The state is
    written by event callbacks and read synchronously once per frame.
    """

    def __init__(self) -> None:
        self.pressed_keys: dict[str, bool] = {}

    def press(self, key: str) -> None:
        self.pressed_keys[key] = True

    def release(self, key: str) -> None:
        self.pressed_keys[key] = False

    def release_all(self) -> None:
        """Forget every held key (e.g. when the window loses focus)"""
        self.pressed_keys.clear()

    def is_pressed(self, key: str) -> bool:
        return self.pressed_keys.get(key, False)
