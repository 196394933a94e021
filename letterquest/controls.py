"""Arrow-key steering of the pointer target."""

from typing import Tuple

from pynput import keyboard

from letterquest import config


class KeySteering:
    """Tracks held arrow keys from a background pynput listener.

    Terminals report key repeats with a delay, so held state comes straight
    from the keyboard instead of from curses.
    """

    def __init__(self, speed: float = config.POINTER_KEY_SPEED):
        self.speed = speed
        # Track actual key states (True = pressed, False = released)
        self.keys_state = {
            keyboard.Key.up: False,
            keyboard.Key.down: False,
            keyboard.Key.left: False,
            keyboard.Key.right: False,
        }
        self.listener = None

    def start(self):
        self.listener = keyboard.Listener(
            on_press=self._on_key_press,
            on_release=self._on_key_release)
        self.listener.start()

    def stop(self):
        if self.listener is not None:
            self.listener.stop()
            self.listener = None

    def _on_key_press(self, key):
        """Callback for key press events from pynput"""
        if key in self.keys_state:
            self.keys_state[key] = True

    def _on_key_release(self, key):
        """Callback for key release events from pynput"""
        if key in self.keys_state:
            self.keys_state[key] = False

    def release_all(self):
        for key in self.keys_state:
            self.keys_state[key] = False

    def direction(self) -> Tuple[int, int]:
        dx = int(self.keys_state[keyboard.Key.right]) - int(self.keys_state[keyboard.Key.left])
        dy = int(self.keys_state[keyboard.Key.down]) - int(self.keys_state[keyboard.Key.up])
        return dx, dy

    def steer(self, pointer, width: float, height: float):
        """Move the pointer target while arrow keys are held"""
        dx, dy = self.direction()
        if dx or dy:
            pointer.nudge(dx * self.speed, dy * self.speed, width, height)
