from .robotState import DriveCommand


class SlowModeToggle:
    """
    Two-state slow mode flag toggled by a momentary button.

    Edge triggered: the flag flips once when the button goes down and
    holding it has no further effect.
    """
    def __init__(self, factor: float = 0.5, active: bool = False):
        self.factor = factor
        self.active = active
        self._was_down = False

    def update(self, button_down: bool) -> bool:
        """Feed the current button level, returns the flag"""
        if button_down and not self._was_down:
            self.active = not self.active
            print(f"Slow mode {'ON' if self.active else 'OFF'}")
        self._was_down = button_down
        return self.active

    def apply(self, command: DriveCommand) -> DriveCommand:
        if self.active:
            return command.scaled(self.factor)
        return command
