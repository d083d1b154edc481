from dataclasses import dataclass


@dataclass
class InputState:
    jump_held: bool = False  # true between key press and key release
