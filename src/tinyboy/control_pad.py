from enum import Enum


class Button(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def __repr__(self) -> str:
        return f"Button.{self.name}"


# Symbols available at every step of an input sequence
ALPHABET = tuple(Button)
