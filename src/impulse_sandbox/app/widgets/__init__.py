from .sprite_view import SpriteView
from .state_panel import StatePanel

__all__ = [
    "SpriteView",
    "StatePanel",
]
