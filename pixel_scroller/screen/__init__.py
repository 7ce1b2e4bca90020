# pixel_scroller/screen/__init__.py
from .screen_game import GameScreen
from .screen_pause import PauseScreen
from .screens import ROUTES, ScreenManager
