from autodraft.gui.views.draft_view import DraftSetupView
from autodraft.gui.views.game_view import (
    GameOverView,
    GameView,
    PlayerStatusGrid,
    ResultSelector,
)
from autodraft.gui.views.menu_views import AddPlayerView, MainMenuView, StatsView

__all__ = [
    "MainMenuView",
    "AddPlayerView",
    "StatsView",
    "DraftSetupView",
    "GameView",
    "GameOverView",
    "PlayerStatusGrid",
    "ResultSelector",
]
