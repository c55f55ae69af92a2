"""Page renderers for Yacht."""

from yacht.ui.views.game import render_game_page
from yacht.ui.views.results import render_results_page

__all__ = ["render_game_page", "render_results_page"]
