from controllers.search import SearchController
from controllers.theme import CookieThemeStore, ThemeContext
from controllers.timer import CancellableTimer
from controllers.word_list import WordListController

__all__ = [
    "SearchController", "WordListController",
    "ThemeContext", "CookieThemeStore",
    "CancellableTimer",
]
