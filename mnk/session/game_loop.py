"""
Game Loop - The menu-driven outer loop.

The loop:
1. Show the main menu
2. Run the chosen screen (new game, settings, logs)
3. Repeat until the player chooses Exit

Every finished game's log is kept for the lifetime of the loop, so the
logs can be viewed or saved later.
"""

from __future__ import annotations
from enum import Enum
import logging

from ..config import GameConfig
from ..settings import InvalidSettings, MAX_DIMENSION, Settings, make_settings
from ..engine_core.state import Board
from ..engine_core.game_log import GameLog, LogCollection
from ..interface.prompt import ConsoleMoveProvider, ConsolePrompt
from ..interface.render import (
    CLEAR_SCREEN,
    describe_settings,
    format_log_collection,
    render_board,
)
from ..storage import LogWriteError, save_logs
from .game_session import GameSession, MoveProvider, SessionState, TurnResult

logger = logging.getLogger(__name__)


class MenuItem(Enum):
    """Main menu entries, in display order."""
    NEW_GAME = "New Game"
    VIEW_SETTINGS = "View Settings"
    EDIT_SETTINGS = "Edit Settings"
    VIEW_LOG = "View Game Log"
    SAVE_LOG = "Save Game Log"
    EXIT = "Exit"

    @property
    def label(self) -> str:
        return self.value


def menu_items(config: GameConfig) -> tuple[MenuItem, ...]:
    """The menu for this configuration."""
    items = []
    for item in MenuItem:
        if item is MenuItem.EDIT_SETTINGS and not config.editor_mode:
            continue
        if item is MenuItem.SAVE_LOG and config.secret_mode:
            continue
        items.append(item)
    return tuple(items)


class GameLoop:
    """
    Main menu driver.

    Usage:
        loop = GameLoop(settings, config)
        logs = loop.run()

    prompt and move_provider default to the console; tests pass
    scripted ones instead.
    """

    def __init__(
        self,
        settings: Settings,
        config: GameConfig | None = None,
        prompt: ConsolePrompt | None = None,
        move_provider: MoveProvider | None = None,
    ):
        self.settings = settings
        self.config = config or GameConfig()
        self.prompt = prompt or ConsolePrompt(color=self.config.color)
        self.move_provider = move_provider or ConsoleMoveProvider(self.prompt)
        self.menu = menu_items(self.config)
        self.logs = LogCollection()

    def run(self) -> LogCollection:
        """Show the menu until Exit is chosen. Returns the session's logs."""
        handlers = {
            MenuItem.NEW_GAME: self.new_game,
            MenuItem.VIEW_SETTINGS: self.view_settings,
            MenuItem.EDIT_SETTINGS: self.edit_settings,
            MenuItem.VIEW_LOG: self.view_log,
            MenuItem.SAVE_LOG: self.save_log,
        }

        while True:
            choice = self.prompt.choose(
                "MAIN MENU", self.menu, [item.label for item in self.menu]
            )
            if choice is MenuItem.EXIT:
                self.prompt.show("Goodbye")
                return self.logs
            handlers[choice]()

    def new_game(self) -> GameLog:
        session = GameSession(
            self.settings,
            include_settings_snapshot=self.config.include_settings_snapshot,
        )
        logger.info(
            "Starting game %d on %dx%d, K=%d",
            len(self.logs) + 1,
            self.settings.width,
            self.settings.height,
            self.settings.matches,
        )
        self._draw(session.board)

        game_log = session.play(self.move_provider, observer=self._on_turn)
        self.logs.append(game_log)

        if session.state is SessionState.WON:
            self.prompt.show(f"Player {session.winner.symbol} has won!")
        else:
            self.prompt.show("All tiles are taken, this is a draw!")
        self.prompt.enter_to_continue()
        return game_log

    def _on_turn(self, result: TurnResult, board: Board) -> None:
        if result.success:
            self._draw(board)
        else:
            self.prompt.show_error(result.message)

    def _draw(self, board: Board) -> None:
        screen = render_board(board, color=self.config.color)
        if self.config.color:
            screen = CLEAR_SCREEN + screen
        self.prompt.show(screen)

    def view_settings(self) -> None:
        self.prompt.show(describe_settings(self.settings))

    def edit_settings(self) -> Settings:
        """
        Prompt for new M, N and K until they form valid settings.
        """
        self.view_settings()
        self.prompt.show(f"!! ALL SETTINGS MUST BE BETWEEN 1 AND {MAX_DIMENSION} !!")

        while True:
            width = self.prompt.get_int_in_range("Enter new value of M (width): ", 1, MAX_DIMENSION)
            height = self.prompt.get_int_in_range("Enter new value of N (height): ", 1, MAX_DIMENSION)
            matches = self.prompt.get_int_in_range(
                "Enter new value of K (tiles in a row): ", 1, MAX_DIMENSION
            )
            try:
                self.settings = make_settings(width, height, matches)
            except InvalidSettings:
                self.prompt.show_error("The value of K cannot be larger than M or N")
                continue

            logger.info("Settings changed to %s", self.settings)
            return self.settings

    def view_log(self) -> None:
        self.prompt.show("\n" + format_log_collection(
            self.logs, self.settings, self.config.include_settings_snapshot,
        ))

    def save_log(self) -> None:
        try:
            path = save_logs(
                self.logs, self.settings, self.config.log_dir,
                include_settings_snapshot=self.config.include_settings_snapshot,
            )
        except LogWriteError as e:
            self.prompt.show_error(str(e))
            return
        self.prompt.show(f"\nGame logs have been saved to {path}\n")
