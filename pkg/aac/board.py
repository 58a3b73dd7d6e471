"""
AAC board: two-level image mapping and navigation state machine.

  Home ──select(category image)──▶ InCategory(C)
  InCategory(C) ──select(category image)──▶ InCategory(C')
  InCategory(C) ──select(item of C)──▶ InCategory(C)   (returns text to speak)
  any ──reset()──▶ Home

Category images are checked before item images, so a category can be
switched to from inside another category.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from .board_file import read_board_file, write_board_file
from .category import AACCategory
from .config import BoardConfig
from .errors import BoardFileError, ImageNotFound

logger = logging.getLogger(__name__)


class BoardView(Enum):
    """Which set of images the board is showing."""
    HOME = "home"                # Category images
    IN_CATEGORY = "in_category"  # Items of the current category


@dataclass(frozen=True)
class BoardState:
    """Current view, plus the open category when not at home."""
    view: BoardView
    category: Optional[AACCategory] = None

    @classmethod
    def home(cls) -> "BoardState":
        return cls(BoardView.HOME)

    @classmethod
    def in_category(cls, category: AACCategory) -> "BoardState":
        return cls(BoardView.IN_CATEGORY, category)

    @property
    def is_home(self) -> bool:
        return self.view == BoardView.HOME


class AACBoard:
    """
    Categories keyed by the image that opens them, plus the current view.

    The board owns every category; the state only points at the open one.
    """

    def __init__(self, filename: Optional[str] = None, config: Optional[BoardConfig] = None):
        """
        Create a board, loading filename (or config.board_file) when given.

        A failed initial load is logged and kept in ``load_error``; whatever
        was parsed before the failure stays on the board.
        """
        self.config = (config or BoardConfig()).validate()
        self.categories: Dict[str, AACCategory] = {}
        self.home_page: Optional[AACCategory] = None
        self.load_error: Optional[BoardFileError] = None
        self._state = BoardState.home()

        filename = filename or self.config.board_file
        if filename:
            try:
                self.load(filename)
            except BoardFileError as e:
                self.load_error = e

    # ──────────────────────────────────────────
    # State
    # ──────────────────────────────────────────

    @property
    def state(self) -> BoardState:
        return self._state

    @property
    def is_home(self) -> bool:
        return self._state.is_home

    def _current(self) -> Optional[AACCategory]:
        return self._state.category

    def reset(self) -> None:
        """Return to the home screen."""
        self._state = BoardState.home()

    # ──────────────────────────────────────────
    # Selection
    # ──────────────────────────────────────────

    def select(self, image_loc: str) -> str:
        """
        Act on a selected image.

        A category image opens that category and returns "" (the caller
        should redraw with get_image_locs()). An item of the open category
        returns its text to be spoken.

        Raises ImageNotFound if the image is neither.
        """
        category = self.categories.get(image_loc)
        if category is not None:
            self._state = BoardState.in_category(category)
            logger.debug(f"Opened category {category.get_category()!r} via {image_loc}")
            return ""

        current = self._current()
        if current is not None and current.has_image(image_loc):
            return current.select(image_loc)

        raise ImageNotFound(image_loc, scope=self.get_category() or "home")

    def get_image_locs(self) -> List[str]:
        """Images to display: category images at home, otherwise the open category's items."""
        current = self._current()
        if current is None:
            return list(self.categories)
        return current.get_image_locs()

    def get_category(self) -> str:
        """Name of the open category, or "" at home."""
        current = self._current()
        return current.get_category() if current is not None else ""

    def has_image(self, image_loc: str) -> bool:
        """Whether the open category holds the image. Always False at home."""
        current = self._current()
        return current.has_image(image_loc) if current is not None else False

    def category_names(self) -> Dict[str, str]:
        """Selector image -> category name, in load order."""
        return {key: category.get_category() for key, category in self.categories.items()}

    # ──────────────────────────────────────────
    # Mutation
    # ──────────────────────────────────────────

    def add_item(self, image_loc: str, text: str) -> None:
        """
        Add the mapping to the open category.

        At home there is no open category: the mapping goes into the
        "Home Page" category (created on first use), which becomes the
        open category. It is not added to the category images.

        Unlike the legacy board, which started a fresh "Home Page" on every
        add at home, the same category is reused after reset() until the
        next load().
        """
        if self._current() is None:
            if self.home_page is None:
                self.home_page = AACCategory(self.config.home_page_name)
                logger.info(f"Created {self.home_page.get_category()!r} category for items added at home")
            self._state = BoardState.in_category(self.home_page)
        self._current().add_item(image_loc, text)

    # ──────────────────────────────────────────
    # Board files
    # ──────────────────────────────────────────

    def load(self, filename: str) -> None:
        """
        Replace the board's categories with those in filename and go home.

        Raises BoardFileError (or BoardFormatError). Lines applied before
        the failure are kept.
        """
        self.categories = {}
        self.home_page = None
        self.reset()

        current: Optional[AACCategory] = None
        items = 0
        try:
            for line in read_board_file(filename, self.config.text_mode, self.config.encoding):
                if line.is_item:
                    current.add_item(line.key, line.value)
                    items += 1
                else:
                    current = AACCategory(line.value)
                    if line.key in self.categories:
                        logger.warning(f"{filename}:{line.line_no}: category image {line.key} redefined")
                    self.categories[line.key] = current
        except BoardFileError as e:
            logger.error(f"Failed to load board {filename}: {e}")
            raise
        logger.info(f"Loaded {len(self.categories)} categories, {items} items from {filename}")

    def write_to_file(self, filename: str) -> None:
        """
        Write every loaded category to filename in board file format.

        The "Home Page" category is not written. Raises BoardFileError.
        """
        try:
            count = write_board_file(
                filename,
                self.categories,
                write_selector_keys=self.config.write_selector_keys,
                encoding=self.config.encoding,
                text_mode=self.config.text_mode,
            )
        except BoardFileError as e:
            logger.error(f"Failed to write board {filename}: {e}")
            raise
        logger.info(f"Wrote {len(self.categories)} categories ({count} lines) to {filename}")
