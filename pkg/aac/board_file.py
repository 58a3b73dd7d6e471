# AAC board — board file reader/writer
#
# Line format:
#   img/food/plate.png food            category: selector image, then name
#   >img/food/fries.png french fries   item of the last category: image, then text
#
# Blank lines are skipped. Item lines must follow a category line.

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .category import AACCategory
from .errors import BoardFileError, BoardFormatError

logger = logging.getLogger(__name__)

ITEM_PREFIX = ">"


@dataclass
class BoardLine:
    """One parsed, non-blank line of a board file."""
    line_no: int       # 1-based
    key: str           # selector image (category) or image location (item)
    value: str         # category name or spoken text
    is_item: bool


def _split_fields(line: str, text_mode: str) -> Optional[Tuple[str, str]]:
    """Split a raw line into (first token, remainder). None for blank lines."""
    parts = line.split(None, 1)
    if not parts:
        return None
    key = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    if text_mode == "token" and rest:
        rest = rest.split(None, 1)[0]
    return key, rest


def parse_board_lines(
    lines: Iterable[str],
    text_mode: str = "line",
    path: Optional[str] = None,
) -> Iterator[BoardLine]:
    """
    Yield BoardLines in file order.

    Lines are yielded as soon as they are parsed, so a consumer applying
    them keeps everything before a BoardFormatError.
    """
    seen_category = False
    for line_no, raw in enumerate(lines, start=1):
        fields = _split_fields(raw, text_mode)
        if fields is None:
            continue
        key, value = fields

        if key.startswith(ITEM_PREFIX):
            image_loc = key[len(ITEM_PREFIX):]
            if not seen_category:
                raise BoardFormatError(
                    f"item {image_loc or key!r} appears before any category",
                    path=path, line_no=line_no,
                )
            if not image_loc:
                raise BoardFormatError("item line has no image location", path=path, line_no=line_no)
            yield BoardLine(line_no, image_loc, value, is_item=True)
        else:
            seen_category = True
            yield BoardLine(line_no, key, value, is_item=False)


def read_board_file(path: str, text_mode: str = "line", encoding: str = "utf-8") -> Iterator[BoardLine]:
    """
    Stream BoardLines from a file on disk.

    OSError and decoding failures surface as BoardFileError.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            yield from parse_board_lines(f, text_mode=text_mode, path=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise BoardFileError(f"Cannot read board file {path}: {e}", path=str(path)) from e


def format_board_lines(
    categories: Mapping[str, AACCategory],
    write_selector_keys: bool = True,
    text_mode: str = "line",
) -> Iterator[str]:
    """
    Yield board file lines (without newlines) for the given categories.

    Raises BoardFormatError for anything that would read back differently
    under the same text_mode.
    """
    for selector, category in categories.items():
        name = category.get_category()
        if write_selector_keys:
            header_key = selector
            _check_key(header_key, "selector image")
        else:
            # Legacy header: the name stands in for the selector image
            header_key = name
            _check_key(header_key, "category name")
        if header_key.startswith(ITEM_PREFIX):
            raise BoardFormatError(f"category line {header_key!r} starts with {ITEM_PREFIX!r}")
        _check_text(name, selector, text_mode)
        yield _join(header_key, name)

        for image_loc, text in category.pairs():
            _check_key(image_loc, "image location")
            _check_text(text, image_loc, text_mode)
            yield _join(ITEM_PREFIX + image_loc, text)


def write_board_file(
    path: str,
    categories: Mapping[str, AACCategory],
    write_selector_keys: bool = True,
    encoding: str = "utf-8",
    text_mode: str = "line",
) -> int:
    """
    Write categories to path. Returns the number of lines written.

    Every line is formatted before the file is opened, so a BoardFormatError
    leaves an existing file untouched.
    """
    try:
        lines = list(format_board_lines(categories, write_selector_keys, text_mode))
    except BoardFormatError as e:
        e.path = str(path)
        raise
    try:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding=encoding) as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise BoardFileError(f"Cannot write board file {path}: {e}", path=str(path)) from e
    return len(lines)


def _join(key: str, value: str) -> str:
    return f"{key} {value}" if value else key


def _check_key(key: str, what: str):
    if not key or any(c.isspace() for c in key):
        raise BoardFormatError(f"{what} {key!r} cannot be written (empty or contains whitespace)")


def _check_text(text: str, owner: str, text_mode: str = "line"):
    if "\n" in text or "\r" in text:
        raise BoardFormatError(f"text for {owner!r} spans multiple lines")
    if text != text.strip():
        raise BoardFormatError(f"text for {owner!r} has leading or trailing whitespace")
    if text_mode == "token" and any(c.isspace() for c in text):
        raise BoardFormatError(f"text for {owner!r} has more than one word (text_mode is 'token')")
