"""
A single AAC category: the images shown once the category is opened,
each mapped to the text it should speak.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from .errors import ImageNotFound

logger = logging.getLogger(__name__)


@dataclass
class AACCategory:
    """Named, insertion-ordered mapping of image location -> spoken text."""

    name: str
    items: Dict[str, str] = field(default_factory=dict)

    def add_item(self, image_loc: str, text: str) -> None:
        """Add the image/text pairing, replacing any text already bound to the image."""
        if not image_loc:
            raise ValueError("image location must be a non-empty string")
        if image_loc in self.items:
            logger.debug(f"[{self.name}] overwriting {image_loc}")
        else:
            logger.debug(f"[{self.name}] adding {image_loc}")
        self.items[image_loc] = text

    def get_image_locs(self) -> List[str]:
        """All image locations in the category, in insertion order ([] if empty)."""
        return list(self.items)

    def get_category(self) -> str:
        return self.name

    def select(self, image_loc: str) -> str:
        """
        Return the text associated with the image.

        Raises ImageNotFound if the image is not in this category.
        """
        try:
            return self.items[image_loc]
        except KeyError:
            raise ImageNotFound(image_loc, scope=self.name) from None

    def has_image(self, image_loc: str) -> bool:
        return image_loc in self.items

    def pairs(self) -> Iterator[Tuple[str, str]]:
        """Iterate (image location, text) pairs in insertion order."""
        return iter(self.items.items())

    def __contains__(self, image_loc: object) -> bool:
        return image_loc in self.items

    def __len__(self) -> int:
        return len(self.items)
