"""Static catalog of the artworks shown in the gallery."""
import logging
from dataclasses import dataclass
from typing import Tuple

from .state import FIRST_ARTWORK_ID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtworkEntry:
    """One displayable artwork and the references to its display resources."""
    id: int
    image_ref: str  # image file name, resolved by the resource layer
    title_ref: str  # string resource key
    artist_year_ref: str  # string resource key

    @property
    def display_refs(self) -> Tuple[str, str, str]:
        """The (image, title, artist/year) references as a tuple."""
        return (self.image_ref, self.title_ref, self.artist_year_ref)


CATALOG: Tuple[ArtworkEntry, ...] = (
    ArtworkEntry(1, "art_1.png", "artwork1_title", "artwork1_artist_year"),
    ArtworkEntry(2, "art_2.png", "artwork2_title", "artwork2_artist_year"),
    ArtworkEntry(3, "art_3.png", "artwork3_title", "artwork3_artist_year"),
)

_BY_ID = {entry.id: entry for entry in CATALOG}


def lookup(artwork_id: int) -> ArtworkEntry:
    """
    Look up an artwork by id.

    Ids outside the catalog fall back to the first artwork so the display
    is never interrupted.

    Args:
        artwork_id: Artwork id (1, 2 or 3)

    Returns:
        The matching ArtworkEntry
    """
    entry = _BY_ID.get(artwork_id)
    if entry is None:
        logger.warning(f"Unknown artwork id {artwork_id!r}, falling back to {FIRST_ARTWORK_ID}")
        return _BY_ID[FIRST_ARTWORK_ID]
    return entry
