"""State management for the gallery view."""
from dataclasses import dataclass

FIRST_ARTWORK_ID = 1
LAST_ARTWORK_ID = 3


@dataclass
class GalleryState:
    """Holds the currently selected artwork for one view instance."""
    current_artwork_id: int = FIRST_ARTWORK_ID

    def __post_init__(self):
        if not FIRST_ARTWORK_ID <= self.current_artwork_id <= LAST_ARTWORK_ID:
            raise ValueError(
                f"current_artwork_id must be between {FIRST_ARTWORK_ID} and {LAST_ARTWORK_ID}, "
                f"got {self.current_artwork_id!r}"
            )

    def go_next(self) -> None:
        """Move to the next artwork, wrapping from the last back to the first."""
        if self.current_artwork_id == LAST_ARTWORK_ID:
            self.current_artwork_id = FIRST_ARTWORK_ID
        else:
            self.current_artwork_id += 1

    def go_previous(self) -> None:
        """Move to the previous artwork, wrapping from the first to the last."""
        if self.current_artwork_id == FIRST_ARTWORK_ID:
            self.current_artwork_id = LAST_ARTWORK_ID
        else:
            self.current_artwork_id -= 1

    def navigate(self, direction: int) -> bool:
        """
        Navigate around the ring of artworks.

        Args:
            direction: -1 = previous, 1 = next

        Returns:
            True if navigation was performed
        """
        if direction == -1:
            self.go_previous()
        elif direction == 1:
            self.go_next()
        else:
            return False
        return True
