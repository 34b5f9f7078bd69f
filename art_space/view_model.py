"""View-model layer between the gallery state and the render layers."""
import logging
from typing import Callable, List, Tuple

from .catalog import CATALOG, ArtworkEntry, lookup
from .state import GalleryState

logger = logging.getLogger(__name__)


class GalleryViewModel:
    """Owns the gallery state and notifies listeners after every change."""

    def __init__(self):
        """Initialize the view-model on the first artwork."""
        self.state = GalleryState()
        self._listeners: List[Callable[['GalleryViewModel'], None]] = []

    @property
    def current_artwork_id(self) -> int:
        """Id of the artwork currently displayed."""
        return self.state.current_artwork_id

    @property
    def current_entry(self) -> ArtworkEntry:
        """Catalog entry for the artwork currently displayed."""
        return lookup(self.state.current_artwork_id)

    def current_display(self) -> Tuple[str, str, str]:
        """
        Get the display references for the current artwork.

        Returns:
            Tuple of (image_ref, title_ref, artist_year_ref)
        """
        return self.current_entry.display_refs

    def position_label(self) -> str:
        """Get the counter text shown between the navigation buttons."""
        return f"{self.state.current_artwork_id} / {len(CATALOG)}"

    def add_listener(self, callback: Callable[['GalleryViewModel'], None]) -> None:
        """Register a callback invoked with this view-model after every change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[['GalleryViewModel'], None]) -> None:
        """Unregister a previously added callback."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        """Internal method to call every listener."""
        for callback in list(self._listeners):
            callback(self)

    def go_next(self) -> None:
        """Show the next artwork, wrapping after the last one."""
        self.navigate(1)

    def go_previous(self) -> None:
        """Show the previous artwork, wrapping before the first one."""
        self.navigate(-1)

    def navigate(self, direction: int) -> bool:
        """
        Navigate to a different artwork.

        Args:
            direction: -1 = previous, 1 = next

        Returns:
            True if navigation was performed
        """
        if not self.state.navigate(direction):
            return False
        logger.debug(f"Navigated to artwork {self.state.current_artwork_id}")
        self._notify()
        return True
