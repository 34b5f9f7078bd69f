"""
Art Space - a single-screen gallery viewer for three artworks.
"""

from .catalog import ArtworkEntry, CATALOG, lookup
from .view_model import GalleryViewModel

__all__ = ['ArtworkEntry', 'CATALOG', 'lookup', 'GalleryViewModel']
__version__ = '1.0.0'
