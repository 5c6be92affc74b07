from typing import List, Optional

from loguru import logger

from therapy_directory.filtering.view import derive_view
from therapy_directory.loading.loader import DirectoryLoader
from therapy_directory.models.entry import DirectoryEntry
from therapy_directory.models.enums import LoadState
from therapy_directory.models.view import DirectoryView, FilterState
from therapy_directory.normalization.normalizer import Normalizer, normalize_csv

LOAD_ERROR_MESSAGE = "Error loading therapist data"


class InvalidTransitionError(Exception):
    """Raised when the directory is asked to do something its state forbids."""

    pass


class DirectoryState:
    """Lifecycle of one loaded dataset: loading, then ready or error.

    Both outcomes are terminal; a new dataset needs a new DirectoryState.
    """

    def __init__(self, loader: DirectoryLoader, normalizer: Optional[Normalizer] = None):
        self.loader = loader
        self.normalizer = normalizer or Normalizer()
        self.state = LoadState.LOADING
        self.error: Optional[str] = None
        self._entries: List[DirectoryEntry] = []
        self._started = False

    @property
    def entries(self) -> List[DirectoryEntry]:
        return self._entries if self.state == LoadState.READY else []

    async def load(self) -> LoadState:
        """Fetches and normalizes the directory once."""
        if self._started:
            raise InvalidTransitionError(f"Directory load already attempted (state: {self.state.value})")
        self._started = True

        try:
            text = await self.loader.fetch_csv()
            entries = normalize_csv(text, self.normalizer)
        except Exception:
            logger.exception("Failed to load therapist directory.")
            self.error = LOAD_ERROR_MESSAGE
            self.state = LoadState.ERROR
            return self.state

        self._entries = entries
        self.state = LoadState.READY
        logger.success(f"Directory ready with {len(entries)} therapists.")
        return self.state

    def view(self, filters: FilterState = FilterState()) -> DirectoryView:
        if self.state != LoadState.READY:
            raise InvalidTransitionError(f"Cannot derive a view in state {self.state.value}")
        return derive_view(self._entries, filters)


async def load_directory(loader: Optional[DirectoryLoader] = None) -> DirectoryState:
    """Creates a loader (unless given), loads the directory once and closes the loader."""
    loader = loader or DirectoryLoader()
    directory = DirectoryState(loader)
    try:
        await directory.load()
    finally:
        await loader.close()
    return directory
