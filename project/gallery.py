"""
Gallery state owner.

GalleryApp holds the canonical state (breed catalog, selected breeds, image
list), loads the catalog and default images on start, and runs the image
fetches requested by the search panel.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from breed_search import Command, FetchImages, SetSelectedBreeds
from config import DEFAULT_IMAGE_COUNT, IMAGES_PER_BREED
from dog_api import DogApiClient, DogApiError

logger = logging.getLogger(__name__)


class GalleryApp:
    """
    Application root for the dog gallery.

    Children get read-only snapshots (`catalog`, `selected_breeds`, `images`)
    and request changes through `dispatch`.

    Every image fetch takes a sequence number. A result is applied only if it
    is newer than the last applied one, so a slow outdated fetch can never
    overwrite the images of a later one.
    """

    def __init__(self, client: Optional[DogApiClient] = None, images_per_breed: int = IMAGES_PER_BREED):
        self.client = client or DogApiClient()
        self.images_per_breed = images_per_breed
        self._catalog: Mapping[str, Tuple[str, ...]] = MappingProxyType({})
        self._selected_breeds: Tuple[str, ...] = ()
        self._images: Tuple[str, ...] = ()
        self._fetch_seq = 0
        self._applied_seq = 0

    @property
    def catalog(self) -> Mapping[str, Tuple[str, ...]]:
        return self._catalog

    @property
    def selected_breeds(self) -> Tuple[str, ...]:
        return self._selected_breeds

    @property
    def images(self) -> Tuple[str, ...]:
        return self._images

    def start(self) -> None:
        """Load the breed catalog and a default set of random images."""
        self.load_catalog()
        self.load_random_images()

    def load_catalog(self) -> None:
        try:
            breeds = self.client.get_all_breeds()
        except DogApiError as e:
            logger.error("Error fetching dog breeds: %s", e)
            return
        self._catalog = MappingProxyType({name: tuple(subs) for name, subs in breeds.items()})
        logger.info("✅ Loaded %d breeds", len(self._catalog))

    def load_random_images(self, count: int = DEFAULT_IMAGE_COUNT) -> None:
        seq = self._next_seq()
        try:
            images = self.client.get_random_images(count)
        except DogApiError as e:
            logger.error("Error fetching random dog images: %s", e)
            return
        self._apply_images(seq, images)

    def fetch_images(self, breeds: Sequence[str]) -> None:
        """
        Replace the image list with `images_per_breed` images for each breed.

        Results are concatenated in the order of `breeds`. If any breed fails
        the whole batch is dropped and the image list is left as it was. An
        empty `breeds` clears the image list without calling the API.
        """
        seq = self._next_seq()
        all_images = []
        try:
            for breed in breeds:
                all_images.extend(self.client.get_breed_random_images(breed, self.images_per_breed))
        except DogApiError as e:
            logger.error("Error fetching dog images for %s: %s", list(breeds), e)
            return
        self._apply_images(seq, all_images)

    def dispatch(self, command: Command) -> None:
        """Apply a state change requested by a child component."""
        if isinstance(command, SetSelectedBreeds):
            self._selected_breeds = tuple(dict.fromkeys(command.breeds))
        elif isinstance(command, FetchImages):
            self.fetch_images(command.breeds)
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def _next_seq(self) -> int:
        self._fetch_seq += 1
        return self._fetch_seq

    def _apply_images(self, seq: int, images: Sequence[str]) -> None:
        if seq <= self._applied_seq:
            logger.debug("Discarding outdated image fetch #%d (already showing #%d)", seq, self._applied_seq)
            return
        self._applied_seq = seq
        self._images = tuple(images)
        logger.info("Showing %d images (fetch #%d)", len(self._images), seq)
