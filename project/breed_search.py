"""
Breed search and selection

This module handles:
1. Live substring suggestions against the breed catalog
2. Display names for breed keys (with their sub-breeds)
3. The SearchPanel, which owns the input text and suggestions and asks the
   gallery for selection changes and image fetches through commands

The panel never mutates the selected breeds itself. It reads a snapshot and
dispatches SetSelectedBreeds / FetchImages to whoever owns the state.
"""

from dataclasses import dataclass
from typing import Callable, List, Mapping, Sequence, Tuple, Union

from config import MAX_SUGGESTIONS


@dataclass(frozen=True)
class SetSelectedBreeds:
    """Replace the selected breeds with `breeds`."""

    breeds: Tuple[str, ...]


@dataclass(frozen=True)
class FetchImages:
    """Fetch images for `breeds` and replace the image list."""

    breeds: Tuple[str, ...]


Command = Union[SetSelectedBreeds, FetchImages]


def suggest_breeds(
    user_input: str, catalog: Mapping[str, Sequence[str]], limit: int = MAX_SUGGESTIONS
) -> List[str]:
    """
    Return up to `limit` catalog keys containing `user_input`, case-insensitively.

    Keys come back in the catalog's own order. Empty input gives no suggestions.
    """
    if not user_input:
        return []
    needle = user_input.lower()
    matches = []
    for breed in catalog:
        if needle in breed.lower():
            matches.append(breed)
            if len(matches) == limit:
                break
    return matches


def breed_display_name(breed: str, catalog: Mapping[str, Sequence[str]]) -> str:
    """
    Human readable name for a breed key, e.g. 'bulldog' -> 'Bulldog (boston, english, french)'.
    """
    display = breed.replace("_", " ").replace("-", " ").title()
    sub_breeds = catalog.get(breed) or []
    if sub_breeds:
        return f"{display} ({', '.join(sub_breeds)})"
    return display


class SearchPanel:
    """Search input, suggestion list and selected-breed controls."""

    def __init__(
        self,
        catalog: Mapping[str, Sequence[str]],
        selected_breeds: Sequence[str],
        dispatch: Callable[[Command], None],
    ):
        self.catalog = catalog
        self.selected_breeds = tuple(selected_breeds)
        self.dispatch = dispatch
        self.input_text = ""
        self.suggestions: List[str] = []

    def refresh(self, catalog: Mapping[str, Sequence[str]], selected_breeds: Sequence[str]) -> None:
        """Take a new read-only snapshot from the state owner."""
        self.catalog = catalog
        self.selected_breeds = tuple(selected_breeds)

    def update_input(self, text: str) -> None:
        self.input_text = text
        self.suggestions = suggest_breeds(text, self.catalog)

    def select_suggestion(self, name: str) -> None:
        """Add `name` to the selection and fetch images. No-op if already selected."""
        if name in self.selected_breeds:
            return
        updated = self.selected_breeds + (name,)
        self.selected_breeds = updated
        self.input_text = ""
        self.suggestions = []
        self.dispatch(SetSelectedBreeds(updated))
        self.dispatch(FetchImages(updated))

    def remove_breed(self, name: str) -> None:
        """Drop `name` from the selection (if present) and fetch images for the rest."""
        updated = tuple(breed for breed in self.selected_breeds if breed != name)
        self.selected_breeds = updated
        self.dispatch(SetSelectedBreeds(updated))
        self.dispatch(FetchImages(updated))

    def manual_search(self) -> None:
        """Re-fetch images for the current selection without changing it."""
        self.dispatch(FetchImages(self.selected_breeds))
