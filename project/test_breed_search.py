"""Tests for breed suggestions and the search panel's commands."""

import pytest

from breed_search import (
    FetchImages,
    SearchPanel,
    SetSelectedBreeds,
    breed_display_name,
    suggest_breeds,
)

CATALOG = {
    "affenpinscher": [],
    "bulldog": ["boston", "english", "french"],
    "bullterrier": ["staffordshire"],
    "mastiff": ["bull", "english", "tibetan"],
    "poodle": ["miniature", "standard", "toy"],
    "pug": [],
    "terrier": ["american", "australian"],
}


def make_panel(selected=(), catalog=CATALOG):
    commands = []
    panel = SearchPanel(catalog, selected, commands.append)
    return panel, commands


class TestSuggestBreeds:

    def test_empty_input_gives_nothing(self):
        assert suggest_breeds("", CATALOG) == []

    def test_case_insensitive_substring(self):
        assert suggest_breeds("POO", CATALOG) == ["poodle"]
        assert suggest_breeds("ter", CATALOG) == ["bullterrier", "terrier"]

    def test_capped_at_four_in_catalog_order(self):
        assert suggest_breeds("e", CATALOG) == ["affenpinscher", "bullterrier", "poodle", "terrier"]

    def test_no_match(self):
        assert suggest_breeds("cat", CATALOG) == []

    @pytest.mark.parametrize("text", ["a", "u", "bull", "P", "ie", "zzz", "d"])
    def test_results_are_matching_catalog_keys(self, text):
        result = suggest_breeds(text, CATALOG)
        assert len(result) <= 4
        assert all(name in CATALOG and text.lower() in name.lower() for name in result)
        assert result == [name for name in CATALOG if text.lower() in name][:4]


class TestDisplayName:

    def test_without_sub_breeds(self):
        assert breed_display_name("pug", CATALOG) == "Pug"

    def test_with_sub_breeds(self):
        assert breed_display_name("bulldog", CATALOG) == "Bulldog (boston, english, french)"

    def test_unknown_breed(self):
        assert breed_display_name("german_shepherd", CATALOG) == "German Shepherd"


class TestSearchPanel:

    def test_typing_then_selecting_poodle(self):
        panel, commands = make_panel(catalog={"poodle": [], "bulldog": []})
        panel.update_input("poo")
        assert panel.suggestions == ["poodle"]

        panel.select_suggestion("poodle")
        assert panel.selected_breeds == ("poodle",)
        assert panel.input_text == ""
        assert panel.suggestions == []
        assert commands == [SetSelectedBreeds(("poodle",)), FetchImages(("poodle",))]

    def test_clearing_input_clears_suggestions(self):
        panel, _ = make_panel()
        panel.update_input("bu")
        assert panel.suggestions == ["bulldog", "bullterrier"]
        panel.update_input("")
        assert panel.suggestions == []

    def test_selecting_again_is_a_no_op(self):
        panel, commands = make_panel(selected=("poodle",))
        panel.update_input("poo")
        panel.select_suggestion("poodle")
        assert panel.selected_breeds == ("poodle",)
        assert commands == []
        assert panel.input_text == "poo"

    def test_selection_keeps_insertion_order(self):
        panel, commands = make_panel()
        panel.select_suggestion("pug")
        panel.select_suggestion("bulldog")
        assert panel.selected_breeds == ("pug", "bulldog")
        assert commands[-1] == FetchImages(("pug", "bulldog"))

    def test_remove_breed(self):
        panel, commands = make_panel(selected=("poodle", "bulldog"))
        panel.remove_breed("poodle")
        assert panel.selected_breeds == ("bulldog",)
        assert commands == [SetSelectedBreeds(("bulldog",)), FetchImages(("bulldog",))]

    def test_remove_absent_breed_keeps_selection(self):
        panel, commands = make_panel(selected=("poodle",))
        panel.remove_breed("pug")
        assert panel.selected_breeds == ("poodle",)
        assert commands[0] == SetSelectedBreeds(("poodle",))

    def test_remove_last_breed_fetches_for_empty_list(self):
        panel, commands = make_panel(selected=("poodle",))
        panel.remove_breed("poodle")
        assert commands[-1] == FetchImages(())

    def test_manual_search_only_fetches(self):
        panel, commands = make_panel(selected=("pug", "poodle"))
        panel.manual_search()
        assert commands == [FetchImages(("pug", "poodle"))]

    def test_refresh_takes_new_snapshot(self):
        panel, _ = make_panel(catalog={})
        panel.update_input("pu")
        assert panel.suggestions == []
        panel.refresh(CATALOG, ("pug",))
        panel.update_input("pu")
        assert panel.suggestions == ["pug"]
        assert panel.selected_breeds == ("pug",)
