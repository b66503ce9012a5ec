"""
Unit tests for root menu composition.
"""

from dataclasses import fields

import pytest
from conftest import all_menu_toggles

from mediabrowse.helpers.dto.browse_dto import NodeType
from mediabrowse.helpers.dto.config_dto import BrowseSettings, MenuToggles
from mediabrowse.workflows.browse.compose_root_menu_wf import MENU_ORDER, compose_root_menu


class TestComposeRootMenu:
    """Tests for compose_root_menu."""

    @pytest.mark.unit
    def test_every_toggle_has_one_entry(self) -> None:
        """Each toggle maps to exactly one node type and every node type but the root is reachable."""
        toggles = [toggle for toggle, _ in MENU_ORDER]
        assert sorted(toggles) == sorted(f.name for f in fields(MenuToggles))
        assert {nt for _, nt in MENU_ORDER} == set(NodeType) - {NodeType.ROOT}

    @pytest.mark.unit
    def test_all_enabled_keeps_display_order(self) -> None:
        """With every toggle on the menu is MENU_ORDER."""
        menu = compose_root_menu(BrowseSettings(menu=all_menu_toggles(True)))
        assert menu == [nt for _, nt in MENU_ORDER]

    @pytest.mark.unit
    def test_all_disabled(self) -> None:
        assert compose_root_menu(BrowseSettings(menu=all_menu_toggles(False))) == []

    @pytest.mark.unit
    @pytest.mark.parametrize("toggle", [f.name for f in fields(MenuToggles)])
    def test_single_toggle(self, toggle: str) -> None:
        """Turning one toggle off removes only its entry."""
        on = {f.name: True for f in fields(MenuToggles)}
        on[toggle] = False
        menu = compose_root_menu(BrowseSettings(menu=MenuToggles(**on)))
        removed = dict(MENU_ORDER)[toggle]
        assert menu == [nt for _, nt in MENU_ORDER if nt != removed]

    @pytest.mark.unit
    def test_folder_views_grouped(self) -> None:
        """The by-folder views sit next to their flat counterparts."""
        order = [nt for _, nt in MENU_ORDER]
        assert order.index(NodeType.MEDIA_FILE_BY_FOLDER) == order.index(NodeType.MEDIA_FILE) + 1
        assert order.index(NodeType.ARTIST_BY_FOLDER) == order.index(NodeType.ARTIST) + 1
        assert order[-1] == NodeType.PODCAST
