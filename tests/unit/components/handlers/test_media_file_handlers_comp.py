"""
Unit tests for mediabrowse.components.handlers.media_file_handlers_comp module.
"""

from __future__ import annotations

import pytest
from conftest import node_ids

from mediabrowse.components.browse.node_factory_comp import CLASS_MUSIC_TRACK, CLASS_STORAGE_FOLDER, CLASS_VIDEO_ITEM
from mediabrowse.helpers.dto.browse_dto import BrowseFlag
from mediabrowse.helpers.exceptions import MalformedIdentifierError, NotFoundError
from mediabrowse.persistence.library import MemoryLibrary
from mediabrowse.services.content_directory_svc import ContentDirectoryService


class TestMediaFileHandler:
    """Tests for the folder view."""

    @pytest.mark.unit
    def test_roots_with_several_folders(self, content_directory: ContentDirectoryService) -> None:
        """Each configured folder contributes its root directory."""
        result = content_directory.browse("folder")
        assert node_ids(result) == ["folder/100", "folder/200"]
        assert result.nodes[0].child_count == 4
        assert result.nodes[0].parent_id == "folder"

    @pytest.mark.unit
    def test_single_folder_lists_its_contents(
        self, library: MemoryLibrary, content_directory: ContentDirectoryService
    ) -> None:
        """With one folder the root directory level is skipped."""
        library.configure_folders([1])
        result = content_directory.browse("folder")
        assert node_ids(result) == ["folder/101", "folder/105", "folder/110", "folder/109"]
        assert result.total_matches == 4

    @pytest.mark.unit
    def test_directory_children(self, content_directory: ContentDirectoryService) -> None:
        """Directories come first, then files; files render as items."""
        result = content_directory.browse("folder/100")
        assert node_ids(result) == ["folder/101", "folder/105", "folder/110", "folder/109"]
        classes = [n.upnp_class for n in result.nodes]
        assert classes == [CLASS_STORAGE_FOLDER, CLASS_STORAGE_FOLDER, CLASS_VIDEO_ITEM, CLASS_MUSIC_TRACK]
        assert result.nodes[0].parent_id == "folder/100"

    @pytest.mark.unit
    def test_song_metadata(self, content_directory: ContentDirectoryService) -> None:
        """Metadata on a song answers the item under its directory."""
        (node,) = content_directory.browse("folder/103", BrowseFlag.METADATA).nodes
        assert node.id == "folder/103"
        assert node.parent_id == "folder/102"
        assert not node.container
        assert node.resource is not None

    @pytest.mark.unit
    def test_song_has_no_children(self, content_directory: ContentDirectoryService) -> None:
        """Browsing a file's children yields nothing."""
        result = content_directory.browse("folder/103")
        assert result.count == 0
        assert result.total_matches == 0

    @pytest.mark.unit
    def test_missing_and_malformed(self, content_directory: ContentDirectoryService) -> None:
        """Unknown ids are not found; non-numeric ids are malformed."""
        with pytest.raises(NotFoundError):
            content_directory.browse("folder/999")
        with pytest.raises(MalformedIdentifierError):
            content_directory.browse("folder/abc")


class TestMediaFileByFolderHandler:
    """Tests for the folder-by-folder view."""

    @pytest.mark.unit
    def test_folders_are_tagged(self, content_directory: ContentDirectoryService) -> None:
        """Folders always appear, tagged "mf:"."""
        result = content_directory.browse("mfbf")
        assert node_ids(result) == ["mfbf/mf:1", "mfbf/mf:2"]
        assert [n.title for n in result.nodes] == ["Music", "Books"]

    @pytest.mark.unit
    def test_single_folder_keeps_folder_level(
        self, library: MemoryLibrary, content_directory: ContentDirectoryService
    ) -> None:
        """This view does not collapse."""
        library.configure_folders([2])
        assert node_ids(content_directory.browse("mfbf")) == ["mfbf/mf:2"]

    @pytest.mark.unit
    def test_folder_contents(self, content_directory: ContentDirectoryService) -> None:
        """A folder lists its root directory's contents; subdirectories stay in this view."""
        result = content_directory.browse("mfbf/mf:1")
        assert node_ids(result)[:2] == ["mfbf/101", "mfbf/105"]
        assert result.nodes[0].parent_id == "mfbf/mf:1"
        assert node_ids(content_directory.browse("mfbf/101")) == ["mfbf/102"]

    @pytest.mark.unit
    def test_unconfigured_folder(self, library: MemoryLibrary, content_directory: ContentDirectoryService) -> None:
        """A folder that is not configured is not found."""
        library.configure_folders([1])
        with pytest.raises(NotFoundError):
            content_directory.browse("mfbf/mf:2")
