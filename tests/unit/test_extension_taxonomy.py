"""Tests for the static extension categories."""

import pytest

from validation import taxonomy


class TestExtensionsFor:
    """Test policy-dependent extension sets."""

    def test_with_images_includes_all_supported_categories(self):
        extensions = taxonomy.extensions_for(True)
        assert taxonomy.IMAGE <= extensions
        assert taxonomy.DOCUMENT <= extensions
        assert taxonomy.TEXT <= extensions

    def test_without_images_excludes_images(self):
        extensions = taxonomy.extensions_for(False)
        assert not (taxonomy.IMAGE & extensions)
        assert ".txt" in extensions
        assert ".pdf" in extensions

    def test_audio_and_video_never_supported(self):
        for allow_images in (True, False):
            extensions = taxonomy.extensions_for(allow_images)
            assert not (taxonomy.AUDIO & extensions)
            assert not (taxonomy.VIDEO & extensions)

    def test_supported_extensions_list_order(self):
        with_images = taxonomy.supported_extensions(True)
        without_images = taxonomy.supported_extensions(False)

        assert with_images[: len(taxonomy.IMAGE_EXTENSIONS)] == list(taxonomy.IMAGE_EXTENSIONS)
        assert ".png" not in without_images
        assert set(with_images) == set(taxonomy.extensions_for(True))
        assert set(without_images) == set(taxonomy.extensions_for(False))


class TestIsSupported:
    """Test extension membership checks."""

    @pytest.mark.parametrize("extension", sorted(taxonomy.DOCUMENT | taxonomy.TEXT))
    def test_documents_and_text_supported_under_both_policies(self, extension):
        assert taxonomy.is_supported(extension, False) is True
        assert taxonomy.is_supported(extension, True) is True

    @pytest.mark.parametrize("extension", sorted(taxonomy.IMAGE))
    def test_images_depend_on_policy(self, extension):
        assert taxonomy.is_supported(extension, True) is True
        assert taxonomy.is_supported(extension, False) is False

    def test_case_insensitive(self):
        assert taxonomy.is_supported(".TXT", True) == taxonomy.is_supported(".txt", True)
        assert taxonomy.is_supported(".Pdf", False) is True
        assert taxonomy.is_supported(".PNG", True) is True

    def test_unknown_extension(self):
        assert taxonomy.is_supported(".unknown", True) is False
        assert taxonomy.is_supported(".", True) is False


class TestIsAudioOrVideo:
    """Test audio/video detection."""

    @pytest.mark.parametrize("extension", sorted(taxonomy.AUDIO | taxonomy.VIDEO))
    def test_audio_and_video_detected(self, extension):
        assert taxonomy.is_audio_or_video(extension) is True

    @pytest.mark.parametrize("extension", sorted(taxonomy.DOCUMENT | taxonomy.TEXT | taxonomy.IMAGE))
    def test_other_categories_not_detected(self, extension):
        assert taxonomy.is_audio_or_video(extension) is False

    def test_uppercase_extensions(self):
        assert taxonomy.is_audio_or_video(".MP3") is True
        assert taxonomy.is_audio_or_video(".MP4") is True


class TestExtensionOf:
    """Test extension extraction from file names."""

    def test_simple_name(self):
        assert taxonomy.extension_of("report.txt") == ".txt"

    def test_lowercases(self):
        assert taxonomy.extension_of("TEST.MP3") == ".mp3"

    def test_uses_last_dot(self):
        assert taxonomy.extension_of("archive.tar.gz") == ".gz"

    def test_no_dot_yields_bare_dot(self):
        assert taxonomy.extension_of("Makefile") == "."

    def test_trailing_dot(self):
        assert taxonomy.extension_of("notes.") == "."
