"""
Tests for input classification.
"""

import pytest

from iashell.core.intent import Intent, ParsedInput, classify, resolves_to_home


class TestClassify:
    """Routing rules, in priority order."""

    @pytest.mark.parametrize("line, target", [
        ("cd /tmp", "/tmp"),
        ("cd    /var/log  ", "/var/log"),
        ("cd ~", "~"),
        ("cd", ""),
        ("cd ", ""),
        ("cd ~/projects", "~/projects"),
    ])
    def test_directory_change(self, line, target):
        assert classify(line) == ParsedInput(Intent.DIRECTORY_CHANGE, target)

    def test_cd_prefix_requires_word_boundary(self):
        assert classify("cdrecord --help").intent is Intent.RAW_EXEC

    def test_reselect_marker(self):
        assert classify("//model") == ParsedInput(Intent.RESELECT)

    def test_disable_auto_marker(self):
        assert classify("  //ask  ") == ParsedInput(Intent.DISABLE_AUTO)

    def test_translate_strips_marker_and_whitespace(self):
        assert classify("//  list files ") == ParsedInput(Intent.TRANSLATE, "list files")

    def test_marker_with_suffix_is_a_translation(self):
        parsed = classify("//models available")

        assert parsed.intent is Intent.TRANSLATE
        assert parsed.argument == "models available"

    def test_ask_followed_by_text_is_a_translation(self):
        assert classify("//ask me something").intent is Intent.TRANSLATE

    def test_empty_translation(self):
        assert classify("//") == ParsedInput(Intent.TRANSLATE, "")

    def test_raw_exec_keeps_full_line(self):
        assert classify("ls -la | grep py") == ParsedInput(Intent.RAW_EXEC, "ls -la | grep py")

    def test_single_slash_is_raw(self):
        assert classify("/usr/bin/env").intent is Intent.RAW_EXEC


class TestResolvesToHome:

    @pytest.mark.parametrize("target", ["", "~"])
    def test_home_aliases(self, target):
        assert resolves_to_home(target)

    @pytest.mark.parametrize("target", ["~/x", "/home", "."])
    def test_other_targets(self, target):
        assert not resolves_to_home(target)
