"""Unit tests for src/cht_editor/config.py"""

import logging

from cht_editor.config import DEFAULT_NAME, EditorConfig


class TestEditorConfig:

    def test_defaults(self):
        config = EditorConfig()
        assert config.encoding == "utf-8"
        assert config.debug is False
        assert config.default_name == DEFAULT_NAME

    def test_from_empty_env_gives_defaults(self):
        assert EditorConfig.from_env({}) == EditorConfig()

    def test_from_env_reads_variables(self):
        config = EditorConfig.from_env({
            "CHT_EDITOR_ENCODING": "latin-1",
            "CHT_EDITOR_DEBUG": "Yes",
            "CHT_EDITOR_DEFAULT_NAME": "new.cht",
        })
        assert config.encoding == "latin-1"
        assert config.debug is True
        assert config.default_name == "new.cht"

    def test_unrecognised_debug_value_is_false(self):
        assert EditorConfig.from_env({"CHT_EDITOR_DEBUG": "maybe"}).debug is False

    def test_log_level_follows_debug(self):
        assert EditorConfig(debug=True).log_level == logging.DEBUG
        assert EditorConfig().log_level == logging.INFO
