"""
Unit tests for persisted review settings.
Run: python -m pytest tests/test_review_settings.py -v
"""

import pytest

from phraser.config import SettingsRepository, parse_bool
from phraser.exceptions import ValidationError
from phraser.models import ReviewSettings
from phraser.services import MemoryStore, StorageKeys


@pytest.fixture
def settings(memory_store):
    return SettingsRepository(memory_store)


class TestSettingsRepository:

    def test_defaults_when_nothing_stored(self, settings):
        assert settings.get() == ReviewSettings(
            active_input=False, reverse_mode=False, color_coded_feedback=False
        )

    def test_update_persists_single_flag(self, settings, memory_store):
        updated = settings.update("active_input", True)

        assert updated.active_input is True
        assert settings.get().active_input is True
        assert memory_store.get(StorageKeys.SETTINGS) == {
            "activeInputEnabled": True,
            "reverseModeEnabled": False,
            "colorCodedFeedbackEnabled": False,
        }

    def test_update_accepts_flag_text(self, settings):
        settings.update("reverse_mode", "on")
        assert settings.get().reverse_mode is True
        settings.update("reverse_mode", "off")
        assert settings.get().reverse_mode is False

    def test_update_unknown_setting(self, settings):
        with pytest.raises(ValidationError):
            settings.update("dark_mode", True)

    def test_update_rejects_unparseable_value(self, settings):
        with pytest.raises(ValidationError):
            settings.update("active_input", "maybe")
        assert settings.get().active_input is False

    def test_partial_record_merges_over_defaults(self):
        store = MemoryStore({StorageKeys.SETTINGS: '{"colorCodedFeedbackEnabled": true, "legacy": 1}'})
        current = SettingsRepository(store).get()
        assert current == ReviewSettings(color_coded_feedback=True)

    def test_corrupt_record_reads_defaults(self):
        store = MemoryStore({StorageKeys.SETTINGS: "not json"})
        assert SettingsRepository(store).get() == ReviewSettings()

    def test_non_bool_values_are_ignored(self):
        store = MemoryStore({StorageKeys.SETTINGS: '{"activeInputEnabled": "yes"}'})
        assert SettingsRepository(store).get().active_input is False

    def test_reset(self, settings):
        settings.update("active_input", True)
        settings.update("color_coded_feedback", True)
        assert settings.reset() == ReviewSettings()
        assert settings.get() == ReviewSettings()

    def test_settings_do_not_touch_items(self, settings, repository):
        item = repository.create("你好", "hello")
        settings.update("reverse_mode", True)
        assert repository.list() == [item]


class TestParseBool:

    @pytest.mark.parametrize("value", [True, 1, "true", "1", "YES", " on "])
    def test_truthy(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", [False, 0, "false", "0", "No", "off"])
    def test_falsy(self, value):
        assert parse_bool(value) is False

    @pytest.mark.parametrize("value", ["", "2", 2, None, "enabled"])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            parse_bool(value)
