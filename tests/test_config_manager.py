import json

import pytest

import config.manager as manager_module
from config.manager import ConfigManager
from form_filler.utils import config_loader
from form_filler.utils.config_loader import ClassifierSettings, get_classifier_settings, reload_settings
from form_filler.utils.error_handler import ConfigLoadError, StandardErrorHandler
from form_filler.utils.generator_registry import GeneratorRegistry


def _write_config(directory, payload):
    path = directory / 'classifier_config.json'
    if isinstance(payload, str):
        path.write_text(payload, encoding='utf-8')
    else:
        path.write_text(json.dumps(payload), encoding='utf-8')
    return path


def test_missing_file_falls_back_to_defaults(tmp_path):
    cfg = ConfigManager(tmp_path).get_classifier_config()
    assert cfg['settings']['confidence_threshold'] == 60
    assert cfg['custom_fields'] == []


def test_broken_json_falls_back_to_defaults(tmp_path, caplog):
    _write_config(tmp_path, '{"settings": ')
    with caplog.at_level('WARNING'):
        cfg = ConfigManager(tmp_path).get_classifier_config()
    assert cfg['settings']['min_age'] == 18
    assert 'Invalid config format' in caplog.text


def test_valid_file_is_loaded_and_copied(tmp_path):
    _write_config(tmp_path, {
        'settings': {'locale': 'ja', 'confidence_threshold': 80},
        'custom_fields': [{'field': 'email', 'kind': 'list', 'value': ['a@example.com']}],
    })
    manager = ConfigManager(tmp_path)

    cfg = manager.get_classifier_config()
    cfg['custom_fields'].clear()

    assert manager.get_custom_fields()[0]['field'] == 'email'
    assert manager.get_classifier_config()['settings']['locale'] == 'ja'


def test_malformed_sections_are_replaced(tmp_path):
    _write_config(tmp_path, {'settings': [], 'custom_fields': 'email'})
    cfg = ConfigManager(tmp_path).get_classifier_config()
    assert cfg['settings']['locale'] == 'en'
    assert cfg['custom_fields'] == []


def test_reload_rereads_the_file(tmp_path):
    _write_config(tmp_path, {'settings': {'confidence_threshold': 70}, 'custom_fields': []})
    manager = ConfigManager(tmp_path)
    assert manager.get_classifier_config()['settings']['confidence_threshold'] == 70

    _write_config(tmp_path, {'settings': {'confidence_threshold': 90}, 'custom_fields': []})
    assert manager.get_classifier_config()['settings']['confidence_threshold'] == 70
    manager.reload()
    assert manager.get_classifier_config()['settings']['confidence_threshold'] == 90


def test_repository_default_config():
    cfg = ConfigManager().get_classifier_config()
    settings = ClassifierSettings.from_config(cfg)
    assert settings.confidence_threshold == 60
    assert settings.enable_heuristic_detection is True


def test_settings_are_clamped():
    settings = ClassifierSettings.from_dict({'confidence_threshold': 150, 'min_age': 50, 'max_age': 20})
    assert settings.confidence_threshold == 95
    assert settings.confidence_ratio == pytest.approx(0.95)
    assert (settings.min_age, settings.max_age) == (18, 65)


def test_settings_from_config_merges_custom_fields():
    settings = ClassifierSettings.from_config({
        'settings': {'enable_label_matching': False},
        'custom_fields': [
            {'field': '*email', 'kind': 'list', 'value': 'a@example.com, b@example.com'},
            {'field': 'code', 'kind': 'regex', 'value': '(a+)+'},
        ],
    })
    assert settings.enable_label_matching is False
    assert len(settings.custom_fields) == 1
    assert settings.custom_fields[0].values == ['a@example.com', 'b@example.com']


def test_empty_input_gives_defaults():
    assert ClassifierSettings.from_dict(None) == ClassifierSettings.defaults()


def test_error_handler_critical_raises():
    def loader():
        raise FileNotFoundError('classifier_config.json')

    assert StandardErrorHandler.load_config_with_fallback(loader, {'x': 1}, 'classifier') == {'x': 1}
    with pytest.raises(ConfigLoadError):
        StandardErrorHandler.load_config_with_fallback(loader, {}, 'classifier', critical=True)


def test_error_handler_passes_through_unexpected_errors():
    def loader():
        raise KeyError('settings')

    with pytest.raises(KeyError):
        StandardErrorHandler.load_config_with_fallback(loader, {}, 'classifier')


def test_settings_singleton_and_reload(tmp_path, monkeypatch):
    _write_config(tmp_path, {'settings': {'confidence_threshold': 75}, 'custom_fields': []})
    monkeypatch.setattr(manager_module, 'config_manager', ConfigManager(tmp_path))
    monkeypatch.setattr(config_loader, '_classifier_settings', None)

    first = get_classifier_settings()
    assert first.confidence_threshold == 75
    assert get_classifier_settings() is first

    _write_config(tmp_path, {'settings': {'confidence_threshold': 85}, 'custom_fields': []})
    reload_settings()
    assert get_classifier_settings().confidence_threshold == 85


def test_generator_registry():
    registry = GeneratorRegistry(fallback=lambda: 'x')
    registry.register('person.last_name', lambda: 'Yamada')
    registry.register('internet.email', lambda: 'a@example.com')

    assert len(registry) == 2
    assert registry.paths == ['internet.email', 'person.last_name']
    assert registry.resolve('person.last_name')() == 'Yamada'
    assert registry.resolve('person.unknown')() == 'x'

    with pytest.raises(ValueError):
        registry.register('last_name', lambda: '')
    with pytest.raises(TypeError):
        registry.register('person.age', 42)
