import pytest

import binserde.conf.get_settings as get_settings_module


@pytest.fixture(autouse=True)
def reset_global_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Every test starts without loaded settings and without settings in the environment."""
    monkeypatch.setattr(get_settings_module, '_settings_singleton', None)
    for name in get_settings_module.CodecSettings.model_fields:
        monkeypatch.delenv(get_settings_module.ENV_PREFIX + name, raising=False)
