import pytest

from resourceid_codec.config import CodecSettings, load_settings
from resourceid_codec.exceptions import ConfigurationError


def test_load_settings_defaults():
    settings = load_settings()
    assert settings == CodecSettings()
    assert settings.strict_storage_id is False
    assert settings.config_path is None


def test_load_settings_from_yaml(tmp_path):
    config_file = tmp_path / "codec.yaml"
    config_file.write_text("strict_storage_id: true\n", encoding="utf-8")

    settings = load_settings(config_file)

    assert settings.strict_storage_id is True
    assert settings.config_path == config_file.resolve()


def test_load_settings_nested_section_and_overrides(tmp_path):
    config_file = tmp_path / "frontend.yaml"
    config_file.write_text("codec:\n  strict_storage_id: true\nhost: localhost\n", encoding="utf-8")

    assert load_settings(config_file).strict_storage_id is True
    assert load_settings(config_file, overrides={"strict_storage_id": False}).strict_storage_id is False


def test_load_settings_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "strict_storage_id: [true\n",
        "- strict_storage_id\n",
        "strict_storage_id: sometimes\n",
        "codec:\n  - strict_storage_id: true\n",
        "codec: true\n",
    ],
)
def test_load_settings_rejects_invalid_files(tmp_path, content):
    config_file = tmp_path / "codec.yaml"
    config_file.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(config_file)
