from pathlib import Path

from vcf_exporter.config import Settings, ensure_config, load_settings


def test_ensure_config_creates_defaults(tmp_path: Path):
    conf = tmp_path / "local" / "vcf-export.conf"
    ensure_config(conf)

    assert conf.exists()
    txt = conf.read_text()
    assert 'vcard_version = "3.0"' in txt
    assert load_settings(conf) == Settings()


def test_ensure_config_keeps_existing(tmp_path: Path):
    conf = tmp_path / "vcf-export.conf"
    conf.write_text('vcard_version = "4.0"\n', encoding="utf-8")
    ensure_config(conf)
    assert load_settings(conf).vcard_version == "4.0"


def test_load_settings_overrides(tmp_path: Path):
    conf = tmp_path / "vcf-export.conf"
    conf.write_text('output_dir = "out"\nnotify = false\n', encoding="utf-8")
    settings = load_settings(conf)
    assert settings.output_dir == "out"
    assert settings.notify is False
    assert settings.vcard_version == "3.0"


def test_malformed_config_falls_back_to_defaults(tmp_path: Path):
    conf = tmp_path / "vcf-export.conf"
    conf.write_text("this is = = not toml", encoding="utf-8")
    assert load_settings(conf) == Settings()


def test_missing_config_is_defaults(tmp_path: Path):
    assert load_settings(tmp_path / "absent.conf") == Settings()
