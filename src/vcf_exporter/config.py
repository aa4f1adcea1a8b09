from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    vcard_version: str = "3.0"
    output_dir: str = "cards-export"
    notify: bool = True


DEFAULT_CONF = """# vcf-exporter local config (TOML)
vcard_version = "3.0"
output_dir = "cards-export"
notify = true
"""


def default_conf_path(base: Path | None = None) -> Path:
    return Path(base or os.getcwd()) / "local" / "vcf-export.conf"


def ensure_config(conf_path: Path) -> Path:
    """Create the config file with defaults if it does not exist yet."""
    conf_path = Path(conf_path)
    conf_path.parent.mkdir(parents=True, exist_ok=True)
    if not conf_path.exists():
        conf_path.write_text(DEFAULT_CONF, encoding="utf-8")
    return conf_path


def load_settings(conf_path: Path) -> Settings:
    settings = Settings()
    conf_path = Path(conf_path)
    if not conf_path.exists():
        return settings
    try:
        data = tomllib.loads(conf_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", conf_path, exc)
        return settings

    settings.vcard_version = str(data.get("vcard_version", settings.vcard_version))
    settings.output_dir = str(data.get("output_dir", settings.output_dir))
    notify = data.get("notify", settings.notify)
    if isinstance(notify, bool):
        settings.notify = notify
    else:
        logger.warning("%s: 'notify' must be true or false, got %r", conf_path, notify)
    return settings
