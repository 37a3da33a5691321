from __future__ import annotations

import logging
import os

import json5
from pydantic import BaseModel, ConfigDict, Field, ValidationError


logger = logging.getLogger(__name__)

CONFIG_PATH = os.getenv("HASHPAGE_CONFIG", "./config.jsonc")


class Settings(BaseModel):
    """Startup configuration; field aliases are the keys used in ``config.jsonc``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ssl_cert_path: str = Field(default="cert.pem", alias="ssl_cert")
    # The on-disk key is spelled "sll_key"; existing config files depend on it.
    ssl_key_path: str = Field(default="key.pem", alias="sll_key")
    bind_address: str = Field(default="0.0.0.0", alias="server_ip")
    bind_port: int = Field(default=443, alias="server_port")


def load_config(path: str = CONFIG_PATH) -> Settings:
    """Read a JSON-with-comments config file.

    Missing keys fall back to the field defaults. Raises ``RuntimeError`` when
    the file cannot be opened or does not hold a valid config object.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            raw = fh.read()
    except OSError as exc:
        raise RuntimeError(f"Failed to open json file {path}: {exc}") from exc

    try:
        data = json5.loads(raw)
        settings = Settings.model_validate(data)
    except (ValueError, ValidationError) as exc:
        raise RuntimeError(f"Failed to parse json {path}: {exc}") from exc

    logger.info("Loaded config from %s", path)
    return settings
