# annotator/config.py

from __future__ import annotations

import yaml
from dataclasses import dataclass
from typing import Any, Dict


DEFAULT_STOP_CHARS = ".,!?"


@dataclass
class AnnotatorConfig:
    # punctuation that ends a mention, e.g. "@john.com" -> "@john"
    mention_stop_chars: str = DEFAULT_STOP_CHARS
    linkify: bool = True
    default_scheme: str = "https"

    def scheme_prefix(self) -> str:
        return f"{self.default_scheme}://"


def config_from_dict(cfg: Dict[str, Any] | None) -> AnnotatorConfig:
    if cfg is None:
        return AnnotatorConfig()
    if not isinstance(cfg, dict):
        raise ValueError("Annotator config must be a mapping")

    mentions_cfg = cfg.get("mentions") or {}
    links_cfg = cfg.get("links") or {}

    stop_chars = mentions_cfg.get("stop_chars", DEFAULT_STOP_CHARS)
    if not isinstance(stop_chars, str):
        raise ValueError("mentions.stop_chars must be a string")

    scheme = str(links_cfg.get("default_scheme", "https")).lower()
    if scheme not in ("http", "https"):
        raise ValueError(f"Unsupported default_scheme: {scheme!r}")

    return AnnotatorConfig(
        mention_stop_chars=stop_chars,
        linkify=bool(links_cfg.get("enabled", True)),
        default_scheme=scheme,
    )


def load_config(path: str) -> AnnotatorConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    return config_from_dict(cfg)
