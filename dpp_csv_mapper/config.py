from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import ContextUrls, Defaults


def _split_sectors(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True, slots=True)
class MapperConfig:
    context_base_url: str = ContextUrls.BASE
    sample_limit: int = Defaults.SAMPLE_LIMIT
    score_cutoff: float = Defaults.SCORE_CUTOFF
    default_sectors: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.context_base_url:
            raise ValueError("context_base_url must not be empty")
        if self.sample_limit < 1:
            raise ValueError(f"sample_limit must be positive, got {self.sample_limit}")
        if self.score_cutoff <= 0:
            raise ValueError(
                f"score_cutoff must be positive, got {self.score_cutoff}"
            )

    @classmethod
    def from_env(cls) -> MapperConfig:
        base_url = os.getenv("DPP_CONTEXT_BASE_URL", ContextUrls.BASE).strip()
        return cls(
            context_base_url=base_url or ContextUrls.BASE,
            sample_limit=int(os.getenv("DPP_SAMPLE_LIMIT", str(Defaults.SAMPLE_LIMIT))),
            score_cutoff=float(
                os.getenv("DPP_SCORE_CUTOFF", str(Defaults.SCORE_CUTOFF))
            ),
            default_sectors=_split_sectors(os.getenv("DPP_SECTORS")),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> MapperConfig:
        config = MapperConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: MapperConfig) -> MapperConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        contexts = _get_table(data, "contexts")
        mapping = _get_table(data, "mapping")
        generate = _get_table(data, "generate")
        context_base_url = base_config.context_base_url
        if value := contexts.get("base_url"):
            context_base_url = str(value).strip()
        sample_limit = base_config.sample_limit
        if (value := mapping.get("sample_limit")) is not None:
            sample_limit = _coerce_int(value, key="mapping.sample_limit")
        score_cutoff = base_config.score_cutoff
        if (value := mapping.get("score_cutoff")) is not None:
            score_cutoff = _coerce_float(value, key="mapping.score_cutoff")
        default_sectors = base_config.default_sectors
        if "sectors" in generate:
            default_sectors = _coerce_sectors(
                generate.get("sectors"), key="generate.sectors"
            )
        return MapperConfig(
            context_base_url=context_base_url,
            sample_limit=sample_limit,
            score_cutoff=score_cutoff,
            default_sectors=default_sectors,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_sectors(value: object, *, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return _split_sectors(value)
    if isinstance(value, list):
        items = cast("list[object]", value)
        return tuple(str(item).strip() for item in items if str(item).strip())
    raise ValueError(f"{key} must be a list or string, got {type(value).__name__}")
