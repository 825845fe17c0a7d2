import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from wordgrid.scoring import Ranking

logger = logging.getLogger("wordgrid")


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 1
    RANKING: str = Ranking.LEXICOGRAPHIC.value
    MAX_RESULTS: int = 0

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "wordlist.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))

        if not _is_ranking(self.RANKING):
            logger.warning("Unknown RANKING %r, using %r", self.RANKING, Ranking.LEXICOGRAPHIC.value)
            self.RANKING = Ranking.LEXICOGRAPHIC.value


def _is_ranking(value) -> bool:
    return isinstance(value, str) and value in {r.value for r in Ranking}


# Fields that may be changed at runtime through update_settings()
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "RANKING": str,
    "MAX_RESULTS": int,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return value


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to cfg. Returns {field: error} for rejected ones."""
    errors: dict[str, str] = {}
    for name, raw in values.items():
        if name not in cfg.__dataclass_fields__:
            errors[name] = "unknown setting"
            continue
        if name not in EDITABLE_FIELDS:
            errors[name] = "setting is not editable"
            continue
        try:
            value = _coerce(getattr(cfg, name), raw)
        except (TypeError, ValueError):
            errors[name] = f"expected {EDITABLE_FIELDS[name].__name__}, got {raw!r}"
            continue
        if name == "RANKING" and not _is_ranking(value):
            errors[name] = f"unknown ranking {value!r}"
            continue
        if name in ("MIN_WORD_LENGTH", "MAX_RESULTS") and value < 0:
            errors[name] = "must not be negative"
            continue
        setattr(cfg, name, value)
    return errors


settings = Settings()
