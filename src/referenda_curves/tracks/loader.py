"""Загрузка таблицы треков из JSON (контракт jsonschema + pydantic модели)."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from referenda_curves.core.contracts import validate_track_table
from referenda_curves.core.domain.track import TrackTable

logger = logging.getLogger(__name__)

# Таблица треков Moonbase, поставляемая с пакетом
BUNDLED_TRACKS_PATH = Path(__file__).parent / "data" / "moonbase.json"


def parse_track_table(data: Dict[str, Any]) -> TrackTable:
    """
    Валидация и разбор таблицы треков.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт track_table
        pydantic.ValidationError: Если данные не проходят валидацию модели
    """
    validate_track_table(data)
    return TrackTable.model_validate(data)


def load_track_table(path: Optional[Path] = None) -> TrackTable:
    """
    Загрузка таблицы треков из файла (по умолчанию встроенная Moonbase).

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError / pydantic.ValidationError: см. parse_track_table
    """
    path = Path(path) if path is not None else BUNDLED_TRACKS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    table = parse_track_table(data)
    logger.info("Loaded %d tracks for %s from %s", len(table.tracks), table.network, path)
    return table
