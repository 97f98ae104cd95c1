"""
Predefined — Загрузка предопределённых стилей нумерации

CSS Counter Styles Level 3, §7 (simple predefined counter styles)
W3C Ready-made Counter Styles

Таблицы символов (decimal, roman, armenian, georgian, hebrew, CJK,
индийские системы, bullets и т.д.) хранятся как данные в
data/predefined_counter_styles.json, а не как код. Таблица проверяется
по JSON Schema (counter_style_table) перед построением CounterStyle.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Union

from list_counter.core.contracts import validate_counter_style_table
from list_counter.styles.counter_style import CounterStyle

logger = logging.getLogger(__name__)

PREDEFINED_STYLES_PATH: Path = Path(__file__).parent / "data" / "predefined_counter_styles.json"


def load_counter_styles(path: Union[str, Path], validate: bool = True) -> List[CounterStyle]:
    """
    Загрузка таблицы стилей из JSON файла.

    Args:
        path: Путь к JSON-таблице ({"version": 1, "styles": [...]})
        validate: Проверять таблицу по JSON Schema

    Returns:
        Стили в порядке объявления в таблице

    Raises:
        FileNotFoundError: Если файл не найден
        jsonschema.ValidationError: Если таблица не соответствует схеме
        pydantic.ValidationError: Если определение стиля нарушает контракт системы
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Counter style table not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if validate:
        validate_counter_style_table(data)

    styles = [CounterStyle.model_validate(entry) for entry in data["styles"]]
    logger.debug("Loaded %d counter styles from %s", len(styles), path)
    return styles


@lru_cache(maxsize=None)
def predefined_counter_styles() -> tuple[CounterStyle, ...]:
    """Предопределённые стили из таблицы пакета (загружаются один раз)."""
    return tuple(load_counter_styles(PREDEFINED_STYLES_PATH))
