"""CounterStyleRegistry — таблица name → CounterStyle для разрешения fallback.

CSS Counter Styles Level 3, §3.1.6 (fallback), §7 (predefined counter styles):
- Registry инициализируется предопределёнными стилями
- register перезаписывает стиль с тем же именем
- lookup никогда не падает: неизвестное имя → decimal

Registry передаётся явно в CounterStyle.generate_*; default_registry()
используется только когда registry не указан.

Потокобезопасность: register/lookup требуют внешней синхронизации при
конкурентной записи. Полностью заполненный registry только для чтения
можно разделять без блокировок.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from list_counter.styles.counter_style import DECIMAL, CounterStyle
from list_counter.styles.predefined import load_counter_styles, predefined_counter_styles

logger = logging.getLogger(__name__)

DEFAULT_STYLE_NAME = "decimal"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RegistryConfig:
    """Конфигурация начального заполнения registry.

    - seed_predefined: заполнить предопределёнными стилями
    - predefined_path: JSON-таблица стилей (None → таблица из пакета)
    - validate_schema: проверять таблицу по JSON Schema перед загрузкой
    """

    seed_predefined: bool = True
    predefined_path: Optional[Path] = None
    validate_schema: bool = True


# =============================================================================
# REGISTRY
# =============================================================================


class CounterStyleRegistry:
    """Изменяемая таблица стилей нумерации.

    Гарантия: всегда содержит стиль "decimal" (если его нет среди
    начальных стилей, используется встроенный DECIMAL).
    """

    def __init__(
        self,
        styles: Optional[Iterable[CounterStyle]] = None,
        config: Optional[RegistryConfig] = None,
    ):
        """
        Args:
            styles: дополнительные стили (регистрируются после предопределённых)
            config: конфигурация заполнения (по умолчанию RegistryConfig())
        """
        self.config = config or RegistryConfig()
        self._styles: Dict[str, CounterStyle] = {}

        if self.config.seed_predefined:
            if self.config.predefined_path is None:
                self.register_all(predefined_counter_styles())
            else:
                self.register_all(
                    load_counter_styles(
                        self.config.predefined_path,
                        validate=self.config.validate_schema,
                    )
                )

        if styles is not None:
            self.register_all(styles)

        if DEFAULT_STYLE_NAME not in self._styles:
            self._styles[DEFAULT_STYLE_NAME] = DECIMAL

    def lookup(self, name: str) -> CounterStyle:
        """Стиль по имени; неизвестное имя → стиль "decimal"."""
        style = self._styles.get(name)
        if style is None:
            logger.debug("Counter style %r not registered, using %r", name, DEFAULT_STYLE_NAME)
            return self._styles[DEFAULT_STYLE_NAME]
        return style

    def register(self, style: CounterStyle) -> None:
        """Добавление стиля или перезапись стиля с тем же именем."""
        if style.name in self._styles:
            logger.debug("Counter style %r overridden", style.name)
        self._styles[style.name] = style

    def register_all(self, styles: Iterable[CounterStyle]) -> None:
        """Регистрация стилей по порядку (при совпадении имён побеждает последний)."""
        for style in styles:
            self.register(style)

    def names(self) -> List[str]:
        """Имена зарегистрированных стилей в порядке регистрации."""
        return list(self._styles)

    def generate_counter_content(self, name: str, value: int) -> str:
        """lookup(name).generate_counter_content(value) в контексте этого registry."""
        return self.lookup(name).generate_counter_content(value, registry=self)

    def generate_marker_content(self, name: str, value: int) -> str:
        """lookup(name).generate_marker_content(value) в контексте этого registry."""
        return self.lookup(name).generate_marker_content(value, registry=self)

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)


@lru_cache(maxsize=None)
def default_registry() -> CounterStyleRegistry:
    """Registry по умолчанию с предопределёнными стилями (создаётся один раз)."""
    return CounterStyleRegistry()
