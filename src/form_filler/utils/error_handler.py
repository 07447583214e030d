"""
設定読み込み時のエラーハンドリング

分類器の設定は欠けていても既定値で動作できるため、読み込み失敗は
原則フォールバックで吸収する。起動に必須の設定だけ critical で失敗させる。
"""

import logging
from typing import Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')

# 例外種別 → ログ文言（上から順に判定）
_FAILURE_MESSAGES: Tuple[Tuple[Type[Exception], str], ...] = (
    (FileNotFoundError, "Config file not found for {name}"),
    (ValueError, "Invalid config format for {name}"),
    (OSError, "Could not read {name}"),
    (RuntimeError, "Unexpected error loading {name}"),
)
_HANDLED_ERRORS = tuple(exc for exc, _ in _FAILURE_MESSAGES)


class ConfigLoadError(Exception):
    """必須設定の読み込みに失敗"""
    pass


def _describe(error: Exception, config_name: str) -> str:
    for exc_type, template in _FAILURE_MESSAGES:
        if isinstance(error, exc_type):
            return f"{template.format(name=config_name)}: {error}"
    return f"Failed to load {config_name}: {error}"


class StandardErrorHandler:
    """設定読み込みの失敗を一か所で扱う"""

    @staticmethod
    def load_config_with_fallback(
        loader_func: Callable[[], T],
        fallback_value: T,
        config_name: str,
        critical: bool = False
    ) -> T:
        """
        loader_func を実行し、想定内の失敗ならフォールバック値を返す

        critical=True の場合は ConfigLoadError を送出する。
        想定外の例外（KeyError など）は握りつぶさずそのまま伝播する。
        """
        try:
            loaded = loader_func()
        except _HANDLED_ERRORS as e:
            message = _describe(e, config_name)
            if critical:
                logger.error(message)
                raise ConfigLoadError(message) from e
            logger.warning(f"{message}; falling back to defaults")
            return fallback_value
        logger.debug(f"Loaded config: {config_name}")
        return loaded


load_config_safe = StandardErrorHandler.load_config_with_fallback
