"""
分類ログの抑制フィルタ

分類器はフィールドごとに判定理由を DEBUG で出すため、ページ全体の入力パスでは
ログが膨らむ。対象ロガーの詳細ログだけを落とし、警告以上は常に残す。
"""

import logging
from typing import Iterable, Optional, Tuple, Union

CLASSIFIER_LOGGERS: Tuple[str, ...] = (
    "form_filler.analyzer",
    "form_filler.security.logger",
)


class ClassificationLogFilter(logging.Filter):
    """指定ロガー配下のレコードのうち min_level 未満を捨てる"""

    DEFAULT_PREFIXES = CLASSIFIER_LOGGERS

    def __init__(self, prefixes: Optional[Iterable[str]] = None, min_level: int = logging.WARNING):
        super().__init__()
        self.prefixes: Tuple[str, ...] = tuple(prefixes) if prefixes else self.DEFAULT_PREFIXES
        self.min_level = min_level

    def _is_target(self, logger_name: str) -> bool:
        return any(logger_name == p or logger_name.startswith(p + ".") for p in self.prefixes)

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if record.levelno >= self.min_level:
            return True
        return not self._is_target(record.name)


def quiet_classification_logs(target: Union[logging.Handler, logging.Logger, None] = None,
                              min_level: int = logging.WARNING) -> ClassificationLogFilter:
    """ハンドラ（省略時はルートロガーの全ハンドラ）にフィルタを取り付ける"""
    log_filter = ClassificationLogFilter(min_level=min_level)
    if target is None:
        for handler in logging.getLogger().handlers:
            handler.addFilter(log_filter)
    else:
        target.addFilter(log_filter)
    return log_filter
