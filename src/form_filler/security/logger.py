"""
分類診断ログのマスキング

placeholder の入力例や初期値には実在のメールアドレス・電話番号が
入っていることがあるため、シグナルをログへ出す前に伏せ字にする。
"""

import logging
import re
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r'[^\s@]+@[^\s@]+\.[^\s@]+')
_PHONE_ONLY_RE = re.compile(r'^[\d\-\(\)\+\s]+$')
MIN_PHONE_DIGITS = 8


def _hide_middle(text: str, head: int, tail: int) -> str:
    """先頭 head 文字と末尾 tail 文字以外を * にする（短すぎる場合は全体）"""
    if len(text) <= head + tail:
        return '*' * len(text)
    return text[:head] + '*' * (len(text) - head - tail) + text[len(text) - tail:]


class SecurityLogger:
    """シグナルを伏せ字にしてから出力するロガー"""

    # 値そのものを常に伏せるキー
    SENSITIVE_FIELDS = [
        'value', 'default_value', 'placeholder', 'title', 'aria_describedby_text',
    ]

    @staticmethod
    def _is_phone_like(text: str) -> bool:
        digits = sum(ch.isdigit() for ch in text)
        return digits >= MIN_PHONE_DIGITS and _PHONE_ONLY_RE.match(text) is not None

    @staticmethod
    def _hide_email(address: str) -> str:
        local, _, domain = address.partition('@')
        return f"{_hide_middle(local, 1, 1)}@{domain}"

    @classmethod
    def _hide_contacts(cls, text: str) -> str:
        """電話番号だけの文字列、または文中のメールアドレスを伏せる"""
        if cls._is_phone_like(text):
            return _hide_middle(text, 2, 2)
        return _EMAIL_RE.sub(lambda m: cls._hide_email(m.group(0)), text)

    @classmethod
    def _hide_value(cls, text: str) -> str:
        hidden = cls._hide_contacts(text)
        if hidden != text:
            return hidden
        return _hide_middle(text, 1, 1)

    @classmethod
    def _mask_mapping(cls, data: Mapping[Any, Any]) -> dict:
        sensitive = {name.lower() for name in cls.SENSITIVE_FIELDS}
        result = {}
        for key, value in data.items():
            if isinstance(value, str) and value and str(key).lower() in sensitive:
                result[key] = cls._hide_value(value)
            else:
                result[key] = cls.mask_sensitive_data(value)
        return result

    @classmethod
    def mask_sensitive_data(cls, data: Any) -> Any:
        """辞書・リスト・文字列を再帰的にたどって伏せ字にする"""
        if isinstance(data, Mapping):
            return cls._mask_mapping(data)
        if isinstance(data, (list, tuple)):
            return [cls.mask_sensitive_data(item) for item in data]
        if isinstance(data, str):
            return cls._hide_contacts(data)
        return data

    @classmethod
    def _format(cls, message: str, data: Any) -> str:
        if data is None:
            return message
        return f"{message}: {cls.mask_sensitive_data(data)}"

    @classmethod
    def safe_log_debug(cls, message: str, data: Any = None):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(cls._format(message, data))

    @classmethod
    def safe_log_warning(cls, message: str, data: Any = None):
        logger.warning(cls._format(message, data))
