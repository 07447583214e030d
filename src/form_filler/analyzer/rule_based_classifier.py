"""
ルールベース分類器

1. ネイティブ種別の短絡表（type=email など）に該当すれば即決
2. テキスト/数値系のみ TEXT_INPUT_RULES を表の順に走査し、
   最初に一致したルールを採用（excluded_types が一致する場合はスキップ）
3. どれにも一致しなければ汎用既定値（'text'、数値種別なら 'number'）
"""

import logging
from typing import Optional, Sequence

from .detection_rules import (
    CHECKABLE_KINDS,
    JAPANESE_SCRIPT_RULES,
    NATIVE_INPUT_TYPES,
    NATIVE_TYPE_MAPPING,
    TEXT_INPUT_RULES,
    DetectionRule,
)
from .field_signals import FieldSignals

logger = logging.getLogger(__name__)

GENERIC_TEXT = 'text'
GENERIC_NUMBER = 'number'
UNKNOWN = 'unknown'


class RuleBasedClassifier:
    """表駆動のテキストフィールド分類器"""

    def __init__(self, rules: Optional[Sequence[DetectionRule]] = None):
        self.rules = list(rules) if rules is not None else list(TEXT_INPUT_RULES)
        self._by_type = {}
        for rule in self.rules:
            # 同名タイプが複数ある場合は先勝ち
            self._by_type.setdefault(rule.type, rule)

    @staticmethod
    def native_type(kind: str) -> Optional[str]:
        """ネイティブ種別の短絡判定（該当しなければ None）"""
        if kind in NATIVE_INPUT_TYPES:
            return NATIVE_TYPE_MAPPING.get(kind, kind)
        return None

    @staticmethod
    def generic_default(kind: str) -> str:
        if kind == 'number':
            return GENERIC_NUMBER
        if kind in CHECKABLE_KINDS:
            return GENERIC_TEXT
        return UNKNOWN

    @staticmethod
    def is_generic(field_type: str) -> bool:
        return field_type in (GENERIC_TEXT, GENERIC_NUMBER, UNKNOWN)

    def _is_excluded(self, rule: DetectionRule, signals: FieldSignals) -> bool:
        for excluded_type in rule.excluded_types:
            excluded_rule = self._by_type.get(excluded_type)
            if excluded_rule is not None and signals.matches_any(excluded_rule.keywords):
                return True
        return False

    def match_rule(self, signals: FieldSignals) -> Optional[DetectionRule]:
        """表の順に走査し、最初に生き残ったルールを返す"""
        if signals.is_empty:
            return None
        for rule in self.rules:
            if not signals.matches_any(rule.keywords):
                continue
            if self._is_excluded(rule, signals):
                logger.debug(f"Rule '{rule.type}' suppressed by excluded types {rule.excluded_types}")
                continue
            return rule
        return None

    def classify(self, signals: FieldSignals) -> str:
        native = self.native_type(signals.kind)
        if native is not None:
            return native

        if signals.kind not in CHECKABLE_KINDS:
            return self.generic_default(signals.kind)

        rule = self.match_rule(signals)
        if rule is not None:
            logger.debug(
                f"Rule-based match: {rule.type} (keyword={signals.matched_keyword(rule.keywords)})"
            )
            return rule.type
        return self.generic_default(signals.kind)

    def detect_japanese_script(self, signals: FieldSignals) -> str:
        """ひらがな/カタカナ/ローマ字 入力欄のヒント（テキスト入力のみ）"""
        if signals.kind not in ('text', ''):
            return ''
        raw = signals.raw_text
        if not raw:
            return ''
        for rule in JAPANESE_SCRIPT_RULES:
            if any(keyword in raw for keyword in rule.keywords):
                return rule.type
        return ''
