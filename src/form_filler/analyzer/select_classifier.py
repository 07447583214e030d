"""
select（ドロップダウン）分類器

name/id/ラベル等のシグナル、option のテキスト/値、option 数の3観点で
各ルールを採点し、最高得点（同点は先勝ち）が最小値以上ならそのタイプを返す。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .field_model import FieldOption, FormField
from .field_signals import FieldSignals
from .select_rules import (
    MIN_OPTION_KEYWORD_HITS,
    MIN_SELECT_SCORE,
    NAME_MATCH_SCORE,
    OPTION_COUNT_SCORE,
    OPTION_MATCH_SCORE,
    SELECT_DETECTION_RULES,
    SELECT_UNKNOWN,
    SelectDetectionRule,
)

logger = logging.getLogger(__name__)


@dataclass
class SelectDetection:
    """select 判定結果"""
    type: str
    score: int = 0
    confidence: float = 0.0
    breakdown: Dict[str, int] = field(default_factory=dict)

    @property
    def is_unknown(self) -> bool:
        return self.type == SELECT_UNKNOWN


class SelectClassifier:
    """ドロップダウン用のスコアリング分類器"""

    def __init__(self, rules: Optional[Sequence[SelectDetectionRule]] = None,
                 min_score: int = MIN_SELECT_SCORE):
        self.rules = list(rules) if rules is not None else list(SELECT_DETECTION_RULES)
        self.min_score = min_score

    @staticmethod
    def _signal_values(signals: FieldSignals) -> List[str]:
        return [
            v for v in (
                signals.name,
                signals.element_id,
                signals.label,
                signals.placeholder,
                signals.aria_label,
                signals.class_list,
            ) if v
        ]

    @staticmethod
    def _option_blob(options: Sequence[FieldOption]) -> str:
        texts = [o.text.lower().strip() for o in options]
        values = [o.value.lower().strip() for o in options]
        return ' '.join(texts + values)

    def _name_matches(self, rule: SelectDetectionRule, values: List[str]) -> bool:
        return any(keyword in value for keyword in rule.name_keywords for value in values)

    def _options_match(self, rule: SelectDetectionRule, blob: str) -> bool:
        if not rule.option_keywords or not blob:
            return False
        hits = 0
        for keyword in rule.option_keywords:
            if keyword in blob:
                hits += 1
                if hits >= MIN_OPTION_KEYWORD_HITS:
                    return True
        return False

    @staticmethod
    def _count_in_range(rule: SelectDetectionRule, count: int) -> bool:
        if rule.option_count_range is None:
            return False
        low, high = rule.option_count_range
        return low <= count <= high

    def score_rule(self, rule: SelectDetectionRule, signals: FieldSignals,
                   options: Sequence[FieldOption]) -> Dict[str, int]:
        values = self._signal_values(signals)
        blob = self._option_blob(options)
        breakdown = {'name': 0, 'options': 0, 'count': 0}
        if self._name_matches(rule, values):
            breakdown['name'] = NAME_MATCH_SCORE
        if self._options_match(rule, blob):
            breakdown['options'] = OPTION_MATCH_SCORE
        if self._count_in_range(rule, len(options)):
            breakdown['count'] = OPTION_COUNT_SCORE
        return breakdown

    def detect(self, field: FormField, signals: FieldSignals) -> SelectDetection:
        best: Optional[SelectDetectionRule] = None
        best_score = 0
        best_breakdown: Dict[str, int] = {}

        for rule in self.rules:
            breakdown = self.score_rule(rule, signals, field.options)
            score = sum(breakdown.values())
            # 厳密に大きい場合のみ更新（同点は表の先頭側）
            if score > best_score:
                best, best_score, best_breakdown = rule, score, breakdown

        if best is None or best_score < self.min_score:
            return SelectDetection(type=SELECT_UNKNOWN, score=best_score, breakdown=best_breakdown)

        confidence = round(best_score / (NAME_MATCH_SCORE + OPTION_MATCH_SCORE + OPTION_COUNT_SCORE), 4)
        logger.debug(
            f"Detected select type: {best.type} (score: {best_score}, options: {len(field.options)})"
        )
        return SelectDetection(
            type=best.type, score=best_score, confidence=confidence, breakdown=best_breakdown
        )
