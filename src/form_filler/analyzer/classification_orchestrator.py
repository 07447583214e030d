"""
分類オーケストレータ

1フィールドの最終タイプを固定の優先順で決める。
1. カスタムルール（一致すれば確定）
2. ルールベース（select は select 分類器、その他はネイティブ種別 → キーワード表）
   汎用既定値以外なら確定
3. ヒューリスティック（汎用既定値になったテキスト系のみ、有効時かつ閾値以上）
4. 汎用既定値（'text'、数値種別は 'number'、入力対象外は 'unknown'）
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..security.logger import SecurityLogger
from ..utils.config_loader import ClassifierSettings
from ..utils.generator_registry import GeneratorRegistry
from .custom_field_matcher import CustomField, CustomFieldMatcher
from .detection_rules import CHECKABLE_KINDS
from .field_model import FormField
from .field_signals import AttributeExtractor, SignalCache
from .heuristic_classifier import HeuristicClassifier, HeuristicPrediction
from .label_finder import LabelFinder
from .option_selector import OptionChoice, SmartOptionSelector
from .rule_based_classifier import GENERIC_TEXT, UNKNOWN, RuleBasedClassifier
from .select_classifier import SelectClassifier

logger = logging.getLogger(__name__)

CUSTOM_TYPE = 'custom'


class ClassificationSource(str, Enum):
    """結果を出した段（診断用）"""
    OVERRIDE = 'override'
    NATIVE = 'native'
    RULE = 'rule'
    SELECT = 'select'
    HEURISTIC = 'heuristic'
    DEFAULT = 'default'


class HeuristicClassificationError(Exception):
    """ヒューリスティック分類中の想定外エラー"""
    pass


@dataclass
class ClassificationResult:
    field_type: str
    confidence: Optional[float] = None
    source: ClassificationSource = ClassificationSource.DEFAULT
    custom_field: Optional[CustomField] = None
    # select の推奨 option
    option: Optional[OptionChoice] = None
    # 'hiragana' / 'katakana' / 'romaji' / ''
    japanese_script: str = ''
    features: List[str] = field(default_factory=list)

    @property
    def is_override(self) -> bool:
        return self.source == ClassificationSource.OVERRIDE


class FieldClassifier:
    """全フィールド種別共通の分類入口"""

    def __init__(self, settings: Optional[ClassifierSettings] = None,
                 cache: Optional[SignalCache] = None,
                 heuristic: Optional[HeuristicClassifier] = None,
                 registry: Optional[GeneratorRegistry] = None,
                 selector: Optional[SmartOptionSelector] = None):
        self.settings = settings or ClassifierSettings.defaults()
        label_finder = LabelFinder()
        self.cache = cache or SignalCache(AttributeExtractor(label_finder))
        self.heuristic = heuristic or HeuristicClassifier(label_finder=label_finder)
        self.registry = registry or GeneratorRegistry()
        self.selector = selector or SmartOptionSelector()
        self.matcher = CustomFieldMatcher(label_finder)
        self.rule_classifier = RuleBasedClassifier()
        self.select_classifier = SelectClassifier()

    def classify(self, field: FormField) -> ClassificationResult:
        override = self._classify_override(field)
        if override is not None:
            return override

        if not field.is_fillable:
            return ClassificationResult(field_type=UNKNOWN, source=ClassificationSource.DEFAULT)

        if field.is_select:
            # ドロップダウンの近接ラベル探索はラベル照合が有効なときだけ
            signals = self.cache.get(field, proximity_labels=self.settings.enable_label_matching)
            return self._classify_select(field, signals)

        signals = self.cache.get(field)

        japanese_script = self.rule_classifier.detect_japanese_script(signals)

        native = self.rule_classifier.native_type(field.kind)
        if native is not None:
            return ClassificationResult(
                field_type=native, confidence=1.0, source=ClassificationSource.NATIVE,
                japanese_script=japanese_script,
            )

        rule = None
        if field.kind in CHECKABLE_KINDS:
            rule = self.rule_classifier.match_rule(signals)
        if rule is not None:
            keyword = signals.matched_keyword(rule.keywords)
            return ClassificationResult(
                field_type=rule.type, confidence=1.0, source=ClassificationSource.RULE,
                japanese_script=japanese_script,
                features=[f"keyword:{keyword}"] if keyword else [],
            )
        default_type = self.rule_classifier.generic_default(field.kind)

        if self.settings.enable_heuristic_detection and field.is_text_like:
            try:
                prediction = self._run_heuristic(field)
            except HeuristicClassificationError as e:
                logger.warning(f"Heuristic classification skipped: {e}")
                prediction = None
            if prediction is not None and prediction.type != GENERIC_TEXT:
                return ClassificationResult(
                    field_type=prediction.type, confidence=prediction.confidence,
                    source=ClassificationSource.HEURISTIC, japanese_script=japanese_script,
                    features=list(prediction.features),
                )

        return ClassificationResult(
            field_type=default_type, source=ClassificationSource.DEFAULT,
            japanese_script=japanese_script,
        )

    def _classify_override(self, field: FormField) -> Optional[ClassificationResult]:
        if not self.settings.custom_fields:
            return None
        rule = self.matcher.match(field, self.settings.custom_fields, self.settings.enable_label_matching)
        if rule is None:
            return None
        option = None
        if field.is_select and rule.kind == 'list':
            option = self.selector.select_from_list(field, rule.values)
        return ClassificationResult(
            field_type=CUSTOM_TYPE, confidence=1.0, source=ClassificationSource.OVERRIDE,
            custom_field=rule, option=option,
        )

    def _classify_select(self, field: FormField, signals) -> ClassificationResult:
        detection = self.select_classifier.detect(field, signals)
        option = self.selector.select(
            field, detection.type, self.settings.min_age, self.settings.max_age
        )
        if detection.is_unknown:
            return ClassificationResult(
                field_type=UNKNOWN, source=ClassificationSource.DEFAULT, option=option,
            )
        return ClassificationResult(
            field_type=detection.type, confidence=detection.confidence,
            source=ClassificationSource.SELECT, option=option,
            features=[f"{k}:{v}" for k, v in detection.breakdown.items() if v],
        )

    def _run_heuristic(self, field: FormField) -> Optional[HeuristicPrediction]:
        threshold = self.settings.confidence_ratio
        try:
            prediction = self.heuristic.predict_enhanced(field, threshold)
        except Exception as e:
            SecurityLogger.safe_log_warning(
                "Heuristic classifier failed for field",
                {'name': field.name, 'id': field.element_id, 'placeholder': field.placeholder},
            )
            raise HeuristicClassificationError(f"{type(e).__name__}: {e}") from e
        if prediction is not None:
            SecurityLogger.safe_log_debug(
                f"Heuristic fallback: {prediction.type} ({prediction.confidence:.2f})",
                {'name': field.name, 'placeholder': field.placeholder},
            )
        return prediction

    def classify_pass(self, fields: Iterable[FormField]) -> List[ClassificationResult]:
        """1回の入力パスを分類し、終了時に必ずシグナルキャッシュを破棄する"""
        try:
            return [self.classify(f) for f in fields]
        finally:
            self.clear_cache()

    def clear_cache(self) -> None:
        self.cache.clear()

    def resolve_generator(self, result: ClassificationResult) -> Optional[Callable[[], str]]:
        """generator 種別の上書き結果に対応する生成関数"""
        rule = result.custom_field
        if rule is None or rule.kind != 'generator':
            return None
        return self.registry.resolve(rule.generator)
