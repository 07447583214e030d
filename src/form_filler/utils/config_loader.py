"""
設定ローダー
classifier_config.json を読み込み、型安全な設定オブジェクトを提供
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..analyzer.custom_field_matcher import CustomField
from ..validation.config_validator import DEFAULT_SETTINGS, ConfigValidator
from .generator_registry import GeneratorRegistry

logger = logging.getLogger(__name__)


@dataclass
class ClassifierSettings:
    """分類器設定"""
    locale: str = 'en'
    enable_label_matching: bool = True
    enable_heuristic_detection: bool = True
    # パーセント表記（30〜95）
    confidence_threshold: float = 60
    min_age: int = 18
    max_age: int = 65
    custom_fields: List[CustomField] = field(default_factory=list)

    @property
    def confidence_ratio(self) -> float:
        """閾値を [0,1] に換算"""
        return self.confidence_threshold / 100.0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]],
                  registry: Optional[GeneratorRegistry] = None) -> 'ClassifierSettings':
        """フラットな辞書から生成（不正値は既定値へ丸める）"""
        raw = data or {}
        result = ConfigValidator.validate_settings(raw, registry)
        for warning in result.warnings:
            logger.warning(f"Classifier settings: {warning}")
        sanitized = ConfigValidator.sanitize_settings(raw, registry)
        return cls(
            locale=sanitized['locale'],
            enable_label_matching=sanitized['enable_label_matching'],
            enable_heuristic_detection=sanitized['enable_heuristic_detection'],
            confidence_threshold=sanitized['confidence_threshold'],
            min_age=sanitized['min_age'],
            max_age=sanitized['max_age'],
            custom_fields=[CustomField.from_dict(entry) for entry in sanitized['custom_fields']],
        )

    @classmethod
    def from_config(cls, config: Dict[str, Any],
                    registry: Optional[GeneratorRegistry] = None) -> 'ClassifierSettings':
        """classifier_config.json 形式（settings + custom_fields）から生成"""
        merged = dict(config.get('settings') or {})
        merged['custom_fields'] = config.get('custom_fields') or []
        return cls.from_dict(merged, registry)

    @classmethod
    def defaults(cls) -> 'ClassifierSettings':
        return cls.from_dict(DEFAULT_SETTINGS)


# グローバル設定インスタンス（シングルトンパターン）
_classifier_settings: Optional[ClassifierSettings] = None


def get_classifier_settings() -> ClassifierSettings:
    """分類器設定のシングルトンインスタンスを取得"""
    global _classifier_settings
    if _classifier_settings is None:
        from config.manager import config_manager

        _classifier_settings = ClassifierSettings.from_config(config_manager.get_classifier_config())
    return _classifier_settings


def reload_settings() -> None:
    """設定を再読み込み"""
    global _classifier_settings
    from config.manager import config_manager

    config_manager.reload()
    _classifier_settings = None
