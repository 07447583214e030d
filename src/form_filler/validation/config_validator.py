"""
設定値妥当性検証

classifier_config.json の settings / custom_fields を検証し、
安全な範囲内に収まることを保証
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..security.pattern_safety import is_regex_safe, sanitize_custom_field_pattern
from ..utils.generator_registry import GENERATOR_PATH_RE, GeneratorRegistry

logger = logging.getLogger(__name__)

SUPPORTED_LOCALES = ('ja', 'en', 'zh', 'vi', 'ar', 'ko', 'es', 'fr', 'de', 'pl', 'ru')
CUSTOM_FIELD_KINDS = ('list', 'regex', 'generator')

DEFAULT_SETTINGS: Dict[str, Any] = {
    'locale': 'en',
    'enable_label_matching': True,
    'enable_heuristic_detection': True,
    'confidence_threshold': 60,
    'min_age': 18,
    'max_age': 65,
    'custom_fields': [],
}


@dataclass
class ValidationResult:
    """検証結果（errors が空なら valid）"""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


class ConfigValidator:
    """設定値妥当性検証クラス"""

    # 設定値の制約定義
    CONSTRAINTS = {
        'confidence_threshold': {'min': 30, 'max': 95, 'warn_below': 50, 'type': (int, float)},
        'min_age': {'min': 0, 'max': 120, 'type': int},
        'max_age': {'min': 0, 'max': 120, 'type': int},
        'custom_fields': {'warn_above': 100},
        'list_values': {'warn_above': 1000},
    }

    @staticmethod
    def _is_number(value: Any) -> bool:
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def validate_custom_field(entry: Any, index: int,
                              registry: Optional[GeneratorRegistry] = None) -> ValidationResult:
        """カスタムルール1件の検証"""
        errors: List[str] = []
        warnings: List[str] = []
        prefix = f"custom_fields[{index}]"

        if not isinstance(entry, dict):
            return ValidationResult(False, [f"{prefix} must be an object"])

        pattern = entry.get('field')
        if not isinstance(pattern, str) or not pattern.strip():
            errors.append(f"{prefix}.field must be a non-empty string")

        kind = entry.get('kind')
        if kind not in CUSTOM_FIELD_KINDS:
            errors.append(f"{prefix}.kind must be one of {', '.join(CUSTOM_FIELD_KINDS)}, got {kind!r}")
        elif kind == 'regex':
            value = entry.get('value')
            if not isinstance(value, str) or not is_regex_safe(value):
                errors.append(f"{prefix}.value is not a safe regular expression")
        elif kind == 'list':
            value = entry.get('value')
            if isinstance(value, str):
                value = [v for v in value.split(',') if v.strip()]
            if not isinstance(value, list) or not value:
                errors.append(f"{prefix}.value must be a non-empty list")
            elif len(value) > ConfigValidator.CONSTRAINTS['list_values']['warn_above']:
                warnings.append(f"{prefix}.value has {len(value)} entries")
        elif kind == 'generator':
            path = entry.get('generator')
            if not isinstance(path, str) or not GENERATOR_PATH_RE.match(path):
                errors.append(f"{prefix}.generator must be a dotted path like 'person.first_name'")
            elif registry is not None and not registry.is_registered(path):
                errors.append(f"{prefix}.generator '{path}' is not registered")

        return ValidationResult(not errors, errors, warnings)

    @staticmethod
    def validate_settings(settings: Dict[str, Any],
                          registry: Optional[GeneratorRegistry] = None) -> ValidationResult:
        """
        分類器設定全体の妥当性検証

        Args:
            settings: settings セクションに custom_fields を含めた辞書
            registry: 指定時は generator ルールの登録有無も検証

        Returns:
            ValidationResult
        """
        errors: List[str] = []
        warnings: List[str] = []

        if not isinstance(settings, dict):
            return ValidationResult(False, ['settings must be an object'])

        locale = settings.get('locale', DEFAULT_SETTINGS['locale'])
        if locale not in SUPPORTED_LOCALES:
            errors.append(f"locale must be one of {', '.join(SUPPORTED_LOCALES)}, got {locale!r}")

        for flag in ('enable_label_matching', 'enable_heuristic_detection'):
            if flag in settings and not isinstance(settings[flag], bool):
                errors.append(f"{flag} must be a boolean")

        constraints = ConfigValidator.CONSTRAINTS['confidence_threshold']
        threshold = settings.get('confidence_threshold', DEFAULT_SETTINGS['confidence_threshold'])
        if not ConfigValidator._is_number(threshold):
            errors.append("confidence_threshold must be a number")
        elif not constraints['min'] <= threshold <= constraints['max']:
            errors.append(
                f"confidence_threshold must be between {constraints['min']} and {constraints['max']}, got {threshold}"
            )
        elif threshold < constraints['warn_below']:
            warnings.append(f"confidence_threshold {threshold} is low; heuristic guesses may be noisy")

        ages = {}
        for key in ('min_age', 'max_age'):
            value = settings.get(key, DEFAULT_SETTINGS[key])
            limits = ConfigValidator.CONSTRAINTS[key]
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append(f"{key} must be an integer")
            elif not limits['min'] <= value <= limits['max']:
                errors.append(f"{key} must be between {limits['min']} and {limits['max']}, got {value}")
            else:
                ages[key] = value
        if len(ages) == 2 and ages['min_age'] > ages['max_age']:
            errors.append(f"min_age ({ages['min_age']}) must be <= max_age ({ages['max_age']})")

        custom_fields = settings.get('custom_fields', [])
        if not isinstance(custom_fields, list):
            errors.append("custom_fields must be a list")
        else:
            if len(custom_fields) > ConfigValidator.CONSTRAINTS['custom_fields']['warn_above']:
                warnings.append(f"custom_fields has {len(custom_fields)} rules; matching may be slow")
            for index, entry in enumerate(custom_fields):
                result = ConfigValidator.validate_custom_field(entry, index, registry)
                errors.extend(result.errors)
                warnings.extend(result.warnings)

        is_valid = len(errors) == 0
        if is_valid:
            logger.debug("Classifier settings validation passed")
        else:
            logger.warning(f"Classifier settings validation failed with {len(errors)} errors: {errors}")
        return ValidationResult(is_valid, errors, warnings)

    @staticmethod
    def sanitize_settings(settings: Dict[str, Any],
                          registry: Optional[GeneratorRegistry] = None) -> Dict[str, Any]:
        """不正値を既定値・範囲内へ丸めた新しい辞書を返す"""
        source = settings if isinstance(settings, dict) else {}
        sanitized: Dict[str, Any] = dict(DEFAULT_SETTINGS)

        locale = source.get('locale')
        if locale in SUPPORTED_LOCALES:
            sanitized['locale'] = locale

        for flag in ('enable_label_matching', 'enable_heuristic_detection'):
            if isinstance(source.get(flag), bool):
                sanitized[flag] = source[flag]

        threshold = source.get('confidence_threshold')
        if ConfigValidator._is_number(threshold):
            limits = ConfigValidator.CONSTRAINTS['confidence_threshold']
            sanitized['confidence_threshold'] = min(max(threshold, limits['min']), limits['max'])

        min_age = source.get('min_age')
        max_age = source.get('max_age')
        if (isinstance(min_age, int) and isinstance(max_age, int)
                and not isinstance(min_age, bool) and not isinstance(max_age, bool)
                and 0 <= min_age <= max_age <= 120):
            sanitized['min_age'] = min_age
            sanitized['max_age'] = max_age

        custom_fields = []
        raw_fields = source.get('custom_fields')
        for index, entry in enumerate(raw_fields if isinstance(raw_fields, list) else []):
            if not isinstance(entry, dict):
                continue
            cleaned = dict(entry)
            cleaned['field'] = sanitize_custom_field_pattern(entry.get('field', ''))
            result = ConfigValidator.validate_custom_field(cleaned, index, registry)
            if result.valid:
                custom_fields.append(cleaned)
            else:
                logger.warning(f"Dropping invalid custom field rule: {result.errors}")
        sanitized['custom_fields'] = custom_fields

        return sanitized
