"""
フォームフィールド意図分類システム

シグナル抽出 → カスタムルール → ルールベース/select 分類 → ヒューリスティック
の順でフィールドの正規化タイプを決める。

注意: 設定ローダー経由で config パッケージに触れるモジュールは遅延インポートにし、
表や分類器単体のテストで不要な初期化が走らないようにする。
"""

# 遅延インポートにより、必要時に __getattr__ で解決
__all__ = [
    'FormField',
    'FieldSignals',
    'SignalCache',
    'RuleBasedClassifier',
    'SelectClassifier',
    'SmartOptionSelector',
    'HeuristicClassifier',
    'CustomFieldMatcher',
    'FieldClassifier',
    'ClassificationResult',
    'ClassificationSource',
]


def __getattr__(name):
    if name == 'FormField':
        from .field_model import FormField
        return FormField
    if name in ('FieldSignals', 'SignalCache'):
        from . import field_signals
        return getattr(field_signals, name)
    if name == 'RuleBasedClassifier':
        from .rule_based_classifier import RuleBasedClassifier
        return RuleBasedClassifier
    if name == 'SelectClassifier':
        from .select_classifier import SelectClassifier
        return SelectClassifier
    if name == 'SmartOptionSelector':
        from .option_selector import SmartOptionSelector
        return SmartOptionSelector
    if name == 'HeuristicClassifier':
        from .heuristic_classifier import HeuristicClassifier
        return HeuristicClassifier
    if name == 'CustomFieldMatcher':
        from .custom_field_matcher import CustomFieldMatcher
        return CustomFieldMatcher
    if name in ('FieldClassifier', 'ClassificationResult', 'ClassificationSource'):
        from . import classification_orchestrator
        return getattr(classification_orchestrator, name)
    raise AttributeError(name)
