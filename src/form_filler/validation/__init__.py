"""
設定値検証モジュール

分類器設定とカスタムルールの妥当性検証機能を提供
"""

from .config_validator import ConfigValidator, ValidationResult

__all__ = ['ConfigValidator', 'ValidationResult']
