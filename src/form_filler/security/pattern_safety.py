"""
ユーザー定義パターンの安全性チェック

カスタムルールの正規表現は外部入力なので、使用前に
長さ上限・破滅的バックトラッキング形状・コンパイル可否を検証する。
"""

import logging
import re
from typing import List, Optional, Pattern

logger = logging.getLogger(__name__)

MAX_PATTERN_LENGTH = 1000

# 量指定子付き要素を含むグループにさらに量指定子: (a+)+ (a*)* (a+)* (a+){2,}
_NESTED_QUANTIFIER_RE = re.compile(r"\((?:[^()\\]|\\.)*[+*}]\)[+*{]")
# 量指定子付きの選択グループ: (a|a)+ / (a|ab)*
_QUANTIFIED_ALTERNATION_RE = re.compile(r"\(((?:[^()\\]|\\.)*\|(?:[^()\\]|\\.)*)\)[+*{]")
_UNESCAPED_PIPE_RE = re.compile(r"(?<!\\)\|")
_UNSAFE_CHARS_RE = re.compile(r"[<>'\"]")


def _has_overlapping_alternatives(body: str) -> bool:
    if body.startswith('?:'):
        body = body[2:]
    alternatives: List[str] = _UNESCAPED_PIPE_RE.split(body)
    for i, left in enumerate(alternatives):
        for right in alternatives[i + 1:]:
            if left.startswith(right) or right.startswith(left):
                return True
    return False


def is_regex_safe(pattern: str, max_length: int = MAX_PATTERN_LENGTH) -> bool:
    """ReDoS を起こしうるパターンや不正なパターンを拒否する"""
    if not isinstance(pattern, str) or not pattern:
        return False
    if len(pattern) > max_length:
        logger.warning(f"Rejected override pattern: too long ({len(pattern)} > {max_length})")
        return False
    if _NESTED_QUANTIFIER_RE.search(pattern):
        logger.warning("Rejected override pattern: nested quantifier")
        return False
    for match in _QUANTIFIED_ALTERNATION_RE.finditer(pattern):
        if _has_overlapping_alternatives(match.group(1)):
            logger.warning("Rejected override pattern: overlapping alternation under quantifier")
            return False
    try:
        re.compile(pattern)
    except re.error as e:
        logger.warning(f"Rejected override pattern: {e}")
        return False
    return True


def sanitize_custom_field_pattern(pattern: str) -> str:
    """HTML/引用符として解釈されうる文字を除去"""
    if not isinstance(pattern, str):
        return ''
    return _UNSAFE_CHARS_RE.sub('', pattern).strip()


def compile_override_regex(pattern: str, flags: int = 0) -> Optional[Pattern[str]]:
    """安全と判定されたパターンのみコンパイルして返す"""
    if not is_regex_safe(pattern):
        return None
    return re.compile(pattern, flags)
