"""
カスタムルール（ユーザー定義の上書き）照合

パターン形式:
- 'email'            name/id への部分一致（大文字小文字無視）
- '*mail*' 'user*'   ワイルドカード（* は任意文字列、全体一致）
- '.form-email'      class トークンとの一致（ワイルドカード可）
- '[name="email"]'   属性値との一致（= はワイルドカード可、*= ^= $= も可）
ラベル照合が有効な場合、name/id に加えてラベル系テキストも照合対象にする。
記述順に評価し、最初に一致したルールを返す。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from .field_model import FormField
from .label_finder import LabelFinder

logger = logging.getLogger(__name__)

_ATTRIBUTE_PATTERN_RE = re.compile(
    r"""^\[\s*([\w:.-]+)\s*(?:([*^$]?=)\s*(?:"([^"]*)"|'([^']*)'|([^\]]*?)))?\s*\]$"""
)


@dataclass
class CustomField:
    """ユーザー定義の上書きルール"""
    field: str
    kind: str = 'list'
    # list: 候補値（リストまたはカンマ区切り） / regex: 正規表現
    value: Union[str, List[str], None] = None
    # generator: 'person.first_name' のようなドット区切りパス
    generator: str = ''

    @property
    def values(self) -> List[str]:
        if isinstance(self.value, str):
            return [v.strip() for v in self.value.split(',') if v.strip()]
        if isinstance(self.value, list):
            return [str(v).strip() for v in self.value if str(v).strip()]
        return []

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CustomField':
        return cls(
            field=str(data.get('field') or ''),
            kind=str(data.get('kind') or 'list'),
            value=data.get('value'),
            generator=str(data.get('generator') or ''),
        )


def matches_wildcard_pattern(text: str, pattern: str) -> bool:
    """'*' を任意文字列として全体一致（大文字小文字無視）"""
    if not text or not pattern:
        return False
    if '*' not in pattern:
        return text.lower() == pattern.lower()
    regex = '.*'.join(re.escape(part) for part in pattern.lower().split('*'))
    return re.fullmatch(regex, text.lower(), re.DOTALL) is not None


def _match_attribute_value(actual: str, operator: str, expected: str) -> bool:
    actual_l = actual.lower()
    expected_l = expected.lower()
    if operator == '*=':
        return bool(expected_l) and expected_l in actual_l
    if operator == '^=':
        return bool(expected_l) and actual_l.startswith(expected_l)
    if operator == '$=':
        return bool(expected_l) and actual_l.endswith(expected_l)
    return matches_wildcard_pattern(actual, expected)


class CustomFieldMatcher:
    """上書きルールの照合"""

    def __init__(self, label_finder: Optional[LabelFinder] = None):
        self.label_finder = label_finder or LabelFinder()

    def _candidate_texts(self, field: FormField, enable_label_matching: bool) -> List[str]:
        texts = [field.name, field.element_id]
        if enable_label_matching:
            texts.extend(self.label_finder.get_all_possible_labels(field))
        return [t for t in texts if t]

    def _matches_class(self, field: FormField, pattern: str) -> bool:
        class_pattern = pattern[1:]
        if not class_pattern:
            return False
        return any(matches_wildcard_pattern(c, class_pattern) for c in field.class_list)

    def _matches_attribute(self, field: FormField, pattern: str) -> bool:
        parsed = _ATTRIBUTE_PATTERN_RE.match(pattern)
        if not parsed:
            return False
        attr, operator = parsed.group(1), parsed.group(2)
        actual = field.get_attribute(attr)
        if operator is None:
            # [attr] は属性の存在のみ
            return actual is not None
        if actual is None:
            return False
        expected = next((g for g in parsed.group(3, 4, 5) if g is not None), '')
        return _match_attribute_value(actual, operator, expected.strip())

    def _matches_text(self, texts: Iterable[str], pattern: str) -> bool:
        if '*' in pattern:
            return any(matches_wildcard_pattern(t, pattern) for t in texts)
        needle = pattern.lower()
        return any(needle in t.lower() for t in texts)

    def matches(self, field: FormField, rule: CustomField, enable_label_matching: bool = True) -> bool:
        pattern = (rule.field or '').strip()
        if not pattern:
            return False
        if pattern.startswith('.'):
            return self._matches_class(field, pattern)
        if pattern.startswith('['):
            return self._matches_attribute(field, pattern)
        return self._matches_text(self._candidate_texts(field, enable_label_matching), pattern)

    def match(self, field: FormField, rules: Sequence[CustomField],
              enable_label_matching: bool = True) -> Optional[CustomField]:
        """記述順に評価し、最初に一致したルールを返す"""
        for rule in rules:
            if self.matches(field, rule, enable_label_matching):
                logger.debug(f"Custom field rule matched: '{rule.field}' (kind={rule.kind})")
                return rule
        return None
