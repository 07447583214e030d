"""
スマート選択肢セレクタ

判定済みの select タイプに応じて具体的な option を1つ選ぶ。
- year: 年齢範囲（min_age〜max_age）から導いた生年の範囲内で一様に選ぶ
- age: 数値が年齢範囲内の option から一様に選ぶ
- その他: タイプ別の推奨値を含む option から一様に選ぶ
- 推奨が無ければ有効な option 全体から一様に選ぶ
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from .field_model import FieldOption, FormField
from .select_rules import PREFERRED_OPTION_VALUES

logger = logging.getLogger(__name__)

DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 60

# 「選択してください」系のプレースホルダー option
_PLACEHOLDER_TEXT_RE = re.compile(
    r"^(select|choose|pick|--|please|seleccion|selecciona|elija|elige|choisi|sélection|veuillez"
    r"|bitte|wählen|auswählen|wybierz|выбер|選択|选择|請選擇|请选择|選んで|선택|chọn|اختر)",
    re.IGNORECASE,
)
_LEADING_INT_RE = re.compile(r"^\s*(\d+)")
_MONTH_NAME_RE = re.compile(r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)", re.IGNORECASE)
_GENDER_RE = re.compile(r"male|female|other|prefer|non-binary|nam|nữ|homme|femme", re.IGNORECASE)


@dataclass(frozen=True)
class OptionChoice:
    """選択結果（値と選択理由）"""
    value: str
    text: str
    reason: str


def _leading_int(text: str) -> Optional[int]:
    match = _LEADING_INT_RE.match(text or '')
    return int(match.group(1)) if match else None


def option_number(option: FieldOption) -> Optional[int]:
    """value → text の順で先頭の整数を読む（parseInt 相当）"""
    number = _leading_int(option.value)
    if number is not None:
        return number
    return _leading_int(option.text)


def is_placeholder_option(option: FieldOption) -> bool:
    value = (option.value or '').strip()
    if option.disabled or not value or value == '0':
        return True
    return bool(_PLACEHOLDER_TEXT_RE.match(option.text.strip()))


def valid_options(options: Iterable[FieldOption]) -> List[FieldOption]:
    return [o for o in options if not is_placeholder_option(o)]


class SmartOptionSelector:
    """タイプ別ポリシーで option を選ぶ"""

    def __init__(self, rng: Optional[random.Random] = None, today: Optional[date] = None):
        self.rng = rng or random.Random()
        self._today = today

    @property
    def current_year(self) -> int:
        return (self._today or date.today()).year

    def _pick(self, candidates: Sequence[FieldOption], reason: str) -> Optional[OptionChoice]:
        if not candidates:
            return None
        option = candidates[self.rng.randrange(len(candidates))]
        return OptionChoice(value=option.value, text=option.text, reason=reason)

    def year_window(self, min_age: int, max_age: int) -> range:
        """年齢範囲から生年の範囲を導く（両端含む）"""
        return range(self.current_year - max_age, self.current_year - min_age + 1)

    def select(self, field: FormField, select_type: str,
               min_age: Optional[int] = None, max_age: Optional[int] = None) -> Optional[OptionChoice]:
        candidates = valid_options(field.options)
        if not candidates:
            logger.debug(f"No eligible option for select type '{select_type}'")
            return None

        min_age = DEFAULT_MIN_AGE if min_age is None else min_age
        max_age = DEFAULT_MAX_AGE if max_age is None else max_age

        if select_type == 'year':
            window = self.year_window(min_age, max_age)
            in_window = [o for o in candidates if option_number(o) in window]
            choice = self._pick(in_window, 'age-appropriate year')
            if choice:
                return choice

        if select_type == 'age':
            in_range = [
                o for o in candidates
                if option_number(o) is not None and min_age <= option_number(o) <= max_age
            ]
            choice = self._pick(in_range, 'age-appropriate value')
            if choice:
                return choice

        preferred = PREFERRED_OPTION_VALUES.get(select_type, ())
        if preferred:
            matching = [o for o in candidates if self._contains_any(o, preferred)]
            choice = self._pick(matching, f"preferred {select_type} value")
            if choice:
                return choice

        return self._pick(candidates, 'random valid option')

    def select_from_list(self, field: FormField, values: Iterable[str]) -> Optional[OptionChoice]:
        """カスタムルールの列挙値を含む option から選ぶ"""
        wanted = [v.strip().lower() for v in values if v and v.strip()]
        if not wanted:
            return None
        matching = [o for o in valid_options(field.options) if self._contains_any(o, wanted)]
        return self._pick(matching, 'custom list value')

    @staticmethod
    def _contains_any(option: FieldOption, needles: Iterable[str]) -> bool:
        text = option.text.lower().strip()
        value = option.value.lower().strip()
        return any(n in text or n in value for n in needles)


def validate_selected_option(option: FieldOption, select_type: str,
                             today: Optional[date] = None) -> bool:
    """選ばれた option がタイプとして妥当か"""
    text = option.text.lower()
    value = option.value.lower()

    if select_type == 'year':
        year = option_number(option)
        return year is not None and 1900 <= year <= (today or date.today()).year
    if select_type == 'month':
        month = _leading_int(value)
        return (month is not None and 1 <= month <= 12) or bool(_MONTH_NAME_RE.match(text))
    if select_type == 'day':
        day = _leading_int(value)
        return day is not None and 1 <= day <= 31
    if select_type == 'gender':
        return bool(_GENDER_RE.search(text + value))
    return True
