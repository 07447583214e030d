"""
属性抽出とシグナルキャッシュ

フィールドハンドルから判定用テキストシグナル（name/id/placeholder/
aria-label/ラベル/class/data-*）を取り出し、多言語正規化と小文字化を
施した FieldSignals を作る。1回の入力パス内では SignalCache により
同一フィールドの抽出結果を再利用し、パス終了時に呼び出し側が clear() する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..locale import translate_keywords
from .field_model import FormField
from .label_finder import LabelFinder
from .text_utils import last_identifier_segment, last_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSignals:
    """正規化済みシグナル（1パス内で不変）"""

    kind: str
    name: str = ''
    element_id: str = ''
    placeholder: str = ''
    aria_label: str = ''
    label: str = ''
    class_list: str = ''
    data_attributes: str = ''
    name_part: str = ''
    id_part: str = ''
    class_part: str = ''
    placeholder_part: str = ''
    aria_label_part: str = ''
    label_part: str = ''
    data_attributes_part: str = ''
    # 正規化前（小文字化のみ）の連結テキスト。日本語文字種の判定に使う
    raw_text: str = ''

    def values(self) -> Tuple[str, ...]:
        """照合対象のシグナル（完全形 → 末尾セグメントの順）"""
        return (
            self.name,
            self.element_id,
            self.class_list,
            self.placeholder,
            self.aria_label,
            self.label,
            self.data_attributes,
            self.name_part,
            self.id_part,
            self.class_part,
            self.placeholder_part,
            self.aria_label_part,
            self.label_part,
            self.data_attributes_part,
        )

    def matches_any(self, keywords: Iterable[str]) -> bool:
        """いずれかのキーワードがいずれかのシグナルに部分一致するか"""
        values = [v for v in self.values() if v]
        if not values:
            return False
        return any(keyword in value for keyword in keywords for value in values)

    def matched_keyword(self, keywords: Sequence[str]) -> Optional[str]:
        """最初に一致したキーワード（診断ログ用）"""
        values = [v for v in self.values() if v]
        for keyword in keywords:
            if any(keyword in value for value in values):
                return keyword
        return None

    @property
    def is_empty(self) -> bool:
        return not any(self.values())


class AttributeExtractor:
    """FormField → FieldSignals の変換"""

    def __init__(self, label_finder: Optional[LabelFinder] = None,
                 languages: Optional[Iterable[str]] = None):
        self.label_finder = label_finder or LabelFinder()
        self.languages = tuple(languages) if languages is not None else None

    def _normalize(self, text: str) -> str:
        if not text:
            return ''
        return translate_keywords(text, self.languages).lower().strip()

    def extract(self, field: FormField, proximity_labels: bool = True) -> FieldSignals:
        """proximity_labels=False のときラベルは正式な関連付けのみを使う"""
        placeholder = self._normalize(field.placeholder)
        aria_label = self._normalize(field.aria_label)
        name = self._normalize(field.name)
        element_id = self._normalize(field.element_id)

        raw_label = field.labels[0].strip() if field.labels and field.labels[0].strip() else ''
        if not raw_label and proximity_labels:
            raw_label = self.label_finder.find_closest_label(field)
        label = self._normalize(raw_label)

        class_list = ' '.join(
            n for n in (self._normalize(c) for c in field.class_list) if n
        )
        data_attributes = ' '.join(
            f"{attr.lower()}: {self._normalize(value)}"
            for attr, value in field.data_attributes.items()
        )

        raw_text = ' '.join(
            t for t in (
                field.name, field.element_id, ' '.join(field.class_list), field.placeholder,
                field.aria_label, raw_label, ' '.join(field.data_attributes.values()),
            ) if t
        ).lower()

        return FieldSignals(
            kind=field.kind,
            name=name,
            element_id=element_id,
            placeholder=placeholder,
            aria_label=aria_label,
            label=label,
            class_list=class_list,
            data_attributes=data_attributes,
            name_part=last_identifier_segment(name),
            id_part=last_identifier_segment(element_id),
            class_part=last_word(class_list),
            placeholder_part=last_word(placeholder),
            aria_label_part=last_word(aria_label),
            label_part=last_word(label),
            data_attributes_part=last_word(data_attributes),
            raw_text=raw_text,
        )


class SignalCache:
    """フィールドキー単位の FieldSignals メモ化

    自動失効は行わない。入力パスの区切りで呼び出し側が clear() すること。
    エントリはフィールド本体への参照を持つ。明示キーの無いフィールドは
    同一オブジェクトの場合だけ再利用する。
    """

    def __init__(self, extractor: Optional[AttributeExtractor] = None):
        self.extractor = extractor or AttributeExtractor()
        self._entries: Dict[Tuple[str, bool], Tuple[FormField, FieldSignals]] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def _owns(entry: Tuple[FormField, FieldSignals], field: FormField) -> bool:
        return bool(field.key) or entry[0] is field

    def get(self, field: FormField, proximity_labels: bool = True) -> FieldSignals:
        key = (field.cache_key, proximity_labels)
        entry = self._entries.get(key)
        if entry is not None and self._owns(entry, field):
            self.hits += 1
            return entry[1]

        self.misses += 1
        signals = self.extractor.extract(field, proximity_labels)
        self._entries[key] = (field, signals)
        return signals

    def invalidate(self, field: FormField) -> None:
        for proximity_labels in (True, False):
            self._entries.pop((field.cache_key, proximity_labels), None)

    def clear(self) -> None:
        if self._entries:
            logger.debug(
                f"Signal cache cleared: {len(self._entries)} entries "
                f"(hits={self.hits}, misses={self.misses})"
            )
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, field: object) -> bool:
        if not isinstance(field, FormField):
            return False
        return any(
            entry is not None and self._owns(entry, field)
            for entry in (self._entries.get((field.cache_key, flag)) for flag in (True, False))
        )
