"""
フォームフィールドのデータモデル

DOM 走査側（BeautifulSoup / Playwright アダプタ、テストのフェイク）から
受け取るフィールドハンドルを表す。分類器はこのモデルだけを参照し、
ブラウザやパーサーには依存しない。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# ドロップダウン以外で値入力の対象にならない種別
NON_FILLABLE_KINDS = frozenset({
    'hidden', 'submit', 'button', 'reset', 'image', 'file', 'checkbox', 'radio', 'range',
})

TEXT_LIKE_KINDS = frozenset({'text', 'search', 'textarea', ''})

# ブラウザが認識する input の type 値。これ以外はブラウザ同様 'text' とみなす
HTML_INPUT_TYPES = frozenset({
    'text', 'search', 'email', 'tel', 'url', 'password', 'number', 'range',
    'date', 'month', 'week', 'time', 'datetime-local', 'color',
    'checkbox', 'radio', 'file', 'hidden', 'submit', 'reset', 'button', 'image',
})


def normalize_input_type(raw_type: Optional[str]) -> str:
    """input 要素の type 属性値を HTMLInputElement.type と同じ値にそろえる"""
    kind = (raw_type or '').strip().lower()
    return kind if kind in HTML_INPUT_TYPES else 'text'


@dataclass(frozen=True)
class BoundingBox:
    """画面上の矩形（Playwright の bounding_box と同じ座標系）"""
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['BoundingBox']:
        if not data:
            return None
        try:
            return cls(
                x=float(data.get('x', 0)),
                y=float(data.get('y', 0)),
                width=float(data.get('width', 0)),
                height=float(data.get('height', 0)),
            )
        except (TypeError, ValueError):
            return None


@dataclass(frozen=True)
class FieldOption:
    """select 要素の option"""
    value: str
    text: str
    disabled: bool = False


@dataclass(frozen=True)
class NearbyText:
    """近傍ラベル探索の候補要素"""
    text: str
    tag: str = 'span'
    rect: Optional[BoundingBox] = None
    visible: bool = True
    child_count: int = 0
    # フィールドから何階層上の祖先配下で見つかったか（0 = 親要素）
    depth: int = 0


@dataclass
class FormField:
    """分類対象のフィールドハンドル"""

    kind: str = 'text'
    name: str = ''
    element_id: str = ''
    placeholder: str = ''
    aria_label: str = ''
    title: str = ''
    class_list: List[str] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)
    labels: List[str] = field(default_factory=list)
    aria_labelledby_text: str = ''
    aria_describedby_text: str = ''
    pattern: str = ''
    max_length: int = 0
    required: bool = False
    direction: str = 'ltr'
    options: List[FieldOption] = field(default_factory=list)
    rect: Optional[BoundingBox] = None
    nearby_texts: List[NearbyText] = field(default_factory=list)
    group_texts: List[str] = field(default_factory=list)
    previous_field: str = ''
    next_field: str = ''
    key: str = ''

    def __post_init__(self) -> None:
        self.kind = (self.kind or 'text').strip().lower()

    @property
    def cache_key(self) -> str:
        """シグナルキャッシュのキー（明示キーが無ければオブジェクト同一性）

        id() は破棄後に再利用されるため、SignalCache はキーと併せて
        フィールド本体も保持し、同一性を確かめてから再利用する。
        """
        return self.key or f"obj:{id(self)}"

    @property
    def is_select(self) -> bool:
        return self.kind == 'select'

    @property
    def is_text_like(self) -> bool:
        return self.kind in TEXT_LIKE_KINDS

    @property
    def is_numeric(self) -> bool:
        return self.kind == 'number'

    @property
    def is_fillable(self) -> bool:
        return self.kind not in NON_FILLABLE_KINDS

    @property
    def data_attributes(self) -> Dict[str, str]:
        return {k: v for k, v in self.attributes.items() if k.lower().startswith('data-')}

    def get_attribute(self, name: str) -> Optional[str]:
        """属性値の取得（name/id/class など専用フィールドも解決する）"""
        lowered = name.lower()
        if lowered in self.attributes:
            return self.attributes[lowered]
        builtin = {
            'name': self.name,
            'id': self.element_id,
            'placeholder': self.placeholder,
            'aria-label': self.aria_label,
            'title': self.title,
            'class': ' '.join(self.class_list),
            'type': self.kind,
        }.get(lowered)
        return builtin or None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FormField':
        """プレーンな辞書（アダプタの in-page スクリプト結果など）から生成"""
        options = [
            FieldOption(
                value=str(o.get('value', '') or ''),
                text=str(o.get('text', '') or ''),
                disabled=bool(o.get('disabled', False)),
            )
            for o in data.get('options') or []
        ]
        nearby = [
            NearbyText(
                text=str(n.get('text', '') or ''),
                tag=str(n.get('tag', 'span') or 'span').lower(),
                rect=BoundingBox.from_dict(n.get('rect')),
                visible=bool(n.get('visible', True)),
                child_count=int(n.get('child_count', 0) or 0),
                depth=int(n.get('depth', 0) or 0),
            )
            for n in data.get('nearby_texts') or []
        ]
        class_list = data.get('class_list') or []
        if isinstance(class_list, str):
            class_list = class_list.split()
        try:
            max_length = int(data.get('max_length') or 0)
        except (TypeError, ValueError):
            max_length = 0
        return cls(
            kind=str(data.get('kind', 'text') or 'text'),
            name=str(data.get('name', '') or ''),
            element_id=str(data.get('element_id', '') or ''),
            placeholder=str(data.get('placeholder', '') or ''),
            aria_label=str(data.get('aria_label', '') or ''),
            title=str(data.get('title', '') or ''),
            class_list=[str(c) for c in class_list if c],
            attributes={str(k).lower(): str(v) for k, v in (data.get('attributes') or {}).items()},
            labels=[str(t) for t in data.get('labels') or [] if t],
            aria_labelledby_text=str(data.get('aria_labelledby_text', '') or ''),
            aria_describedby_text=str(data.get('aria_describedby_text', '') or ''),
            pattern=str(data.get('pattern', '') or ''),
            max_length=max(max_length, 0),
            required=bool(data.get('required', False)),
            direction=str(data.get('direction', 'ltr') or 'ltr').lower(),
            options=options,
            rect=BoundingBox.from_dict(data.get('rect')),
            nearby_texts=nearby,
            group_texts=[str(t) for t in data.get('group_texts') or [] if t],
            previous_field=str(data.get('previous_field', '') or ''),
            next_field=str(data.get('next_field', '') or ''),
            key=str(data.get('key', '') or ''),
        )
