"""
BeautifulSoup の Tag から FormField を組み立てるアダプタ

静的 HTML（保存済みページ・テストフィクスチャ）の1要素を分類器の入力に変換する。
レイアウト情報は無いため近傍ラベルは祖先の深さ順で候補化する。
フィールドの列挙は呼び出し側の責務。
"""

import logging
from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from ..analyzer.field_model import FieldOption, FormField, NearbyText, normalize_input_type
from ..analyzer.label_finder import LabelFinder
from ..analyzer.text_utils import normalize_whitespace

logger = logging.getLogger(__name__)

MAX_ANCESTOR_DEPTH = 5
MAX_GROUP_DEPTH = 3
# 前後フィールドとして扱う入力種別
_ADJACENT_INPUT_TYPES = ('', 'text', 'search', 'email', 'tel')
_CANDIDATE_TAGS = sorted(LabelFinder.LABEL_LIKE_TAGS | {'label'})


def _text(element: Optional[Tag]) -> str:
    if element is None:
        return ''
    return normalize_whitespace(element.get_text(' ', strip=True))


def _attr(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ''
    if isinstance(value, list):
        return ' '.join(value)
    return str(value)


def _root(tag: Tag) -> Tag:
    root = tag
    for parent in tag.parents:
        root = parent
    return root


def _is_visible(element: Tag) -> bool:
    if element.has_attr('hidden') or _attr(element, 'aria-hidden').lower() == 'true':
        return False
    style = _attr(element, 'style').replace(' ', '').lower()
    return 'display:none' not in style and 'visibility:hidden' not in style


def _field_kind(tag: Tag) -> str:
    name = (tag.name or '').lower()
    if name == 'input':
        return normalize_input_type(_attr(tag, 'type'))
    return name


def _labels(tag: Tag, root: Tag) -> List[str]:
    texts = []
    element_id = _attr(tag, 'id')
    if element_id:
        for label in root.find_all('label', attrs={'for': element_id}):
            texts.append(_text(label))
    wrapping = tag.find_parent('label')
    if wrapping is not None:
        texts.append(_text(wrapping))
    return [t for t in texts if t]


def _referenced_text(root: Tag, ids: str) -> str:
    texts = []
    for ref in ids.split():
        element = root.find(id=ref)
        if element is not None:
            texts.append(_text(element))
    return ' '.join(t for t in texts if t)


def _nearby_texts(tag: Tag) -> List[NearbyText]:
    ancestors = [p for p in tag.parents if not isinstance(p, BeautifulSoup)][:MAX_ANCESTOR_DEPTH]
    ancestor_ids = {id(a) for a in ancestors}
    seen = set()
    candidates = []
    for depth, ancestor in enumerate(ancestors):
        for element in ancestor.find_all(_CANDIDATE_TAGS):
            if element is tag or id(element) in ancestor_ids or id(element) in seen:
                continue
            seen.add(id(element))
            text = _text(element)
            if not text:
                continue
            candidates.append(NearbyText(
                text=text,
                tag=element.name.lower(),
                visible=_is_visible(element),
                child_count=len(element.find_all(recursive=False)),
                depth=depth,
            ))
    return candidates


def _group_texts(tag: Tag) -> List[str]:
    texts = []
    for depth, ancestor in enumerate(tag.parents):
        if depth >= MAX_GROUP_DEPTH or isinstance(ancestor, BeautifulSoup):
            break
        if ancestor.name == 'fieldset':
            legend = ancestor.find('legend')
            if legend is not None:
                texts.append(_text(legend))
        elif _attr(ancestor, 'role') == 'group' and _attr(ancestor, 'aria-label'):
            texts.append(_attr(ancestor, 'aria-label'))
    return [t for t in texts if t]


def _adjacent_fields(tag: Tag, root: Tag) -> Dict[str, str]:
    scope = tag.find_parent('form')
    if scope is None:
        scope = root
    inputs = [
        el for el in scope.find_all('input')
        if _attr(el, 'type').lower() in _ADJACENT_INPUT_TYPES
    ]
    result = {'previous_field': '', 'next_field': ''}
    index = next((i for i, el in enumerate(inputs) if el is tag), None)
    if index is None:
        return result
    if index > 0:
        prev = inputs[index - 1]
        result['previous_field'] = _attr(prev, 'name') or _attr(prev, 'id')
    if index + 1 < len(inputs):
        nxt = inputs[index + 1]
        result['next_field'] = _attr(nxt, 'name') or _attr(nxt, 'id')
    return result


def _direction(tag: Tag) -> str:
    if _attr(tag, 'dir'):
        return _attr(tag, 'dir').lower()
    parent = tag.find_parent(attrs={'dir': True})
    return _attr(parent, 'dir').lower() if parent is not None else 'ltr'


def _options(tag: Tag) -> List[FieldOption]:
    options = []
    for option in tag.find_all('option'):
        text = _text(option)
        value = option.get('value')
        options.append(FieldOption(
            value=text if value is None else str(value),
            text=text,
            disabled=option.has_attr('disabled'),
        ))
    return options


def form_field_from_tag(tag: Tag, key: str = '') -> FormField:
    """input / textarea / select 要素1つを FormField に変換"""
    root = _root(tag)
    kind = _field_kind(tag)
    try:
        max_length = int(_attr(tag, 'maxlength') or 0)
    except ValueError:
        max_length = 0

    field = FormField(
        kind=kind,
        name=_attr(tag, 'name'),
        element_id=_attr(tag, 'id'),
        placeholder=_attr(tag, 'placeholder'),
        aria_label=_attr(tag, 'aria-label'),
        title=_attr(tag, 'title'),
        class_list=list(tag.get('class') or []),
        attributes={k.lower(): _attr(tag, k) for k in tag.attrs},
        labels=_labels(tag, root),
        aria_labelledby_text=_referenced_text(root, _attr(tag, 'aria-labelledby')),
        aria_describedby_text=_referenced_text(root, _attr(tag, 'aria-describedby')),
        pattern=_attr(tag, 'pattern'),
        max_length=max(max_length, 0),
        required=tag.has_attr('required') or _attr(tag, 'aria-required').lower() == 'true',
        direction=_direction(tag),
        options=_options(tag) if kind == 'select' else [],
        nearby_texts=_nearby_texts(tag),
        group_texts=_group_texts(tag),
        key=key,
        **_adjacent_fields(tag, root),
    )
    logger.debug(f"Built field from <{tag.name}> name={field.name!r} id={field.element_id!r}")
    return field
