"""
ラベル探索

フィールドに対応するラベル文字列を以下の順で求める。
1. 正式な関連付け（label[for] / ラップする label）
2. aria-labelledby が指す要素のテキスト
3. 近傍要素の位置ベース探索（中心間距離に方向重みを掛けた最小値）
"""

import logging
import math
from typing import List, Optional

from .field_model import FormField, NearbyText

logger = logging.getLogger(__name__)


class LabelFinder:
    """近傍テキストからラベルを推定するクラス"""

    LABEL_LIKE_TAGS = frozenset({
        'span', 'div', 'p', 'td', 'th', 'legend', 'dt', 'strong', 'em', 'b',
        'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    })

    # 位置重み（上にあるラベルを優先、下にあるラベルは減点）
    WEIGHT_ABOVE = 0.8
    WEIGHT_PREFERRED_SIDE = 0.9
    WEIGHT_BELOW = 1.5
    SAME_ROW_TOLERANCE = 30
    ABOVE_TOLERANCE = 5

    def __init__(self, max_depth: int = 5, max_distance: float = 300, max_text_length: int = 150):
        self.max_depth = max_depth
        self.max_distance = max_distance
        self.max_text_length = max_text_length

    def is_label_like(self, candidate: NearbyText) -> bool:
        """ラベルらしい要素か（label は常に可、その他は短い可視テキストのみ）"""
        tag = (candidate.tag or '').lower()
        if tag == 'label':
            return bool(candidate.text.strip())
        if tag not in self.LABEL_LIKE_TAGS:
            return False
        text = candidate.text.strip()
        if not text or len(text) > self.max_text_length:
            return False
        if not candidate.visible:
            return False
        # 子要素が多いものはコンテナとみなす
        return candidate.child_count <= 3

    def weighted_distance(self, field: FormField, candidate: NearbyText) -> Optional[float]:
        if field.rect is None or candidate.rect is None:
            return None

        fx, fy = field.rect.center_x, field.rect.center_y
        lx, ly = candidate.rect.center_x, candidate.rect.center_y
        dx = lx - fx
        dy = ly - fy
        distance = math.sqrt(dx * dx + dy * dy)

        if ly < fy - self.ABOVE_TOLERANCE:
            distance *= self.WEIGHT_ABOVE

        is_rtl = field.direction == 'rtl'
        preferred_side = lx > fx if is_rtl else lx < fx
        if preferred_side and abs(dy) < self.SAME_ROW_TOLERANCE:
            distance *= self.WEIGHT_PREFERRED_SIDE

        if ly > fy + field.rect.height:
            distance *= self.WEIGHT_BELOW

        return distance

    def find_by_proximity(self, field: FormField) -> str:
        """近傍候補の中から最も近いラベルらしいテキストを返す"""
        candidates = [
            c for c in field.nearby_texts
            if c.depth < self.max_depth and self.is_label_like(c)
        ]
        if not candidates:
            return ''

        best_text = ''
        best_distance = math.inf
        measured = False
        for candidate in candidates:
            distance = self.weighted_distance(field, candidate)
            if distance is None:
                continue
            measured = True
            if distance < best_distance and distance < self.max_distance:
                best_distance = distance
                best_text = candidate.text.strip()

        if measured:
            return best_text

        # 座標が無い（静的 HTML）場合は最も浅い階層の候補を文書順で採用
        shallowest = min(candidates, key=lambda c: c.depth)
        return shallowest.text.strip()

    def find_closest_label(self, field: FormField) -> str:
        for text in field.labels:
            if text and text.strip():
                return text.strip()

        if field.aria_labelledby_text.strip():
            return field.aria_labelledby_text.strip()

        label = self.find_by_proximity(field)
        if label:
            logger.debug(f"Proximity label resolved: {label[:40]}")
        return label

    def get_all_possible_labels(self, field: FormField) -> List[str]:
        """ラベル照合用の候補テキスト一覧（重複除去・順序保持）"""
        pool: List[str] = []
        pool.extend(t.strip() for t in field.labels)
        pool.append(field.aria_labelledby_text.strip())
        pool.append(field.aria_label.strip())
        pool.append(field.placeholder.strip())
        pool.append(field.title.strip())
        pool.append(field.aria_describedby_text.strip())
        pool.append(self.find_closest_label(field))

        seen = set()
        result: List[str] = []
        for text in pool:
            if text and text not in seen:
                seen.add(text)
                result.append(text)
        return result


_default_finder = LabelFinder()


def find_closest_label(field: FormField) -> str:
    """既定設定での最寄りラベル取得"""
    return _default_finder.find_closest_label(field)


def get_all_possible_labels(field: FormField) -> List[str]:
    return _default_finder.get_all_possible_labels(field)
