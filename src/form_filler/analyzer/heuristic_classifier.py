"""
ヒューリスティック分類器（フォールバック）

ルールベースで汎用既定値になったテキスト系フィールドに対してのみ使う。
1. name/id（一次トークン）、placeholder/class/aria/title/data-*（二次トークン）、
   ラベル・グループ見出し（コンテキストトークン）、構造特徴を抽出
2. 学習パターンごとに重み付きスコアを計算
3. 最高スコアを [0,1] の信頼度へ正規化し、閾値未満なら判定なし
アンサンブル段ではネイティブ種別・placeholder・隣接フィールド・
複数シグナルの一致といった独立した裏付けで信頼度を加算する（上限 0.98）。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..locale import translate_keywords
from .field_model import FormField
from .label_finder import LabelFinder
from .text_utils import split_tokens
from .training_patterns import TRAINING_PATTERNS, TrainingPattern

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 0.6
CONFIDENCE_CAP = 0.98


@dataclass
class StructuralFeatures:
    has_label: bool = False
    has_placeholder: bool = False
    has_pattern: bool = False
    input_type: str = 'text'
    max_length: int = 0
    required: bool = False


@dataclass
class FieldFeatures:
    """抽出済み特徴量"""
    tokens: List[str] = field(default_factory=list)
    primary_tokens: List[str] = field(default_factory=list)
    context_tokens: List[str] = field(default_factory=list)
    # シグナル源（name/id/placeholder/label 等）ごとのトークン
    token_sources: Dict[str, List[str]] = field(default_factory=dict)
    structural: StructuralFeatures = field(default_factory=StructuralFeatures)

    @property
    def secondary_tokens(self) -> List[str]:
        primary = set(self.primary_tokens)
        return [t for t in self.tokens if t not in primary]


@dataclass
class HeuristicPrediction:
    type: str
    confidence: float
    features: List[str] = field(default_factory=list)
    method: str = 'heuristic-scoring'


def _unique(items: Iterable[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


class HeuristicClassifier:
    """重み付き語彙スコアリングによる推定"""

    # 一次トークン（name/id）
    PRIMARY_EXACT = 1.5
    PRIMARY_CONTAINS = 1.2
    PRIMARY_PARTIAL = 0.9
    # 二次トークン（placeholder/class/aria/title/data-*）
    SECONDARY_EXACT = 0.6
    SECONDARY_CONTAINS = 0.5
    SECONDARY_PARTIAL = 0.3
    # コンテキスト（ラベル・見出し）
    CONTEXT_KEYWORD = 0.35
    CONTEXT_EXACT = 0.5
    CONTEXT_CONTAINS = 0.4
    MIN_PARTIAL_TOKEN_LENGTH = 4
    REQUIRED_MULTIPLIER = 1.05
    SCORE_SCALE = 1.8
    CLEAR_WINNER_MARGIN = 0.3
    CLEAR_WINNER_BOOST = 1.1

    # ネイティブ種別と一致するパターンへの構造加点
    STRUCTURAL_BONUS: Dict[Tuple[str, str], float] = {
        ('email', 'email'): 0.5,
        ('password', 'password'): 0.8,
        ('url', 'url'): 0.5,
        ('date', 'date'): 0.5,
        ('number', 'number'): 0.4,
        ('phone', 'tel'): 0.5,
    }

    _LAST_NAME_NEIGHBOUR_RE = re.compile(r"last|surname|family")
    _FIRST_NAME_NEIGHBOUR_RE = re.compile(r"first|given|fore")
    _DIGITS_RE = re.compile(r"\d{3}")

    def __init__(self, patterns: Optional[Sequence[TrainingPattern]] = None,
                 label_finder: Optional[LabelFinder] = None,
                 languages: Optional[Iterable[str]] = None):
        self.patterns = list(patterns) if patterns is not None else list(TRAINING_PATTERNS)
        self.label_finder = label_finder or LabelFinder()
        self.languages = tuple(languages) if languages is not None else None

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        translated = translate_keywords(text.lower(), self.languages)
        return [t for t in split_tokens(translated) if len(t) > 1]

    def extract_features(self, field: FormField) -> FieldFeatures:
        sources: Dict[str, List[str]] = {
            'name': self.tokenize(field.name),
            'id': self.tokenize(field.element_id),
            'placeholder': self.tokenize(field.placeholder),
            'class': self.tokenize(' '.join(field.class_list)),
            'aria': self.tokenize(field.aria_label),
            'title': self.tokenize(field.title),
        }
        data_tokens: List[str] = []
        for attr, value in field.data_attributes.items():
            data_tokens.extend(self.tokenize(attr))
            data_tokens.extend(self.tokenize(value))
        sources['data'] = data_tokens

        label = self.label_finder.find_closest_label(field)
        context: List[str] = self.tokenize(label)
        for text in field.group_texts:
            context.extend(self.tokenize(text))
        sources['label'] = context

        primary = sources['name'] + sources['id']
        tokens = primary + [
            t for key in ('placeholder', 'class', 'aria', 'title', 'data') for t in sources[key]
        ]

        return FieldFeatures(
            tokens=_unique(tokens),
            primary_tokens=_unique(primary),
            context_tokens=_unique(context),
            token_sources={k: _unique(v) for k, v in sources.items() if v},
            structural=StructuralFeatures(
                has_label=bool(label),
                has_placeholder=bool(field.placeholder),
                has_pattern=bool(field.pattern),
                input_type=field.kind or 'text',
                max_length=field.max_length,
                required=field.required,
            ),
        )

    def _token_score(self, token: str, pattern_str: str, weight: float,
                     exact: float, contains: float, partial: float) -> Tuple[float, str]:
        if token == pattern_str:
            return weight * exact, f"{token}=={pattern_str}"
        if pattern_str in token:
            strength = min(len(pattern_str) / len(token), 1.0)
            return weight * strength * contains, f"{token}->{pattern_str}"
        if token in pattern_str and len(token) >= self.MIN_PARTIAL_TOKEN_LENGTH:
            strength = len(token) / len(pattern_str)
            return weight * strength * partial, f"{token}<{pattern_str}"
        return 0.0, ''

    def score_pattern(self, features: FieldFeatures, pattern: TrainingPattern) -> Tuple[float, List[str]]:
        score = 0.0
        matched: List[str] = []

        for token in features.primary_tokens:
            for pattern_str in pattern.patterns:
                gained, note = self._token_score(
                    token, pattern_str, pattern.weight,
                    self.PRIMARY_EXACT, self.PRIMARY_CONTAINS, self.PRIMARY_PARTIAL,
                )
                if gained:
                    score += gained
                    matched.append(f"primary:{note}")

        for token in features.secondary_tokens:
            for pattern_str in pattern.patterns:
                gained, note = self._token_score(
                    token, pattern_str, pattern.weight,
                    self.SECONDARY_EXACT, self.SECONDARY_CONTAINS, self.SECONDARY_PARTIAL,
                )
                if gained:
                    score += gained
                    matched.append(f"token:{note}")

        for context_token in features.context_tokens:
            for keyword in pattern.context_keywords:
                if keyword in context_token or context_token in keyword:
                    score += pattern.weight * self.CONTEXT_KEYWORD
                    matched.append(f"context:{context_token}->{keyword}")

        # ラベル等が語彙そのものを含む場合は強めに加点
        for context_token in features.context_tokens:
            for pattern_str in pattern.patterns:
                if context_token == pattern_str:
                    score += pattern.weight * self.CONTEXT_EXACT
                    matched.append(f"context-exact:{context_token}=={pattern_str}")
                elif pattern_str in context_token and len(pattern_str) > 3:
                    score += pattern.weight * self.CONTEXT_CONTAINS
                    matched.append(f"context-contains:{context_token}->{pattern_str}")

        bonus = self.STRUCTURAL_BONUS.get((pattern.type, features.structural.input_type))
        if bonus:
            score += bonus
            matched.append(f"struct:type={features.structural.input_type}")

        if features.structural.required:
            score *= self.REQUIRED_MULTIPLIER

        return score, matched

    def _ranked(self, features: FieldFeatures) -> List[Tuple[TrainingPattern, float, List[str]]]:
        scored = []
        for pattern in self.patterns:
            score, matched = self.score_pattern(features, pattern)
            if score > 0:
                scored.append((pattern, score, matched))
        # 安定ソート: 同点は表の先頭側
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored

    def predict(self, field: FormField,
                min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> Optional[HeuristicPrediction]:
        features = self.extract_features(field)
        if not features.tokens and not features.context_tokens:
            return None

        ranked = self._ranked(features)
        if not ranked:
            return None

        best_pattern, best_score, matched = ranked[0]
        confidence = min(best_score / self.SCORE_SCALE, 1.0)
        if len(ranked) > 1 and best_score - ranked[1][1] > self.CLEAR_WINNER_MARGIN:
            confidence = min(confidence * self.CLEAR_WINNER_BOOST, CONFIDENCE_CAP)
        confidence = min(confidence, CONFIDENCE_CAP)

        if confidence < min_confidence:
            logger.debug(
                f"Heuristic best '{best_pattern.type}' below threshold "
                f"({confidence:.3f} < {min_confidence:.3f})"
            )
            return None

        return HeuristicPrediction(type=best_pattern.type, confidence=confidence, features=matched)

    def predict_enhanced(self, field: FormField,
                         min_confidence: float = DEFAULT_MIN_CONFIDENCE) -> Optional[HeuristicPrediction]:
        """基本予測（閾値×0.8）に独立した裏付けを加点したアンサンブル予測"""
        base = self.predict(field, min_confidence * 0.8)
        if base is None:
            return None

        confidence = base.confidence
        notes = list(base.features)
        kind = field.kind

        if base.type == 'email':
            if '@' in (field.placeholder or ''):
                confidence += 0.1
                notes.append('enhance:placeholder-has-@')
            if kind == 'email':
                confidence += 0.15
                notes.append('enhance:native-email-type')

        if base.type == 'password' and kind == 'password':
            confidence += 0.15
            notes.append('enhance:native-password-type')

        if base.type == 'phone':
            if kind == 'tel':
                confidence += 0.1
                notes.append('enhance:native-tel-type')
            if self._DIGITS_RE.search(field.placeholder or ''):
                confidence += 0.05
                notes.append('enhance:placeholder-has-numbers')

        # 姓名は隣接して並ぶことが多い
        if base.type == 'first_name' and self._LAST_NAME_NEIGHBOUR_RE.search(field.next_field.lower()):
            confidence += 0.05
            notes.append('enhance:next-field-is-lastname')
        if base.type == 'last_name' and self._FIRST_NAME_NEIGHBOUR_RE.search(field.previous_field.lower()):
            confidence += 0.05
            notes.append('enhance:prev-field-is-firstname')

        agreeing = self._agreeing_sources(field, base.type)
        if len(agreeing) >= 2:
            confidence += 0.05
            notes.append(f"enhance:sources-agree({','.join(agreeing)})")

        confidence = min(confidence, CONFIDENCE_CAP)
        if confidence < min_confidence:
            logger.debug(
                f"Ensemble '{base.type}' below threshold ({confidence:.3f} < {min_confidence:.3f})"
            )
            return None

        return HeuristicPrediction(
            type=base.type,
            confidence=confidence,
            features=notes,
            method='heuristic-ensemble',
        )

    def _agreeing_sources(self, field: FormField, type_: str) -> List[str]:
        """予測タイプの語彙を含むシグナル源の一覧"""
        pattern = next((p for p in self.patterns if p.type == type_), None)
        if pattern is None:
            return []
        features = self.extract_features(field)
        agreeing = []
        for source, tokens in features.token_sources.items():
            for token in tokens:
                if any(token == p or (len(p) > 3 and p in token) for p in pattern.patterns):
                    agreeing.append(source)
                    break
        return agreeing

    def analyze(self, field: FormField) -> Dict[str, object]:
        """診断用: 特徴量と全パターンの信頼度（0.1 超のみ、降順）"""
        features = self.extract_features(field)
        predictions = []
        for pattern in self.patterns:
            score, matched = self.score_pattern(features, pattern)
            confidence = min(score / 2, 1.0)
            if confidence > 0.1:
                predictions.append({'type': pattern.type, 'confidence': confidence, 'features': matched})
        predictions.sort(key=lambda p: p['confidence'], reverse=True)
        return {'features': features, 'predictions': predictions}
