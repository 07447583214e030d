"""言語別キーワード辞書

(原語フレーズ, 正規化英語トークン) の順序付きリストを保持し、
先頭から順に置換する。長いフレーズを先に並べることで
短いフレーズによる部分置換（例: 'カナ' が 'カタカナ' を壊す）を防ぐ。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Pattern, Sequence, Tuple


@dataclass
class KeywordDictionary:
    """1言語分の置換辞書"""

    language: str
    entries: Sequence[Tuple[str, str]]
    # 文字種ゲート（該当文字を含まない入力は辞書全体をスキップ）
    detector: Optional[Callable[[str], bool]] = None
    ignore_case: bool = False
    # この長さ以下のフレーズは語境界付きで照合する（0 は無効）
    boundary_max_length: int = 0
    _compiled: List[Tuple[Pattern[str], str]] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        flags = re.IGNORECASE if self.ignore_case else 0
        for source, token in self.entries:
            escaped = re.escape(source)
            if self.boundary_max_length and len(source) <= self.boundary_max_length:
                escaped = rf"\b{escaped}\b"
            self._compiled.append((re.compile(escaped, flags), token))

    def applies_to(self, text: str) -> bool:
        if not text:
            return False
        if self.detector is None:
            return True
        return self.detector(text)

    def translate(self, text: str) -> str:
        """辞書の全エントリを順に適用した文字列を返す（純粋関数）。"""
        if not self.applies_to(text):
            return text

        translated = text
        for pattern, token in self._compiled:
            if pattern.search(translated):
                translated = pattern.sub(_replacement_for(token), translated)
        return translated

    def __len__(self) -> int:
        return len(self.entries)


def _replacement_for(token: str) -> Callable[["re.Match[str]"], str]:
    # 置換結果が大小文字違いで同一になる場合は原文を保持（'Name' -> 'name' にしない）
    def _replace(match: "re.Match[str]") -> str:
        original = match.group(0)
        if original.lower() == token:
            return original
        return token

    return _replace
