"""
多言語キーワード正規化

各言語のフィールドラベル・属性値を正規化英語トークンへ置換する。
辞書は固定順（ja, vi, zh, ko, ar, de, es, fr, pl, ru）で適用し、
同一入力に対する結果は常に同一となる。
"""

from typing import Iterable, List, Optional

from .arabic import ARABIC
from .chinese import CHINESE
from .french import FRENCH
from .german import GERMAN
from .japanese import JAPANESE
from .keyword_dictionary import KeywordDictionary
from .korean import KOREAN
from .polish import POLISH
from .russian import RUSSIAN
from .spanish import SPANISH
from .vietnamese import VIETNAMESE

# 適用順は結果に影響するため変更しないこと
DICTIONARIES: List[KeywordDictionary] = [
    JAPANESE,
    VIETNAMESE,
    CHINESE,
    KOREAN,
    ARABIC,
    GERMAN,
    SPANISH,
    FRENCH,
    POLISH,
    RUSSIAN,
]

SUPPORTED_LANGUAGES = tuple(d.language for d in DICTIONARIES)


def translate_keywords(text: str, languages: Optional[Iterable[str]] = None) -> str:
    """既知の各言語フレーズを正規化英語トークンへ置換する。

    Args:
        text: 入力文字列（大小文字は呼び出し側で後処理する）
        languages: 適用する言語コードの絞り込み（None なら全辞書）

    Returns:
        str: 置換後の文字列。空文字/None はそのまま返す。
    """
    if not text:
        return text

    selected = set(languages) if languages is not None else None
    translated = text
    for dictionary in DICTIONARIES:
        if selected is not None and dictionary.language not in selected:
            continue
        translated = dictionary.translate(translated)
    return translated


def normalize_signal(text: str) -> str:
    """翻訳してから小文字化（属性抽出・分類で共通の正規化）。"""
    if not text:
        return ''
    return translate_keywords(text).lower()


__all__ = [
    'DICTIONARIES',
    'KeywordDictionary',
    'SUPPORTED_LANGUAGES',
    'normalize_signal',
    'translate_keywords',
]
