"""文字列ユーティリティ（シグナル正規化・辞書ゲート共有関数）

属性抽出・ロケール辞書・ヒューリスティック分類で共通に使う
文字種判定や区切り文字処理をまとめたモジュール。
"""

from __future__ import annotations

import re
from typing import List

# 事前コンパイル済みの文字種検出用パターン
_CJK_RE = re.compile(r"[\u3040-\u30ff\u3400-\u9fff\uff66-\uff9f]")
_HAN_RE = re.compile(r"[\u4e00-\u9fff\u3400-\u4dbf]")
_HANGUL_RE = re.compile(r"[\u1100-\u11ff\u3130-\u318f\uac00-\ud7af]")
_ARABIC_RE = re.compile(r"[\u0600-\u06ff\u0750-\u077f]")
_CYRILLIC_RE = re.compile(r"[\u0400-\u04ff\u0500-\u052f]")
_VIETNAMESE_RE = re.compile(
    r"[àảãáạăằẳẵắặâầẩẫấậđèẻẽéẹêềểễếệìỉĩíịòỏõóọôồổỗốộơờởỡớợùủũúụưừửữứựỳỷỹýỵ]",
    re.IGNORECASE,
)

# 名前空間付き識別子（user.email / contact[email] / billing-zip）の区切り
_SEGMENT_SEPARATORS_RE = re.compile(r"[-._\[\]]")
_TOKEN_SPLIT_RE = re.compile(r"[\W_]+")


def has_cjk(s: str) -> bool:
    """日本語(CJK)文字を含むかの軽量判定。"""
    if not s:
        return False
    return _CJK_RE.search(s) is not None


def has_han(s: str) -> bool:
    """漢字（CJK統合漢字・拡張A）を含むか。"""
    return bool(s) and _HAN_RE.search(s) is not None


def has_hangul(s: str) -> bool:
    return bool(s) and _HANGUL_RE.search(s) is not None


def has_arabic(s: str) -> bool:
    return bool(s) and _ARABIC_RE.search(s) is not None


def has_cyrillic(s: str) -> bool:
    return bool(s) and _CYRILLIC_RE.search(s) is not None


def has_vietnamese(s: str) -> bool:
    """ベトナム語固有のダイアクリティカルマークを含むか。"""
    return bool(s) and _VIETNAMESE_RE.search(s) is not None


def last_identifier_segment(value: str) -> str:
    """識別子の最後のセグメントを返す（例: 'user.email' -> 'email'）。

    末尾が区切り文字の場合（'contact[email]'）は空文字ではなく
    直前の非空セグメントを返す。
    """
    if not value:
        return ""
    parts = [p for p in _SEGMENT_SEPARATORS_RE.split(value) if p]
    return parts[-1] if parts else ""


def last_word(value: str) -> str:
    """空白区切りの最後の語を返す。"""
    if not value:
        return ""
    words = value.split()
    return words[-1] if words else ""


def normalize_whitespace(text: str) -> str:
    """連続する空白（全角含む）を1つの半角スペースへ畳み込む。"""
    if not text:
        return ""
    return re.sub(r"[\s　]+", " ", text).strip()


def split_tokens(text: str) -> List[str]:
    """英数字・各言語の文字以外で分割（アンダースコアも区切りとして扱う）。"""
    if not text:
        return []
    return [t for t in _TOKEN_SPLIT_RE.split(text) if t]
