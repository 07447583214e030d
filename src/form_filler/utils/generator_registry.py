"""
名前付きジェネレータのレジストリ

カスタムルール（kind='generator'）は 'person.first_name' のような
ドット区切りのパスで値生成関数を指す。パスはオブジェクト探索ではなく
事前登録されたフラットな辞書で解決し、未登録時は既定のフォールバックを返す。
"""

import logging
import re
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

GENERATOR_PATH_RE = re.compile(r'^[A-Za-z_]+(\.[A-Za-z_]+)+$')

Generator = Callable[[], str]


class GeneratorRegistry:
    """ドット区切りパス → 生成関数"""

    def __init__(self, fallback: Optional[Generator] = None):
        self._generators: Dict[str, Generator] = {}
        self.fallback = fallback

    def register(self, path: str, generator: Generator) -> None:
        if not GENERATOR_PATH_RE.match(path or ''):
            raise ValueError(f"Invalid generator path: {path!r}")
        if not callable(generator):
            raise TypeError(f"Generator for {path} is not callable")
        self._generators[path] = generator

    def is_registered(self, path: str) -> bool:
        return path in self._generators

    def resolve(self, path: str) -> Optional[Generator]:
        generator = self._generators.get(path)
        if generator is None:
            logger.warning(f"Generator '{path}' is not registered, using fallback")
            return self.fallback
        return generator

    @property
    def paths(self) -> List[str]:
        return sorted(self._generators)

    def __len__(self) -> int:
        return len(self._generators)
