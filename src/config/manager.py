"""設定ファイル読み込みと管理を行うユーティリティモジュール"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from form_filler.utils.error_handler import StandardErrorHandler

logger = logging.getLogger(__name__)

CLASSIFIER_CONFIG_FILE = "classifier_config.json"


class ConfigManager:
    """設定ファイルの読み込みと管理を行うクラス"""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        if config_dir is None:
            self.config_dir = Path(__file__).parent.parent.parent / "config"
        else:
            self.config_dir = Path(config_dir)
        self._classifier_config: Optional[Dict[str, Any]] = None

    def get_classifier_config(self) -> Dict[str, Any]:
        """分類器設定を取得（読み込み失敗時は既定値）"""
        if self._classifier_config is None:
            cfg = StandardErrorHandler.load_config_with_fallback(
                lambda: self._load_config(CLASSIFIER_CONFIG_FILE),
                self._get_default_classifier_config(),
                "classifier_config",
            )
            # かんたんな構造検証（値の検証は ConfigValidator 側）
            if not isinstance(cfg, dict):
                logger.warning("classifier_config must be an object, using defaults")
                cfg = self._get_default_classifier_config()
            if not isinstance(cfg.get("settings"), dict):
                cfg["settings"] = self._get_default_classifier_config()["settings"]
            if not isinstance(cfg.get("custom_fields"), list):
                cfg["custom_fields"] = []
            self._classifier_config = cfg
        return copy.deepcopy(self._classifier_config)

    def get_custom_fields(self) -> List[Dict[str, Any]]:
        """カスタムルール一覧（記述順）を取得"""
        return self.get_classifier_config()["custom_fields"]

    def reload(self) -> None:
        """キャッシュ済みの設定を破棄"""
        self._classifier_config = None

    def _get_default_classifier_config(self) -> Dict[str, Any]:
        """デフォルトの分類器設定"""
        return {
            "settings": {
                "locale": "en",
                "enable_label_matching": True,
                "enable_heuristic_detection": True,
                "confidence_threshold": 60,
                "min_age": 18,
                "max_age": 65,
            },
            "custom_fields": [],
        }

    def _load_config(self, filename: str) -> Dict[str, Any]:
        """設定ファイルを読み込み"""
        config_path = self.config_dir / filename

        if not config_path.exists():
            raise FileNotFoundError(f"設定ファイルが見つかりません: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"設定ファイルの形式が不正です ({filename}): {e}")
        except OSError as e:
            raise RuntimeError(f"設定ファイルの読み込みに失敗しました ({filename}): {e}")


# グローバルな設定マネージャーインスタンス
config_manager = ConfigManager()


def get_classifier_config() -> Dict[str, Any]:
    """分類器設定を取得する便利関数"""
    return config_manager.get_classifier_config()


def get_custom_fields() -> List[Dict[str, Any]]:
    """カスタムルール一覧を取得する便利関数"""
    return config_manager.get_custom_fields()
