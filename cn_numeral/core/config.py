# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
配置加载模块

从 YAML 文件读取数值转换的行为开关，文件缺失或格式错误时回退到内置默认值。
"""

import copy
from typing import Any, Dict, Optional

import yaml
from importlib_resources import files

from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "reducer": {
        # 是否要求同一小节内的 十/百/千 严格递减（如拒绝 "十百"）
        "strict_unit_order": False,
    },
    "rewriter": {
        # 整段替换时遇到无法归约的片段：True 保留原文，False 抛出异常
        "keep_unreducible": True,
    },
    "tokenizer": {
        # FST 缓存文件名前缀
        "cache_prefix": "zh_numeral",
    },
}


def default_config_path() -> str:
    """包内默认配置文件路径"""
    return str(files("cn_numeral.chinese").joinpath("config/numeral_config.yaml"))


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
    """
    加载配置

    Args:
        config_path: 配置文件路径，为None时使用包内默认配置

    Returns:
        Dict: 与默认值合并后的完整配置
    """
    if config_path is None:
        config_path = default_config_path()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"加载配置失败，使用默认值: {config_path}: {e}")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(loaded, dict):
        logger.warning(f"配置文件顶层必须是映射，使用默认值: {config_path}")
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, loaded)
