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
FST基础处理器模块

提供基于有限状态转换器(FST)的文法构建与缓存功能。
"""

import os
from typing import Any, Dict, List, Optional

from pynini import Fst

from .logger import get_logger
from .utils import ensure_dir_exists, safe_filename


class Processor:
    """
    FST基础处理类。

    子类在 build_tagger 中构建 self.tagger，build_fst 负责构建、优化
    以及（可选的）磁盘缓存。文法使用 utf8 标记类型，弧上的标签即字符码位。

    Attributes:
        name (str): 处理器名称
        tagger (Optional[Fst]): 构建完成的FST
    """

    TOKEN_TYPE = "utf8"

    def __init__(self, name: str) -> None:
        """
        初始化处理器。

        Args:
            name: 处理器名称，用于标识和日志记录
        """
        self.name = name
        self.tagger: Optional[Fst] = None
        self.logger = get_logger(f"cn_numeral.{name}")

    def build_fst(
        self, prefix: str, cache_dir: Optional[str] = None, overwrite_cache: bool = False
    ) -> None:
        """
        构建并（可选）缓存FST。

        Args:
            prefix: 模型名称前缀
            cache_dir: FST文件缓存目录，为None时只在内存中构建
            overwrite_cache: 是否覆盖现有缓存
        """
        if cache_dir is None:
            self.logger.info(f"为 {self.name} 构建FST（不使用缓存）...")
            self._build_and_optimize()
            return

        ensure_dir_exists(cache_dir)
        tagger_path = os.path.join(cache_dir, f"{safe_filename(prefix)}_tagger.fst")

        if os.path.exists(tagger_path) and not overwrite_cache:
            self.logger.info(f"发现现有FST: {tagger_path}")
            self.tagger = Fst.read(tagger_path)
            return

        self.logger.info(f"为 {self.name} 构建FST...")
        self._build_and_optimize()
        self.tagger.write(tagger_path)
        self.logger.info(f"FST路径: {tagger_path}")

    def _build_and_optimize(self) -> None:
        self.build_tagger()
        if self.tagger is None:
            raise ValueError(f"构建 {self.name} 的FST失败")
        self.tagger = self.tagger.optimize()

    def build_tagger(self) -> None:
        """
        构建文法。子类需要实现此方法。

        Raises:
            NotImplementedError: 如果子类未实现此方法
        """
        raise NotImplementedError("子类必须实现 build_tagger 方法")

    def tag(self, text: str) -> List[Dict[str, Any]]:
        """
        标记输入文本并返回标记字典列表。子类需要实现此方法。

        Args:
            text: 要标记的输入文本
        """
        raise NotImplementedError("子类必须实现 tag 方法")

    def ensure_built(self) -> None:
        if self.tagger is None:
            raise ValueError(f"标记器 {self.name} 尚未构建，请先调用 build_fst")
