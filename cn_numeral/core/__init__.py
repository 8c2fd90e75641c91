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
中文数字处理核心模块

提供FST文法处理器基类、数值标记、异常、配置与日志等基础设施。

主要组件:
- Processor: FST基础处理类，负责文法构建与缓存
- NumeralToken: 分词器输出的数字片段
- NoMatchError / NotReducibleError: 两类识别错误
- load_config: YAML 配置加载
"""

from .processor import Processor
from .token import NumeralToken
from .errors import NumeralError, NoMatchError, NotReducibleError
from .config import load_config, DEFAULT_CONFIG
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "Processor",
    "NumeralToken",
    "NumeralError",
    "NoMatchError",
    "NotReducibleError",
    "load_config",
    "DEFAULT_CONFIG",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
