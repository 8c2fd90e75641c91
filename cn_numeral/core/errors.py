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
异常定义模块

数值识别只有两类错误：
- NoMatchError: 文本中不存在（或不完整构成）口语中文数字，调用方应保持原文不变
- NotReducibleError: 归约器遇到数字/零/单位以外的字符，说明文法与调用方约定不一致
"""

from typing import Optional


class NumeralError(Exception):
    """中文数字处理的基础异常"""


class NoMatchError(NumeralError):
    """输入中没有符合文法的中文数字"""

    def __init__(self, text: str, message: Optional[str] = None) -> None:
        self.text = text
        super().__init__(message or f"未找到中文数字: {text!r}")


class NotReducibleError(NumeralError, ValueError):
    """数字主体中含有无法归约的字符"""

    def __init__(self, body: str, char: str, message: Optional[str] = None) -> None:
        self.body = body
        self.char = char
        super().__init__(message or f"无法归约的字符 {char!r}，数字主体: {body!r}")
