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
数值标记模块

NumeralToken 表示分词器在原文中找到的一个口语中文数字片段，
由可选符号、整数主体、可选的小数点与小数部分组成，创建后不可修改。
"""

from typing import Any, Dict, Optional


SIGN_MARKERS = ("-", "負")
DECIMAL_MARKER = "點"


class NumeralToken:
    """
    口语中文数字片段。

    Attributes:
        text: 匹配到的原文片段
        start: 片段在原文中的起始字符下标
        end: 片段在原文中的结束字符下标（不含）
    """

    name = "numeral"

    __slots__ = ("_text", "_start", "_end")

    def __init__(self, text: str, start: int, end: int) -> None:
        if end - start != len(text):
            raise ValueError(f"片段长度与区间不一致: {text!r} [{start}, {end})")
        self._text = text
        self._start = start
        self._end = end

    @property
    def text(self) -> str:
        return self._text

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def span(self):
        return self._start, self._end

    @property
    def sign(self) -> str:
        """前导符号（"-" 或 "負"），没有时为空字符串"""
        if self._text[:1] in SIGN_MARKERS:
            return self._text[0]
        return ""

    @property
    def negative(self) -> bool:
        return bool(self.sign)

    @property
    def unsigned(self) -> str:
        return self._text[len(self.sign) :]

    @property
    def integer_body(self) -> str:
        return self.unsigned.split(DECIMAL_MARKER, 1)[0]

    @property
    def fraction_body(self) -> Optional[str]:
        """小数点之后的部分；没有小数点时为None，只有小数点时为空字符串"""
        parts = self.unsigned.split(DECIMAL_MARKER, 1)
        return parts[1] if len(parts) == 2 else None

    def string(self) -> str:
        """格式化为与FST标记相同的文本形式"""
        return f'{self.name} {{ value: "{self._text}" start: "{self._start}" end: "{self._end}" }}'

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.name,
            "value": self._text,
            "start": self._start,
            "end": self._end,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumeralToken):
            return NotImplemented
        return (self._text, self._start, self._end) == (other._text, other._start, other._end)

    def __hash__(self) -> int:
        return hash((self._text, self._start, self._end))

    def __repr__(self) -> str:
        return f"NumeralToken({self._text!r}, {self._start}, {self._end})"
