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
口语中文数字归约器

把不含符号与小数点的数字主体（如 "五億七千萬零七十"）从左到右归约为整数。
状态只有三项：待定数字、当前小节累计值、总计。

- 数字：设为待定数字（连续两个数字时后者覆盖前者）
- 零：清空待定数字，之后紧跟的单位按 1 计
- 十/百/千：(待定数字或 1) × 单位，加到小节
- 萬/億：待定数字并入小节，小节乘以单位后加到总计，小节清零
"""

from enum import Enum
from typing import NamedTuple, Optional

from ..core.errors import NotReducibleError


class CharKind(Enum):
    DIGIT = "digit"
    ZERO = "zero"
    SMALL_UNIT = "small_unit"
    BIG_UNIT = "big_unit"
    SIGN = "sign"
    DECIMAL_MARKER = "decimal_marker"
    OTHER = "other"


class CharClass(NamedTuple):
    kind: CharKind
    value: int = 0


_DIGIT_MAP = {
    "一": 1,
    "壹": 1,
    "二": 2,
    "貳": 2,
    "兩": 2,
    "三": 3,
    "參": 3,
    "四": 4,
    "肆": 4,
    "五": 5,
    "伍": 5,
    "六": 6,
    "陸": 6,
    "七": 7,
    "柒": 7,
    "八": 8,
    "捌": 8,
    "九": 9,
    "玖": 9,
}

_SMALL_UNIT_MAP = {
    "十": 10,
    "百": 100,
    "千": 1000,
}

_BIG_UNIT_MAP = {
    "萬": 10000,
    "億": 100000000,
}

_ZERO = "零"
_SIGNS = ("-", "負")
_DECIMAL_MARKER = "點"


def classify(char: str) -> CharClass:
    """对单个字符分类"""
    if char in _DIGIT_MAP:
        return CharClass(CharKind.DIGIT, _DIGIT_MAP[char])
    if char == _ZERO:
        return CharClass(CharKind.ZERO)
    if char in _SMALL_UNIT_MAP:
        return CharClass(CharKind.SMALL_UNIT, _SMALL_UNIT_MAP[char])
    if char in _BIG_UNIT_MAP:
        return CharClass(CharKind.BIG_UNIT, _BIG_UNIT_MAP[char])
    if char in _SIGNS:
        return CharClass(CharKind.SIGN)
    if char == _DECIMAL_MARKER:
        return CharClass(CharKind.DECIMAL_MARKER)
    return CharClass(CharKind.OTHER)


class ReductionState:
    """归约过程中的可变状态，每次归约新建一个"""

    def __init__(self) -> None:
        self.pending: Optional[int] = None
        self.section = 0
        self.total = 0
        # 当前小节里最近一次出现的 十/百/千，仅供严格顺序检查
        self.last_small_unit: Optional[int] = None

    def take_digit(self, digit: int) -> None:
        self.pending = digit

    def take_zero(self) -> None:
        """零不参与乘法；清空待定数字，使后续单位默认乘 1 而不是乘 0"""
        self.pending = None

    def take_small_unit(self, unit: int) -> None:
        """没有待定数字时按 1 计（"十八" 的 十、"零十" 的 十）"""
        digit = 1 if self.pending is None else self.pending
        self.section += digit * unit
        self.pending = None
        self.last_small_unit = unit

    def take_big_unit(self, unit: int) -> None:
        """萬/億 只放大当前小节，不影响已经并入总计的部分"""
        if self.pending is not None:
            self.section += self.pending
            self.pending = None
        self.section *= unit
        self.total += self.section
        self.section = 0
        self.last_small_unit = None

    def finish(self) -> int:
        if self.pending is not None:
            self.section += self.pending
            self.pending = None
        self.total += self.section
        self.section = 0
        return self.total


def reduce_to_integer(body: str, negative: bool = False, strict_unit_order: bool = False) -> int:
    """
    把数字主体归约为整数。

    Args:
        body: 只含数字、零和单位的主体，调用方已去掉符号与小数部分
        negative: 是否取负
        strict_unit_order: 为True时要求同一小节内 十/百/千 严格递减

    Returns:
        int: 归约结果；空主体为 0

    Raises:
        NotReducibleError: 主体中有数字/零/单位以外的字符，或严格模式下单位顺序错误
    """
    chars = "一" + body if body.startswith("十") else body

    state = ReductionState()
    for char in chars:
        kind, value = classify(char)
        if kind is CharKind.DIGIT:
            state.take_digit(value)
        elif kind is CharKind.ZERO:
            state.take_zero()
        elif kind is CharKind.SMALL_UNIT:
            if (
                strict_unit_order
                and state.last_small_unit is not None
                and value >= state.last_small_unit
            ):
                raise NotReducibleError(body, char, f"单位顺序错误 {char!r}，数字主体: {body!r}")
            state.take_small_unit(value)
        elif kind is CharKind.BIG_UNIT:
            state.take_big_unit(value)
        else:
            raise NotReducibleError(body, char)

    total = state.finish()
    return -total if negative else total
