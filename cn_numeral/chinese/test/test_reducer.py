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

import pytest

from cn_numeral.chinese.reducer import (
    CharKind,
    ReductionState,
    classify,
    reduce_to_integer,
)
from cn_numeral.core.errors import NotReducibleError

from helpers import to_chinese


@pytest.mark.parametrize(
    "body, expected",
    [
        ("", 0),
        ("零", 0),
        ("十", 10),
        ("十八", 18),
        ("一十八", 18),
        ("二十", 20),
        ("一百零五", 105),
        ("三千兩百五十七", 3257),
        ("五千一百萬", 51000000),
        ("一億", 100000000),
        ("一億零五萬", 100050000),
        ("一億零三萬", 100030000),
        ("五億七千萬", 570000000),
        ("五億七千萬零七十", 570000070),
        ("九十億", 9000000000),
    ],
)
def test_reduce_to_integer(body, expected):
    assert reduce_to_integer(body) == expected


def test_negative_applies_to_whole_value():
    assert reduce_to_integer("一億零五萬", negative=True) == -100050000
    assert reduce_to_integer("三", negative=True) == -3
    assert reduce_to_integer("", negative=True) == 0


def test_zero_resets_pending_digit():
    # 零之后的单位按 1 计，而不是乘以被丢弃的 0
    assert reduce_to_integer("零十") == 10
    assert reduce_to_integer("一百零十") == 110


def test_later_digit_overwrites_pending_digit():
    assert reduce_to_integer("二三") == 3
    assert reduce_to_integer("二三十") == 30


def test_financial_digits():
    assert reduce_to_integer("貳十") == 20
    assert reduce_to_integer("參百肆十伍") == 345
    assert reduce_to_integer("壹萬") == 10000


@pytest.mark.parametrize("body, char", [("一百a", "a"), ("三點五", "點"), ("-三", "-"), ("拾", "拾")])
def test_foreign_character_is_not_reducible(body, char):
    with pytest.raises(NotReducibleError) as exc_info:
        reduce_to_integer(body)
    assert exc_info.value.char == char
    assert exc_info.value.body == body


def test_unit_order_is_permissive_by_default():
    assert reduce_to_integer("十百") == 110
    assert reduce_to_integer("二十三百") == 320


def test_strict_unit_order():
    with pytest.raises(NotReducibleError):
        reduce_to_integer("十百", strict_unit_order=True)
    with pytest.raises(NotReducibleError):
        reduce_to_integer("二十三百", strict_unit_order=True)
    # 萬/億 开启新小节，小节之间不比较
    assert reduce_to_integer("五千一百萬三千", strict_unit_order=True) == 51003000
    assert reduce_to_integer("一千二百三十四", strict_unit_order=True) == 1234


def test_canonical_round_trip():
    samples = [0, 7, 10, 18, 105, 1000, 1005, 1050, 9999, 10000, 10001, 10010, 100000]
    samples += [1234567, 20000000, 50050005, 70000070, 99999999, 100000000]
    samples += list(range(0, 10**8 + 1, 999983))
    for n in samples:
        assert reduce_to_integer(to_chinese(n)) == n, to_chinese(n)


def test_classify():
    assert classify("兩") == (CharKind.DIGIT, 2)
    assert classify("玖") == (CharKind.DIGIT, 9)
    assert classify("零").kind is CharKind.ZERO
    assert classify("百") == (CharKind.SMALL_UNIT, 100)
    assert classify("億") == (CharKind.BIG_UNIT, 100000000)
    assert classify("負").kind is CharKind.SIGN
    assert classify("-").kind is CharKind.SIGN
    assert classify("點").kind is CharKind.DECIMAL_MARKER
    assert classify("號").kind is CharKind.OTHER


def test_small_unit_defaults_pending_digit_to_one():
    state = ReductionState()
    state.take_small_unit(100)
    assert state.section == 100
    state.take_digit(3)
    state.take_small_unit(10)
    assert state.section == 130
    assert state.pending is None


def test_big_unit_multiplies_only_current_section():
    state = ReductionState()
    state.take_digit(5)
    state.take_big_unit(100000000)
    state.take_digit(7)
    state.take_small_unit(1000)
    state.take_big_unit(10000)
    assert state.total == 570000000
    assert state.section == 0
    state.take_zero()
    state.take_digit(7)
    assert state.finish() == 570000007
