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

import pynini

from ....core.processor import Processor

# 文法中可出现的字符集合
SIGN_CHARS = "-負"
LEADING_TEN = "十"
DIGIT_CHARS = "零一二兩三四五六七八九"
UNIT_CHARS = "十百千萬億"
YI = "億"
WAN = "萬"
DECIMAL_POINT = "點"
# 小数部分只接受逐位读法，不含 "兩"
FRACTION_DIGIT_CHARS = "零一二三四五六七八九"


def char_accep(char: str) -> pynini.Fst:
    """单个字符的接受器，弧标签为字符码位。"""
    return pynini.accep(char, token_type=Processor.TOKEN_TYPE)


def char_union(chars: str) -> pynini.Fst:
    """若干字符中任取其一的接受器。"""
    return pynini.union(*[char_accep(ch) for ch in chars]).optimize()


def cn_sign_union():
    return char_union(SIGN_CHARS)


def cn_digit_union():
    """整数部分的数字字符（含 零 与 兩）。"""
    return char_union(DIGIT_CHARS)


def cn_unit_union():
    return char_union(UNIT_CHARS)


def cn_fraction_digit_union():
    return char_union(FRACTION_DIGIT_CHARS)
