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
cn-numeral - 口语中文数字转阿拉伯数字

把文本中口语表达的中文数字（如 "一百零五點七二"、"負一億零五萬"）原地替换为阿拉伯数字，
或把逐位读出的中文数字（如 "九五二七"）逐字转写。

Usage:
    import cn_numeral

    cn_numeral.parse("序號十八號，身高一百零五點七二公分")   # "序號18號，身高105.72公分"
    cn_numeral.find_numerals("身價五千一百萬")                # ["五千一百萬"]
    cn_numeral.parse_standalone_numeral("一百零五")           # 105
    cn_numeral.chars_to_arabic("你好九五二七")                # "你好9527"
"""

from typing import List, Optional

from .chinese import ChineseNumeralExtractor, get_default_extractor
from .chinese.reducer import reduce_to_integer
from .chinese.transliterator import chars_to_arabic
from .core.errors import NumeralError, NoMatchError, NotReducibleError
from .core.token import NumeralToken

__version__ = "1.0.0"


def find(text: str) -> List[NumeralToken]:
    return get_default_extractor().find(text)


def find_numerals(text: str) -> List[str]:
    return get_default_extractor().find_numerals(text)


def parse(text: str) -> str:
    return get_default_extractor().parse(text)


def parse_standalone_numeral(text: str) -> Optional[int]:
    return get_default_extractor().to_integer(text)


def numeral_to_integer(text: str) -> Optional[int]:
    return get_default_extractor().numeral_to_integer(text)


__all__ = [
    "ChineseNumeralExtractor",
    "NumeralToken",
    "NumeralError",
    "NoMatchError",
    "NotReducibleError",
    "chars_to_arabic",
    "find",
    "find_numerals",
    "numeral_to_integer",
    "parse",
    "parse_standalone_numeral",
    "reduce_to_integer",
]
