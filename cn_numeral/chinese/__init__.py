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
中文数字识别模块

主要组件:
- NumeralTokenizer: 在文本中查找口语中文数字片段
- reduce_to_integer: 把数字主体归约为整数
- ChineseNumeralExtractor: 查找、替换与整数转换的统一入口
"""

from .numeral_extractor import ChineseNumeralExtractor, get_default_extractor
from .reducer import CharKind, ReductionState, classify, reduce_to_integer
from .rewriter import convert_token, convert_tokens, rewrite, splice, split_sign
from .tokenizer import NumeralTokenizer
from .transliterator import chars_to_arabic

__all__ = [
    "ChineseNumeralExtractor",
    "get_default_extractor",
    "CharKind",
    "ReductionState",
    "classify",
    "reduce_to_integer",
    "convert_token",
    "convert_tokens",
    "rewrite",
    "splice",
    "split_sign",
    "NumeralTokenizer",
    "chars_to_arabic",
]
