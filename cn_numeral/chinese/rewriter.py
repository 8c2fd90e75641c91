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
整段替换

把分词器找到的片段拆成 符号/整数/小数 三部分，整数交给归约器、小数逐字转写，
再把结果拼回原文；未匹配的字符全部原样保留。
"""

import logging
from typing import Iterable, List, Optional, Tuple

from ..core.errors import NotReducibleError
from ..core.logger import get_logger
from ..core.token import SIGN_MARKERS, NumeralToken
from .reducer import reduce_to_integer
from .tokenizer import NumeralTokenizer
from .transliterator import chars_to_arabic

_logger = get_logger(__name__)


def split_sign(text: str) -> Tuple[bool, str]:
    """去掉前导的 "-" 或 "負"，返回 (是否为负, 其余部分)"""
    if text[:1] in SIGN_MARKERS:
        return True, text[1:]
    return False, text


def convert_token(token: NumeralToken, strict_unit_order: bool = False) -> str:
    """
    把一个数字片段转成阿拉伯数字字符串。

    有小数时输出 "{符号}{整数}.{小数}"，符号单独输出，因此 "負零點五" -> "-0.5"；
    小数点后没有数字时只输出带符号的整数。

    Raises:
        NotReducibleError: 整数部分无法归约
    """
    value = reduce_to_integer(token.integer_body, strict_unit_order=strict_unit_order)
    fraction = chars_to_arabic(token.fraction_body or "")
    if fraction:
        sign = "-" if token.negative else ""
        return f"{sign}{value}.{fraction}"
    return str(-value if token.negative else value)


def convert_tokens(
    tokens: Iterable[NumeralToken],
    strict_unit_order: bool = False,
    keep_unreducible: bool = True,
    logger: Optional[logging.Logger] = None,
) -> List[Tuple[int, int, str]]:
    """
    逐个转换片段，得到可交给 splice 的 (start, end, 替换文本) 列表。

    无法归约的片段在 keep_unreducible 为真时跳过（原文保留）并记录警告。

    Raises:
        NotReducibleError: keep_unreducible 为假且某个片段无法归约
    """
    logger = logger or _logger
    replacements = []
    for token in tokens:
        try:
            replacements.append((token.start, token.end, convert_token(token, strict_unit_order)))
        except NotReducibleError as e:
            if not keep_unreducible:
                raise
            logger.warning(f"保留无法归约的片段 {token.text!r}: {e}")
    return replacements


def splice(text: str, replacements: Iterable[Tuple[int, int, str]]) -> str:
    """
    按区间替换文本。

    Args:
        text: 原文
        replacements: 按起点升序、互不重叠的 (start, end, 替换文本)

    Returns:
        str: 替换后的文本，包括最后一个片段之后的尾部
    """
    pieces = []
    cursor = 0
    for start, end, replacement in replacements:
        if start < cursor or end < start:
            raise ValueError(f"替换区间无序或重叠: [{start}, {end})")
        pieces.append(text[cursor:start])
        pieces.append(replacement)
        cursor = end
    pieces.append(text[cursor:])
    return "".join(pieces)


def rewrite(
    text: str,
    tokenizer: NumeralTokenizer,
    strict_unit_order: bool = False,
    keep_unreducible: bool = True,
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    把文本中所有口语中文数字替换成阿拉伯数字。

    Args:
        text: 输入文本
        tokenizer: 分词器
        strict_unit_order: 归约时是否要求单位严格递减
        keep_unreducible: 片段无法归约时保留原文（False 时抛出异常）
        logger: 日志器，默认使用模块日志器

    Returns:
        str: 替换后的文本
    """
    replacements = convert_tokens(
        tokenizer.finditer(text), strict_unit_order, keep_unreducible, logger
    )
    return splice(text, replacements)
