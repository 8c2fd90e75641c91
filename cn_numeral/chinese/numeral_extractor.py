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

import threading
import time
from typing import Any, Dict, List, Optional

from ..core.config import load_config
from ..core.errors import NoMatchError, NotReducibleError
from ..core.logger import get_logger
from ..core.token import NumeralToken
from .reducer import reduce_to_integer
from .rewriter import convert_token, convert_tokens, splice, split_sign
from .tokenizer import NumeralTokenizer
from .transliterator import chars_to_arabic


class ChineseNumeralExtractor:
    """整合分词、归约与替换的中文数字提取器"""

    def __init__(self, cache_dir=None, overwrite_cache=False, config_path=None):
        self.logger = get_logger(__name__)
        self.config = load_config(config_path)
        self.strict_unit_order = bool(self.config["reducer"]["strict_unit_order"])
        self.keep_unreducible = bool(self.config["rewriter"]["keep_unreducible"])
        self.tokenizer = NumeralTokenizer(
            cache_dir=cache_dir,
            overwrite_cache=overwrite_cache,
            prefix=str(self.config["tokenizer"]["cache_prefix"]),
        )
        # 累计耗时（秒），供命令行统计
        self.tokenizer_time = 0.0
        self.reducer_time = 0.0

    def find(self, text: str) -> List[NumeralToken]:
        start_time = time.time()
        tokens = self.tokenizer.find(text)
        self.tokenizer_time += time.time() - start_time
        return tokens

    def find_numerals(self, text: str) -> List[str]:
        """
        找出字串中所有口语表达的中文数字
        :param text: 输入文本，如 "序號十八號，身高一百零五點七二公分"
        :return: 匹配到的片段，如 ["十八", "一百零五點七二"]
        """
        return [token.text for token in self.find(text)]

    def tag(self, text: str) -> List[Dict[str, Any]]:
        return [token.to_dict() for token in self.find(text)]

    def convert(self, token: NumeralToken) -> str:
        start_time = time.time()
        try:
            return convert_token(token, self.strict_unit_order)
        finally:
            self.reducer_time += time.time() - start_time

    def parse(self, text: str) -> str:
        """
        将字串中口语表达的中文数字全部转为阿拉伯数字
        :param text: 如 "身高一百零五點七二公分，身價-一億零五萬"
        :return: 如 "身高105.72公分，身價-100050000"
        """
        if not text:
            return text
        tokens = self.find(text)

        start_time = time.time()
        try:
            replacements = convert_tokens(
                tokens,
                strict_unit_order=self.strict_unit_order,
                keep_unreducible=self.keep_unreducible,
                logger=self.logger,
            )
        finally:
            self.reducer_time += time.time() - start_time
        return splice(text, replacements)

    def to_integer(self, text: str) -> Optional[int]:
        """
        整个字串必须恰好是一个中文整数，如 "一百零五" -> 105
        "體重一百零五"、"三點五" 都返回None
        """
        start_time = time.time()
        try:
            token = self.tokenizer.match_full(text)
        except NoMatchError as e:
            self.logger.debug(str(e))
            return None
        finally:
            self.tokenizer_time += time.time() - start_time

        if token.fraction_body:
            self.logger.debug(f"含小数部分，不是整数: {text!r}")
            return None

        return self._reduce(token.integer_body, token.negative)

    def numeral_to_integer(self, text: str) -> Optional[int]:
        """
        不经文法校验，直接归约可选符号加数字主体，接受大写数字（如 "貳十" -> 20）
        含有其他字符时返回None
        """
        negative, body = split_sign(text)
        return self._reduce(body, negative)

    def _reduce(self, body: str, negative: bool) -> Optional[int]:
        start_time = time.time()
        try:
            return reduce_to_integer(body, negative, self.strict_unit_order)
        except NotReducibleError as e:
            self.logger.debug(str(e))
            return None
        finally:
            self.reducer_time += time.time() - start_time

    @staticmethod
    def chars_to_arabic(text: str) -> str:
        return chars_to_arabic(text)


class DefaultExtractor:
    """进程内共享的默认提取器，首次使用时构建"""

    _instance: Optional[ChineseNumeralExtractor] = None
    _lock = threading.Lock()

    @classmethod
    def get(cls) -> ChineseNumeralExtractor:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = ChineseNumeralExtractor()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None


def get_default_extractor() -> ChineseNumeralExtractor:
    return DefaultExtractor.get()
