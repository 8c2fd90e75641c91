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
口语中文数字分词器

在任意文本中按"最左、最长"原则查找互不重叠的中文数字片段。
文法由 NumeralRule 编译为确定化、最小化的接受器，扫描时把接受器展开成
状态转移表，从每个起点尽可能向后走，记住最后一次到达终止状态的位置。
"""

from typing import Any, Dict, Iterator, List, Optional

from pynini import Weight, determinize

from ..core.errors import NoMatchError
from ..core.processor import Processor
from ..core.token import NumeralToken
from .rules import NumeralRule


class NumeralTokenizer(Processor):
    """
    中文数字分词器。

    Args:
        cache_dir: FST缓存目录，为None时不写缓存
        overwrite_cache: 是否重建缓存
        prefix: 缓存文件名前缀
    """

    def __init__(
        self,
        cache_dir: Optional[str] = None,
        overwrite_cache: bool = False,
        prefix: str = "zh_numeral",
    ) -> None:
        super().__init__(name="numeral_tokenizer")
        self.build_fst(prefix, cache_dir, overwrite_cache)
        self._compile_transitions()

    def build_tagger(self) -> None:
        self.tagger = NumeralRule().tagger

    def _compile_transitions(self) -> None:
        """把接受器展开为 {码位: 下一状态} 的转移表，构建后不再修改"""
        self.ensure_built()
        dfa = determinize(self.tagger.copy().rmepsilon()).minimize()
        zero = Weight.zero(dfa.weight_type())

        transitions = []
        finals = set()
        for state in dfa.states():
            # 状态编号从0连续递增
            transitions.append({arc.ilabel: arc.nextstate for arc in dfa.arcs(state)})
            if dfa.final(state) != zero:
                finals.add(state)

        self._start = dfa.start()
        self._transitions = tuple(transitions)
        self._finals = frozenset(finals)
        self.logger.debug(f"转移表状态数: {len(self._transitions)}")

    def _longest_match(self, text: str, pos: int) -> int:
        """从 pos 开始的最长匹配的结束位置；没有匹配时返回 pos"""
        state = self._start
        last_end = pos
        for i in range(pos, len(text)):
            state = self._transitions[state].get(ord(text[i]))
            if state is None:
                break
            if state in self._finals:
                last_end = i + 1
        return last_end

    def finditer(self, text: str) -> Iterator[NumeralToken]:
        """
        按出现顺序惰性产出所有数字片段。

        匹配成功后从片段末尾继续扫描，因此片段互不重叠。
        """
        pos = 0
        length = len(text)
        while pos < length:
            end = self._longest_match(text, pos)
            if end > pos:
                yield NumeralToken(text[pos:end], pos, end)
                pos = end
            else:
                pos += 1

    def find(self, text: str) -> List[NumeralToken]:
        if not text:
            return []
        return list(self.finditer(text))

    def tag(self, text: str) -> List[Dict[str, Any]]:
        """
        标记输入文本。

        示例:
            输入: '序號十八號'
            输出: [{'type': 'numeral', 'value': '十八', 'start': 2, 'end': 4}]

        Raises:
            ValueError: 标记器尚未构建
        """
        self.ensure_built()
        return [token.to_dict() for token in self.find(text)]

    def match_full(self, text: str) -> NumeralToken:
        """
        要求整个字符串恰好是一个数字片段。

        Raises:
            NoMatchError: 字符串为空、含有文法以外的字符或无法整体匹配
        """
        if not text or self._longest_match(text, 0) != len(text):
            raise NoMatchError(text)
        return NumeralToken(text, 0, len(text))
