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
逐字转写：把中文数字字符一对一换成阿拉伯数字，不处理单位。

例如 "你好九五二七" -> "你好9527"，"負三" -> "-3"。
"""

_CHAR_TO_ARABIC = str.maketrans(
    {
        "零": "0",
        "一": "1",
        "二": "2",
        "三": "3",
        "四": "4",
        "五": "5",
        "六": "6",
        "七": "7",
        "八": "8",
        "九": "9",
        "負": "-",
    }
)


def chars_to_arabic(text: str) -> str:
    """逐字转写，未识别的字符原样保留；对纯阿拉伯数字文本不做任何改变"""
    return text.translate(_CHAR_TO_ARABIC)
