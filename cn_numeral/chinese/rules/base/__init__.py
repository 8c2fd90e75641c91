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
基础规则模块

提供中文数字文法使用的字符集合接受器。
"""

from .cn_number_base import (
    char_accep,
    char_union,
    cn_digit_union,
    cn_fraction_digit_union,
    cn_sign_union,
    cn_unit_union,
)

__all__ = [
    "char_accep",
    "char_union",
    "cn_digit_union",
    "cn_fraction_digit_union",
    "cn_sign_union",
    "cn_unit_union",
]
