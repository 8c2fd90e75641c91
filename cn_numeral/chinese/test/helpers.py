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

"""测试用的辅助函数"""


def to_chinese(n):
    """把 0..10^8 的整数写成规范的中文读法（十位总写作 一十）"""
    digits = "零一二三四五六七八九"
    if n == 0:
        return "零"

    def section(value):
        out = ""
        pending_zero = False
        for unit_value, unit in ((1000, "千"), (100, "百"), (10, "十"), (1, "")):
            d = value // unit_value % 10
            if d == 0:
                if out:
                    pending_zero = True
                continue
            if pending_zero:
                out += "零"
                pending_zero = False
            out += digits[d] + unit
        return out

    result = ""
    for value, unit in ((n // 10**8, "億"), (n // 10**4 % 10**4, "萬"), (n % 10**4, "")):
        if value == 0:
            continue
        if result and value < 1000:
            result += "零"
        result += section(value) + unit
    return result
