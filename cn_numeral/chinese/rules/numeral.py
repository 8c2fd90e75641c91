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

from ...core.processor import Processor
from .base.cn_number_base import (
    DECIMAL_POINT,
    LEADING_TEN,
    WAN,
    YI,
    char_accep,
    cn_digit_union,
    cn_fraction_digit_union,
    cn_sign_union,
    cn_unit_union,
)


class NumeralRule(Processor):
    """口语中文数字文法。

    token      := sign? core decimal?
    sign       := "-" | "負"
    core       := "十"? unit_group+
    unit_group := digit unit? "億"? "萬"?
    decimal    := "點" frac_digit*

    億/萬 可以紧跟在单位之后出现在同一组里，以覆盖 "五億七千萬" 这类写法。
    规则本身只是接受器，不做数值映射；数值由归约器计算。
    """

    def __init__(self):
        super().__init__(name="numeral")
        self.build_tagger()

    def build_tagger(self):
        sign = cn_sign_union().ques
        unit_group = (
            cn_digit_union() + cn_unit_union().ques + char_accep(YI).ques + char_accep(WAN).ques
        )
        core = char_accep(LEADING_TEN).ques + unit_group.plus
        # 只有小数点、没有小数位也算匹配（"三點" 视作整数 3）
        decimal = (char_accep(DECIMAL_POINT) + cn_fraction_digit_union().star).ques
        self.tagger = (sign + core + decimal).optimize()
