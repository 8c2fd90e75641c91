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

import pytest

from cn_numeral.chinese.numeral_extractor import ChineseNumeralExtractor
from cn_numeral.chinese.rewriter import convert_token, rewrite, splice, split_sign
from cn_numeral.core.errors import NotReducibleError
from cn_numeral.core.token import NumeralToken


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "序號十八號，身高一百零五點七二公分，重量三千兩百五十七點三九公斤，身價五千一百萬",
            "序號18號，身高105.72公分，重量3257.39公斤，身價51000000",
        ),
        ("身價-一億零五萬", "身價-100050000"),
        ("身價負一億零五萬", "身價-100050000"),
        ("利潤-三點五", "利潤-3.5"),
        ("負零點五度", "-0.5度"),
        ("三點鐘見", "3鐘見"),
        ("共五億七千萬零七十元整", "共570000070元整"),
        ("序號十八號，身高一百零五點七二公分", "序號18號，身高105.72公分"),
        ("零點零五", "0.05"),
    ],
)
def test_rewrite(tokenizer, text, expected):
    assert rewrite(text, tokenizer) == expected


def test_rewrite_keeps_arabic_text_unchanged(tokenizer):
    text = "身高105.72公分，身價-100050000，2024年"
    assert rewrite(text, tokenizer) == text
    assert rewrite("", tokenizer) == ""


def test_rewrite_preserves_text_around_matches(tokenizer):
    assert rewrite("十八", tokenizer) == "18"
    assert rewrite("約十八，", tokenizer) == "約18，"
    assert rewrite("abc一二三def", tokenizer) == "abc3def"


def test_rewrite_unreducible_token(tokenizer):
    text = "共二十三百人"
    assert rewrite(text, tokenizer) == "共320人"
    assert rewrite(text, tokenizer, strict_unit_order=True) == text
    assert rewrite("十八和二十三百", tokenizer, strict_unit_order=True) == "18和二十三百"
    with pytest.raises(NotReducibleError):
        rewrite(text, tokenizer, strict_unit_order=True, keep_unreducible=False)


@pytest.mark.parametrize(
    "token, expected",
    [
        (NumeralToken("三點五", 0, 3), "3.5"),
        (NumeralToken("-三點五", 0, 4), "-3.5"),
        (NumeralToken("負三", 0, 2), "-3"),
        (NumeralToken("三點", 0, 2), "3"),
        (NumeralToken("十八", 0, 2), "18"),
        (NumeralToken("負零", 0, 2), "0"),
    ],
)
def test_convert_token(token, expected):
    assert convert_token(token) == expected


def test_splice():
    assert splice("abcdef", []) == "abcdef"
    assert splice("abcdef", [(1, 3, "X"), (4, 5, "YY")]) == "aXdYYf"
    assert splice("abcdef", [(0, 6, "")]) == ""
    with pytest.raises(ValueError):
        splice("abcdef", [(2, 4, "X"), (3, 5, "Y")])


def test_split_sign():
    assert split_sign("-三") == (True, "三")
    assert split_sign("負三") == (True, "三")
    assert split_sign("三") == (False, "三")
    assert split_sign("") == (False, "")


def test_extractor_config_controls_unreducible(write_config):
    path = write_config("reducer:\n  strict_unit_order: true\n")
    extractor = ChineseNumeralExtractor(config_path=path)
    assert extractor.strict_unit_order
    assert extractor.keep_unreducible
    assert extractor.parse("共二十三百人") == "共二十三百人"
    assert extractor.to_integer("二十三百") is None

    path = write_config("reducer:\n  strict_unit_order: true\nrewriter:\n  keep_unreducible: false\n")
    extractor = ChineseNumeralExtractor(config_path=path)
    with pytest.raises(NotReducibleError):
        extractor.parse("共二十三百人")
