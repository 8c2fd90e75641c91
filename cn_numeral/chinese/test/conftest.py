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
from cn_numeral.chinese.tokenizer import NumeralTokenizer


@pytest.fixture(scope="session")
def tokenizer():
    return NumeralTokenizer()


@pytest.fixture(scope="session")
def extractor():
    return ChineseNumeralExtractor()


@pytest.fixture
def write_config(tmp_path):
    """把YAML文本写入临时配置文件并返回路径"""

    def _write(content):
        path = tmp_path / "numeral_config.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
