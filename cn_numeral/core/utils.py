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
工具函数模块

提供路径处理等辅助功能。
"""

import os


def ensure_dir_exists(dir_path: str) -> None:
    """
    确保目录存在，如果不存在则创建。

    Args:
        dir_path: 目录路径

    Raises:
        OSError: 如果无法创建目录
    """
    os.makedirs(dir_path, exist_ok=True)


def safe_filename(filename: str) -> str:
    """
    生成安全的文件名，移除或替换不安全的字符。

    Args:
        filename: 原始文件名

    Returns:
        str: 安全的文件名
    """
    unsafe_chars = '<>:"/\\|?*'

    safe_name = filename
    for char in unsafe_chars:
        safe_name = safe_name.replace(char, "_")

    # 移除前后空格和点号
    safe_name = safe_name.strip(" .")

    if not safe_name:
        safe_name = "unnamed"

    return safe_name


def read_lines(file_path: str):
    """逐行读取UTF-8文本文件，去掉行尾换行符"""
    with open(file_path, encoding="utf-8") as fin:
        for line in fin:
            yield line.rstrip("\r\n")
