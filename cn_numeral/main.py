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

import argparse
import json
import os
import sys
import time

from .chinese.numeral_extractor import ChineseNumeralExtractor
from .core.logger import LOG_LEVELS, SIMPLE_FORMAT, reset_logging, setup_logging
from .core.utils import read_lines

MODES = ("parse", "find", "integer", "chars")


def run_mode(extractor, mode, text):
    """按模式处理一条文本，返回可打印的结果字符串"""
    if mode == "parse":
        return extractor.parse(text)
    if mode == "find":
        return json.dumps(extractor.find_numerals(text), ensure_ascii=False)
    if mode == "integer":
        value = extractor.to_integer(text)
        return "" if value is None else str(value)
    if mode == "chars":
        return extractor.chars_to_arabic(text)
    raise ValueError(f"Unsupported mode: {mode}")


def process_file(extractor, mode, input_file, writer=print):
    total_lines = 0
    for line in read_lines(input_file):
        total_lines += 1
        writer(run_mode(extractor, mode, line))
    return total_lines


def print_usage_examples():
    """打印使用示例"""
    examples = """
使用示例：

1. 替换一段文本中的中文数字：
   cn-numeral --text "身高一百零五點七二公分"

2. 只列出找到的数字片段：
   cn-numeral --text "身價五千一百萬" --mode find

3. 整段文本转为整数：
   cn-numeral --text "負一億零五萬" --mode integer

4. 逐行处理文件并保存结果：
   cn-numeral --file input.txt --output result.txt

5. 强制重建FST缓存：
   cn-numeral --text "十八" --cache_dir ./fst --overwrite_cache
"""
    print(examples)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cn-numeral",
        description="Chinese numeral to Arabic numeral converter - 口语中文数字转阿拉伯数字工具",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--text", help="Input text string")
    parser.add_argument("--file", help="Path to input file, one text per line")
    parser.add_argument("--output", help="Path to output file for saving --file results")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default="parse",
        help="parse: rewrite numerals in place; find: list numerals; "
        "integer: whole input as one integer; chars: digit-by-digit transliteration",
    )
    parser.add_argument("--cache_dir", help="Directory for the compiled FST cache")
    parser.add_argument(
        "--overwrite_cache",
        action="store_true",
        help="Force rebuild and overwrite existing FST cache files",
    )
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument(
        "--log_level",
        choices=sorted(LOG_LEVELS),
        help="Override CN_NUMERAL_LOG_LEVEL for this run",
    )
    return parser


def main(argv=None):  # noqa: C901
    """Command line entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 参数验证：必须提供 --text 或 --file 之一
    if args.text is None and not args.file:
        print("错误：必须提供 --text 或 --file 参数之一\n", file=sys.stderr)
        parser.print_help()
        print_usage_examples()
        return 1

    if args.text is not None and args.file:
        print("错误：--text 和 --file 参数不能同时使用\n", file=sys.stderr)
        parser.print_help()
        return 1

    if args.output and not args.file:
        print("错误：--output 参数只能与 --file 参数一起使用\n", file=sys.stderr)
        parser.print_help()
        return 1

    if args.file and not os.path.exists(args.file):
        print(f"错误：文件不存在: {args.file}\n", file=sys.stderr)
        return 1

    if args.log_level:
        reset_logging()
        setup_logging(level=args.log_level, format_string=SIMPLE_FORMAT)

    start_time = time.time()
    extractor = ChineseNumeralExtractor(
        cache_dir=args.cache_dir,
        overwrite_cache=args.overwrite_cache,
        config_path=args.config,
    )
    build_time = time.time() - start_time

    start_time = time.time()
    if args.text is not None:
        print(run_mode(extractor, args.mode, args.text))
        total_lines = 1
    elif args.output:
        with open(args.output, "w", encoding="utf-8") as f:

            def writer(msg):
                try:
                    print(msg)
                except BrokenPipeError:
                    # 忽略管道中断错误（如使用 head 命令时）
                    pass
                f.write(msg + "\n")

            total_lines = process_file(extractor, args.mode, args.file, writer=writer)
    else:
        total_lines = process_file(extractor, args.mode, args.file)

    print(f"FST状态数: {extractor.tokenizer.tagger.num_states()}", file=sys.stderr)
    print(f"Lines: {total_lines}", file=sys.stderr)
    print(f"Build time: {build_time}", file=sys.stderr)
    print(f"Process time: {time.time() - start_time}", file=sys.stderr)
    print(f"Tokenizer time: {extractor.tokenizer_time}", file=sys.stderr)
    print(f"Reducer time: {extractor.reducer_time}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
