"""
phonopun 命令列介面

Usage:
    phonopun 已生一世 -c dicts/phonopun.json
    phonopun 已生一世 -c dicts/phonopun.json -t 成语 -t 歇后语 --ordered
    phonopun 已生一世 -c dicts/phonopun.json --json
    phonopun --list-types -c dicts/phonopun.json
"""

import argparse
import json
import sys
from typing import Dict, List, Optional

from phonopun import __version__
from phonopun.config import load_config
from phonopun.core.types import PunResult
from phonopun.engine import PunEngine

DEFAULT_CONFIG_PATH = "phonopun.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonopun",
        description="根據讀音在成語、歇後語與詞表中生成諧音梗",
    )
    parser.add_argument("word", nargs="?", help="要嵌入的詞")
    parser.add_argument(
        "-c", "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"JSON 配置檔 (預設: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-t", "--type",
        dest="types",
        action="append",
        default=None,
        help="只查詢指定分類，可重複指定；省略時查詢全部",
    )
    parser.add_argument(
        "--ordered",
        action="store_true",
        help="使用有序比對（預設為無序比對）",
    )
    parser.add_argument(
        "-n", "--limit",
        type=int,
        default=None,
        help="每個分類最多顯示筆數（預設為配置的 initial_display_size）",
    )
    parser.add_argument("--json", action="store_true", help="以 JSON 輸出")
    parser.add_argument("--list-types", action="store_true", help="列出所有分類（依優先順序）")
    parser.add_argument("-v", "--verbose", action="store_true", help="輸出詳細日誌")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_pun(result: PunResult) -> str:
    """以 [] 標出被替換的字，後面附上原詞"""
    chars = list(result.pun)
    for index in sorted(result.highlights, reverse=True):
        if 0 <= index < len(chars):
            chars[index] = f"[{chars[index]}]"
    return f"{''.join(chars)}  <- {' / '.join(result.origins)}"


def print_results(results: Dict[str, List[PunResult]], limit: Optional[int]) -> None:
    for category, puns in results.items():
        print(f"== {category} ({len(puns)})")
        shown = puns if limit is None else puns[:limit]
        for pun in shown:
            print(f"  {format_pun(pun)}")
        if len(shown) < len(puns):
            print(f"  ... 另有 {len(puns) - len(shown)} 筆")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.word and not args.list_types:
        parser.error("請提供要嵌入的詞，或使用 --list-types")

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    engine = PunEngine(config, verbose=args.verbose)

    if args.list_types:
        for name in engine.get_all_types_ordered():
            print(name)
        return 0

    results = engine.generate(args.word, args.types, ignore_order=not args.ordered)

    if args.json:
        payload = {category: [pun.to_dict() for pun in puns] for category, puns in results.items()}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    limit = args.limit if args.limit is not None else config.initial_display_size
    print_results(results, limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
