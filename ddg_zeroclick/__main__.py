"""
命令行入口，打印每个查询的摘要。

用法: python -m ddg_zeroclick [--secure] [--no-html] QUERY...
"""
import argparse
import sys
from typing import List, Optional

from .clients.zeroclick_client import zero_click
from .core.exceptions import ZeroClickError
from .models.options import QueryOptions


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ddg_zeroclick", description="查询 DuckDuckGo 零点击 API 并打印摘要")
    parser.add_argument("queries", nargs="+", metavar="QUERY")
    parser.add_argument("--secure", action="store_true", help="使用 https")
    parser.add_argument("--no-html", action="store_true", help="去除文本字段中的 HTML")
    parser.add_argument("--skip-disambig", action="store_true", help="跳过消歧义类别")
    parser.add_argument("--no-redirect", action="store_true", help="不跟随 !bang 跳转")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """逐个查询并打印，任意一个失败时返回 1。"""
    args = _parse_args(argv)
    options = QueryOptions(
        secure=args.secure,
        no_html=args.no_html,
        skip_disambig=args.skip_disambig,
        no_redirect=args.no_redirect,
    )

    status = 0
    for query in args.queries:
        try:
            result = zero_click(query, options)
        except ZeroClickError as e:
            print(f"Error looking up {query}: {e}", file=sys.stderr)
            status = 1
            continue
        print(f"{query}: {result.abstract}")
    return status


if __name__ == "__main__":
    sys.exit(main())
