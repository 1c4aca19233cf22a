"""扑克手牌计分 - 主入口"""

import os
import sys
import logging
import argparse
from typing import Callable

from cardgame.engine.hand_scorer import evaluate_hand
from cardgame.ui.renderer import TerminalRenderer, PROMPT

EXIT_COMMAND = "exit"


def run_shell(renderer: TerminalRenderer, read: Callable[[str], str] = input,
              detail: bool = False) -> None:
    """交互式读入循环：逐行计分，输入 exit 或 EOF 结束"""
    renderer.show_welcome()

    while True:
        try:
            line = read(PROMPT)
        except EOFError:
            print()
            break

        if line.strip().lower() == EXIT_COMMAND:
            break

        renderer.show_result(evaluate_hand(line), detail=detail)

    renderer.show_farewell()


def run_once(renderer: TerminalRenderer, hand: str, detail: bool = False) -> int:
    """只计分一手牌，返回进程退出码"""
    total = renderer.show_result(evaluate_hand(hand), detail=detail)
    return 0 if total is not None else 1


def serve(host: str, port: int, log_level: str) -> None:
    """启动 HTTP 计分服务"""
    import uvicorn

    uvicorn.run("cardgame.web.server:app", host=host, port=port, log_level=log_level.lower())


def main(argv=None) -> int:
    """命令行入口"""
    parser = argparse.ArgumentParser(description="扑克手牌计分")
    parser.add_argument("--hand", type=str, default=None, help="直接计分一手牌, 如 2C,3D,JR")
    parser.add_argument("--detail", action="store_true", help="显示逐张计分明细")
    parser.add_argument("--no-color", action="store_true", help="关闭终端颜色")
    parser.add_argument("--serve", action="store_true", help="启动 HTTP 计分服务")
    parser.add_argument("--host", type=str, default=os.getenv("CARDGAME_HOST", "127.0.0.1"),
                        help="服务监听地址 (默认127.0.0.1)")
    parser.add_argument("--port", type=int, default=int(os.getenv("CARDGAME_PORT", "8000")),
                        help="服务监听端口 (默认8000)")
    parser.add_argument("--log-level", type=str, default=os.getenv("CARDGAME_LOG_LEVEL", "WARNING"),
                        help="日志级别 (默认WARNING)")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        serve(args.host, args.port, args.log_level)
        return 0

    renderer = TerminalRenderer(color=not args.no_color and sys.stdout.isatty())

    if args.hand is not None:
        return run_once(renderer, args.hand, detail=args.detail)

    run_shell(renderer, detail=args.detail)
    return 0


if __name__ == "__main__":
    sys.exit(main())
