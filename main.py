"""主程序入口 - 交互式计算器 / 单表达式求值 / 批量求值"""
import argparse
import logging
import sys

from config.config import DISPLAY_CONFIG, LOGGING_CONFIG, BATCH_CONFIG, validate_config
from calculator import InputSession, Keypad
from data.expression_batch import run_batch

logger = logging.getLogger(__name__)

REPL_COMMANDS = {
    "=": "equals",
    "<": "back",
    ":c": "clear",
}
QUIT_COMMAND = ":q"


def setup_logging(level):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOGGING_CONFIG["format"]
    )


def is_error_display(display):
    return (display == DISPLAY_CONFIG["non_finite_display"]
            or display.startswith(DISPLAY_CONFIG["error_prefix"]))


def evaluate_once(expression, out=print):
    """求值单个表达式并输出显示字符串；失败返回 1"""
    displays = []
    session = InputSession(displays.append)
    session.append(expression)
    if displays == [] and expression:
        # 含非法字符的片段会被会话静默丢弃
        logger.error(f"Expression contains disallowed characters: {expression!r}")
        out(DISPLAY_CONFIG["error_prefix"] + "invalid character")
        return 1
    display = session.evaluate()
    out(display)
    return 1 if is_error_display(display) else 0


def run_repl(read=input, out=print):
    """
    交互模式：每行是一个按钮标签或命令。
      =   求值
      <   退格
      :c  清空
      :q  退出
    其他内容原样交给 Keypad（函数名会自动补上 '('）。
    """
    session = InputSession(out)
    keypad = Keypad(session)
    session.clear()

    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            break
        if line == QUIT_COMMAND:
            break
        if not line:
            continue
        keypad.press(REPL_COMMANDS.get(line, line))
    return 0


def main(args):
    validate_config()

    if args.batch:
        logger.info("=== Batch evaluation ===")
        run_batch(args.batch, args.column, args.output_path)
        return 0

    if args.expr is not None:
        return evaluate_once(args.expr)

    return run_repl()


def build_parser():
    parser = argparse.ArgumentParser(description="Shunting-yard expression calculator")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--batch",
        type=str,
        default=None,
        help="Path to a CSV file with an expression column to evaluate"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column (batch mode)"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=None,
        help="Path to save the batch results (default: <input>_results.csv)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
