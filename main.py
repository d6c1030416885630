"""主程序入口 - 交互式计算器 / 单次求值"""
import argparse
import logging
import sys

from config.config import *
from calculator import ExpressionEvaluator
from app import CalculatorSession
from utils.formatting import format_number
from utils.trace import LoggingTraceSink

logger = logging.getLogger(__name__)


def evaluate_once(evaluator, expression, stdout=None, stderr=None):
    """求值一次并输出，返回进程退出码"""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    result = evaluator.evaluate(expression)
    if result.ok:
        stdout.write(f"{SESSION_CONFIG['answer_prefix']}{format_number(result.value)}\n")
        return 0
    stderr.write(f"{SESSION_CONFIG['error_prefix']}{result.message}\n")
    return 1


def main(args):
    # 设置日志
    logging.basicConfig(
        level=args.log_level,
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    trace = LoggingTraceSink() if args.trace else None
    if trace is not None and logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        logger.warning("--trace given but log level is above DEBUG; trace output will be hidden")

    evaluator = ExpressionEvaluator(cache_size=args.cache_size, trace=trace)

    if args.expression is not None:
        return evaluate_once(evaluator, args.expression)

    session = CalculatorSession(evaluator)
    session.run()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive arithmetic expression evaluator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit instead of starting the interactive session"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=CALCULATOR_CONFIG["trace"],
        help="Log intermediate tokens and stack operations (needs --log_level DEBUG)"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--cache_size",
        type=int,
        default=CALCULATOR_CONFIG["cache_size"],
        help="Number of evaluated expressions to cache, 0 disables caching (default: %(default)s)"
    )
    return parser


def run():
    args = build_parser().parse_args()
    return main(args)


if __name__ == "__main__":
    sys.exit(run())
