"""app/session.py - 逐行读取的交互会话"""
import logging
import sys

from calculator import ExpressionEvaluator
from config.config import SESSION_CONFIG
from utils.formatting import format_number

logger = logging.getLogger(__name__)

GREETING = (
    "\n------ Welcome to Calculator 2.0 ------\n"
    "Available operations (PEMDAS): (), %, ^, *, /, +, -. Negative numbers supported!\n"
    "Type 'exit' to close program. Type 'help' for hints.\n"
)

HELP_TEXT = (
    "\nEnter any mathematical expression using numbers and any of the following operations: (), %, ^, *, /, +, -."
    "\nType 'exit' to close program.\n"
)

FAREWELL = "Program finished with exit code 0.\n\n"


class CalculatorSession:
    """读一行 -> 判断是否命令 -> 求值并输出 Answer/Error"""

    def __init__(self, evaluator=None, stdin=None, stdout=None, stderr=None, config=None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.config = {**SESSION_CONFIG, **(config or {})}
        self.evaluated = 0

    def greet(self):
        self.stdout.write(GREETING)

    def show_help(self):
        self.stdout.write(HELP_TEXT)

    def handle_line(self, line):
        """
        处理一行输入
        Returns:
            False 表示会话应结束（exit），否则 True
        """
        line = line.rstrip("\r\n")

        if line == self.config["exit_command"]:
            self.stdout.write(FAREWELL)
            return False

        if line == self.config["help_command"]:
            self.show_help()
            return True

        result = self.evaluator.evaluate(line)
        self.evaluated += 1
        if result.ok:
            answer = format_number(result.value, self.config["number_format"])
            self.stdout.write(f"{self.config['answer_prefix']}{answer}\n")
        else:
            self.stderr.write(f"{self.config['error_prefix']}{result.message}\n")
        return True

    def run(self):
        """
        运行会话直到 exit 或输入结束
        Returns:
            求值过的表达式数量
        """
        self.greet()
        while True:
            self.stdout.write(self.config["prompt"])
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                logger.debug("End of input, closing session")
                break
            if not self.handle_line(line):
                break
        logger.info(f"Session finished, {self.evaluated} expressions evaluated")
        return self.evaluated
