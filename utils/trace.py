"""utils/trace.py - 可注入的诊断追踪（旁路，不影响计算结果）"""
import logging

logger = logging.getLogger(__name__)


class TraceSink:
    """默认实现什么都不做；子类按需覆盖"""

    def stage(self, name, tokens):
        """某一阶段（分词/后缀转换）完成后的Token序列"""

    def pushed(self, value):
        """数值入栈"""

    def popped(self, value):
        """数值出栈"""

    def applied(self, symbol, operands, result):
        """操作符作用于操作数得到结果"""


class LoggingTraceSink(TraceSink):
    """把追踪事件写到日志（debug 级别）"""

    def __init__(self, log=None, level=logging.DEBUG):
        self.log = log or logger
        self.level = level

    def stage(self, name, tokens):
        self.log.log(self.level, f"--- Debug: {name} ---")
        for token in tokens:
            self.log.log(self.level, f"{token.type.value}: {token}")

    def pushed(self, value):
        self.log.log(self.level, f"Push {value:g} onto stack")

    def popped(self, value):
        self.log.log(self.level, f"Pop {value:g} from stack")

    def applied(self, symbol, operands, result):
        args = ' and '.join(f"{x:g}" for x in operands)
        self.log.log(self.level, f"Applying {symbol} to {args} -> {result:g}")


class RecordingTraceSink(TraceSink):
    """按顺序记录全部事件，便于检查"""

    def __init__(self):
        self.events = []

    def stage(self, name, tokens):
        self.events.append(('stage', name, tuple(tokens)))

    def pushed(self, value):
        self.events.append(('push', float(value)))

    def popped(self, value):
        self.events.append(('pop', float(value)))

    def applied(self, symbol, operands, result):
        self.events.append(('apply', symbol, tuple(float(x) for x in operands), float(result)))

    def clear(self):
        self.events.clear()

