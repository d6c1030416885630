"""配置文件"""

# 表达式求值参数
CALCULATOR_CONFIG = {
    "cache_size": 256,  # ExpressionEvaluator 的LRU缓存条目数，0表示不缓存
    "trace": False,  # 是否默认打开追踪
}

# 交互会话参数
SESSION_CONFIG = {
    "prompt": "\nEnter your expression: ",
    "exit_command": "exit",
    "help_command": "help",
    "answer_prefix": "Answer: ",
    "error_prefix": "Error: ",
    "number_format": "g",  # 与原程序的流输出一致（6位有效数字）
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# --log_level 可选值
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["cache_size"] >= 0, "cache_size 不能为负"
    assert SESSION_CONFIG["exit_command"] != SESSION_CONFIG["help_command"], "命令不能重名"
    assert LOGGING_CONFIG["level"] in LOG_LEVELS, "未知的日志级别"
    format(1.5, SESSION_CONFIG["number_format"])
    return True
