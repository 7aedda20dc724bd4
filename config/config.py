"""配置文件"""

# 表达式引擎参数
ENGINE_CONFIG = {
    "cache_size": 256,  # ExpressionEvaluator 缓存的后缀表达式数量
    "right_assoc_operators": ["^"],
}

# 显示参数
DISPLAY_CONFIG = {
    "significant_digits": 12,  # 结果保留12位有效数字
    "empty_display": "0",  # 缓冲区为空时显示的内容
    "non_finite_display": "Error",  # inf / nan 结果
    "error_prefix": "Error: ",  # 求值失败时的消息前缀
}

# 输入过滤：append 只接受这些字符组成的片段
INPUT_CONFIG = {
    "allowed_pattern": r"^[0-9a-zA-Z+\-*/^().]*$",
    "keypad_commands": {
        "clear": "clear",
        "back": "backspace",
        "equals": "evaluate",
    },
    "key_commands": {
        "Enter": "evaluate",
        "Backspace": "backspace",
        "Escape": "clear",
    },
    "key_pattern": r"^[0-9+\-*/^().]$",
}

# 批量模式
BATCH_CONFIG = {
    "expression_column": "expression",
    "result_column": "result",
    "display_column": "display",
    "output_suffix": "_results",
    "log_every": 1000,  # 每处理多少行打一次进度日志
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    from core.token_system import OPERATOR_DEFINITIONS

    assert DISPLAY_CONFIG["significant_digits"] == 12, "结果显示固定为12位有效数字"
    assert DISPLAY_CONFIG["error_prefix"].startswith("Error"), "错误消息必须以 Error 开头"
    assert ENGINE_CONFIG["cache_size"] > 0, "缓存大小必须为正"
    right_assoc = sorted(sym for sym, spec in OPERATOR_DEFINITIONS.items() if spec.right_assoc)
    assert right_assoc == sorted(ENGINE_CONFIG["right_assoc_operators"]), "只有 ^ 是右结合"
    return True
