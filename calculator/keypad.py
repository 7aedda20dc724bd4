"""calculator/keypad.py - 把按钮标签和按键名翻译成 InputSession 调用"""
import re

from config.config import INPUT_CONFIG
from core.token_system import FUNCTION_DEFINITIONS

_SINGLE_KEY = re.compile(INPUT_CONFIG["key_pattern"])


class Keypad:

    def __init__(self, session):
        self.session = session

    def _dispatch(self, command):
        getattr(self.session, command)()

    def press(self, label):
        """按钮：clear / back / equals 为命令，函数名自动补上 '('，其余原样追加"""
        command = INPUT_CONFIG["keypad_commands"].get(label)
        if command:
            self._dispatch(command)
        elif label in FUNCTION_DEFINITIONS:
            self.session.append(label + '(')
        else:
            self.session.append(label)

    def key(self, name):
        """键盘：Enter / Backspace / Escape 为命令，单个数字或操作符追加，其余忽略"""
        command = INPUT_CONFIG["key_commands"].get(name)
        if command:
            self._dispatch(command)
        elif _SINGLE_KEY.fullmatch(name):
            self.session.append(name)
