"""计分错误定义 - 单张解析错误与整手牌校验错误"""

from enum import Enum


class ParseErrorKind(str, Enum):
    """单张解析失败原因"""
    INVALID_RANK = "INVALID_RANK"   # 点数字符非法
    INVALID_SUIT = "INVALID_SUIT"   # 花色字符非法
    MALFORMED = "MALFORMED"         # 长度不是两个字符


class CardParseError(ValueError):
    """单张牌面记号无法解析"""

    def __init__(self, kind: ParseErrorKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class HandError(ValueError):
    """整手牌计分失败的基类，每个子类对应一条固定的提示文本"""
    code = "hand_error"
    message = "Invalid hand"

    def __init__(self):
        super().__init__(self.message)


class InvalidInputError(HandError):
    """输入含非法字符或出现空牌"""
    code = "invalid_input"
    message = "Invalid input string"


class UnrecognizedCardError(HandError):
    """某个记号无法识别为牌"""
    code = "unrecognised_card"
    message = "Card not recognised"


class DuplicateCardError(HandError):
    """普通牌重复出现"""
    code = "duplicate_card"
    message = "Cards cannot be duplicated"


class TooManyJokersError(HandError):
    """王牌超过两张"""
    code = "too_many_jokers"
    message = "A hand cannot contain more than two Jokers"
