"""牌的定义 - 计分用扑克牌的数据模型、字符分类与单张解析"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict

from .errors import CardParseError, ParseErrorKind


class CharType(str, Enum):
    """字符分类"""
    NUMBER = "NUMBER"     # 十进制数字
    LETTER = "LETTER"     # 字母
    INVALID = "INVALID"   # 其它符号


class Rank(str, Enum):
    """点数枚举（值为输入中的点数字符）"""
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"
    JOKER = "JOKER"

    @property
    def weight(self) -> int:
        return RANK_WEIGHT[self]


class Suit(str, Enum):
    """花色枚举（值为输入中的花色字符）"""
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"
    JOKER = "JOKER"

    @property
    def weight(self) -> int:
        return SUIT_WEIGHT[self]


# 计分权重表：王牌的点数与花色权重都固定为 0，保证王牌单张得分恒为 0
RANK_WEIGHT: Dict[Rank, int] = {
    Rank.TWO: 2, Rank.THREE: 3, Rank.FOUR: 4, Rank.FIVE: 5,
    Rank.SIX: 6, Rank.SEVEN: 7, Rank.EIGHT: 8, Rank.NINE: 9,
    Rank.TEN: 10, Rank.JACK: 11, Rank.QUEEN: 12, Rank.KING: 13,
    Rank.ACE: 14, Rank.JOKER: 0,
}

SUIT_WEIGHT: Dict[Suit, int] = {
    Suit.CLUBS: 1, Suit.DIAMONDS: 2, Suit.HEARTS: 3, Suit.SPADES: 4,
    Suit.JOKER: 0,
}

# 显示映射
RANK_DISPLAY = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "10",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A", Rank.JOKER: "Joker",
}

SUIT_DISPLAY = {
    Suit.CLUBS: "♣", Suit.DIAMONDS: "♦", Suit.HEARTS: "♥",
    Suit.SPADES: "♠", Suit.JOKER: "",
}

# 王牌的两字符记号（J + R，R 不是任何普通花色）
JOKER_TOKEN = "JR"

# 输入字符 → 枚举（不含王牌哨兵）
_RANK_BY_SYMBOL = {r.value: r for r in Rank if r is not Rank.JOKER}
_SUIT_BY_SYMBOL = {s.value: s for s in Suit if s is not Suit.JOKER}


@dataclass(frozen=True)
class Card:
    """一张计分用的牌"""
    rank: Rank
    suit: Suit
    is_joker: bool = False

    @property
    def code(self) -> str:
        """规范化的两字符记号，如 TD / JR"""
        if self.is_joker:
            return JOKER_TOKEN
        return f"{self.rank.value}{self.suit.value}"

    @property
    def display(self) -> str:
        if self.is_joker:
            return "Joker"
        return f"{RANK_DISPLAY[self.rank]}{SUIT_DISPLAY[self.suit]}"

    def __repr__(self) -> str:
        return self.display


JOKER = Card(rank=Rank.JOKER, suit=Suit.JOKER, is_joker=True)


def classify(ch: str) -> CharType:
    """判断单个字符是数字、字母还是非法字符"""
    if len(ch) != 1:
        raise ValueError(f"需要单个字符, 实际为 {ch!r}")
    if ch.isdecimal():
        return CharType.NUMBER
    if ch.isalpha():
        return CharType.LETTER
    return CharType.INVALID


def parse_rank(ch: str) -> Rank:
    """点数字符 → Rank，只接受 2-9 与 T/J/Q/K/A（不区分大小写）"""
    if classify(ch) == CharType.INVALID:
        raise CardParseError(ParseErrorKind.INVALID_RANK, f"非法点数字符: {ch!r}")
    rank = _RANK_BY_SYMBOL.get(ch.upper())
    if rank is None:
        raise CardParseError(ParseErrorKind.INVALID_RANK, f"非法点数字符: {ch!r}")
    return rank


def parse_suit(ch: str) -> Suit:
    """花色字符 → Suit，只接受 C/D/H/S（不区分大小写）"""
    if classify(ch) != CharType.LETTER:
        raise CardParseError(ParseErrorKind.INVALID_SUIT, f"非法花色字符: {ch!r}")
    suit = _SUIT_BY_SYMBOL.get(ch.upper())
    if suit is None:
        raise CardParseError(ParseErrorKind.INVALID_SUIT, f"非法花色字符: {ch!r}")
    return suit


def parse_card(token: str) -> Card:
    """
    解析两字符牌面记号（如 2C、td、JR）。
    调用方负责去除空白；失败抛出 CardParseError，不会返回残缺的牌。
    """
    if len(token) != 2:
        raise CardParseError(ParseErrorKind.MALFORMED, f"牌面记号必须为两个字符: {token!r}")

    if token.upper() == JOKER_TOKEN:
        return JOKER

    return Card(rank=parse_rank(token[0]), suit=parse_suit(token[1]))


def score_card(card: Card) -> int:
    """单张得分 = 点数权重 × 花色权重（王牌恒为 0）"""
    return card.rank.weight * card.suit.weight
