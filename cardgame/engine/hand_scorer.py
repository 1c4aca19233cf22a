"""整手牌计分 - 切分、校验、逐张计分并应用王牌倍数"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from .card import Card, CharType, classify, parse_card, score_card
from .errors import (
    CardParseError,
    DuplicateCardError,
    HandError,
    InvalidInputError,
    TooManyJokersError,
    UnrecognizedCardError,
)

logger = logging.getLogger(__name__)

# 一手牌最多允许的王牌数（倍数按 2 的整数次幂计算，上限不可随意放开）
MAX_JOKERS = 2

SEPARATOR = ","


@dataclass(frozen=True)
class ScoredCard:
    """一张已计分的牌"""
    token: str
    card: Card
    score: int


@dataclass(frozen=True)
class HandScore:
    """一手牌的计分明细"""
    cards: Tuple[ScoredCard, ...]
    subtotal: int
    joker_count: int

    @property
    def multiplier(self) -> int:
        return 2 ** self.joker_count

    @property
    def total(self) -> int:
        return self.subtotal * self.multiplier


@dataclass(frozen=True)
class HandResult:
    """计分结果：score 与 error 二选一"""
    score: Optional[HandScore] = None
    error: Optional[HandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ============================================================
#  输入预处理
# ============================================================

def split_tokens(text: str) -> List[str]:
    """
    去除空格、检查非法字符并按逗号切分。
    任何非法字符或空记号都抛出 InvalidInputError。
    """
    normalized = text.replace(" ", "")

    for ch in normalized:
        if ch != SEPARATOR and classify(ch) == CharType.INVALID:
            logger.debug("拒绝输入 %r: 非法字符 %r", text, ch)
            raise InvalidInputError()

    tokens = [t.strip() for t in normalized.split(SEPARATOR)]
    if any(not t for t in tokens):
        logger.debug("拒绝输入 %r: 存在空记号", text)
        raise InvalidInputError()
    return tokens


# ============================================================
#  计分
# ============================================================

def score_hand_detailed(text: str) -> HandScore:
    """按输入顺序逐张处理，遇到第一个错误立即中止"""
    tokens = split_tokens(text)

    scored: List[ScoredCard] = []
    seen: Set[str] = set()
    subtotal = 0
    joker_count = 0

    for token in tokens:
        try:
            card = parse_card(token)
        except CardParseError as e:
            # 具体原因只记日志，对外统一为 "Card not recognised"
            logger.debug("无法识别的牌 %r: %s (%s)", token, e.detail, e.kind.value)
            raise UnrecognizedCardError() from None

        if card.is_joker:
            joker_count += 1
            if joker_count > MAX_JOKERS:
                logger.debug("拒绝输入 %r: 王牌数超过 %d", text, MAX_JOKERS)
                raise TooManyJokersError()
            scored.append(ScoredCard(token=token, card=card, score=0))
            continue

        key = token.upper()
        if key in seen:
            logger.debug("拒绝输入 %r: 重复的牌 %r", text, token)
            raise DuplicateCardError()
        seen.add(key)

        points = score_card(card)
        subtotal += points
        scored.append(ScoredCard(token=token, card=card, score=points))

    result = HandScore(cards=tuple(scored), subtotal=subtotal, joker_count=joker_count)
    logger.debug("手牌 %r 得分 %d (小计 %d × %d)", text, result.total, subtotal, result.multiplier)
    return result


def score_hand(text: str) -> int:
    """计算一手牌的总分，失败抛出 HandError 子类"""
    return score_hand_detailed(text).total


def evaluate_hand(text: str) -> HandResult:
    """计分并把 HandError 转为结果值，供终端与 Web 外壳使用"""
    try:
        return HandResult(score=score_hand_detailed(text))
    except HandError as e:
        return HandResult(error=e)
