# 计分引擎模块
from .card import (
    Card, CharType, Rank, Suit, JOKER, classify,
    parse_card, parse_rank, parse_suit, score_card,
)
from .errors import (
    CardParseError, ParseErrorKind, HandError, InvalidInputError,
    UnrecognizedCardError, DuplicateCardError, TooManyJokersError,
)
from .hand_scorer import (
    HandScore, HandResult, ScoredCard, MAX_JOKERS,
    split_tokens, score_hand, score_hand_detailed, evaluate_hand,
)
