"""HTTP 后端服务 - 对外提供手牌计分接口"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cardgame.engine.card import Card, parse_card, score_card
from cardgame.engine.errors import CardParseError, UnrecognizedCardError
from cardgame.engine.hand_scorer import HandScore, evaluate_hand

logger = logging.getLogger(__name__)


class HandRequest(BaseModel):
    """计分请求体"""
    hand: str


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为 dict"""
    return {
        "code": c.code,
        "rank": c.rank.value,
        "suit": c.suit.value,
        "is_joker": c.is_joker,
        "score": score_card(c),
        "display": c.display,
    }


def score_to_dict(hand: str, s: HandScore) -> dict:
    """将 HandScore 序列化"""
    return {
        "hand": hand,
        "score": s.total,
        "subtotal": s.subtotal,
        "joker_count": s.joker_count,
        "multiplier": s.multiplier,
        "cards": [
            {"token": item.token, **card_to_dict(item.card)}
            for item in s.cards
        ],
    }


# ============================================================
#  FastAPI 应用
# ============================================================

app = FastAPI(title="Card Hand Scorer")


@app.get("/")
async def index():
    return {"name": "cardgame", "status": "ok"}


@app.post("/api/score")
async def score(req: HandRequest):
    """计算一手牌的得分"""
    result = evaluate_hand(req.hand)
    if not result.ok:
        logger.info("计分失败 hand=%r: %s", req.hand, result.error.message)
        return JSONResponse(
            status_code=422,
            content={"error": result.error.code, "message": result.error.message},
        )
    logger.info("计分成功 hand=%r score=%d", req.hand, result.score.total)
    return score_to_dict(req.hand, result.score)


@app.get("/api/cards/{token}")
async def card(token: str):
    """解析并计分单张牌"""
    try:
        c = parse_card(token)
    except CardParseError as e:
        logger.info("无法识别的牌 %r: %s", token, e.detail)
        return JSONResponse(
            status_code=404,
            content={
                "error": UnrecognizedCardError.code,
                "message": UnrecognizedCardError.message,
            },
        )
    return card_to_dict(c)
