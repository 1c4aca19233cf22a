"""终端渲染器 - 在终端中展示手牌计分结果"""

from typing import Optional

from cardgame.engine.card import Card, Suit
from cardgame.engine.errors import HandError
from cardgame.engine.hand_scorer import HandResult, HandScore


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

WELCOME = "Welcome to the Card Game!"
INSTRUCTIONS = "Enter a hand of cards (comma-separated), e.g., 2C,3D,JR:"
PROMPT = "\nEnter hand (or 'exit' to quit): "
FAREWELL = "Thanks for playing!"


class TerminalRenderer:
    """终端渲染器"""

    def __init__(self, color: bool = True):
        self.color = color

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return f"{''.join(codes)}{text}{RESET}"

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_card(self, card: Card) -> str:
        """单张牌着色：红色花色高亮，王牌青色"""
        if card.is_joker:
            return self._paint(card.display, CYAN, BOLD)
        if card.suit in (Suit.HEARTS, Suit.DIAMONDS):
            return self._paint(card.display, RED)
        return card.display

    @staticmethod
    def separator(char: str = "─", width: int = 40) -> str:
        return char * width

    # ============================================================
    #  会话提示
    # ============================================================

    def show_welcome(self) -> None:
        print(self._paint(WELCOME, YELLOW, BOLD))
        print(INSTRUCTIONS)

    def show_farewell(self) -> None:
        print(FAREWELL)

    # ============================================================
    #  结果展示
    # ============================================================

    def show_score(self, score: HandScore, detail: bool = False) -> None:
        """展示总分，detail 时附带逐张明细"""
        if detail:
            self.show_breakdown(score)
        print(f"Hand score: {self._paint(str(score.total), GREEN, BOLD)}")

    def show_breakdown(self, score: HandScore) -> None:
        print(f"  {self.separator()}")
        for item in score.cards:
            pad = " " * max(0, 6 - len(item.card.display))
            print(f"  {item.token:<4} {self.format_card(item.card)}{pad} {item.score:>4}")
        print(f"  {self.separator()}")
        print(f"  小计: {score.subtotal}  王牌: {score.joker_count}  倍数: ×{score.multiplier}")

    def show_error(self, error: HandError) -> None:
        print(self._paint(f"Error: {error.message}", RED))

    def show_result(self, result: HandResult, detail: bool = False) -> Optional[int]:
        """展示一次计分结果，返回总分（失败时为 None）"""
        if not result.ok:
            self.show_error(result.error)
            return None
        self.show_score(result.score, detail=detail)
        return result.score.total
