"""命令行与交互循环测试"""

from typing import Iterator

import main
from cardgame.ui.renderer import TerminalRenderer


def _reader(lines: list):
    """按顺序返回预置输入，耗尽后抛出 EOFError"""
    it: Iterator[str] = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return read


class TestShell:

    def setup_method(self):
        self.renderer = TerminalRenderer(color=False)

    def test_scores_until_exit(self, capsys):
        main.run_shell(self.renderer, read=_reader(["2C,JR", "2C,2c", "EXIT", "3D"]))
        out = capsys.readouterr().out
        assert "Welcome to the Card Game!" in out
        assert "Hand score: 4" in out
        assert "Error: Cards cannot be duplicated" in out
        assert "Hand score: 6" not in out
        assert out.rstrip().endswith("Thanks for playing!")

    def test_eof_ends_loop(self, capsys):
        main.run_shell(self.renderer, read=_reader(["JR,JR,JR"]))
        out = capsys.readouterr().out
        assert "Error: A hand cannot contain more than two Jokers" in out
        assert "Thanks for playing!" in out

    def test_detail(self, capsys):
        main.run_shell(self.renderer, read=_reader(["2C,JR"]), detail=True)
        out = capsys.readouterr().out
        assert "倍数: ×2" in out
        assert "Joker" in out


class TestCommandLine:

    def test_one_shot_success(self, capsys):
        assert main.main(["--hand", "2C , 3D, 4H", "--no-color"]) == 0
        assert "Hand score: 20" in capsys.readouterr().out

    def test_one_shot_failure(self, capsys):
        assert main.main(["--hand", "2S|3D", "--no-color"]) == 1
        assert "Error: Invalid input string" in capsys.readouterr().out

    def test_serve_uses_configured_address(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main, "serve", lambda host, port, level: calls.append((host, port, level)))
        monkeypatch.setenv("CARDGAME_PORT", "9001")
        monkeypatch.delenv("CARDGAME_LOG_LEVEL", raising=False)
        assert main.main(["--serve", "--host", "0.0.0.0"]) == 0
        assert calls == [("0.0.0.0", 9001, "WARNING")]
