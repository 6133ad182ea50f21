import io

from pypipex.heredoc import PROMPT, read_heredoc


def test_stops_at_limiter():
    prompts = io.StringIO()
    body = read_heredoc("EOF", io.StringIO("a\nb\nEOF\nc\n"), prompts)
    assert body == "a\nb\n"


def test_prompt_before_each_line():
    prompts = io.StringIO()
    read_heredoc("EOF", io.StringIO("a\nb\nEOF\nc\n"), prompts)
    assert prompts.getvalue() == PROMPT * 3


def test_prompt_text():
    prompts = io.StringIO()
    read_heredoc("END", io.StringIO("END\n"), prompts)
    assert prompts.getvalue() == "heredoc> "


def test_end_of_input_without_limiter_adds_newline():
    body = read_heredoc("EOF", io.StringIO("a\nb"), io.StringIO())
    assert body == "a\nb\n"


def test_limiter_without_newline_at_end():
    body = read_heredoc("EOF", io.StringIO("x\nEOF"), io.StringIO())
    assert body == "x\n"


def test_longer_line_is_not_limiter():
    body = read_heredoc("EOF", io.StringIO("EOFX\nEO\nEOF\n"), io.StringIO())
    assert body == "EOFX\nEO\n"


def test_empty_input():
    assert read_heredoc("EOF", io.StringIO(""), io.StringIO()) == ""


def test_defaults_use_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nSTOP\n"))
    body = read_heredoc("STOP")
    assert body == "hello\n"
    assert capsys.readouterr().out.count(PROMPT) == 2