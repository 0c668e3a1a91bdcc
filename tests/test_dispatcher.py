from abi_console.repl import MenuCompleter, dispatcher, get_prompt_text, handle_command, run_repl
from abi_console.repl.menu import ROOT
from prompt_toolkit.document import Document

from conftest import ALICE, FakeBinding


def test_descend_and_go_up(make_ctx):
    ctx = make_ctx()
    assert handle_command(ctx, "events")
    assert get_prompt_text(ctx) == "events> "
    assert handle_command(ctx, "watch")
    assert get_prompt_text(ctx) == "events/watch> "

    handle_command(ctx, "..")
    assert get_prompt_text(ctx) == "events> "
    handle_command(ctx, "..")
    assert ctx.current == ROOT
    assert get_prompt_text(ctx) == "> "


def test_up_at_root_stays_put(make_ctx):
    ctx = make_ctx()
    assert handle_command(ctx, "..")
    assert ctx.current == ROOT


def test_blank_line_is_ignored(make_ctx):
    ctx = make_ctx()
    assert handle_command(ctx, "   ")
    assert ctx.current == ROOT


def test_unknown_command(make_ctx, capsys):
    ctx = make_ctx()
    handle_command(ctx, "constant")
    assert handle_command(ctx, "totalSupply")
    out = capsys.readouterr().out
    assert "unknown command: totalSupply" in out
    assert get_prompt_text(ctx) == "constant> "


def test_help_lists_entries(make_ctx, capsys):
    ctx = make_ctx()
    handle_command(ctx, "transact")
    handle_command(ctx, "help")
    out = capsys.readouterr().out
    for segment in ("approve", "deposit", "transfer", "..", "help", "exit"):
        assert segment in out


def test_leaf_runs_and_keeps_position(make_ctx, capsys):
    binding = FakeBinding(call_result=5)
    ctx = make_ctx([ALICE], binding=binding)
    handle_command(ctx, "constant")
    before = ctx.current

    assert handle_command(ctx, "balanceOf")
    assert ctx.current == before
    assert binding.calls == [("call", "balanceOf", [ALICE])]
    assert "=5" in capsys.readouterr().out


def test_exit_ends_loop(make_ctx):
    ctx = make_ctx()
    handle_command(ctx, "signer")
    assert handle_command(ctx, "exit") is False


def test_signer_show(make_ctx, key_signer, capsys):
    ctx = make_ctx()
    handle_command(ctx, "signer")
    handle_command(ctx, "show")
    assert "no signer configured" in capsys.readouterr().out

    ctx.signer = key_signer
    handle_command(ctx, "show")
    assert key_signer.address in capsys.readouterr().out


def test_completer_offers_current_menu(make_ctx):
    ctx = make_ctx()
    handle_command(ctx, "events")
    completer = MenuCompleter(ctx)
    found = [c.text for c in completer.get_completions(Document("w"), None)]
    assert found == ["watch"]

    found = [c.text for c in completer.get_completions(Document(""), None)]
    assert found == ["list", "watch", "..", "help", "exit"]


class ScriptedPromptSession:
    """Stands in for PromptSession, replaying lines and recording prompts."""

    lines = []
    prompts = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def prompt(self, message):
        ScriptedPromptSession.prompts.append(message)
        line = ScriptedPromptSession.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


def test_run_repl_prompts_with_menu_path(make_ctx, monkeypatch, capsys):
    monkeypatch.setattr(dispatcher, "PromptSession", ScriptedPromptSession)
    ScriptedPromptSession.lines = ["events", KeyboardInterrupt(), "list", "exit"]
    ScriptedPromptSession.prompts = []
    ctx = make_ctx()

    assert run_repl(ctx) == 0
    assert ScriptedPromptSession.prompts == ["> ", "events> ", "events> ", "events/list> "]
    assert "Goodbye!" in capsys.readouterr().out


def test_run_repl_ends_on_eof(make_ctx, monkeypatch):
    monkeypatch.setattr(dispatcher, "PromptSession", ScriptedPromptSession)
    ScriptedPromptSession.lines = [EOFError()]
    ScriptedPromptSession.prompts = []
    assert run_repl(make_ctx()) == 0
    assert ScriptedPromptSession.prompts == ["> "]
