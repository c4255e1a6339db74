"""Tests for chatpal.interface.ui — reply layout and console output."""

from chatpal.core.config import BotConfig
from chatpal.interface.ui import render_reply


class TestRenderReply:
    def test_plain_lines_indented(self):
        assert render_reply("hello\nworld").plain == "  hello\n  world\n"

    def test_paragraphs_separated(self):
        assert render_reply("one\n\ntwo").plain == "  one\n\n  two\n"

    def test_headings(self):
        text = render_reply("# Title\n## Section\n### Sub")
        assert text.plain == "\n Title\n\n Section\n   Sub\n"

    def test_heading_styles(self):
        text = render_reply("### Sub")
        assert any(span.style == "bold blue" for span in text.spans)


class TestChatUI:
    def test_error_with_brackets(self, ui, console):
        ui.error('Remote call failed (400): {"error": [/oops]}')
        assert "[/oops]" in console.file.getvalue()

    def test_banner(self, ui, console):
        ui.banner(BotConfig(name="Buddy", username="Sam", model="m-1", max_history=7))
        out = console.file.getvalue()
        assert "Buddy" in out
        assert "m-1" in out
        assert "7 exchanges" in out

    def test_token_usage(self, ui, console):
        ui.token_usage(17, 2000)
        assert "Tokens used: 17/2000" in console.file.getvalue()

    def test_bracketed_config_values(self, ui, console):
        config = BotConfig(name="Pal [/]", username="[/b]", model="m[/x]")
        ui.banner(config)
        with ui.thinking(config):
            pass
        ui.reply(config.name, "hi")
        out = console.file.getvalue()
        assert "Pal [/]" in out
        assert "[/b]" in out
        assert "m[/x]" in out
