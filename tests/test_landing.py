# test_landing.py

import io
import httpx
from unittest.mock import AsyncMock, Mock

import pytest

from finantic.display import Display
from finantic.display.terminal import DisplayTerminal
from finantic.display.animations.renderer import TaglineRenderer
from finantic.display.animations.typewriter import Mode
from finantic.landing import Landing
from finantic.taglines import DEFAULT_TAGLINES, WAITLIST_TAGLINE
from finantic.waitlist.client import WaitlistClient


class MockLogger:
    def __init__(self):
        self.debug = Mock()
        self.info = Mock()
        self.warning = Mock()
        self.error = Mock()


class TestTaglineRenderer:

    def test_rewrites_current_line_with_caret(self):
        out = io.StringIO()
        renderer = TaglineRenderer(DisplayTerminal(stream=out))
        renderer("Hi")
        assert out.getvalue() == "\r\033[2KHi|"
        assert renderer.frame == "Hi"

    def test_rewrites_fixed_row_and_restores_cursor(self):
        out = io.StringIO()
        renderer = TaglineRenderer(DisplayTerminal(stream=out), caret="_", row=7)
        renderer("Go")
        assert out.getvalue() == "\0337\033[7;1H\033[2KGo_\0338"

    def test_styled_frame_keeps_text(self):
        display = Display(terminal=DisplayTerminal(stream=io.StringIO()))
        renderer = display.animations.create_renderer()
        renderer("Join")
        assert "Join" in display.terminal.stream.getvalue()
        assert display.style.get_visible_length(renderer.format("Join")) == len("Join|")


class TestLanding:

    def setup_method(self):
        self.out = io.StringIO()
        self.display = Display(terminal=DisplayTerminal(stream=self.out))
        self.client = Mock()
        self.client.submit = AsyncMock(return_value={'success': True})
        self.logger = MockLogger()
        self.landing = Landing(self.display, self.client, self.logger)

    def test_fresh_landing_has_closed_empty_form(self):
        landing = Landing(self.display, self.client, self.logger)
        assert not landing.show_form
        assert (landing.name, landing.email) == ("", "")
        assert list(landing.phrases) == DEFAULT_TAGLINES

    @pytest.mark.asyncio
    async def test_rejected_submission_still_closes_form(self):
        reply = {'success': False, 'message': 'Name and email are required'}
        transport = httpx.MockTransport(lambda request: httpx.Response(400, json=reply))
        async with WaitlistClient('http://waitlist.test/api/waitlist', logger=self.logger,
                                  transport=transport) as client:
            landing = Landing(self.display, client, self.logger)
            landing.open_form()
            landing.name = "Ada"
            assert await landing.submit() == reply
            landing.leave_form()
        assert not landing.show_form
        assert (landing.name, landing.email) == ("", "")
        assert list(landing.typewriter.phrases) == DEFAULT_TAGLINES

    def test_starts_with_taglines_and_reset_enabled(self):
        assert list(self.landing.typewriter.phrases) == DEFAULT_TAGLINES
        assert self.landing.typewriter.reset_on_phrase_change
        assert "F I N A N T I C" in self.landing.logo

    def test_opening_form_switches_to_waitlist_tagline(self):
        self.landing.typewriter.machine.state.text = "The AI"
        self.landing.open_form()
        assert list(self.landing.typewriter.phrases) == WAITLIST_TAGLINE
        assert self.landing.typewriter.state.text == ""
        assert self.landing.typewriter.state.mode is Mode.TYPING

    def test_leaving_empty_form_restores_taglines(self):
        self.landing.open_form()
        self.landing.leave_form()
        assert not self.landing.show_form
        assert list(self.landing.typewriter.phrases) == DEFAULT_TAGLINES

    def test_leaving_filled_form_keeps_it_open(self):
        self.landing.open_form()
        self.landing.email = "ada@example.com"
        self.landing.leave_form()
        assert self.landing.show_form
        assert list(self.landing.typewriter.phrases) == WAITLIST_TAGLINE

    @pytest.mark.asyncio
    async def test_blank_submission_sends_nothing(self):
        self.landing.open_form()
        self.landing.name, self.landing.email = "  ", ""
        assert await self.landing.submit() is None
        self.client.submit.assert_not_called()

    @pytest.mark.asyncio
    async def test_successful_submission_clears_and_closes(self):
        self.landing.open_form()
        self.landing.name, self.landing.email = "Ada", "ada@example.com"
        assert await self.landing.submit() == {'success': True}
        self.client.submit.assert_awaited_once_with("Ada", "ada@example.com")
        assert (self.landing.name, self.landing.email) == ("", "")
        assert not self.landing.show_form
        assert list(self.landing.typewriter.phrases) == DEFAULT_TAGLINES

    @pytest.mark.asyncio
    async def test_failed_submission_keeps_fields(self):
        self.client.submit = AsyncMock(return_value=None)
        self.landing.open_form()
        self.landing.name, self.landing.email = "Ada", "ada@example.com"
        assert await self.landing.submit() is None
        assert self.landing.show_form
        assert self.landing.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_form_flow_through_prompts(self):
        terminal = self.display.terminal
        terminal.prompt = AsyncMock(side_effect=["Ada", "ada@example.com"])
        await self.landing.run_form()
        self.client.submit.assert_awaited_once_with("Ada", "ada@example.com")
        assert not self.landing.show_form

    @pytest.mark.asyncio
    async def test_escape_closes_empty_form(self):
        terminal = self.display.terminal
        terminal.prompt = AsyncMock(return_value=None)
        await self.landing.run_form()
        self.client.submit.assert_not_called()
        assert not self.landing.show_form

    @pytest.mark.asyncio
    async def test_run_until_quit_key(self):
        terminal = self.display.terminal
        terminal.read_key = AsyncMock(side_effect=["q"])
        await self.landing.run()
        assert not self.landing.typewriter.running
        assert not self.landing.typewriter.pending

    @pytest.mark.asyncio
    async def test_enter_opens_form_then_quit(self):
        terminal = self.display.terminal
        terminal.read_key = AsyncMock(side_effect=["c-m", "c-c"])
        terminal.prompt = AsyncMock(side_effect=["", ""])
        await self.landing.run()
        assert terminal.prompt.await_count == 2
        self.client.submit.assert_not_called()
        assert not self.landing.typewriter.running


class TestInterface:

    def test_endpoint_argument_wins(self, monkeypatch):
        from finantic import Interface
        monkeypatch.setenv('FINANTIC_WAITLIST_ENDPOINT', 'http://env.test/api/waitlist')
        assert Interface(endpoint='http://arg.test/api/waitlist').settings.waitlist_endpoint == \
            'http://arg.test/api/waitlist'
        assert Interface().settings.waitlist_endpoint == 'http://env.test/api/waitlist'
