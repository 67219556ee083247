"""
Unit tests for the live password analyzer.
"""

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import DummyInput
from prompt_toolkit.output import DummyOutput

from passforge.analyzer.live import LiveAnalyzerApp
from passforge.derive import derive_options


def _text(formatted) -> str:
    return "".join(fragment[1] for fragment in formatted)


class TestLiveAnalyzer:
    """Test live analyzer state without running the terminal UI."""

    @pytest.fixture
    def analyzer(self):
        """Create an analyzer bound to dummy terminal I/O."""
        accepted = []
        with create_app_session(input=DummyInput(), output=DummyOutput()):
            yield LiveAnalyzerApp(accepted.append), accepted

    def test_initial_state(self, analyzer):
        """Test nothing is derived before typing."""
        app, _ = analyzer

        assert app.derived.length == 0
        assert "0 characters" in _text(app._get_status_text())
        assert "[x]" not in _text(app._get_categories_text())

    def test_updates_while_typing(self, analyzer):
        """Test derived options follow the buffer."""
        app, _ = analyzer

        app.input_buffer.text = "Ab1"
        assert app.derived == derive_options("Ab1")

        categories = _text(app._get_categories_text())
        assert "[x] upper" in categories
        assert "[x] lower" in categories
        assert "[x] digits" in categories
        assert "[ ] special" in categories
        assert "3 characters" in _text(app._get_status_text())

    def test_singular_status(self, analyzer):
        """Test status wording for one character."""
        app, _ = analyzer

        app.input_buffer.text = "a"
        status = _text(app._get_status_text())
        assert status.startswith("1 character ")
        assert "characters" not in status

    def test_accept(self, analyzer):
        """Test accepting hands over a protected value and clears input."""
        app, accepted = analyzer

        app.input_buffer.text = "secret!"
        app.accept()

        assert len(accepted) == 1
        chars = []
        accepted[0].for_each_char(chars.append)
        assert "".join(chars) == "secret!"
        assert app.input_buffer.text == ""
