"""
Live password analyzer for the derive command.

Provides a minimal masked input that shows the derived length and
character categories as the user types, with Enter accepting the password.
"""

from typing import Callable, List, Tuple

from prompt_toolkit import Application
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import BufferControl, FormattedTextControl
from prompt_toolkit.layout.processors import PasswordProcessor

from ..charsets import CharCategory
from ..derive import derive_options
from ..options import GenerationOptions
from ..utils.protected import ProtectedValue


class LiveAnalyzerApp:
    """Masked password input with live category feedback."""

    def __init__(self, on_accept: Callable[[ProtectedValue], None]):
        """
        Initialize the live analyzer.

        Args:
            on_accept: Callback receiving the protected password on Enter
        """
        self.on_accept = on_accept
        self.derived = GenerationOptions()

        self.input_buffer = Buffer(
            multiline=False,
            on_text_changed=self._on_text_changed
        )

        self.bindings = self._create_key_bindings()
        self.layout = self._create_layout()

        self.app = Application(
            layout=self.layout,
            key_bindings=self.bindings,
            full_screen=False,
            mouse_support=False
        )

    def _create_key_bindings(self) -> KeyBindings:
        """Create key bindings for the interface."""
        bindings = KeyBindings()

        @bindings.add('c-c')
        @bindings.add('escape')
        def _(event):
            """Quit without accepting."""
            self.input_buffer.reset()
            event.app.exit()

        @bindings.add('enter')
        def _(event):
            """Accept the typed password and exit."""
            self.accept()
            event.app.exit()

        return bindings

    def _create_layout(self) -> Layout:
        """Create the application layout."""
        input_window = Window(
            content=BufferControl(
                buffer=self.input_buffer,
                input_processors=[PasswordProcessor()],
            ),
            height=1,
            wrap_lines=False,
        )

        categories_window = Window(
            content=FormattedTextControl(
                text=self._get_categories_text,
                focusable=False,
                show_cursor=False
            ),
            height=len(CharCategory),
            wrap_lines=False
        )

        status_window = Window(
            content=FormattedTextControl(
                text=self._get_status_text,
                focusable=False
            ),
            height=1,
            style="class:status"
        )

        root_container = HSplit([
            Window(
                content=FormattedTextControl(text="Password analyzer"),
                height=1,
                style="class:title"
            ),
            input_window,
            categories_window,
            status_window,
        ])

        return Layout(root_container, focused_element=input_window)

    def _on_text_changed(self, buffer: Buffer) -> None:
        """Re-derive options whenever the input changes."""
        self.derived = derive_options(buffer.text)

    def accept(self) -> None:
        """Hand the current input to the callback as a protected value."""
        value = ProtectedValue.from_string(self.input_buffer.text)
        self.input_buffer.reset()
        self.on_accept(value)

    def _get_categories_text(self) -> FormattedText:
        """Get one line per category, marking the ones present."""
        lines: List[Tuple[str, str]] = []
        for category in CharCategory:
            if self.derived.has(category):
                lines.append(("class:present", f"  [x] {category.value}\n"))
            else:
                lines.append(("class:absent", f"  [ ] {category.value}\n"))
        return FormattedText(lines)

    def _get_status_text(self) -> FormattedText:
        """Get formatted text for status line."""
        length = self.derived.length
        info = f"{length} character{'s' if length != 1 else ''}"
        instructions = " • Enter: accept • Esc: cancel"

        return FormattedText([
            ("class:length", info),
            ("class:instructions", instructions)
        ])

    def run(self) -> None:
        """Run the live analyzer."""
        self.app.run()


def live_analyze(on_accept: Callable[[ProtectedValue], None]) -> None:
    """
    Show the live analyzer until the user accepts or cancels.

    Args:
        on_accept: Callback receiving the protected password on Enter
    """
    app = LiveAnalyzerApp(on_accept)
    app.run()
