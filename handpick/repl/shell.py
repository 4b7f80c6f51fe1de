"""EditorShell: a prompt_toolkit line editor completing from curated candidates."""

from __future__ import annotations

import logging
import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.styles import Style

from handpick.config import HandpickConfig
from handpick.exceptions import PersistenceError
from handpick.repl.channels import ChannelRouter
from handpick.repl.commands import BufferSelection, CandidateCommands, CompletionMenuProbe
from handpick.repl.complete import CandidateCompleter
from handpick.session import CandidateSession

logger = logging.getLogger("handpick.shell")

HELP = """\
:add TEXT       add TEXT as a candidate
:del [TEXT]     delete TEXT, or pick one interactively
:clear          delete every candidate
:save           write candidates to disk now
:list [PREFIX]  show candidates starting with PREFIX
:help           this message
c-t             add the selection (or the word before the cursor)
tab             complete from candidates"""


def _bind_candidate_keys(kb: KeyBindings, shell: EditorShell) -> None:
    """c-t adds the selection or word before the cursor as a candidate."""

    @kb.add("c-t")
    def add_selection(event):
        buf = event.current_buffer
        added = shell.commands.add_selection(
            BufferSelection(buf, shell.config.symbol_chars)
        )
        buf.exit_selection()
        if added is not None:
            shell.router.write("handpick", f"added {added!r}")
        event.app.invalidate()


def _bind_submit(kb: KeyBindings, shell: EditorShell) -> None:
    """Enter submits, except on a highlighted entry of the completion popup."""

    @kb.add("enter")
    def submit(event):
        event.current_buffer.validate_and_handle()

    def _highlighted() -> bool:
        buf = shell.session.default_buffer
        if not CompletionMenuProbe(buf).popup_visible():
            return False
        return buf.complete_state.current_completion is not None

    # Registered last so it takes precedence while an entry is highlighted.
    @kb.add("enter", filter=Condition(_highlighted))
    def accept_completion(event):
        buf = event.current_buffer
        buf.apply_completion(buf.complete_state.current_completion)


def _build_key_bindings(shell: EditorShell) -> KeyBindings:
    kb = KeyBindings()
    _bind_candidate_keys(kb, shell)
    _bind_submit(kb, shell)
    return kb


class EditorShell:
    """Line editor with candidate completion and :commands."""

    def __init__(self, config: HandpickConfig) -> None:
        self.config = config
        self.router = ChannelRouter.with_defaults()
        self.candidates = CandidateSession(config, on_error=self._report_error)
        self.store = self.candidates.store
        self.commands = CandidateCommands(self.store, self.candidates)
        self.completer = CandidateCompleter(self.store, config.symbol_chars)
        self.session = PromptSession(
            message=[("class:prompt", "> ")],
            completer=self.completer,
            complete_while_typing=True,
            bottom_toolbar=self._toolbar,
            style=Style.from_dict(
                {
                    "prompt": "#87d7ff bold",
                    "bottom-toolbar": "bg:#1c1c1c #808080",
                }
            ),
            key_bindings=_build_key_bindings(self),
        )

    def _report_error(self, err: PersistenceError) -> None:
        self.router.write("error", str(err))

    def _toolbar(self):
        n = len(self.store)
        return [
            ("", f" {n} candidate{'s' if n != 1 else ''} "),
            ("", f" {self.config.persistence_file_path} "),
        ]

    async def _run_command(self, text: str) -> None:
        """Handle a :command line."""
        try:
            parts = shlex.split(text[1:])
        except ValueError as e:
            self.router.write("error", f"cannot parse command: {e}")
            return
        if not parts:
            return
        cmd, args = parts[0], parts[1:]

        if cmd == "add":
            if not args:
                self.router.write("error", "usage: :add TEXT")
                return
            for arg in args:
                self.commands.add(arg)
            self.router.write("handpick", f"added {', '.join(map(repr, args))}")
        elif cmd == "del":
            if args:
                for arg in args:
                    if not self.commands.delete(arg):
                        self.router.write("handpick", f"no candidate {arg!r}")
                return
            name = await self.commands.delete_interactive()
            if name is not None:
                self.router.write("handpick", f"deleted {name!r}")
        elif cmd == "clear":
            n = self.commands.clear()
            self.router.write("handpick", f"cleared {n} candidate{'s' if n != 1 else ''}")
        elif cmd == "save":
            if self.commands.save():
                self.router.write("handpick", f"saved to {self.candidates.path}")
        elif cmd == "list":
            matches = self.commands.listing(args[0] if args else "")
            self.router.write("handpick", "\n".join(matches) if matches else "(no candidates)")
        elif cmd == "help":
            self.router.write("handpick", HELP)
        else:
            self.router.write("error", f"unknown command {text!r}, try :help")

    async def _dispatch(self, text: str) -> None:
        if text.startswith(":"):
            await self._run_command(text)
        else:
            self.router.write("text", text)

    async def run(self) -> None:
        """Main editor loop. Ctrl-D or Ctrl-C ends it and flushes candidates."""
        self.candidates.start()
        logger.debug("editor started with %d candidates", len(self.store))
        with patch_stdout():
            while True:
                try:
                    text = await self.session.prompt_async()
                except (KeyboardInterrupt, EOFError):
                    self.candidates.shutdown()
                    return

                if not text.strip():
                    continue
                await self._dispatch(text)
