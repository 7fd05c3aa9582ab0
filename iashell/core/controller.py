"""
Session controller.

Owns the Session, runs the read-eval loop and routes each input line:

    cd <dir>      change the working directory
    //model       pick another model
    //ask         turn auto-execution off
    //<request>   translate a request into a shell command
    anything else run it through the shell as typed

Translated commands go through the confirmation state machine:

    ASK  --x (always)-->  AUTO
    AUTO --//ask-->       ASK
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console

from iashell.core.errors import FatalSessionError, GatewayError
from iashell.core.executor import ExecutionResult, ShellExecutor
from iashell.core.intent import Intent, classify, resolves_to_home
from iashell.core.permissions import ConfirmationPrompt, ConfirmDecision
from iashell.core.sanitizer import SuggestedCommand
from iashell.core.session import Session, ExecutionMode
from iashell.core.status import StatusReporter
from iashell.llm.base_client import BaseLLMClient
from iashell.prompts import build_translation_prompt

SEPARATOR = "──────────────────────────────────────────────────"
SELECTION_PROMPT = "Enter the model number: "


class SessionController:
    """Drives one interactive shell session."""

    def __init__(
        self,
        client: BaseLLMClient,
        reader,
        executor: Optional[ShellExecutor] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        renderer=None,
        separator: str = SEPARATOR,
        prompt_reader=None
    ):
        """
        Args:
            client: Model gateway
            reader: Line reader (read_line(prompt) -> str or None at end of input)
            executor: Shell executor
            console: Console for normal output
            err_console: Console for errors
            renderer: Optional logo renderer (render(model_name), clear())
            separator: Line printed between prompts
            prompt_reader: Reader for the model number and confirmation answers;
                defaults to `reader`
        """
        self.client = client
        self.reader = reader
        self.prompt_reader = prompt_reader or reader
        self.executor = executor or ShellExecutor()
        self.console = console or Console()
        self.status = StatusReporter(self.console, err_console)
        self.renderer = renderer
        self.separator = separator
        self.confirmation = ConfirmationPrompt(self.prompt_reader, self.console)
        self.session: Optional[Session] = None

    # ------------------------------------------------------------------
    # Startup and model selection
    # ------------------------------------------------------------------
    def start(self) -> Session:
        """Choose a model, load it and create the session."""
        self._clear()
        model = self.choose_model()
        self.session = Session(selected_model=model)
        self.load_model(model)
        return self.session

    def choose_model(self) -> str:
        """
        Ask the user to pick one of the backend's models.

        Returns:
            The chosen model name

        Raises:
            FatalSessionError: Backend unreachable, no models, or input exhausted
        """
        self.console.print("Querying available Ollama models...")
        try:
            models = self.client.list_models()
        except GatewayError as e:
            raise FatalSessionError(f"Could not list Ollama models: {e}") from e

        if not models:
            raise FatalSessionError("No Ollama models are installed. (Use 'ollama pull ...')")

        self.console.print("--- Choose an AI model ---")
        for index, name in enumerate(models, start=1):
            self.console.print(f"{index}: {name}", markup=False, highlight=False)
        self.console.print("-" * 30)

        while True:
            try:
                answer = self.prompt_reader.read_line(SELECTION_PROMPT)
            except OSError as e:
                raise FatalSessionError(f"Error reading the selection: {e}") from e
            if answer is None:
                raise FatalSessionError("Error reading the selection.")

            choice = _parse_index(answer, len(models))
            if choice is None:
                self.console.print("Invalid selection. Enter a number from the list.")
                continue

            selected = models[choice - 1]
            logger.info(f"Model selected: {selected}")
            return selected

    def load_model(self, model: str) -> None:
        """Warm the model up, then show its logo."""
        self._clear()
        self.console.print(
            f'Loading model "{model}" into memory...\n(This can take a few seconds)',
            markup=False, highlight=False
        )
        try:
            warmed = self.client.warm_up(model)
        except KeyboardInterrupt:
            logger.info(f"Warm-up of {model} interrupted")
            warmed = False
        if not warmed:
            self.status.warning(f"Failed to warm up model '{model}'.")
        self._clear()
        if self.renderer is not None:
            self.renderer.render(model)

    def _clear(self) -> None:
        if self.renderer is not None:
            self.renderer.clear()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        """Run until input is exhausted. FatalSessionError is the only exception that escapes."""
        if self.session is None:
            try:
                self.start()
            except KeyboardInterrupt:
                logger.info("Interrupted during startup")
                self._farewell()
                return

        while True:
            self._render_separator()
            try:
                line = self.reader.read_line(self.prompt_text())
            except OSError as e:
                self.status.error(f"Error reading input: {e}")
                break
            if line is None:
                break

            line = line.strip()
            if not line:
                continue
            try:
                self.handle_line(line)
            except KeyboardInterrupt:
                self.status.notice("Interrupted.")

        self._farewell()

    def _farewell(self) -> None:
        self.console.print()
        self.console.print("Goodbye!")
        logger.info("Session ended")

    def _render_separator(self) -> None:
        if self.session.first_prompt:
            self.session.first_prompt = False
            self.console.print()
        else:
            self.console.print(self.separator, style="dim", highlight=False)

    def prompt_text(self) -> str:
        """The prompt line: mode, model and abbreviated working directory."""
        cwd = self.session.display_directory()
        if cwd is None:
            return "ia> (error dir) >>> "
        mode = " (auto)" if self.session.auto_execute else ""
        return f"ia{mode} [{self.session.selected_model}]> {cwd} >>> "

    def handle_line(self, line: str) -> None:
        """Classify one input line and run its handler."""
        parsed = classify(line)
        logger.debug(f"Input {line!r} -> {parsed.intent.value}")

        if parsed.intent is Intent.DIRECTORY_CHANGE:
            self.change_directory(parsed.argument)
        elif parsed.intent is Intent.RESELECT:
            self.reselect_model()
        elif parsed.intent is Intent.DISABLE_AUTO:
            self.disable_auto()
        elif parsed.intent is Intent.TRANSLATE:
            self.translate(parsed.argument)
        else:
            self.execute_direct(parsed.argument)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------
    def change_directory(self, target: str) -> bool:
        """
        Change the process working directory.

        Args:
            target: Directory; empty or ~ means the home directory

        Returns:
            True if the directory changed
        """
        try:
            path = str(Path.home()) if resolves_to_home(target) else os.path.expanduser(target)
        except RuntimeError as e:
            self.status.error(f"Could not find the home directory: {e}")
            return False

        try:
            os.chdir(path)
        except OSError as e:
            self.status.error(str(e))
            logger.info(f"cd {target!r} failed: {e}")
            return False

        logger.debug(f"Working directory: {os.getcwd()}")
        return True

    def reselect_model(self) -> None:
        model = self.choose_model()
        self.session.switch_model(model)
        self.load_model(model)

    def disable_auto(self) -> None:
        self.session.disable_auto()
        self.status.notice("Auto-execution mode disabled. Confirmation will be requested.")

    def translate(self, user_prompt: str) -> None:
        """Translate a natural-language request according to the current mode."""
        if not user_prompt:
            self.status.notice("Empty AI request. Type // followed by your request.")
            return

        if self.session.mode is ExecutionMode.AUTO:
            self.translate_auto(user_prompt)
            return

        decision = self.translate_confirm(user_prompt)
        if decision is ConfirmDecision.ACCEPT_ALWAYS:
            self.session.enable_auto()
            self.status.notice("Auto-execution mode enabled. Type '//ask' to disable it.")

    def translate_auto(self, user_prompt: str) -> Optional[ExecutionResult]:
        """Translate and run straight away. Returns None when nothing ran."""
        self.status.info("Processing (auto)...")
        suggestion = self.request_suggestion(user_prompt)
        if suggestion is None:
            return None

        self.status.command("executing (auto):", suggestion.sanitized_text)
        return self._run_suggestion(suggestion)

    def translate_confirm(self, user_prompt: str) -> ConfirmDecision:
        """
        Translate, show the suggestion and act on the user's answer.

        Returns:
            The decision; REJECT when the backend failed
        """
        self.status.info("Processing... (contacting Ollama)")
        suggestion = self.request_suggestion(user_prompt)
        if suggestion is None:
            return ConfirmDecision.REJECT

        decision = self.confirmation.ask(suggestion.sanitized_text)
        if not decision.executes:
            self.status.notice("Cancelled.")
            return decision

        if decision is ConfirmDecision.ACCEPT_ALWAYS:
            self.status.info("Executing and enabling 'auto' mode...")
        else:
            self.status.info("Executing...")
        self.status.command("executing:", suggestion.sanitized_text)
        self._run_suggestion(suggestion)
        return decision

    def request_suggestion(self, user_prompt: str) -> Optional[SuggestedCommand]:
        """
        Ask the model for a command.

        Returns:
            The suggestion, or None after reporting a backend failure or an
            empty answer
        """
        model = self.session.selected_model
        logger.info(f"Translation request ({model}): {user_prompt}")
        try:
            response = self.client.generate(model, build_translation_prompt(user_prompt))
        except GatewayError as e:
            self.status.error(str(e))
            return None
        except KeyboardInterrupt:
            logger.info("Translation request interrupted")
            self.status.notice("Request cancelled.")
            return None

        suggestion = SuggestedCommand.from_response(response.content)
        logger.info(f"Suggested command: {suggestion.sanitized_text!r}")
        if not suggestion.sanitized_text:
            self.status.error("The model returned an empty command.")
            return None
        return suggestion

    def _run_suggestion(self, suggestion: SuggestedCommand) -> ExecutionResult:
        result = self.executor.run(suggestion.sanitized_text)
        if not result.success:
            self.status.error("IA> The command failed.")
        self.console.print()
        return result

    def execute_direct(self, line: str) -> ExecutionResult:
        """Run a line through the shell exactly as typed."""
        self.console.print()
        result = self.executor.run(line)
        if not result.success and result.return_code is None:
            self.status.error(result.error or "Failed to run command.")
        self.console.print()
        return result


def _parse_index(answer: str, count: int) -> Optional[int]:
    """1-based index in [1, count], or None for anything else."""
    try:
        choice = int(answer.strip())
    except ValueError:
        return None
    if choice < 1 or choice > count:
        return None
    return choice
