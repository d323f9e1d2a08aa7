"""Tests for the yes/no prompt."""

import sys
from unittest.mock import patch

import click
import pytest

from installer.cli.prompt import ClickPrompt, is_interactive_terminal, parse_answer
from installer.errors import InputStreamError, NonInteractiveError


@pytest.mark.parametrize("answer", ["y", "Y", "yes", " YES "])
def test_parse_affirmative_answers(answer):
    """Test the accepted affirmative answers."""
    assert parse_answer(answer) is True


@pytest.mark.parametrize("answer", ["n", "N", "no", "", "maybe", "yy", "q"])
def test_parse_other_answers_decline(answer):
    """Test that negative and unrecognized answers decline."""
    assert parse_answer(answer) is False


def test_non_interactive_terminal_raises():
    """Test that asking without a terminal fails instead of blocking."""
    prompt = ClickPrompt(is_interactive=lambda: False)

    with pytest.raises(NonInteractiveError):
        prompt.ask("Continue?")


def test_default_interactivity_check_is_used():
    """Test that the terminal check is consulted when none is given."""
    with patch("installer.cli.prompt.is_interactive_terminal", return_value=False):
        prompt = ClickPrompt()

        with pytest.raises(NonInteractiveError):
            prompt.ask("Continue?")


def test_ask_reads_answer():
    """Test that the answer read from the terminal is parsed."""
    prompt = ClickPrompt(is_interactive=lambda: True)

    with (
        patch("installer.cli.prompt.click.echo") as mock_echo,
        patch("installer.cli.prompt.click.prompt", return_value="y") as mock_prompt,
    ):
        assert prompt.ask("Continue?") is True

    mock_echo.assert_called_once_with("Continue?", err=True)
    assert mock_prompt.call_args.kwargs["err"] is True


def test_ask_unrecognized_answer_declines():
    """Test that an unexpected answer is a decline."""
    prompt = ClickPrompt(is_interactive=lambda: True)

    with (
        patch("installer.cli.prompt.click.echo"),
        patch("installer.cli.prompt.click.prompt", return_value="whatever"),
    ):
        assert prompt.ask("Continue?") is False


def test_ask_input_failure_raises_input_stream_error():
    """Test that a closed input stream is reported as a prompt error."""
    prompt = ClickPrompt(is_interactive=lambda: True)

    with (
        patch("installer.cli.prompt.click.echo"),
        patch("installer.cli.prompt.click.prompt", side_effect=click.exceptions.Abort()),
    ):
        with pytest.raises(InputStreamError):
            prompt.ask("Continue?")


@pytest.mark.parametrize("stream", ["stdin", "stderr"])
def test_missing_standard_stream_is_not_interactive(stream):
    """Test that a detached process is reported as non-interactive."""
    with patch.object(sys, stream, None):
        assert is_interactive_terminal() is False

        with pytest.raises(NonInteractiveError):
            ClickPrompt().ask("Continue?")
