"""Unit tests for the interactive and unattended input providers."""

from __future__ import annotations

import pytest

import tv_packager.adapters.prompts as prompts
from tv_packager.application.fields import FieldDescriptor
from tv_packager.errors import MetadataValidationError
from tv_packager.schemas import check_webos_version


def test_typer_provider_reprompts_until_valid(monkeypatch: pytest.MonkeyPatch) -> None:
    replies = iter(["1.0", "1.0.1"])
    messages: list[str] = []
    monkeypatch.setattr(prompts.typer, "prompt", lambda *args, **kwargs: next(replies))
    monkeypatch.setattr(prompts.typer, "echo", lambda message, err=False: messages.append(message))
    field = FieldDescriptor(name="version", message="Version", validator=check_webos_version)

    answers = prompts.TyperInputProvider().ask([field])

    assert answers == {"version": "1.0.1"}
    assert messages == [">> invalid version string for webos platform"]


def test_typer_provider_confirm(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_confirm(message: str, default: bool) -> bool:
        seen["default"] = default
        return False

    monkeypatch.setattr(prompts.typer, "confirm", fake_confirm)
    field = FieldDescriptor(name="useExisting", message="Reuse?", kind="confirm", default=True)

    assert prompts.TyperInputProvider().ask([field]) == {"useExisting": False}
    assert seen["default"] is True


def test_typer_provider_choice_passes_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_prompt(message: str, **kwargs: object) -> str:
        seen.update(kwargs)
        return "1280x720"

    monkeypatch.setattr(prompts.typer, "prompt", fake_prompt)
    field = FieldDescriptor(
        name="resolution",
        message="Resolution",
        kind="choice",
        default="960x540",
        choices=("960x540", "1280x720"),
    )

    assert prompts.TyperInputProvider().ask([field]) == {"resolution": "1280x720"}
    assert list(seen["type"].choices) == ["960x540", "1280x720"]  # type: ignore[union-attr]


def test_defaults_provider_fills_choice_and_confirm() -> None:
    fields = [
        FieldDescriptor(name="category", message="c", kind="choice", choices=("VOD", "game")),
        FieldDescriptor(name="ok", message="ok", kind="confirm"),
        FieldDescriptor(name="vendor", message="v", default="ACME"),
    ]

    answers = prompts.DefaultsInputProvider().ask(fields)

    assert answers == {"category": "VOD", "ok": False, "vendor": "ACME"}


def test_defaults_provider_rejects_invalid_default() -> None:
    field = FieldDescriptor(
        name="version", message="v", default="1.0", validator=check_webos_version
    )
    with pytest.raises(MetadataValidationError, match="Default for 'version'"):
        prompts.DefaultsInputProvider().ask([field])
