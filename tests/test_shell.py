"""Tests for interactive mode."""

import json
import random

import pytest

from pwgen.password import GenerationOptions
from pwgen.shell import Session, run_interactive


def feed(monkeypatch, *lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def session():
    return Session(GenerationOptions(), rng=random.Random(0))


def test_set_boolean_and_int(session):
    assert session.set("symbols", "false") == "Set symbols to false"
    assert session.options.include_symbols is False
    assert session.set("length", "20") == "Set length to 20"
    assert session.options.length == 20
    assert session.set("require-all", "yes") == "Set require-all to yes"
    assert session.options.require_all_categories is False


def test_set_bad_int_falls_back(session):
    session.set("length", "abc")
    assert session.options.length == 12
    session.set("max-consecutive", "x")
    assert session.options.max_consecutive == 0
    assert session.set("count", "nope") == "Set count to nope"
    assert session.count == 1


def test_set_invalid_value_is_not_applied(session):
    assert session.set("length", "-5").startswith("Invalid value for length")
    assert session.options.length == 12


def test_set_unknown_option(session):
    assert session.set("colour", "red") == "Unknown option: colour"


def test_generate_respects_count(session):
    session.set("count", "3")
    passwords = session.generate()
    assert len(passwords) == 3
    assert all(len(p) == 12 for p in passwords)


def test_generate_reports_failure(session):
    for name in ("lowercase", "uppercase", "numbers", "symbols"):
        session.set(name, "false")
    assert session.generate() == ["Error: No characters available with current settings"]


def test_show(session):
    session.set("count", "2")
    settings = json.loads(session.show())
    assert settings["length"] == 12
    assert settings["count"] == 2


def test_loop(monkeypatch, capsys, session):
    feed(monkeypatch, "set length 16", "generate", "check aaaa", "bogus", "exit", "generate")
    run_interactive(session)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Password Generator Interactive Mode"
    assert "Set length to 16" in out
    assert "Strength: Weak (score: -1)" in out
    assert "Unknown command: bogus" in out
    assert out[-1] == "Goodbye!"
    generated = out[out.index("Set length to 16") + 1]
    assert len(generated) == 16


def test_loop_ends_on_eof(monkeypatch, capsys, session):
    feed(monkeypatch, "show")
    run_interactive(session)
    out = capsys.readouterr().out
    assert "Current settings:" in out
    assert out.rstrip().endswith("Goodbye!")


def test_usage_messages(monkeypatch, capsys, session):
    feed(monkeypatch, "set length", "check", "quit")
    run_interactive(session)
    out = capsys.readouterr().out
    assert "Usage: set <option> <value>" in out
    assert "Usage: check <password>" in out
