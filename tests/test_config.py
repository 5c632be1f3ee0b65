"""Tests for ContextVar-based lexer configuration.

Validates the config dataclass, context manager behavior, thread isolation,
and the EOF terminator option.
"""

from threading import Thread

import pytest

from calclex import (
    LexConfig,
    Token,
    TokenKind,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
    tokenize,
)


@pytest.fixture(autouse=True)
def _clean_config():
    reset_lex_config()
    yield
    reset_lex_config()


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert LexConfig().emit_eof is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.emit_eof = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"emit_eof": True, "unknown_key": "ignored"})
        assert config.emit_eof is True

    def test_from_dict_empty(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_default(self) -> None:
        assert get_lex_config() == LexConfig()

    def test_set_and_reset(self) -> None:
        set_lex_config(LexConfig(emit_eof=True))
        assert get_lex_config().emit_eof is True
        reset_lex_config()
        assert get_lex_config().emit_eof is False

    def test_context_manager_restores(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            assert get_lex_config().emit_eof is True
        assert get_lex_config().emit_eof is False

    def test_context_manager_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(emit_eof=True)):
                raise RuntimeError("boom")
        assert get_lex_config().emit_eof is False


class TestEmitEof:
    """EOF terminator is dormant unless enabled."""

    def test_eof_not_emitted_by_default(self) -> None:
        result = tokenize("1+2")
        assert all(t.kind is not TokenKind.EOF for t in result.tokens)

    def test_eof_appended_once(self) -> None:
        result = tokenize("1+2", config=LexConfig(emit_eof=True))
        assert result.tokens[-1] == Token(TokenKind.EOF, "")
        assert sum(t.kind is TokenKind.EOF for t in result.tokens) == 1

    def test_eof_on_empty_input(self) -> None:
        result = tokenize("", config=LexConfig(emit_eof=True))
        assert result.tokens == (Token(TokenKind.EOF, ""),)

    def test_no_eof_on_error(self) -> None:
        result = tokenize("1+@", config=LexConfig(emit_eof=True))
        assert result.tokens == ()
        assert result.error is not None

    def test_context_config_applies(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            result = tokenize("7")
        assert result.tokens[-1].kind is TokenKind.EOF

    def test_explicit_config_wins(self) -> None:
        with lex_config_context(LexConfig(emit_eof=True)):
            result = tokenize("7", config=LexConfig())
        assert result.tokens == (Token(TokenKind.NUMBER, "7"),)


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_do_not_share_config(self) -> None:
        seen: dict[str, bool] = {}

        def worker(name: str, emit_eof: bool) -> None:
            set_lex_config(LexConfig(emit_eof=emit_eof))
            result = tokenize("1 + 2")
            seen[name] = result.tokens[-1].kind is TokenKind.EOF

        threads = [
            Thread(target=worker, args=(f"eof-{i}", True)) for i in range(4)
        ] + [Thread(target=worker, args=(f"plain-{i}", False)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(v for k, v in seen.items() if k.startswith("eof-"))
        assert not any(v for k, v in seen.items() if k.startswith("plain-"))
        # Main thread untouched
        assert get_lex_config().emit_eof is False
