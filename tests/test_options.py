# =============================================================================
# test_options.py - Scanner Configuration Tests
# =============================================================================
# Tests for ScannerOptions defaults, validation, and environment loading.
# =============================================================================

import pytest

from lexkit import ErrorPolicy, ScannerOptions, TokenType, lex


class TestDefaults:
    """Test default option values."""

    def test_defaults(self):
        options = ScannerOptions()
        assert options.filename == "<input>"
        assert options.error_policy is ErrorPolicy.FAIL_FAST
        assert options.emit_eof is True
        assert options.keywords == frozenset()
        assert options.max_errors == 100
        assert not options.collect_errors

    def test_string_policy_converted(self):
        options = ScannerOptions(error_policy="COLLECT")
        assert options.error_policy is ErrorPolicy.COLLECT
        assert options.collect_errors

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            ScannerOptions(error_policy="sometimes")

    def test_invalid_max_errors(self):
        with pytest.raises(ValueError):
            ScannerOptions(max_errors=0)

    def test_keywords_frozen(self):
        options = ScannerOptions(keywords=["if", "else"])
        assert options.keywords == frozenset({"if", "else"})


class TestFromEnv:
    """Test loading options from environment variables."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in (
            "LEXKIT_ERROR_POLICY",
            "LEXKIT_EMIT_EOF",
            "LEXKIT_MAX_ERRORS",
            "LEXKIT_KEYWORDS",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_unset_gives_defaults(self):
        assert ScannerOptions.from_env() == ScannerOptions()

    def test_all_variables(self, monkeypatch):
        monkeypatch.setenv("LEXKIT_ERROR_POLICY", "collect")
        monkeypatch.setenv("LEXKIT_EMIT_EOF", "false")
        monkeypatch.setenv("LEXKIT_MAX_ERRORS", "5")
        monkeypatch.setenv("LEXKIT_KEYWORDS", "if, else ,while,")
        options = ScannerOptions.from_env(filename="env.src")
        assert options.filename == "env.src"
        assert options.error_policy is ErrorPolicy.COLLECT
        assert options.emit_eof is False
        assert options.max_errors == 5
        assert options.keywords == frozenset({"if", "else", "while"})

    def test_env_options_drive_scan(self, monkeypatch):
        monkeypatch.setenv("LEXKIT_KEYWORDS", "let")
        monkeypatch.setenv("LEXKIT_EMIT_EOF", "0")
        tokens = lex("let x", ScannerOptions.from_env())
        assert [t.type for t in tokens] == [TokenType.KEYWORD, TokenType.IDENTIFIER]

    @pytest.mark.parametrize(
        "name,value",
        [
            ("LEXKIT_ERROR_POLICY", "never"),
            ("LEXKIT_EMIT_EOF", "maybe"),
            ("LEXKIT_MAX_ERRORS", "lots"),
            ("LEXKIT_MAX_ERRORS", "0"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError):
            ScannerOptions.from_env()
