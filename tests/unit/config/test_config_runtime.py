import pytest

from mathcore.config import ConfigurationError, runtime


@pytest.fixture
def fresh_defaults(monkeypatch):
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", None)
    yield


def test_load_default_values_prefers_first_file(monkeypatch, tmp_path, fresh_defaults):
    first = tmp_path / "first.env"
    first.write_text("MATHCORE_FIRST=one\nMATHCORE_SHARED=first\n")
    second = tmp_path / "second.env"
    second.write_text("MATHCORE_SHARED=second\nMATHCORE_OTHER=3\n")

    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (first, second, tmp_path / "missing.env"))

    defaults = runtime._load_default_values()
    assert defaults == {"MATHCORE_FIRST": "one", "MATHCORE_SHARED": "first", "MATHCORE_OTHER": "3"}
    # Cached value is reused without re-reading files
    assert runtime._load_default_values() is defaults


def test_env_str_uses_defaults_and_handles_blanks(monkeypatch):
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {"FALLBACK": " spaced "})
    monkeypatch.delenv("FALLBACK", raising=False)
    assert runtime.env_str("FALLBACK") == "spaced"

    monkeypatch.setenv("ALLOW_BLANK", "")
    assert runtime.env_str("ALLOW_BLANK", allow_blank=True) == ""

    monkeypatch.setenv("NO_STRIP", " padded ")
    assert runtime.env_str("NO_STRIP", strip=False) == " padded "

    monkeypatch.delenv("MISSING_OPTIONAL", raising=False)
    assert runtime.env_str("MISSING_OPTIONAL", "fallback") == "fallback"

    with pytest.raises(ConfigurationError):
        runtime.env_str("MISSING_REQUIRED", required=True)


def test_environment_wins_over_defaults(monkeypatch):
    monkeypatch.setattr(runtime, "_DEFAULT_VALUES", {"CHOICE": "file"})
    monkeypatch.setenv("CHOICE", "env")
    assert runtime.env_str("CHOICE") == "env"


def test_env_float_validation(monkeypatch):
    monkeypatch.setenv("FLOAT_VALUE", "1.5e-9")
    assert runtime.env_float("FLOAT_VALUE") == 1.5e-9

    monkeypatch.delenv("FLOAT_MISSING", raising=False)
    assert runtime.env_float("FLOAT_MISSING", or_value=2.0) == 2.0
    with pytest.raises(ConfigurationError):
        runtime.env_float("FLOAT_MISSING", required=True)

    monkeypatch.setenv("FLOAT_INVALID", "abc")
    with pytest.raises(ConfigurationError, match="must be a float"):
        runtime.env_float("FLOAT_INVALID")


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("YES", True), ("on", True), ("0", False), ("off", False), ("False", False)])
def test_env_bool_values(monkeypatch, raw, expected):
    monkeypatch.setenv("BOOL_VALUE", raw)
    assert runtime.env_bool("BOOL_VALUE") is expected


def test_env_bool_rejects_unknown(monkeypatch):
    monkeypatch.setenv("BOOL_VALUE", "maybe")
    with pytest.raises(ConfigurationError, match="must be a boolean"):
        runtime.env_bool("BOOL_VALUE")

    monkeypatch.delenv("BOOL_VALUE")
    assert runtime.env_bool("BOOL_VALUE", or_value=True) is True
    with pytest.raises(ConfigurationError):
        runtime.env_bool("BOOL_VALUE", required=True)


def test_dotenv_pairs_parses_mathcore_lines(tmp_path):
    path = tmp_path / ".env"
    path.write_text(
        "# comment\n"
        "\n"
        "MATHCORE_PLAIN=value\n"
        'MATHCORE_QUOTED="quoted"\n'
        "export MATHCORE_EXPORTED='yes'\n"
        "MATHCORE_not a pair\n"
        "MATHCORE_EQUALS=a=b\n"
    )

    assert dict(runtime._dotenv_pairs(path)) == {
        "MATHCORE_PLAIN": "value",
        "MATHCORE_QUOTED": "quoted",
        "MATHCORE_EXPORTED": "yes",
        "MATHCORE_EQUALS": "a=b",
    }


def test_dotenv_pairs_skips_foreign_keys(tmp_path):
    path = tmp_path / ".env"
    path.write_text("DATABASE_URL=postgres://db\nexport AWS_SECRET=hidden\nMATHCORE_TOLERANCE=1e-9\n")

    assert dict(runtime._dotenv_pairs(path)) == {"MATHCORE_TOLERANCE": "1e-9"}


def test_foreign_dotenv_keys_never_become_defaults(monkeypatch, tmp_path, fresh_defaults):
    path = tmp_path / ".env"
    path.write_text("HOME_DIR=/tmp/elsewhere\nMATHCORE_JSON_OUTPUT=yes\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (path,))
    monkeypatch.delenv("HOME_DIR", raising=False)

    assert runtime.env_str("HOME_DIR") is None
    assert runtime.env_bool("MATHCORE_JSON_OUTPUT") is True


def test_dotenv_pairs_missing_file(tmp_path):
    assert list(runtime._dotenv_pairs(tmp_path / "absent.env")) == []


def test_dotenv_read_errors_are_wrapped(monkeypatch, tmp_path, fresh_defaults):
    directory = tmp_path / "dir.env"
    directory.mkdir()
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (directory,))

    with pytest.raises(ConfigurationError, match="Failed to load configuration"):
        runtime._load_default_values()
