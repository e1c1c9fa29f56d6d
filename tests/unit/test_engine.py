#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the interpreter-backed Beautifier.

These tests load stand-in bundles (see ``tests/utils.py``) into a real
QuickJS context, so they exercise asset loading, the option boundary and
the failure modes without depending on the upstream js-beautify files.
"""

import logging

import pytest
from utils import FAKE_DEFAULTS, fake_bundle_source, split_echo, write_fake_bundles

from jsbeautify.engine import Beautifier, bundled_assets_available, resolve_assets_dir
from jsbeautify.exceptions import (
    EngineError,
    EngineUnavailableError,
    FormattingError,
    InvalidOptionValueError,
    OptionConversionError,
)
from jsbeautify.options import BeautifyOptions, FormattingOptions, Spaces, Tabs


@pytest.mark.unit
class TestAssetResolution:
    """Test where the engine looks for bundles."""

    def test_explicit_directory(self, tmp_path):
        assert resolve_assets_dir(tmp_path) == tmp_path

    def test_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("JSBEAUTIFY_ASSETS_DIR", str(tmp_path))
        assert resolve_assets_dir() == tmp_path

    def test_explicit_beats_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("JSBEAUTIFY_ASSETS_DIR", str(tmp_path / "env"))
        assert resolve_assets_dir(tmp_path) == tmp_path

    def test_package_directory_by_default(self):
        directory = resolve_assets_dir()
        assert directory.name == "assets"
        assert directory.parent.name == "jsbeautify"

    def test_bundled_assets_available(self, fake_assets_dir, tmp_path):
        assert bundled_assets_available(fake_assets_dir)
        assert not bundled_assets_available(tmp_path / "empty")


@pytest.mark.unit
@pytest.mark.engine
class TestBeautifierInit:
    """Test engine construction and its failure modes."""

    def test_loads_fake_bundles(self, quickjs_module, fake_assets_dir):
        engine = Beautifier(fake_assets_dir)
        assert engine.assets_dir == fake_assets_dir

    def test_missing_bundle(self, quickjs_module, tmp_path):
        """Test a missing bundle file raises EngineUnavailableError with its path."""
        assets = write_fake_bundles(tmp_path / "assets", skip=("css",))

        with pytest.raises(EngineUnavailableError) as exc_info:
            Beautifier(assets)

        assert exc_info.value.asset_path == str(assets / "beautify-css.min.js")

    def test_bundle_with_syntax_error(self, quickjs_module, tmp_path):
        assets = write_fake_bundles(tmp_path / "assets", overrides={"html": "function ("})

        with pytest.raises(EngineUnavailableError, match="beautify-html.min.js"):
            Beautifier(assets)

    def test_bundle_without_global(self, quickjs_module, tmp_path):
        """Test a bundle that defines nothing fails the global check."""
        assets = write_fake_bundles(tmp_path / "assets", overrides={"js": "var unrelated = 1;"})

        with pytest.raises(EngineUnavailableError, match="js_beautify is not defined"):
            Beautifier(assets)

    def test_environment_variable_used(self, quickjs_module, fake_assets_dir, monkeypatch):
        monkeypatch.setenv("JSBEAUTIFY_ASSETS_DIR", str(fake_assets_dir))
        assert Beautifier().assets_dir == fake_assets_dir


@pytest.mark.unit
@pytest.mark.engine
class TestBeautify:
    """Test formatting calls across the interpreter boundary."""

    @pytest.fixture
    def engine(self, quickjs_module, fake_assets_dir):
        return Beautifier(fake_assets_dir)

    @pytest.mark.parametrize("language", ["js", "css", "html"])
    def test_no_options_calls_with_source_only(self, engine, language):
        """Test an empty option map calls the formatter without an options argument."""
        source, options = split_echo(engine.beautify(language, "x = 1"))

        assert source == f"{language}:x = 1"
        assert options is None

    def test_empty_mapping_calls_with_source_only(self, engine):
        _, options = split_echo(engine.beautify_js("a", {}))
        assert options is None

    def test_language_helpers(self, engine):
        assert engine.beautify_js("a").startswith("js:a")
        assert engine.beautify_css("a").startswith("css:a")
        assert engine.beautify_html("a").startswith("html:a")

    def test_raw_options_reach_formatter(self, engine):
        """Test a plain mapping arrives as a JavaScript object."""
        _, options = split_echo(engine.beautify_js("a", {"indent_size": 2, "templating": ["erb"], "e4x": True}))

        assert options == {"indent_size": 2, "templating": ["erb"], "e4x": True}

    def test_typed_options_reach_formatter(self, engine):
        """Test FormattingOptions are normalized before the call."""
        typed = FormattingOptions(indentation=Tabs(), additional={"indent_size": 10})
        _, options = split_echo(engine.beautify_css("a", typed))

        assert options == typed.to_dict()
        assert options["indent_char"] == "\t"
        assert options["indent_size"] == 10

    def test_beautify_options_reach_formatter(self, engine):
        _, options = split_echo(engine.beautify_html("a", BeautifyOptions({"wrap_attributes": "force"})))
        assert options == {"wrap_attributes": "force"}

    def test_unicode_and_newlines_survive(self, engine):
        source = "const s = 'héllo ✓';\nlet t = `x\ny`;"
        echoed, _ = split_echo(engine.beautify_js(source))
        assert echoed == f"js:{source}"

    def test_undefined_result_raises(self, engine):
        """Test an undefined result is a recoverable FormattingError."""
        with pytest.raises(FormattingError) as exc_info:
            engine.beautify_css("__undefined__")

        assert exc_info.value.language == "css"
        assert engine.beautify_css("a").startswith("css:a")

    def test_throwing_formatter_raises(self, engine):
        with pytest.raises(FormattingError) as exc_info:
            engine.beautify_html("__throw__")

        assert exc_info.value.language == "html"
        assert exc_info.value.original_error is not None
        assert isinstance(exc_info.value, EngineError)

    def test_unknown_language(self, engine):
        with pytest.raises(InvalidOptionValueError):
            engine.beautify("python", "x")  # type: ignore[arg-type]

    def test_unconvertible_options(self, engine):
        with pytest.raises(OptionConversionError):
            engine.beautify_js("a", {"callback": object()})

    def test_console_forwarded_to_logging(self, engine, caplog):
        """Test console.log output inside the interpreter reaches the engine logger."""
        with caplog.at_level(logging.DEBUG, logger="jsbeautify.engine"):
            engine.beautify_js("__log__")

        assert "[js:log] formatting" in caplog.text
        assert '"language":"js"' in caplog.text

    def test_formatting_options_with_spaces(self, engine):
        _, options = split_echo(engine.beautify_js("a", FormattingOptions(indentation=Spaces(2))))
        assert options["indent_size"] == 2
        assert options["wrap_attributes_indent_size"] == 2


@pytest.mark.unit
@pytest.mark.engine
class TestDefaultsAndResources:
    """Test defaultOptions() access and asset listing."""

    @pytest.fixture
    def engine(self, quickjs_module, fake_assets_dir):
        return Beautifier(fake_assets_dir)

    @pytest.mark.parametrize("language", ["js", "css", "html"])
    def test_default_options(self, engine, language):
        options = engine.default_options(language)

        assert isinstance(options, BeautifyOptions)
        assert options.to_dict() == FAKE_DEFAULTS[language]

    def test_default_option_helpers(self, engine):
        assert engine.default_js_options().to_dict() == FAKE_DEFAULTS["js"]
        assert engine.default_css_options().to_dict() == FAKE_DEFAULTS["css"]
        assert engine.default_html_options().to_dict() == FAKE_DEFAULTS["html"]

    def test_missing_default_options(self, quickjs_module, tmp_path):
        """Test a formatter without defaultOptions() raises EngineUnavailableError."""
        assets = write_fake_bundles(
            tmp_path / "assets", overrides={"css": fake_bundle_source("css", with_defaults=False)}
        )
        engine = Beautifier(assets)

        with pytest.raises(EngineUnavailableError):
            engine.default_css_options()

    def test_available_resources(self, engine, fake_assets_dir):
        """Test resource names are listed without their extension."""
        (fake_assets_dir / "JSBeautify-LICENSE").write_text("MIT")
        (fake_assets_dir / "VERSION").write_text("1.0.0")

        assert engine.available_resources() == ["beautify-css.min", "beautify-html.min", "beautify.min"]
        assert engine.available_resources("md") == []
