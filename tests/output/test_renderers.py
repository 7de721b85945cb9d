"""Tests for the Rich renderers."""

from __future__ import annotations

from fragstrings.output.renderers import render_quiet, render_result
from fragstrings.services.codec import CodecService
from fragstrings.services.result import ServiceResult


class TestRenderResult:
    def test_compile(self, codec: CodecService) -> None:
        output = render_result(codec.compile("%s%d?*"))
        assert "OK" in output
        assert "compile" in output
        assert "prefix: %s" in output
        assert "ending: open" in output
        assert "optional" in output

    def test_encode(self, codec: CodecService) -> None:
        output = render_result(codec.encode("%s%d", ["a", 1]))
        assert "encoded: %s%d__a__1" in output

    def test_decode_shows_absent(self, codec: CodecService) -> None:
        output = render_result(codec.decode("%s%d?", "%s__a"))
        assert "(absent)" in output
        assert "int?" in output

    def test_decode_markup_is_not_interpreted(self, codec: CodecService) -> None:
        output = render_result(codec.decode("%s", "%s__[bold]x[/bold]"))
        assert "[bold]x[/bold]" in output

    def test_decode_batch(self, codec: CodecService) -> None:
        output = render_result(codec.decode_batch("%d", ["%d__1", "%d__x"]))
        assert "matched: 1/2" in output

    def test_aliases_empty(self) -> None:
        output = render_result(CodecService().aliases())
        assert "No descriptor aliases configured." in output

    def test_aliases(self, codec: CodecService) -> None:
        output = render_result(codec.aliases())
        assert "@user" in output
        assert "no" in output

    def test_error(self, codec: CodecService) -> None:
        output = render_result(codec.decode("%d", "%d__x"))
        assert output.startswith("ERROR")
        assert "does not match" in output

    def test_error_detail_verbose(self, codec: CodecService) -> None:
        output = render_result(codec.compile("%x"), verbose=True)
        assert "detail:" in output
        assert "invalid_character" in output

    def test_generic_fallback(self) -> None:
        output = render_result(ServiceResult(ok=True, op="other", data={"k": "v"}))
        assert "k: v" in output

    def test_meta_verbose(self, codec: CodecService) -> None:
        output = render_result(codec.decode_batch("%d", ["%d__1"]), verbose=True)
        assert "meta:" in output
        assert "cache" in output


class TestRenderQuiet:
    def test_decode_tab_separated(self, codec: CodecService) -> None:
        assert render_quiet(codec.decode("%s%d?%s?", "%s%d__a__1")) == "a\t1\t"

    def test_compile(self, codec: CodecService) -> None:
        assert render_quiet(codec.compile("@event")) == "%s%d*"

    def test_batch(self, codec: CodecService) -> None:
        assert render_quiet(codec.decode_batch("%d", ["%d__1", "x", "%d__2"])) == "1\n2"

    def test_aliases(self, codec: CodecService) -> None:
        assert render_quiet(codec.aliases()) == "broken\nevent\nuser"

    def test_error(self, codec: CodecService) -> None:
        out = render_quiet(codec.decode("%d", "%d__x"))
        assert out.startswith("ERROR: decode - ")

    def test_unknown_op(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="other")) == "OK: other"
