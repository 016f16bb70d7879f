"""Tests for operation-specific Rich renderers."""

from treelayout.output.renderers import render_quiet, render_result
from treelayout.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


_BOX = {"min_offset": 0.0, "max_offset": 10.0, "min_depth": 0.0, "max_depth": 2.0}


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("show", "NOT_FOUND", "Snapshot 'x.json' not found"))
        assert "ERROR" in output
        assert "show" in output
        assert "Snapshot 'x.json' not found" in output

    def test_bounds_issues_always_listed(self) -> None:
        result = _err(
            "check",
            "INCONSISTENT_BOUNDS",
            "1 bounding-box issue(s)",
            errors=["Vertex 1 at (1.0, -3.0) lies outside the box"],
        )
        output = render_result(result)
        assert "Vertex 1 at (1.0, -3.0) lies outside the box" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("check", "NOT_FOUND", "missing", path="/tmp/[x].json")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "/tmp/[x].json" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="check"))
        assert "Unknown error" in output


# ── Operation renderers ──────────────────────────────────────────────


class TestCheckRenderer:
    def test_summary(self) -> None:
        output = render_result(_ok("check", path="layout.json", size=3, valid=True))
        assert "OK" in output
        assert "3 vertices inside bounding box" in output
        assert "layout.json" not in output

    def test_verbose_shows_path(self) -> None:
        output = render_result(_ok("check", path="layout.json", size=3), verbose=True)
        assert "layout.json" in output


class TestBoundsRenderer:
    def test_both_boxes(self) -> None:
        recomputed = {"min_offset": 2.0, "max_offset": 8.0, "min_depth": 0.0, "max_depth": 1.0}
        output = render_result(
            _ok("bounds", size=3, stored=_BOX, recomputed=recomputed, matches=False, written=False)
        )
        assert "stored: offset [0.0, 10.0]  depth [0.0, 2.0]" in output
        assert "recomputed: offset [2.0, 8.0]  depth [0.0, 1.0]" in output
        assert "matches: False" in output
        assert "written" not in output

    def test_empty_recomputed(self) -> None:
        output = render_result(_ok("bounds", size=0, stored=_BOX, recomputed=None, matches=False))
        assert "recomputed: (none)" in output

    def test_written(self) -> None:
        output = render_result(
            _ok("bounds", size=1, stored=_BOX, recomputed=_BOX, matches=False, written=True)
        )
        assert "written: True" in output


class TestShowRenderer:
    def test_vertex_table(self) -> None:
        vertices = [
            {"index": 0, "depth": 0.0, "offset": 5.0},
            {"index": 1, "depth": 1.0, "offset": 2.0},
        ]
        output = render_result(_ok("show", size=2, bounds=_BOX, vertices=vertices))
        assert "bounds: offset [0.0, 10.0]  depth [0.0, 2.0]" in output
        assert "Index" in output
        assert "Depth" in output
        assert "Offset" in output
        assert "5.0" in output

    def test_no_table_for_empty_layout(self) -> None:
        output = render_result(_ok("show", size=0, bounds=_BOX, vertices=[]))
        assert "Index" not in output


class TestQuiet:
    def test_ok(self) -> None:
        assert render_quiet(_ok("check", size=3)) == "OK: check"

    def test_error(self) -> None:
        assert render_quiet(_err("check", "X", "boom")) == "ERROR: check — boom"
