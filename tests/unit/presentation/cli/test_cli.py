"""Tests for presentation/cli.py."""

import json
from pathlib import Path

import pytest

from compscan.infrastructure.storage import write_snapshot
from compscan.presentation.cli import (
    EXIT_CHANGES,
    EXIT_INVALID,
    EXIT_OK,
    EXIT_WRITE_FAILED,
    build_parser,
    main,
)
from tests.factories import COMPONENT_ANNOTATION, ClassFileBuilder, make_serialized, make_snapshot


@pytest.fixture
def classes(tmp_path: Path) -> Path:
    root = tmp_path / "classes"
    ClassFileBuilder("com.acme.Billing").annotate(COMPONENT_ANNOTATION).write(root)
    ClassFileBuilder("com.acme.Plain").write(root)
    return root


def _config(tmp_path: Path, classes: Path, annotation: str = COMPONENT_ANNOTATION) -> Path:
    path = tmp_path / "discovery.json"
    document = {
        "strategies": [
            {
                "name": "osgi",
                "type": "ANNOTATION",
                "config": {"annotationType": annotation},
                "containerMapping": "core",
            }
        ],
        "globalConfig": {"basePaths": {"core": str(classes)}},
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestParser:
    """Tests for build_parser()."""

    def test_mode_is_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_defaults(self) -> None:
        args = build_parser().parse_args(["change-detect", "discovery.json"])
        assert args.output_format == "text"
        assert args.snapshot_dir == Path("discovered-components")
        assert args.timeout is None


class TestChangeDetect:
    """Tests for the change-detect mode."""

    def test_first_run_reports_changes(self, tmp_path: Path, classes: Path, capsys) -> None:
        snapshots = tmp_path / "snapshots"
        code = main(["change-detect", str(_config(tmp_path, classes)), "--snapshot-dir", str(snapshots)])

        assert code == EXIT_CHANGES
        output = capsys.readouterr().out
        assert "+ core::Billing" in output
        assert (snapshots / "components-latest.json").exists()

    def test_second_run_has_no_changes(self, tmp_path: Path, classes: Path, capsys) -> None:
        argv = ["change-detect", str(_config(tmp_path, classes)), "--snapshot-dir", str(tmp_path / "s")]
        main(argv)
        capsys.readouterr()

        assert main(argv) == EXIT_OK
        assert "No architectural changes detected." in capsys.readouterr().out

    def test_json_format(self, tmp_path: Path, classes: Path, capsys) -> None:
        code = main(
            [
                "--format",
                "json",
                "change-detect",
                str(_config(tmp_path, classes)),
                "--snapshot-dir",
                str(tmp_path / "s"),
            ]
        )
        assert code == EXIT_CHANGES
        output = capsys.readouterr().out
        data = json.loads(output[output.index("{") :])
        assert data["new"] == ["core::Billing"]

    def test_nothing_discovered_is_invalid(self, tmp_path: Path, classes: Path, capsys) -> None:
        config = _config(tmp_path, classes, annotation="com.acme.Missing")
        code = main(["change-detect", str(config), "--snapshot-dir", str(tmp_path / "s")])
        assert code == EXIT_INVALID
        assert "No components found" in capsys.readouterr().err

    def test_invalid_configuration(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "discovery.json"
        path.write_text(json.dumps({"strategies": [{"name": "x", "type": "REGEX"}]}), encoding="utf-8")
        assert main(["change-detect", str(path)]) == EXIT_INVALID
        assert "containerMapping" in capsys.readouterr().err

    @pytest.mark.parametrize("pattern", ["", "  ", "["])
    def test_unusable_strategy_aborts_before_scanning(
        self, tmp_path: Path, classes: Path, pattern: str, capsys
    ) -> None:
        config = _config(tmp_path, classes)
        document = json.loads(config.read_text(encoding="utf-8"))
        document["strategies"].append(
            {"name": "controllers", "type": "REGEX", "config": {"pattern": pattern}, "containerMapping": "core"}
        )
        config.write_text(json.dumps(document), encoding="utf-8")
        snapshots = tmp_path / "s"

        assert main(["change-detect", str(config), "--snapshot-dir", str(snapshots)]) == EXIT_INVALID
        assert "strategy 'controllers'" in capsys.readouterr().err
        assert not snapshots.exists()

    def test_duplicate_declared_component_is_invalid(self, tmp_path: Path, classes: Path) -> None:
        config = _config(tmp_path, classes)
        document = json.loads(config.read_text(encoding="utf-8"))
        document["containers"] = {
            "core": {"objectMapper": [{"componentName": "Billing"}, {"componentName": "BILLING"}]}
        }
        config.write_text(json.dumps(document), encoding="utf-8")
        assert main(["change-detect", str(config), "--snapshot-dir", str(tmp_path / "s")]) == EXIT_INVALID

    @pytest.mark.parametrize("mode", ["change-detect", "baseline"])
    def test_unwritable_snapshot_dir(self, tmp_path: Path, classes: Path, mode: str, capsys) -> None:
        blocker = tmp_path / "snapshots"
        blocker.write_text("a file, not a directory", encoding="utf-8")

        code = main([mode, str(_config(tmp_path, classes)), "--snapshot-dir", str(blocker)])

        assert code == EXIT_WRITE_FAILED
        assert code not in (EXIT_OK, EXIT_CHANGES, EXIT_INVALID)
        assert "cannot save snapshot" in capsys.readouterr().err

    def test_missing_configuration(self, tmp_path: Path) -> None:
        assert main(["baseline", str(tmp_path / "missing.json")]) == EXIT_INVALID


class TestBaselineModes:
    """Tests for the baseline and serialize-only modes."""

    @pytest.mark.parametrize("mode", ["baseline", "serialize-only"])
    def test_saves_snapshot(self, tmp_path: Path, classes: Path, mode: str) -> None:
        snapshots = tmp_path / "snapshots"
        code = main([mode, str(_config(tmp_path, classes)), "--snapshot-dir", str(snapshots)])

        assert code == EXIT_OK
        latest = json.loads((snapshots / "components-latest.json").read_text(encoding="utf-8"))
        assert list(latest["containers"]["core"]["components"]) == ["Billing"]
        assert len(list(snapshots.glob("components-snapshot-*.json"))) == 1


class TestReport:
    """Tests for the report mode."""

    def test_changes(self, tmp_path: Path, capsys) -> None:
        old = tmp_path / "old.json"
        new = tmp_path / "new.json"
        write_snapshot(make_snapshot({"A": [make_serialized("X")]}), old)
        write_snapshot(make_snapshot({"A": [make_serialized("X"), make_serialized("Y")]}), new)

        assert main(["report", str(old), str(new)]) == EXIT_CHANGES
        assert "+ A::Y" in capsys.readouterr().out

    def test_identical(self, tmp_path: Path) -> None:
        path = tmp_path / "snapshot.json"
        write_snapshot(make_snapshot({"A": [make_serialized("X")]}), path)
        assert main(["report", str(path), str(path)]) == EXIT_OK

    def test_unreadable_new_snapshot(self, tmp_path: Path) -> None:
        assert main(["report", str(tmp_path / "a.json"), str(tmp_path / "b.json")]) == EXIT_INVALID
