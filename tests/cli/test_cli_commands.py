# tests/cli/test_cli_commands.py
from pathlib import Path
from typer.testing import CliRunner
from portafs.cli.app import app

runner = CliRunner()


def test_ls_hides_dot_entries_by_default(tmp_path: Path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.txt").write_text("b")
    res = runner.invoke(app, ["ls", str(tmp_path)])
    assert res.exit_code == 0, res.output
    assert set(res.stdout.split()) == {"a.txt", "b.txt"}


def test_ls_all_includes_dot_entries(tmp_path: Path):
    (tmp_path / "a.txt").write_text("a")
    res = runner.invoke(app, ["ls", "--all", "--verbose", str(tmp_path)])
    assert res.exit_code == 0, res.output
    assert set(res.stdout.split()) == {".", "..", "a.txt"}


def test_ls_missing_directory_fails(tmp_path: Path):
    res = runner.invoke(app, ["ls", str(tmp_path / "missing")])
    assert res.exit_code == 1


def test_du_sums_direct_children(tmp_path: Path):
    (tmp_path / "a").write_bytes(b"x" * 7)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b").write_bytes(b"x" * 100)
    res = runner.invoke(app, ["du", str(tmp_path)])
    assert res.exit_code == 0, res.output
    assert res.stdout.startswith("7\t")


def test_du_on_file_fails(tmp_path: Path):
    f = tmp_path / "f"
    f.write_text("x")
    res = runner.invoke(app, ["du", str(f)])
    assert res.exit_code == 1


def test_stat_reports_predicates_and_size(tmp_path: Path):
    f = tmp_path / "f.txt"
    f.write_bytes(b"abc")
    res = runner.invoke(app, ["stat", str(f)])
    assert res.exit_code == 0, res.output
    assert "exists: true" in res.stdout
    assert "is_file: true" in res.stdout
    assert "is_directory: false" in res.stdout
    assert "size: 3" in res.stdout


def test_mkdir_twice(tmp_path: Path):
    target = tmp_path / "made"
    for _ in range(2):
        res = runner.invoke(app, ["mkdir", str(target)])
        assert res.exit_code == 0, res.output
    assert target.is_dir()


def test_mkdir_expands_home(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    res = runner.invoke(app, ["mkdir", "~/inhome"])
    assert res.exit_code == 0, res.output
    assert (tmp_path / "inhome").is_dir()


def test_join_native(monkeypatch):
    import portafs.services.path_service as paths

    monkeypatch.setattr(paths, "SEP", "\\")
    res = runner.invoke(app, ["join", "a/b", "c", "--native"])
    assert res.exit_code == 0, res.output
    assert res.stdout.strip() == "a\\b\\c"
