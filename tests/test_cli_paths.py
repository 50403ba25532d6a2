from pathlib import Path


def test_default_variables_path(tmp_path, monkeypatch):
    """Test default variables path points into the working directory."""
    monkeypatch.chdir(tmp_path)
    from settree.cli.paths import variables_path

    assert Path(variables_path(None)) == tmp_path / "variables.yaml"


def test_explicit_variables_path():
    """Test an explicit path is used unchanged."""
    from settree.cli.paths import variables_path

    assert variables_path("custom/vars.yaml") == "custom/vars.yaml"
