from __future__ import annotations

from pathlib import Path

import pytest

import ptam.__main__ as ptam_main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(ptam_main, "configure_logging_from_args", lambda **kwargs: None)
    monkeypatch.setattr(ptam_main, "DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")


def test_render_default_page(capsys) -> None:
    code = ptam_main.main(["render"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Tabs: [Settings] Support" in out
    assert "Sub-tabs: *General* | License" in out
    assert "Actions: ptam_admin_sub_tab_settings_general" in out


def test_render_support_tab(capsys) -> None:
    code = ptam_main.main(["render", "--tab", "Support"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Tabs: Settings [Support]" in out
    assert "Sub-tabs" not in out
    assert "Actions: ptam_admin_tab_support" in out


def test_render_from_query_string(capsys) -> None:
    code = ptam_main.main(["render", "--query", "page=custom-query-blocks&tab=bogus&subtab=license"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Active: settings / license" in out


def test_links_lists_menu_and_plugin_links(capsys) -> None:
    code = ptam_main.main(["links"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Menu: options-general.php > Custom Query Blocks" in out
    assert "Action link: Settings -> /wp-admin/options-general.php?page=custom-query-blocks&tab=settings" in out
    assert "Row meta: Get Archive Pages Pro" in out


def test_missing_explicit_config_returns_1(tmp_path: Path, capsys) -> None:
    code = ptam_main.main(["--config", str(tmp_path / "missing.json"), "render"])
    assert code == 1
    assert "Configuration file not found" in capsys.readouterr().out


def test_invalid_config_returns_1(tmp_path: Path, capsys) -> None:
    cfg = tmp_path / "ptam.yaml"
    cfg.write_text("admin:\n  namespace: Not Valid\n", encoding="utf-8")
    code = ptam_main.main(["--config", str(cfg), "render"])
    assert code == 1
    assert "Invalid configuration" in capsys.readouterr().out


def test_config_file_is_used(sample_config_file: Path, capsys) -> None:
    code = ptam_main.main(["--config", str(sample_config_file), "links"])
    assert code == 0
    assert "https://example.test/wp-admin/options-general.php" in capsys.readouterr().out


def test_default_config_path_is_picked_up(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys) -> None:
    cfg = tmp_path / "ptam.yaml"
    cfg.write_text("admin:\n  namespace: cqb\n", encoding="utf-8")
    monkeypatch.setattr(ptam_main, "DEFAULT_CONFIG_PATH", cfg)

    assert ptam_main.main(["render", "--tab", "support"]) == 0
    assert "Actions: cqb_admin_tab_support" in capsys.readouterr().out


def test_no_command_runs_tui(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}

    def _fake_run_tui(settings, request):
        captured["request"] = request
        return 7

    monkeypatch.setattr("ptam.ui.tui.app.run_tui", _fake_run_tui)
    assert ptam_main.main([]) == 7
    assert captured["request"].tab is None


def test_tui_command_passes_request(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = {}
    monkeypatch.setattr("ptam.ui.tui.app.run_tui", lambda settings, request: captured.setdefault("r", request) and 0)
    assert ptam_main.main(["tui", "--tab", "support", "--sub-tab", "faq"]) == 0
    assert captured["r"].tab == "support"
    assert captured["r"].sub_tab == "faq"
