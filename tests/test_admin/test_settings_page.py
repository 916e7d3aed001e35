from __future__ import annotations

from ptam.admin import ActionLink, AdminRequest, AdminSettings, MenuPage, NavItem
from tests.helpers import make_tabs


def _with_tabs(settings: AdminSettings, tabs, subtabs_by_tab=None) -> AdminSettings:
    subtabs_by_tab = subtabs_by_tab or {}
    settings.registry.add_tab_provider(lambda current: [*current, *tabs])
    settings.registry.add_sub_tab_provider(
        lambda current, tab_id, subtab_id: [*current, *subtabs_by_tab.get(tab_id, [])]
    )
    return settings


# -------------------------------------------------------------------------
# Render pipeline
# -------------------------------------------------------------------------


def test_render_without_tabs_skips_everything(empty_settings: AdminSettings) -> None:
    calls: list[str] = []
    empty_settings.dispatcher.add_sub_tab_handler("settings", "general", lambda: calls.append("sub"))
    empty_settings.registry.add_sub_tab_provider(lambda current, tab, sub: [{"id": "general"}])

    view = empty_settings.render(AdminRequest(tab="support"))

    assert view.has_nav is False
    assert view.tab.active_id == "settings"
    assert view.sub_tabs == ()
    assert view.dispatched == ()
    assert calls == []


def test_render_marks_requested_tab_active(empty_settings: AdminSettings) -> None:
    _with_tabs(empty_settings, make_tabs("setup", "advanced"))
    view = empty_settings.render(AdminRequest(tab="advanced"))

    assert view.tab.active_id == "advanced"
    assert [(item.id, item.active) for item in view.tabs] == [("setup", False), ("advanced", True)]
    assert all(item.clickable for item in view.tabs)


def test_render_unknown_tab_falls_back_to_settings(empty_settings: AdminSettings) -> None:
    _with_tabs(empty_settings, make_tabs("setup"))
    view = empty_settings.render(AdminRequest(tab="bogus"))
    assert view.tab.active_id == "settings"
    assert [item.active for item in view.tabs] == [False]


def test_render_default_sub_tab_dispatches_named_handler(empty_settings: AdminSettings) -> None:
    calls: list[str] = []
    _with_tabs(
        empty_settings,
        make_tabs("settings", "support"),
        {"settings": make_tabs("general", "license")},
    )
    empty_settings.dispatcher.add_sub_tab_handler("settings", "general", lambda: calls.append("general"))
    empty_settings.dispatcher.add_sub_tab_handler("settings", "license", lambda: calls.append("license"))

    view = empty_settings.render(AdminRequest())

    assert view.sub_tab.active_id == "general"
    assert view.dispatched == ("ptam_admin_sub_tab_settings_general",)
    assert calls == ["general"]
    assert view.sub_tabs == (
        NavItem(id="general", label="General", url="?tab=general", active=True, clickable=False),
        NavItem(id="license", label="License", url="?tab=license", active=False, clickable=True),
    )


def test_render_sub_tabs_are_collected_for_resolved_tab(empty_settings: AdminSettings) -> None:
    seen: list[tuple] = []
    empty_settings.registry.add_tab_provider(lambda current: make_tabs("settings", "support"))
    empty_settings.registry.add_sub_tab_provider(lambda current, tab, sub: seen.append((tab, sub)) or current)

    empty_settings.render(AdminRequest(tab="bogus", sub_tab="license"))
    assert seen == [("settings", "license")]


def test_render_fires_tab_action_with_resolved_ids(empty_settings: AdminSettings) -> None:
    calls: list[tuple] = []
    _with_tabs(
        empty_settings,
        make_tabs("settings", "support", actions={"support": "ptam_admin_tab_support"}),
        {"support": make_tabs("faq", "contact")},
    )
    empty_settings.dispatcher.add_action("ptam_admin_tab_support", lambda tab, sub: calls.append((tab, sub)))

    view = empty_settings.render(AdminRequest(tab="support", sub_tab="contact"))

    assert calls == [("support", "contact")]
    assert view.dispatched == ("ptam_admin_sub_tab_support_contact", "ptam_admin_tab_support")


def test_render_starts_fresh_each_time(empty_settings: AdminSettings) -> None:
    _with_tabs(empty_settings, make_tabs("settings", "support"))
    assert empty_settings.render(AdminRequest(tab="support")).tab.active_id == "support"
    assert empty_settings.render(AdminRequest()).tab.active_id == "settings"


def test_render_carries_title_and_info(empty_settings: AdminSettings) -> None:
    view = empty_settings.render()
    assert view.title == "Custom Query Blocks"
    assert "Query Blocks" in view.info_text


# -------------------------------------------------------------------------
# Menu and plugin list
# -------------------------------------------------------------------------


def test_menu_page(empty_settings: AdminSettings) -> None:
    assert empty_settings.menu_page() == MenuPage(
        parent="options-general.php",
        page_title="Custom Query Blocks",
        menu_title="Custom Query Blocks",
        capability="manage_options",
        menu_slug="custom-query-blocks",
    )


def test_plugin_action_links_appends_settings_and_support(empty_settings: AdminSettings) -> None:
    existing = [ActionLink(label="Deactivate", url="/deactivate")]
    links = empty_settings.plugin_action_links(existing)
    assert [link.label for link in links] == ["Deactivate", "Settings", "Support"]
    assert links[1].url.endswith("page=custom-query-blocks&tab=settings")
    assert links[2].url.endswith("page=custom-query-blocks&tab=support")


def test_plugin_action_links_replaces_non_list_input(empty_settings: AdminSettings) -> None:
    links = empty_settings.plugin_action_links("not-a-list")
    assert [link.label for link in links] == ["Settings", "Support"]


def test_plugin_row_meta_only_for_own_plugin(empty_settings: AdminSettings) -> None:
    meta = ["Version 5.1.0"]
    assert empty_settings.plugin_row_meta(meta, "akismet/akismet.php") == meta

    own = empty_settings.plugin_row_meta(meta, empty_settings.config.plugin_file)
    assert own[0] == "Version 5.1.0"
    assert own[1].label == "Get Archive Pages Pro"
    assert own[1].highlight is True
    assert meta == ["Version 5.1.0"]
