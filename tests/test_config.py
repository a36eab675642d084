from __future__ import annotations

import importlib

import pytest

import frontdesk.config


@pytest.fixture
def reload_config(monkeypatch):
    yield lambda: importlib.reload(frontdesk.config)
    monkeypatch.undo()
    importlib.reload(frontdesk.config)


def test_defaults_without_environment(monkeypatch, reload_config):
    for name in (
        "FRONTDESK_DB_PATH",
        "FRONTDESK_ADMIN_USERNAME",
        "FRONTDESK_ADMIN_PASSWORD",
        "FRONTDESK_PRINTER_VENDOR_ID",
        "FRONTDESK_PRINTER_PRODUCT_ID",
        "FRONTDESK_PRINTER_WIDTH_PX",
    ):
        monkeypatch.delenv(name, raising=False)

    config = reload_config()

    assert config.DB_PATH == "data/frontdesk.db"
    assert config.ADMIN_USERNAME == "admin"
    assert config.PRINTER_USB_VENDOR_ID == 0x28E9
    assert config.PRINTER_USB_PRODUCT_ID == 0x0289
    assert config.PRINTER_WIDTH_PX == 384


def test_environment_overrides_settings(monkeypatch, tmp_path, reload_config):
    monkeypatch.setenv("FRONTDESK_DB_PATH", str(tmp_path / "desk.db"))
    monkeypatch.setenv("FRONTDESK_ADMIN_USERNAME", "manager")
    monkeypatch.setenv("FRONTDESK_ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("FRONTDESK_PRINTER_VENDOR_ID", "0x0416")
    monkeypatch.setenv("FRONTDESK_PRINTER_PRODUCT_ID", "20512")
    monkeypatch.setenv("FRONTDESK_PRINTER_WIDTH_PX", "576")
    monkeypatch.setenv("FRONTDESK_PRINTER_FONT_SIZE", "24")
    monkeypatch.setenv("FRONTDESK_PRINTER_HEADER_FONT_SIZE", "36")

    config = reload_config()

    assert config.DB_PATH == str(tmp_path / "desk.db")
    assert config.ADMIN_USERNAME == "manager"
    assert config.ADMIN_PASSWORD == "s3cret"
    assert config.PRINTER_USB_VENDOR_ID == 0x0416
    assert config.PRINTER_USB_PRODUCT_ID == 20512
    assert config.PRINTER_WIDTH_PX == 576
    assert config.PRINTER_FONT_SIZE == 24
    assert config.PRINTER_HEADER_FONT_SIZE == 36


def test_admin_credentials_follow_environment(monkeypatch, reload_config):
    monkeypatch.setenv("FRONTDESK_ADMIN_USERNAME", "manager")
    monkeypatch.setenv("FRONTDESK_ADMIN_PASSWORD", "s3cret")
    reload_config()

    from frontdesk.admin import AdminCredentials

    credentials = AdminCredentials.from_config()
    assert credentials.check("manager", "s3cret")
    assert not credentials.check("admin", "1234")
