import pytest

from plugin_logger.util.keys import debug_flag_name, sanitize_key


@pytest.mark.parametrize("raw, expected", [
    ("my-plugin", "my-plugin"),
    ("My_Plugin", "my_plugin"),
    ("My Plugin 2.0!", "myplugin20"),
    ("ünïcode", "ncode"),
    ("", ""),
])
def test_sanitize_key(raw, expected):
    assert sanitize_key(raw) == expected


def test_debug_flag_name():
    assert debug_flag_name("my-plugin") == "MY_PLUGIN_DEBUG"
    assert debug_flag_name("shop_sync") == "SHOP_SYNC_DEBUG"
