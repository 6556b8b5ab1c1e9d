import os

from vfox.models import (
    Category,
    Info,
    Package,
    RecordSource,
    RemotePluginInfo,
    UseScope,
)


def test_info_label():
    assert Info(name="java", version="1.0.0").label() == "java@1.0.0"


def test_storage_path_with_version(tmp_path):
    info = Info(name="sdk-name", version="9.0.0")
    assert info.storage_path(str(tmp_path)) == os.path.join(str(tmp_path), "sdk-name-9.0.0")


def test_storage_path_without_version(tmp_path):
    info = Info(name="java")
    assert info.storage_path(str(tmp_path)) == os.path.join(str(tmp_path), "java")


def test_package_defaults():
    main = Info(name="java", version="1.0.0", path="/path/to/java")
    pkg = Package(main=main)
    assert pkg.additions == []
    assert pkg.main.label() == "java@1.0.0"


def test_use_scope_strings():
    assert str(UseScope(0)) == "global"
    assert str(UseScope(1)) == "project"
    assert str(UseScope(2)) == "session"
    assert UseScope(0) is UseScope.GLOBAL
    assert UseScope.GLOBAL < UseScope.PROJECT < UseScope.SESSION


def test_record_source_values():
    assert RecordSource("project") is RecordSource.PROJECT
    assert str(RecordSource("session")) == "session"
    assert [str(s) for s in UseScope] == [s.value for s in RecordSource]


def test_remote_plugin_from_dict():
    data = {
        "name": "java.lua",
        "plugin_author": "someone",
        "plugin_desc": "a plugin",
        "plugin_name": "java",
        "plugin_version": "0.0.1",
        "sha256": "abc",
        "url": "https://example.com/java.lua",
    }
    info = RemotePluginInfo.from_dict(data)
    assert info.filename == data["name"]
    assert info.author == data["plugin_author"]
    assert info.desc == data["plugin_desc"]
    assert info.name == data["plugin_name"]
    assert info.version == data["plugin_version"]
    assert info.sha256 == data["sha256"]
    assert info.url == data["url"]


def test_remote_plugin_missing_fields_default_empty():
    info = RemotePluginInfo.from_dict({"plugin_name": "node"})
    assert info.name == "node"
    assert info.url == ""
    assert info.filename == ""


def test_category_from_dict():
    data = {
        "category": "languages",
        "count": "2",
        "files": [
            {"name": "java.lua", "plugin_name": "java"},
            {"name": "node.lua", "plugin_name": "node"},
        ],
    }
    category = Category.from_dict(data)
    assert category.name == "languages"
    assert category.count == "2"
    assert [p.name for p in category.plugins] == ["java", "node"]
    assert [p.filename for p in category.plugins] == ["java.lua", "node.lua"]


def test_category_without_files():
    category = Category.from_dict({"category": "tools", "files": None})
    assert category.plugins == []
    assert category.name == "tools"