"""Tests for the YAML snapshot bridge."""

from pathlib import Path

import pytest
import yaml

from jvm_bindgen.errors import SetupError
from jvm_bindgen.snapshot_bridge import SnapshotBridge

BAR = {
    "name": "com.foo.Bar",
    "interfaces": ["com.foo.Shape"],
    "methods": [
        {
            "name": "scale",
            "modifiers": 9,
            "parameters": ["double"],
            "returns": "com.foo.Bar",
        },
    ],
}


def write_snapshot(path: Path, classes: list[dict]) -> Path:
    """Write a snapshot file holding ``classes``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump({"classes": classes}), encoding="utf-8")
    return path


def test_loads_directory_recursively(tmp_path: Path) -> None:
    """Snapshots anywhere below a directory are found."""
    write_snapshot(tmp_path / "a" / "b" / "bar.yml", [BAR])
    write_snapshot(
        tmp_path / "shape.yaml", [{"name": "com.foo.Shape", "interface": True}]
    )
    bridge = SnapshotBridge([tmp_path])
    assert sorted(bridge.class_names()) == ["com.foo.Bar", "com.foo.Shape"]
    assert bridge.is_interface("com.foo.Shape")
    assert not bridge.is_interface("com.foo.Bar")
    assert bridge.interfaces("com.foo.Bar") == ["com.foo.Shape"]


def test_declared_methods(tmp_path: Path) -> None:
    """Method records become RawMethods with defaults filled in."""
    bridge = SnapshotBridge([write_snapshot(tmp_path / "bar.yml", [BAR])])
    (method,) = bridge.declared_methods("com.foo.Bar")
    assert method.name == "scale"
    assert method.is_static
    assert method.parameter_types == ("double",)
    assert method.return_type == "com.foo.Bar"
    assert method.declaring_class == "com.foo.Bar"


def test_annotation_is_also_interface(tmp_path: Path) -> None:
    """Annotation types report as interfaces, like Class.isInterface()."""
    path = write_snapshot(
        tmp_path / "a.yml", [{"name": "com.foo.Marker", "annotation": True}]
    )
    bridge = SnapshotBridge([path])
    assert bridge.is_annotation("com.foo.Marker")
    assert bridge.is_interface("com.foo.Marker")


def test_first_definition_wins(tmp_path: Path) -> None:
    """Earlier classpath entries shadow later ones."""
    first = write_snapshot(tmp_path / "first.yml", [BAR])
    second = write_snapshot(
        tmp_path / "other" / "second.yml", [{"name": "com.foo.Bar", "interface": True}]
    )
    bridge = SnapshotBridge([first, second])
    assert not bridge.is_interface("com.foo.Bar")


def test_module_info_and_meta_inf_ignored(tmp_path: Path) -> None:
    """Non-class entries are not reported."""
    path = write_snapshot(
        tmp_path / "x.yml",
        [{"name": "module-info"}, {"name": "META-INF.versions.Foo"}, BAR],
    )
    assert SnapshotBridge([path]).class_names() == ["com.foo.Bar"]


def test_missing_location_is_setup_error(tmp_path: Path) -> None:
    """A classpath entry that does not exist stops the run."""
    with pytest.raises(SetupError, match="does not exist"):
        SnapshotBridge([tmp_path / "missing"])


def test_invalid_snapshot_is_setup_error(tmp_path: Path) -> None:
    """Snapshots without a classes list are rejected."""
    path = tmp_path / "bad.yml"
    path.write_text("just a string", encoding="utf-8")
    with pytest.raises(SetupError, match="classes"):
        SnapshotBridge([path])


def test_unknown_class_lookup_fails(tmp_path: Path) -> None:
    """Asking about a class that is not on the classpath raises."""
    bridge = SnapshotBridge([write_snapshot(tmp_path / "bar.yml", [BAR])])
    with pytest.raises(LookupError):
        bridge.declared_methods("com.foo.Missing")
