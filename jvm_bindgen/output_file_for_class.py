"""Utility for determining the output file of a generated class."""

from pathlib import Path

from jvm_bindgen.rename import rename_class_fq


def output_file_for_class(out_root: Path, class_name: str) -> Path:
    """Determine the ``.rs`` file for a class.

    com.foo.Bar$Baz -> out_root/com/foo/bar_p/Baz.rs
    """
    *packages, name = rename_class_fq(class_name).split(".")
    return out_root.joinpath(*packages, f"{name}.rs")
