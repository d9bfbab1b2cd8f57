from __future__ import annotations

from ._utils import iter_source_files, matches_prefix, package_root, parse_imports

# Layers may only import from layers listed before them.
LAYERS = ("giveup.core", "giveup.output", "giveup.terminate", "giveup.cli")


def _layer_of(module: str) -> int | None:
    for index, prefix in enumerate(LAYERS):
        if matches_prefix(module, prefix):
            return index
    return None


def test_layers_only_import_lower_layers() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_source_files(root):
        rel = file_path.relative_to(root)
        module = ".".join(["giveup", *rel.with_suffix("").parts])
        own = _layer_of(module)
        if own is None:
            continue
        for item in parse_imports(file_path):
            imported = _layer_of(item.module)
            if imported is not None and imported > own:
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "layer dependency violations:\n" + "\n".join(offenders)


def test_core_has_no_third_party_imports() -> None:
    root = package_root()
    allowed_roots = {"giveup", "__future__", "collections", "dataclasses", "enum", "os", "typing"}
    offenders: list[str] = []

    for file_path in iter_source_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if item.module.split(".")[0] not in allowed_roots:
                offenders.append(f"{rel}:{item.line}: unexpected import '{item.module}'")

    assert not offenders, "core import violations:\n" + "\n".join(offenders)
