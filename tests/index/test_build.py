import logging

import pytest

from bundlecache import (
    LoadedResource,
    LoadError,
    Material,
    MemoryProvider,
    MeshData,
    ResourceIndex,
    ResourceProvider,
    TextureData,
    TypeTag,
)
from tests.factories import make_mesh, mesh_resource


class UnreadableProvider(ResourceProvider):
    def enumerate_paths(self):
        raise LoadError("bundle is corrupt")

    def load_by_path(self, path):
        raise AssertionError("never reached")


def test_provider_failure_propagates():
    with pytest.raises(LoadError, match="corrupt"):
        ResourceIndex.build(UnreadableProvider())


def test_payload_must_match_declared_tag():
    lying = LoadedResource(TypeTag.SHADER, make_mesh(), "liar")

    with pytest.raises(LoadError, match="declares shader"):
        ResourceIndex.build(MemoryProvider([("liar.glsl", lying)]))


def test_insertions_are_logged_at_debug(caplog):
    provider = MemoryProvider(
        [
            ("meshes/Rock.obj", mesh_resource("Rock")),
            ("alt/rock.obj", mesh_resource("rock")),
        ]
    )

    with caplog.at_level(logging.DEBUG, logger="bundlecache.index"):
        ResourceIndex.build(provider)

    messages = [r.getMessage() for r in caplog.records]
    assert "Loaded mesh Rock from meshes/Rock.obj" in messages
    assert "Loaded mesh rock from alt/rock.obj" in messages
    assert any(m.startswith("Replacing mesh rock") for m in messages)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)


def test_injected_logger_receives_diagnostics(caplog):
    custom = logging.getLogger("game.assets")
    index = ResourceIndex.build(MemoryProvider([]), log=custom)

    with caplog.at_level(logging.ERROR, logger="game.assets"):
        index.get("missing", MeshData)

    assert [r.name for r in caplog.records] == ["game.assets"]


def test_from_bundle_directory(bundle_dir):
    index = ResourceIndex.from_bundle(bundle_dir)

    assert sorted(index) == ["barrel", "barrel_body", "metal_01", "pbr", "rust"]
    assert index.entry("barrel").tag is TypeTag.GAME_OBJECT
    assert index.get_mesh("barrel_1") == index.get("barrel_body", MeshData)
    assert index.get_mesh("barrel_1").vertex_count == 3

    material = index.get("METAL_01", Material)
    assert material.roughness == 0.2
    assert material.textures["albedo"] == index.get("rust", TextureData)
    assert index.get_shader("metal_01") == index.get_shader("pbr")


def test_archive_and_directory_bundles_agree(bundle_dir, bundle_zip):
    from_dir = ResourceIndex.from_bundle(bundle_dir)
    from_zip = ResourceIndex.from_bundle(bundle_zip)

    assert dict(from_dir.entries()) == dict(from_zip.entries())


def test_from_bundle_missing_path(tmp_path):
    with pytest.raises(LoadError):
        ResourceIndex.from_bundle(tmp_path / "nope.zip")
