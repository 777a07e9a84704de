from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from nuxt_layers import InvalidKeyError, LayerRegistry, use_layers
from nuxt_layers.paths import join


class TestOnly:
    def test_filters_by_string(self, layers: LayerRegistry) -> None:
        assert layers.only("core").extends() == ["core"]

    def test_filters_by_list(self, layers: LayerRegistry) -> None:
        assert layers.only(["core", "blog"]).extends() == ["core", "layers/blog"]

    def test_orders_by_filter(self, layers: LayerRegistry) -> None:
        assert layers.only("site blog").extends() == ["layers/site", "layers/blog"]

    def test_extra_whitespace_is_ignored(self, layers: LayerRegistry) -> None:
        assert layers.only("  site \n\t core ").keys() == ["site", "core"]

    def test_duplicates_keep_first_position(self, layers: LayerRegistry) -> None:
        assert layers.only("blog core blog").keys() == ["blog", "core"]

    def test_does_not_mutate_original(self, layers: LayerRegistry) -> None:
        filtered = layers.only("site")
        assert filtered is not layers
        assert layers.keys() == ["core", "blog", "site"]
        assert filtered.base_dir == layers.base_dir

    def test_names_first_invalid_key(self, layers: LayerRegistry) -> None:
        with pytest.raises(InvalidKeyError) as exc:
            layers.only("core nope other")
        assert exc.value.key == "nope"

    def test_keys_outside_a_filtered_registry_are_invalid(self, layers: LayerRegistry) -> None:
        with pytest.raises(InvalidKeyError):
            layers.only("site").relative_path("core")


class TestRelativePath:
    def test_layer(self, layers: LayerRegistry) -> None:
        assert layers.rel("core") == "core"

    def test_layer_and_folder(self, layers: LayerRegistry) -> None:
        assert layers.relative_path("blog", "assets") == "layers/blog/assets"

    def test_normalises_segments(self, layers: LayerRegistry) -> None:
        assert layers.rel("blog", "./assets//images/../icons") == "layers/blog/assets/icons"

    def test_invalid_key(self, layers: LayerRegistry) -> None:
        with pytest.raises(InvalidKeyError, match='Invalid layer "invalid"'):
            layers.rel("invalid")


class TestAbsolutePath:
    def test_layer(self, layers: LayerRegistry) -> None:
        assert layers.abs("core") == "/projects/project/core"

    def test_layer_and_folder(self, layers: LayerRegistry) -> None:
        assert layers.absolute_path("blog", "assets") == "/projects/project/layers/blog/assets"

    @pytest.mark.parametrize("key", ["core", "blog", "site"])
    @pytest.mark.parametrize("folder", ["", "assets", "a/../b"])
    def test_joins_base_dir_with_relative_path(self, layers: LayerRegistry, key: str, folder: str) -> None:
        assert layers.abs(key, folder) == join(layers.base_dir, layers.rel(key, folder))

    def test_invalid_key(self, layers: LayerRegistry) -> None:
        with pytest.raises(InvalidKeyError, match='Invalid layer "invalid"'):
            layers.abs("invalid")


class TestGenericObject:
    def test_builds_hash(self, layers: LayerRegistry) -> None:
        result = layers.only("core site").obj(lambda key, rel, abs_, index: "|".join([key, rel, abs_, str(index)]))
        assert result == {
            "core": "core|core|/projects/project/core|0",
            "site": "site|layers/site|/projects/project/layers/site|1",
        }


class TestGenericArray:
    def test_builds_list(self, layers: LayerRegistry) -> None:
        result = layers.only("core site").generic_array(
            lambda key, rel, abs_, index: "|".join([key, rel, abs_, str(index)])
        )
        assert result == [
            "core|core|/projects/project/core|0",
            "site|layers/site|/projects/project/layers/site|1",
        ]


class TestConstruction:
    def test_copies_the_mapping(self) -> None:
        source = {"core": "core"}
        registry = use_layers("/base", source)
        source["blog"] = "layers/blog"
        assert registry.keys() == ["core"]

    def test_mapping_is_read_only(self, layers: LayerRegistry) -> None:
        with pytest.raises(TypeError):
            layers.layers["core"] = "elsewhere"  # type: ignore[index]

    def test_accepts_path_objects(self) -> None:
        registry = use_layers(PurePosixPath("/base"), {"core": PurePosixPath("src/core")})
        assert registry.abs("core", "utils") == "/base/src/core/utils"

    def test_windows_separators_become_posix(self) -> None:
        registry = use_layers("C:\\projects\\app", {"core": "layers\\core"})
        assert registry.rel("core") == "layers/core"
        assert registry.abs("core") == "C:/projects/app/layers/core"

    def test_mapping_protocol(self, layers: LayerRegistry) -> None:
        assert len(layers) == 3
        assert "blog" in layers
        assert "nope" not in layers
        assert list(layers) == ["core", "blog", "site"]

    def test_equal_registries_compare_equal(self, layers: LayerRegistry) -> None:
        assert layers.only("core blog site") == layers
