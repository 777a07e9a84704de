from __future__ import annotations

import pytest

from nuxt_layers.paths import join, split_keys


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        (("layers/blog", "assets"), "layers/blog/assets"),
        (("layers/blog", ""), "layers/blog"),
        (("/projects/project", "core", ""), "/projects/project/core"),
        (("core//", "/utils"), "core/utils"),
        (("core", "./a/../b"), "core/b"),
        (("core", "utils/"), "core/utils/"),
        (("layers\\blog", "assets"), "layers/blog/assets"),
        (("", ""), "."),
    ],
)
def test_join(segments, expected) -> None:
    assert join(*segments) == expected


def test_split_keys_from_string() -> None:
    assert split_keys(" core\tsite  blog\n") == ["core", "site", "blog"]


def test_split_keys_from_sequence() -> None:
    assert split_keys(("core", "site")) == ["core", "site"]


def test_split_keys_empty_string() -> None:
    assert split_keys("") == []
