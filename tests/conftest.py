import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'nuxt_layers'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from nuxt_layers import use_layers

BASE_DIR = "/projects/project"


@pytest.fixture
def layers():
    return use_layers(BASE_DIR, {
        "core": "core",
        "blog": "layers/blog",
        "site": "layers/site",
    })
