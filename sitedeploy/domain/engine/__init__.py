"""
Transfer engine
"""
from .models import DeploySettings, HookUnit
from .deployer import Deployer
from .filters import Filter, FilterChain
from .manifest import encode_manifest, decode_manifest, read_manifest, write_manifest
from .masks import matches_mask
from .preprocessor import Preprocessor

__all__ = [
    "DeploySettings",
    "HookUnit",
    "Deployer",
    "Filter",
    "FilterChain",
    "encode_manifest",
    "decode_manifest",
    "read_manifest",
    "write_manifest",
    "matches_mask",
    "Preprocessor",
]
