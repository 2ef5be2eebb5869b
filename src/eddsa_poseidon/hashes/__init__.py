"""Hash functions: BLAKE-512 (key expansion), Poseidon (challenge)."""

from .blake512 import blake512
from .poseidon import poseidon, poseidon5

__all__: tuple[str, ...] = ("blake512", "poseidon", "poseidon5")
