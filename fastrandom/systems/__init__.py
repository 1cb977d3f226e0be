"""Generator systems: the xorshift128 core, per-consumer streams, batch sampling."""

from fastrandom.systems.xorshift import Xorshift128
from fastrandom.systems.streams import StreamFactory, derive_seed
from fastrandom.systems.sampling import draw_samples

__all__ = ["StreamFactory", "Xorshift128", "derive_seed", "draw_samples"]
