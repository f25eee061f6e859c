"""A square grid of terrain chunks."""

from __future__ import annotations

from terraforge.terrain import HeightFunction, TerrainChunk


class ChunkManager:
    """Creates and holds the terrain chunks from ``-grid_size_half`` to ``grid_size_half`` on both axes.

    ``chunks`` maps grid coordinates ``(x, z)`` to generated chunks.
    """

    def __init__(
        self,
        height_fn: HeightFunction,
        grid_size_half: int = 3,
        chunk_size: int = 500,
        resolution: int = 128,
    ) -> None:
        self.height_fn = height_fn
        self.grid_size_half = int(grid_size_half)
        self.chunk_size = int(chunk_size)
        self.resolution = int(resolution)
        self.chunks: dict[tuple[int, int], TerrainChunk] = {}

        span = range(-self.grid_size_half, self.grid_size_half + 1)
        for x in span:
            for z in span:
                self.add_chunk(x, z)

    def add_chunk(self, x: int, z: int) -> TerrainChunk:
        """Generate the chunk at grid position ``(x, z)``, store it and return it."""
        chunk = TerrainChunk(
            self.height_fn,
            x * self.chunk_size,
            z * self.chunk_size,
            self.chunk_size,
            self.resolution,
        )
        chunk.generate()
        self.chunks[(x, z)] = chunk
        return chunk