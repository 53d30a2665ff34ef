"""Unit tests for a single chunk.

Tests the double-buffered generation lifecycle, exact boundary resolution
against the eight neighbor grids, and the Conway transition of a chunk in
isolation and at its seams.
"""

import pytest
import numpy as np
from src.core.chunk import DEAD_GENERATION, Chunk, empty_generation
from src.core.conway_rules import update_cell
from src.core.coords import CHUNK_SIZE
from src.core.direction import Direction

N = CHUNK_SIZE


def dead_neighbors():
    return [DEAD_GENERATION] * 8


def chunk_with(cells, position=(0, 0)):
    """Chunk whose current generation holds the given local cells."""
    chunk = Chunk(position)
    for x, y in cells:
        chunk.set_cell(x, y, True)
    return chunk


def step(chunk, neighbors=None):
    chunk.prepare_tick()
    chunk.tick(neighbors if neighbors is not None else dead_neighbors())


class TestChunkLifecycle:
    """Test construction and the prepare step."""

    def test_new_chunk_is_dead(self):
        """New chunks have empty grids and zero counts."""
        chunk = Chunk((3, -2))
        assert chunk.position == (3, -2)
        assert not chunk.current_generation.any()
        assert not chunk.previous_generation.any()
        assert chunk.current_alive_count == 0
        assert chunk.previous_alive_count == 0
        assert chunk.current_generation.shape == (N, N)

    def test_world_origin(self):
        """World origin follows the chunk position."""
        assert Chunk((-2, 3)).world_origin == (-2 * N, 3 * N)

    def test_prepare_moves_current_to_previous(self):
        """prepare_tick copies current into previous and clears current."""
        chunk = chunk_with([(1, 2), (3, 4)])
        chunk.prepare_tick()

        assert chunk.previous_generation[2, 1]
        assert chunk.previous_generation[4, 3]
        assert chunk.previous_alive_count == 2
        assert not chunk.current_generation.any()
        assert chunk.current_alive_count == 0

    def test_prepare_replaces_rather_than_merges(self):
        """A second prepare drops cells that were only in the old previous."""
        chunk = chunk_with([(5, 5)])
        chunk.prepare_tick()
        chunk.set_cell(6, 6, True)
        chunk.prepare_tick()

        assert not chunk.previous_generation[5, 5]
        assert chunk.previous_generation[6, 6]
        assert chunk.previous_alive_count == 1

    def test_previous_generation_is_read_only(self):
        """The tick input cannot be written through."""
        chunk = chunk_with([(0, 0)])
        chunk.prepare_tick()
        with pytest.raises(ValueError):
            chunk.previous_generation[0, 0] = False


class TestCellAccess:
    """Test local cell reads and writes."""

    def test_set_and_get(self):
        """Written cells read back and keep the count exact."""
        chunk = Chunk((0, 0))
        assert chunk.set_cell(7, 9, True) is True
        assert chunk.get_cell(7, 9) is True
        assert chunk.current_alive_count == 1

        assert chunk.set_cell(7, 9, True) is False
        assert chunk.current_alive_count == 1

        assert chunk.set_cell(7, 9, False) is True
        assert chunk.get_cell(7, 9) is False
        assert chunk.current_alive_count == 0

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (N, 0), (0, N)])
    def test_bounds_checking(self, x, y):
        """Out-of-range local coordinates raise IndexError."""
        chunk = Chunk((0, 0))
        with pytest.raises(IndexError):
            chunk.get_cell(x, y)
        with pytest.raises(IndexError):
            chunk.set_cell(x, y, True)

    def test_live_cells(self):
        """Live cells are reported as local (x, y) pairs."""
        chunk = chunk_with([(0, 0), (49, 3), (2, 48)])
        assert sorted(chunk.live_cells()) == [(0, 0), (2, 48), (49, 3)]

    def test_string_representation(self):
        """Text form has one row per cell row with north first."""
        chunk = chunk_with([(0, 0)])
        lines = str(chunk).split('\n')
        assert len(lines) == N
        assert lines[-1][0] == '█'
        assert lines[0][0] == '░'
        assert repr(chunk) == "Chunk(position=(0, 0), alive=1)"


class TestBoundaryResolution:
    """Test mapping of halo positions onto neighbor grids."""

    @pytest.mark.parametrize("query, direction, source", [
        ((-1, N), Direction.NW, (N - 1, 0)),
        ((N, N), Direction.NE, (0, 0)),
        ((N, -1), Direction.SE, (0, N - 1)),
        ((-1, -1), Direction.SW, (N - 1, N - 1)),
        ((-1, 7), Direction.W, (N - 1, 7)),
        ((7, N), Direction.N, (7, 0)),
        ((N, 7), Direction.E, (0, 7)),
        ((7, -1), Direction.S, (7, N - 1)),
        ((-1, 0), Direction.W, (N - 1, 0)),
        ((N - 1, N), Direction.N, (N - 1, 0)),
    ])
    def test_exact_source_cell(self, query, direction, source):
        """Each halo position reads exactly one cell of exactly one neighbor."""
        chunk = Chunk((0, 0))
        chunk.prepare_tick()

        # Every other neighbor fully alive, target fully alive except the source
        neighbors = [np.ones((N, N), dtype=bool) for _ in range(8)]
        source_x, source_y = source
        neighbors[direction.value][source_y, source_x] = False
        assert chunk.neighbor_state(neighbors, *query) is False

        neighbors[direction.value][:] = False
        neighbors[direction.value][source_y, source_x] = True
        assert chunk.neighbor_state(neighbors, *query) is True

    def test_in_range_reads_previous_generation(self):
        """Interior positions read previous_generation, not current."""
        chunk = chunk_with([(4, 4)])
        chunk.prepare_tick()
        chunk.set_cell(5, 5, True)

        neighbors = [np.ones((N, N), dtype=bool) for _ in range(8)]
        assert chunk.neighbor_state(neighbors, 4, 4) is True
        assert chunk.neighbor_state(neighbors, 5, 5) is False

    @pytest.mark.parametrize("query", [(-2, 0), (0, N + 1), (N + 1, N + 1), (-2, -2)])
    def test_far_positions_are_rejected(self, query):
        """Positions more than one cell outside are a programming error."""
        chunk = Chunk((0, 0))
        with pytest.raises(IndexError):
            chunk.neighbor_state(dead_neighbors(), *query)


class TestChunkTick:
    """Test the Conway transition of one chunk."""

    def test_empty_chunk_stays_empty(self):
        """Dead chunk with dead neighbors stays dead and reports no change."""
        chunk = Chunk((0, 0))
        step(chunk)
        assert chunk.current_alive_count == 0
        assert not chunk.changed()

    def test_block_still_life(self):
        """Isolated 2x2 block is unchanged."""
        chunk = chunk_with([(10, 10), (11, 10), (10, 11), (11, 11)])
        step(chunk)
        assert not chunk.changed()
        assert chunk.current_alive_count == 4

    def test_blinker_oscillates(self):
        """Horizontal blinker turns vertical, then horizontal again."""
        horizontal = [(20, 25), (21, 25), (22, 25)]
        vertical = [(21, 24), (21, 25), (21, 26)]
        chunk = chunk_with(horizontal)

        step(chunk)
        assert chunk.changed()
        assert sorted(chunk.live_cells()) == sorted(vertical)

        step(chunk)
        assert sorted(chunk.live_cells()) == sorted(horizontal)
        assert chunk.current_alive_count == 3

    def test_birth_from_west_edge(self):
        """A column in the west neighbor's last column seeds a birth at x=0."""
        chunk = Chunk((0, 0))
        west = empty_generation()
        west[9:12, N - 1] = True
        neighbors = dead_neighbors()
        neighbors[Direction.W.value] = west

        step(chunk, neighbors)
        assert chunk.live_cells() == [(0, 10)]
        assert chunk.current_alive_count == 1

    def test_birth_from_corner_neighbors(self):
        """The far corner cell counts north, north-east and east neighbors."""
        chunk = Chunk((0, 0))
        neighbors = dead_neighbors()
        north = empty_generation()
        north[0, N - 1] = True
        north_east = empty_generation()
        north_east[0, 0] = True
        east = empty_generation()
        east[N - 1, 0] = True
        neighbors[Direction.N.value] = north
        neighbors[Direction.NE.value] = north_east
        neighbors[Direction.E.value] = east

        step(chunk, neighbors)
        assert chunk.live_cells() == [(N - 1, N - 1)]

    def test_wrong_neighbor_count(self):
        """Ticking with anything but eight neighbor grids is rejected."""
        chunk = Chunk((0, 0))
        chunk.prepare_tick()
        with pytest.raises(ValueError, match="Expected 8"):
            chunk.tick([DEAD_GENERATION] * 7)

    def test_matches_per_cell_rule(self):
        """Vectorised tick equals the rule applied cell by cell via neighbor_state."""
        rng = np.random.default_rng(2024)
        chunk = Chunk((0, 0))
        for y, x in zip(*np.nonzero(rng.random((N, N)) < 0.35)):
            chunk.set_cell(int(x), int(y), True)
        neighbors = [rng.random((N, N)) < 0.35 for _ in range(8)]

        step(chunk, neighbors)

        for y in range(N):
            for x in range(N):
                live = sum(chunk.neighbor_state(neighbors, x + dx, y + dy)
                           for dx in (-1, 0, 1) for dy in (-1, 0, 1)
                           if (dx, dy) != (0, 0))
                expected = update_cell(bool(chunk.previous_generation[y, x]), live)
                assert chunk.current_generation[y, x] == expected, f"Mismatch at ({x}, {y})"

        assert chunk.current_alive_count == int(np.count_nonzero(chunk.current_generation))
