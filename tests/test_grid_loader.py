"""
Unit tests for grid file loading.
"""

import json

import msgpack
import numpy as np
import pytest

from liftpath.config import DEFAULT_GRID_PATH, validate_data_files
from liftpath.data import grid_from_array, load_grid, save_grid
from liftpath.errors import InvalidGridError


class TestLoadGrid:
    """Test reading each supported format."""

    def test_load_json(self, tmp_path, sample_times):
        """Should read a JSON list of rows."""
        path = tmp_path / "times.json"
        path.write_text(json.dumps(sample_times), encoding="utf-8")
        assert load_grid(path) == sample_times

    def test_load_msgpack(self, tmp_path, sample_times):
        """Should read a msgpack list of rows."""
        path = tmp_path / "times.msgpack"
        path.write_bytes(msgpack.packb(sample_times))
        assert load_grid(path) == sample_times

    def test_load_npy(self, tmp_path, sample_times):
        """Should read a 2D integer array as plain ints."""
        path = tmp_path / "times.npy"
        np.save(path, np.array(sample_times, dtype=np.int32))
        grid = load_grid(path)
        assert grid == sample_times
        assert all(type(value) is int for row in grid for value in row)

    def test_load_accepts_str_path(self, tmp_path, sample_times):
        """Should accept string paths."""
        path = tmp_path / "times.json"
        path.write_text(json.dumps(sample_times), encoding="utf-8")
        assert load_grid(str(path)) == sample_times

    @pytest.mark.parametrize("name", ["times.json", "times.msgpack", "times.npy"])
    def test_save_then_load(self, tmp_path, sample_times, name):
        """Saved grids should load back unchanged."""
        path = save_grid(sample_times, tmp_path / name)
        assert load_grid(path) == sample_times

    def test_missing_file(self, tmp_path):
        """Should raise FileNotFoundError for missing files."""
        with pytest.raises(FileNotFoundError):
            load_grid(tmp_path / "missing.json")

    def test_unknown_format(self, tmp_path):
        """Should reject unsupported suffixes."""
        path = tmp_path / "times.csv"
        path.write_text("1,2\n3,4\n", encoding="utf-8")
        with pytest.raises(InvalidGridError, match="Unsupported"):
            load_grid(path)

    def test_save_unknown_format(self, tmp_path, sample_times):
        """Should refuse to write unsupported suffixes."""
        with pytest.raises(InvalidGridError):
            save_grid(sample_times, tmp_path / "times.txt")

    def test_json_not_a_list(self, tmp_path):
        """Should reject JSON that is not a list of rows."""
        path = tmp_path / "times.json"
        path.write_text(json.dumps({"rows": [[1]]}), encoding="utf-8")
        with pytest.raises(InvalidGridError):
            load_grid(path)

    def test_corrupt_json(self, tmp_path):
        """Undecodable JSON should be reported as an invalid grid."""
        path = tmp_path / "times.json"
        path.write_text("[[1, 2", encoding="utf-8")
        with pytest.raises(InvalidGridError, match="could not be decoded"):
            load_grid(path)

    def test_corrupt_msgpack(self, tmp_path):
        """Truncated msgpack should be reported as an invalid grid."""
        path = tmp_path / "times.msgpack"
        path.write_bytes(msgpack.packb([[1, 2], [3, 4]])[:-2])
        with pytest.raises(InvalidGridError, match="could not be decoded"):
            load_grid(path)

    def test_corrupt_npy(self, tmp_path):
        """A file that is not a numpy array should be reported as an invalid grid."""
        path = tmp_path / "times.npy"
        path.write_bytes(b"not an array")
        with pytest.raises(InvalidGridError, match="could not be decoded"):
            load_grid(path)

    def test_json_ragged(self, tmp_path):
        """Should reject ragged grids."""
        path = tmp_path / "times.json"
        path.write_text(json.dumps([[1, 2], [3]]), encoding="utf-8")
        with pytest.raises(InvalidGridError):
            load_grid(path)


class TestGridFromArray:
    """Test numpy array conversion."""

    def test_converts_to_lists(self):
        """Should return nested lists of ints."""
        assert grid_from_array(np.array([[1, 0], [2, 3]])) == [[1, 0], [2, 3]]

    def test_rejects_1d(self):
        """Should reject arrays that are not 2D."""
        with pytest.raises(InvalidGridError, match="2D"):
            grid_from_array(np.array([1, 2, 3]))

    def test_rejects_floats(self):
        """Should reject non-integer arrays."""
        with pytest.raises(InvalidGridError, match="integers"):
            grid_from_array(np.array([[1.0, 2.0]]))

    def test_rejects_negative(self):
        """Should reject negative costs."""
        with pytest.raises(InvalidGridError):
            grid_from_array(np.array([[1, -2]]))


@pytest.mark.skipif(
    not all(validate_data_files().values()),
    reason="Data files not available",
)
class TestShippedGrid:
    """Test the grid shipped in data/."""

    def test_default_grid_loads(self):
        """The default grid should be valid and non-empty."""
        grid = load_grid(DEFAULT_GRID_PATH)
        assert len(grid) > 0
        assert len(grid[0]) > 0
