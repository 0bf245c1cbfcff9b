"""Tests for the bin-by-bin HistogramFiller."""
import numpy as np
import pytest

from kmhist.errors import IndexOutOfRangeError
from kmhist.histogram import Histogram, HistogramFiller


def make_filler(xs, n=4, indices=None, offset=0):
    hist = Histogram.from_data_empty(xs, n)
    bins = np.zeros(n, dtype=np.uint64)
    filler = HistogramFiller(xs, hist.intervals, bins, indices=indices, offset=offset)
    return filler, bins


class TestUnrestrictedFill:
    def test_yields_indices_per_bin_in_scan_order(self, xs):
        """Each step yields the sample positions placed in that bin."""
        filler, _ = make_filler(xs)

        assert next(filler).tolist() == [0, 4, 7]
        assert next(filler).tolist() == [1, 5, 8]
        assert next(filler).tolist() == [2, 6]
        assert next(filler).tolist() == [3]
        with pytest.raises(StopIteration):
            next(filler)

    def test_counts_written_in_place(self, xs):
        """Bin counts are incremented as bins are visited."""
        filler, bins = make_filler(xs)

        next(filler)
        assert bins.tolist() == [3, 0, 0, 0]

        filler.fill()
        assert bins.tolist() == [3, 3, 2, 1]

    def test_exactly_n_items(self, random_walk):
        """The filler produces exactly one index array per bin."""
        filler, bins = make_filler(random_walk, n=17)
        indices = list(filler)

        assert len(indices) == 17
        assert int(bins.sum()) == len(random_walk)

    def test_not_restartable(self, xs):
        """A consumed filler yields nothing on a second pass."""
        filler, bins = make_filler(xs)
        list(filler)

        assert list(filler) == []
        assert bins.tolist() == [3, 3, 2, 1]

    def test_indices_partition_samples(self, random_walk):
        """Every position appears in exactly one bin."""
        filler, _ = make_filler(random_walk, n=10)
        all_indices = np.concatenate(list(filler))

        assert sorted(all_indices.tolist()) == list(range(len(random_walk)))

    def test_remaining_tracks_unassigned(self, xs):
        """remaining counts candidates not yet placed."""
        filler, _ = make_filler(xs)
        assert filler.remaining == 9

        next(filler)
        assert filler.remaining == 6

        filler.fill()
        assert filler.remaining == 0


class TestEdgeBins:
    def test_out_of_range_samples_absorbed(self):
        """Samples outside the boundaries land in the first or last bin."""
        hist = Histogram.from_bounds(0.0, 1.0, 2)
        bins = np.zeros(2, dtype=np.uint64)
        filler = HistogramFiller([-5.0, 0.2, 0.7, 9.0], hist.intervals, bins)

        indices = filler.fill()

        assert indices[0].tolist() == [0, 1]
        assert indices[1].tolist() == [2, 3]
        assert bins.tolist() == [2, 2]

    def test_single_bin_takes_everything(self, xs):
        """With one bin both edges are unbounded."""
        filler, bins = make_filler(xs, n=1)

        assert next(filler).tolist() == list(range(9))
        assert bins.tolist() == [9]

    def test_interior_boundary_goes_to_upper_bin(self):
        """A value equal to an interior boundary belongs to the bin it opens."""
        hist = Histogram.from_bounds(0.0, 2.0, 2)
        bins = np.zeros(2, dtype=np.uint64)

        HistogramFiller([0.0, 1.0, 2.0], hist.intervals, bins).fill()

        assert bins.tolist() == [1, 2]


class TestRestrictedFill:
    def test_lagged_values_of_bin_zero(self, xs):
        """Candidates [0, 4, 7] are judged by xs[1], xs[5], xs[8]."""
        filler, bins = make_filler(xs, indices=[0, 4, 7], offset=1)

        indices = filler.fill()

        assert bins.tolist() == [0, 3, 0, 0]
        assert indices[1].tolist() == [0, 4, 7]
        assert [len(i) for i in indices] == [0, 3, 0, 0]

    def test_reports_candidate_not_lagged_index(self, xs):
        """Yielded positions are the candidates, not the lagged positions."""
        filler, _ = make_filler(xs, indices=[2, 6], offset=1)

        indices = filler.fill()

        # xs[3] = 3.0 and xs[7] = 0.0
        assert indices[0].tolist() == [6]
        assert indices[3].tolist() == [2]

    def test_last_sample_lagged_past_end_not_counted(self, xs):
        """A candidate at the last position has no successor and is skipped."""
        filler, bins = make_filler(xs, indices=[1, 5, 8], offset=1)

        filler.fill()

        # xs[2] = 2.0, xs[6] = 2.0, xs[9] does not exist
        assert bins.tolist() == [0, 0, 2, 0]

    def test_offset_zero_matches_candidates(self, xs):
        """Offset 0 restricts the fill to the candidates themselves."""
        filler, bins = make_filler(xs, indices=[3, 0, 2])

        indices = filler.fill()

        assert bins.tolist() == [1, 0, 1, 1]
        assert indices[0].tolist() == [0]

    def test_empty_candidates(self, xs):
        """No candidates yields empty arrays for every bin."""
        filler, bins = make_filler(xs, indices=[], offset=1)

        indices = filler.fill()

        assert len(indices) == 4
        assert all(len(i) == 0 for i in indices)
        assert bins.tolist() == [0, 0, 0, 0]

    def test_candidate_out_of_range_raises(self, xs):
        """Candidate positions must address samples."""
        with pytest.raises(IndexOutOfRangeError, match="out of range"):
            make_filler(xs, indices=[0, 9], offset=1)

    def test_negative_offset_raises(self, xs):
        """Offsets cannot look backwards."""
        with pytest.raises(ValueError, match="offset.*must be >= 0"):
            make_filler(xs, indices=[1], offset=-1)

    @pytest.mark.parametrize("offset", [0.5, 1.0, True])
    def test_non_integer_offset_raises(self, xs, offset):
        """Offsets must be integers."""
        with pytest.raises(ValueError, match="offset.*must be an integer"):
            make_filler(xs, indices=[1], offset=offset)


class TestFillerValidation:
    def test_bins_shape_must_match_intervals(self, xs):
        """bins needs one entry fewer than intervals."""
        hist = Histogram.from_data_empty(xs, 4)
        with pytest.raises(ValueError, match="does not match"):
            HistogramFiller(xs, hist.intervals, np.zeros(3, dtype=np.uint64))

    def test_readonly_bins_rejected(self, xs):
        """The filler refuses to write through a read-only view."""
        hist = Histogram.from_data_empty(xs, 4)
        with pytest.raises(ValueError, match="writeable"):
            HistogramFiller(xs, hist.intervals, hist.bins)
