"""
Unit tests for Bucket and the median splitter.
"""

import numpy as np
import pytest

from palette_cut.bucket import Bucket, split_bucket
from palette_cut.core_types import Channel, Color, as_pixel_array
from palette_cut.errors import Unsplittable


def unsorted_pixels():
    return as_pixel_array(
        [
            (55, 17, 0, 118),
            (0, 2, 1, 20),
            (3, 4, 15, 2),
            (1, 23, 16, 20),
        ]
    )


def rows(bucket):
    return [tuple(r) for r in bucket.members().tolist()]


class TestBucketRanges:
    """Cached per-channel ranges and widest channel"""

    def test_ranges_ignore_alpha(self):
        bucket = Bucket.seed(unsorted_pixels())
        assert bucket.ranges == (55, 21, 16)
        assert bucket.widest_channel is Channel.R
        assert bucket.widest_range == 55

    def test_channel_tie_prefers_red_then_green(self):
        rg_tie = Bucket.seed(as_pixel_array([(0, 0, 0), (10, 10, 0)]))
        assert rg_tie.widest_channel is Channel.R
        gb_tie = Bucket.seed(as_pixel_array([(0, 0, 0), (0, 10, 10)]))
        assert gb_tie.widest_channel is Channel.G
        blue = Bucket.seed(as_pixel_array([(0, 0, 0), (0, 1, 9)]))
        assert blue.widest_channel is Channel.B

    def test_single_member_is_terminal(self):
        bucket = Bucket.seed(as_pixel_array([(200, 100, 50)]))
        assert len(bucket) == 1
        assert bucket.widest_range == 0
        assert not bucket.is_splittable()

    def test_uniform_bucket_is_terminal(self):
        bucket = Bucket.seed(as_pixel_array([(7, 7, 7)] * 5))
        assert bucket.ranges == (0, 0, 0)
        assert not bucket.is_splittable()

    def test_cached_widest_follows_refresh(self):
        pixels = as_pixel_array([(0, 0, 0), (5, 40, 0), (9, 0, 0), (9, 0, 0)])
        bucket = Bucket(pixels, np.arange(4), 0, 4)
        assert (bucket.widest_channel, bucket.widest_range) == (Channel.G, 40)
        bucket.stop = 1
        bucket.refresh_ranges()
        assert (bucket.widest_channel, bucket.widest_range) == (Channel.R, 0)
        bucket.start, bucket.stop = 2, 4
        bucket.refresh_ranges()
        assert bucket.ranges == (0, 0, 0)
        assert not bucket.is_splittable()

    def test_alpha_only_variation_is_terminal(self):
        bucket = Bucket.seed(as_pixel_array([(7, 7, 7, 0), (7, 7, 7, 255)]))
        assert not bucket.is_splittable()


class TestMeanColor:
    """Bucket averaging rounds half up and forces opaque alpha"""

    def test_mean_rounds_half_up(self):
        bucket = Bucket.seed(unsorted_pixels())
        assert bucket.mean_color() == Color(15, 12, 8, 255)

    def test_exact_half_rounds_up(self):
        bucket = Bucket.seed(as_pixel_array([(0, 0, 0), (1, 3, 255)]))
        assert bucket.mean_color() == Color(1, 2, 128, 255)

    def test_below_half_rounds_down(self):
        bucket = Bucket.seed(as_pixel_array([(0, 0, 0), (0, 0, 0), (1, 1, 1)]))
        assert bucket.mean_color() == Color(0, 0, 0, 255)

    def test_alpha_is_always_opaque(self):
        bucket = Bucket.seed(as_pixel_array([(100, 50, 12, 0), (100, 50, 12, 3)]))
        assert bucket.mean_color() == Color(100, 50, 12, 255)

    def test_no_overflow_on_large_sums(self):
        bucket = Bucket.seed(np.full((100_000, 4), 255, dtype=np.uint8))
        assert bucket.mean_color() == Color(255, 255, 255, 255)


class TestSplitBucket:
    """Median split along the widest channel"""

    def test_split_at_median_of_widest_channel(self):
        below, above = split_bucket(Bucket.seed(unsorted_pixels()))
        assert rows(below) == [(0, 2, 1, 20), (1, 23, 16, 20)]
        assert rows(above) == [(3, 4, 15, 2), (55, 17, 0, 118)]

    def test_children_ranges_recomputed(self):
        below, above = split_bucket(Bucket.seed(unsorted_pixels()))
        assert below.ranges == (1, 21, 15)
        assert above.ranges == (52, 13, 15)

    def test_odd_size_gives_larger_below(self):
        pixels = as_pixel_array([(30, 0, 0), (10, 0, 0), (20, 0, 0)])
        below, above = split_bucket(Bucket.seed(pixels))
        assert len(below) == 2
        assert len(above) == 1
        assert rows(below) == [(10, 0, 0, 255), (20, 0, 0, 255)]
        assert rows(above) == [(30, 0, 0, 255)]

    def test_equal_values_keep_input_order(self):
        pixels = as_pixel_array([(5, 1, 0), (5, 2, 0), (0, 3, 0), (5, 4, 0)])
        # G range (3) loses to R range (5); ties on R=5 stay in input order
        below, above = split_bucket(Bucket.seed(pixels))
        assert [r[1] for r in rows(below)] == [3, 1]
        assert [r[1] for r in rows(above)] == [2, 4]

    def test_conserves_members(self):
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(101, 4), dtype=np.uint8)
        parent = Bucket.seed(pixels)
        below, above = split_bucket(parent)
        assert len(below) + len(above) == len(parent)
        merged = np.sort(np.concatenate([below.indices, above.indices]))
        np.testing.assert_array_equal(merged, np.arange(101))

    def test_children_do_not_exceed_parent_range(self):
        rng = np.random.default_rng(11)
        parent = Bucket.seed(rng.integers(0, 256, size=(64, 4), dtype=np.uint8))
        for child in split_bucket(parent):
            assert child.widest_range <= parent.widest_range

    def test_source_pixels_not_mutated(self):
        pixels = unsorted_pixels()
        before = pixels.copy()
        split_bucket(Bucket.seed(pixels))
        np.testing.assert_array_equal(pixels, before)

    def test_singleton_is_unsplittable(self):
        with pytest.raises(Unsplittable):
            split_bucket(Bucket.seed(as_pixel_array([(0, 0, 0)])))

    def test_empty_is_unsplittable(self):
        pixels = as_pixel_array([(0, 0, 0)])
        empty = Bucket(pixels, np.arange(1), 0, 0)
        with pytest.raises(Unsplittable):
            split_bucket(empty)
