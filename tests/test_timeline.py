"""Tests for the timeline builder and the pair matrix."""

import unittest

from conftest import CLEAN_VOICES, PairMatrix, build_timeline, looped


class TestPairMatrix(unittest.TestCase):

    def setUp(self):
        self.m = PairMatrix(3, {(0, 1): 7, (0, 2): 4, (1, 2): 9})

    def test_symmetric_lookup(self):
        self.assertEqual(self.m[0, 2], 4)
        self.assertEqual(self.m[2, 0], 4)
        self.assertEqual(self.m[1, 2], self.m[2, 1])

    def test_self_pair_missing(self):
        with self.assertRaises(KeyError):
            self.m[1, 1]
        self.assertNotIn((1, 1), self.m)

    def test_out_of_range_pair(self):
        with self.assertRaises(KeyError):
            self.m[0, 3]

    def test_pairs_in_order(self):
        self.assertEqual(self.m.pairs(), [(0, 1), (0, 2), (1, 2)])
        self.assertEqual(list(self.m), [(0, 1), (0, 2), (1, 2)])
        self.assertEqual(len(self.m), 3)


class TestTimelineBuilder(unittest.TestCase):

    def test_shape(self):
        voices = looped(CLEAN_VOICES)
        timeline = build_timeline(voices)
        self.assertEqual(len(timeline), 5)
        for matrix in timeline:
            self.assertEqual(len(matrix), 4 * 3 // 2)
            self.assertEqual(matrix.size, 4)

    def test_values(self):
        timeline = build_timeline([[72, 74], [64, 65], [57, 59]])
        self.assertEqual(timeline[0][0, 1], 8)
        self.assertEqual(timeline[1][0, 1], 9)
        self.assertEqual(timeline[0][0, 2], 3)
        self.assertEqual(timeline[1][1, 2], 6)

    def test_single_voice_has_no_pairs(self):
        timeline = build_timeline([[60, 62, 64]])
        self.assertEqual(len(timeline), 3)
        self.assertTrue(all(len(m) == 0 for m in timeline))

    def test_short_voice_surfaces_as_index_error(self):
        with self.assertRaises(IndexError):
            build_timeline([[60, 62, 64], [55, 57]])

    def test_loop_shape(self):
        voices = looped(CLEAN_VOICES)
        for v in voices:
            self.assertEqual(v[-1], v[0])


if __name__ == "__main__":
    unittest.main()
