import unittest

from lazyrange import PreconditionError, iota, tile, view


class TestTile(unittest.TestCase):
    def test_drops_remainder(self):
        tiles = [list(t) for t in iota(0, 18).tile(4)]
        self.assertEqual(tiles, [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]])

    def test_exact_fit(self):
        tiles = [list(t) for t in view([1, 2, 3, 4, 5, 6]).tile(3)]
        self.assertEqual(tiles, [[1, 2, 3], [4, 5, 6]])

    def test_tile_sizes(self):
        for size in range(1, 25):
            for length in range(1, size + 1):
                with self.subTest(size=size, length=length):
                    rng = tile(iota(size), length)
                    tiles = list(rng)

                    self.assertEqual(rng.size(), len(tiles))
                    self.assertTrue(all(t.size() == length for t in tiles))
                    self.assertLessEqual(len(tiles) * length, size)
                    self.assertLess(size, len(tiles) * length + length)

    def test_tile_of_one(self):
        self.assertEqual([list(t) for t in view("abc").tile(1)], [["a"], ["b"], ["c"]])

    def test_too_short(self):
        with self.assertRaises(PreconditionError):
            view([1, 2, 3]).tile(4)

    def test_zero_length(self):
        with self.assertRaises(PreconditionError):
            iota(5).tile(0)

    def test_forward_view_rejected(self):
        with self.assertRaises(TypeError):
            iota(10).filter(bool).tile(2)

    def test_tiles_view_storage(self):
        data = [0] * 6
        for t in view(data).tile(2):
            view([7, 8]).copy_to(t)
        self.assertEqual(data, [7, 8, 7, 8, 7, 8])

    def test_tile_arithmetic(self):
        rng = iota(20).tile(5)
        first = rng.start()

        self.assertEqual(list((first + 2).deref()), [10, 11, 12, 13, 14])
        self.assertEqual(rng.end() - first, 4)
        self.assertEqual(list(rng.tail(1).start().deref()), [15, 16, 17, 18, 19])

    def test_tiles_of_mapped(self):
        rng = iota(6).map(lambda e: e * e).tile(2)
        self.assertEqual([t.reduce(lambda a, b: a + b) for t in rng], [1, 13, 41])
