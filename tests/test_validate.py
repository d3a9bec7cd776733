from ironsort import Ordering, natural_order, reverse_order
from ironsort.validate import first_unsorted_index, is_partitioned, is_permutation, is_sorted


class TestOrdering:
    def test_natural_order(self):
        assert natural_order(1, 2) is Ordering.LESS
        assert natural_order(2, 1) is Ordering.GREATER
        assert natural_order(2, 2) is Ordering.EQUAL

    def test_nan_is_equal(self):
        assert natural_order(float("nan"), 1.0) is Ordering.EQUAL

    def test_reverse_order(self):
        cmp = reverse_order()
        assert cmp(1, 2) > 0
        assert cmp(2, 1) < 0
        assert cmp(1, 1) == 0

    def test_reverse_of_custom(self):
        cmp = reverse_order(lambda a, b: len(a) - len(b))
        assert cmp("aa", "b") < 0


class TestSorted:
    def test_sorted(self):
        assert is_sorted([])
        assert is_sorted([1])
        assert is_sorted([1, 1, 2, 3])
        assert not is_sorted([1, 3, 2])

    def test_first_unsorted_index(self):
        assert first_unsorted_index([1, 2, 5, 4, 3]) == 2
        assert first_unsorted_index([1, 2, 3]) is None

    def test_custom_order(self):
        assert is_sorted([3, 2, 2, 1], reverse_order())
        assert not is_sorted([1, 2], reverse_order())


class TestPermutation:
    def test_permutation(self):
        assert is_permutation([1, 2, 2, 3], [2, 3, 1, 2])
        assert not is_permutation([1, 2, 2], [1, 2])
        assert not is_permutation([1, 1, 2], [1, 2, 2])

    def test_bytes(self):
        assert is_permutation(b"dog", bytearray(b"god"))


class TestPartitioned:
    def test_partitioned(self):
        assert is_partitioned([1, 0, 3, 5, 4], 0, 5, 2)
        assert not is_partitioned([1, 4, 3, 5, 0], 0, 5, 2)

    def test_sub_range(self):
        assert is_partitioned([9, 1, 2, 3, -9], 1, 4, 1)

    def test_split_out_of_range(self):
        assert not is_partitioned([1, 2, 3], 0, 3, 3)
        assert not is_partitioned([1, 2, 3], 1, 3, 0)
