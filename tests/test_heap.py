import pytest

from halfmesh.heap import MinHeap


class TestMinHeap:
    def test_pop_in_priority_order(self):
        heap = MinHeap([('c', 3.0), ('a', 1.0), ('d', 4.0), ('b', 2.0)])

        assert len(heap) == 4
        assert [heap.pop()[0] for _ in range(4)] == ['a', 'b', 'c', 'd']
        assert not heap

    def test_ties_leave_in_push_order(self):
        heap = MinHeap()

        for item in 'xyzw':
            heap.push(item, 1.0)

        assert [heap.pop()[0] for _ in range(4)] == list('xyzw')

    def test_decrease_and_increase_key(self):
        heap = MinHeap([('a', 1), ('b', 2), ('c', 3)])
        heap.update('c', 0)
        heap.push('a', 5)

        assert heap.pop() == ('c', 0)
        assert heap.pop() == ('b', 2)
        assert heap.pop() == ('a', 5)

    def test_empty(self):
        heap = MinHeap()

        with pytest.raises(IndexError):
            heap.pop()

        with pytest.raises(KeyError):
            heap.update('a', 1)
