import random

import pytest

from redblack import RedBlackTree

SIZE = 10000


def build(values):
    return RedBlackTree(values)


@pytest.mark.benchmark
@pytest.mark.parametrize(
        "order", [
            "ascending",
            "descending",
            "shuffled",
        ]
)
def test_insert(benchmark, order):
    values = list(range(SIZE))
    if order == "descending":
        values.reverse()
    elif order == "shuffled":
        random.Random(SIZE).shuffle(values)

    tree = benchmark(build, values)

    assert len(tree) == SIZE
    tree.validate()
