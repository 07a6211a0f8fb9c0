from nctensor.index_block import IndexBlock, empty, single, span


def test_span_fields():
    block = span(2, 5)
    assert (block.start, block.stop) == (2, 5)
    assert not block.is_single
    assert not block.is_empty
    assert block.extent() == 4


def test_single_fields():
    block = single(3)
    assert block.start == 3
    assert block.stop == 0
    assert block.is_single
    assert not block.is_empty


def test_empty_fields():
    block = empty()
    assert block.is_empty
    assert not block.is_single
    assert (block.start, block.stop) == (0, 0)
    assert block == IndexBlock(is_empty=True)


def test_update_span():
    block = span(1, 3)
    block.update(10, 2)
    assert (block.start, block.stop) == (12, 16)


def test_update_single_leaves_stop():
    block = single(0)
    block.update(7, 3)
    assert block.start == 7
    assert block.stop == 0
    assert block.is_single


def test_update_empty_is_noop():
    block = empty()
    block.update(9, 4)
    assert block == empty()


def test_update_identity_mapping():
    block = span(4, 9)
    block.update(0, 1)
    assert block == span(4, 9)


def test_unit_stride_preserves_extent():
    block = span(3, 8)
    before = block.extent()
    block.update(11, 1)
    assert block.extent() == before