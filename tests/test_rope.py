import random

import pytest

from corekit.rope import Rope


def test_hello():
    rope = Rope()
    rope.insert(0, "hello ")
    rope.insert(6, " world")
    rope.erase(5, 1)
    assert rope.copy(0, 11) == "hello world"


def test_length_tracks_edits():
    rope = Rope()
    rope.insert(0, "abcdef")
    rope.erase(1, 2)
    assert len(rope) == 4
    assert rope.copy(0, 4) == "adef"


def test_large_insert_splits_chunks():
    rope = Rope()
    text = "".join(chr(ord("a") + i % 26) for i in range(10000))
    rope.insert(0, text)
    rope.insert(5000, "XYZ")
    expected = text[:5000] + "XYZ" + text[5000:]
    assert len(rope) == len(expected)
    assert rope.copy(0, len(rope)) == expected
    assert rope.copy(4998, 7) == expected[4998:5005]


def test_random_edits_match_plain_text():
    gen = random.Random(7)
    rope = Rope()
    model = ""
    for step in range(400):
        if model and gen.random() < 0.4:
            index = gen.randrange(len(model))
            size = gen.randrange(min(len(model) - index, 3000) + 1)
            rope.erase(index, size)
            model = model[:index] + model[index + size:]
        else:
            index = gen.randrange(len(model) + 1)
            text = str(step) * gen.randrange(1, 800)
            rope.insert(index, text)
            model = model[:index] + text + model[index:]
        assert len(rope) == len(model)
    assert str(rope) == model


def test_out_of_range():
    rope = Rope()
    rope.insert(0, "abc")
    with pytest.raises(IndexError):
        rope.insert(4, "x")
    with pytest.raises(IndexError):
        rope.erase(2, 2)
    with pytest.raises(IndexError):
        rope.copy(1, 3)