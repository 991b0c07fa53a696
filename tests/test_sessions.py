"""Tests for the study cursor and the quiz queue."""

import random

import pytest

from GravityApp.models.errors import SubmitWithoutCurrentWord
from GravityApp.models.sessions import StudySession, StudyStep, TestSession


def fixed_order(order):
    def shuffle(items):
        assert sorted(items) == sorted(order)
        items[:] = order
    return shuffle


class TestStudySession:
    def test_prev_at_start_is_noop(self):
        s = StudySession([3, 4, 5])
        assert s.prev() is False
        assert s.index == 0
        assert s.current == 3

    def test_next_walks_the_words(self):
        s = StudySession([3, 4, 5])
        assert s.next() is StudyStep.MOVED
        assert (s.current, s.position, s.total) == (4, 2, 3)
        assert s.prev() is True
        assert s.current == 3

    def test_end_signal_raised_once_per_arrival(self):
        s = StudySession([3, 4])
        assert s.next() is StudyStep.MOVED
        assert s.at_end
        assert s.next() is StudyStep.COMPLETE
        assert s.next() is StudyStep.STAY
        assert s.current == 4
        s.prev()
        s.next()
        assert s.next() is StudyStep.COMPLETE

    def test_single_word_day(self):
        s = StudySession([7])
        assert s.at_end
        assert s.next() is StudyStep.COMPLETE
        assert s.current == 7

    def test_needs_words(self):
        with pytest.raises(ValueError):
            StudySession([])


class TestTestSession:
    def test_initial_queue_is_a_permutation(self, fake_store):
        words = list(range(40, 60))
        t = TestSession(words, fake_store, shuffle=random.Random(7).shuffle)
        assert sorted(t.queue) == words
        assert t.remaining == 20
        assert t.current == t.queue[0]

    def test_default_shuffle_keeps_every_word(self, fake_store):
        t = TestSession(range(5), fake_store)
        assert sorted(t.queue) == [0, 1, 2, 3, 4]

    def test_walkthrough(self, fake_store):
        t = TestSession([5, 6, 7], fake_store, shuffle=fixed_order([6, 5, 7]))
        assert t.current == 6

        t.submit(False)
        assert t.queue == [5, 7, 6]
        t.submit(True)
        assert 5 in fake_store
        assert t.queue == [7, 6]
        t.submit(True)
        assert t.queue == [6]
        assert not t.completed
        assert t.submit(True) is None
        assert t.completed
        assert t.current is None
        assert {5, 6, 7} <= set(fake_store.load())

    def test_forgetting_a_single_word_keeps_it_current(self, fake_store):
        t = TestSession([9], fake_store)
        t.submit(False)
        t.submit(False)
        assert t.queue == [9]
        assert len(fake_store) == 0

    def test_reveal_resets_after_submit(self, fake_store):
        t = TestSession([1, 2], fake_store, shuffle=fixed_order([1, 2]))
        t.reveal()
        t.reveal()
        assert t.revealed
        assert t.queue == [1, 2]
        t.submit(False)
        assert not t.revealed

    def test_submit_on_empty_queue(self, fake_store):
        t = TestSession([1], fake_store)
        t.submit(True)
        with pytest.raises(SubmitWithoutCurrentWord):
            t.submit(True)

    def test_already_learned_word_is_not_written_again(self, fake_store):
        fake_store.mark_learned(2)
        t = TestSession([1, 2], fake_store, shuffle=fixed_order([2, 1]))
        t.submit(True)
        t.submit(True)
        assert fake_store.writes == [[2], [2, 1]]

    @pytest.mark.parametrize("seed", range(10))
    def test_completes_only_after_every_word_remembered(self, fake_store, seed):
        rng = random.Random(seed)
        words = list(range(8))
        t = TestSession(words, fake_store, shuffle=rng.shuffle)
        remembered = set()
        while not t.completed:
            assert sorted(set(t.queue) | remembered) == words
            assert len(t.queue) + len(remembered) == len(words)
            head = t.current
            ok = rng.random() < 0.4
            t.submit(ok)
            if ok:
                remembered.add(head)
        assert remembered == set(words)


class FailingStore:
    def mark_learned(self, index):
        raise OSError("disk full")


def test_failed_save_keeps_word_in_queue():
    t = TestSession([5, 6], FailingStore(), shuffle=fixed_order([5, 6]))
    with pytest.raises(OSError):
        t.submit(True)
    assert t.queue == [5, 6]
    assert t.current == 5
