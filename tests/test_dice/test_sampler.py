"""Tests for dice samplers."""

import threading
from unittest.mock import patch

from polydie.config import Settings
from polydie.dice.sampler import get_sampler, reset_sampler, seeded_sampler


class TestSeededSampler:
    """Tests for seeded_sampler."""

    def test_same_seed_same_sequence(self):
        """Two samplers with one seed draw identical sequences."""
        first = seeded_sampler(42)
        second = seeded_sampler(42)
        assert [first.randint(1, 100) for _ in range(20)] == [
            second.randint(1, 100) for _ in range(20)
        ]

    def test_samplers_are_independent(self):
        """Drawing from one sampler does not advance another."""
        first = seeded_sampler(42)
        second = seeded_sampler(42)
        first.randint(1, 100)
        expected = seeded_sampler(42).randint(1, 100)
        assert second.randint(1, 100) == expected


class TestDefaultSampler:
    """Tests for the thread-local default sampler."""

    def setup_method(self):
        reset_sampler()

    def teardown_method(self):
        reset_sampler()

    def test_same_thread_reuses_sampler(self):
        """Repeated calls on one thread return the same generator."""
        assert get_sampler() is get_sampler()

    def test_other_thread_gets_own_sampler(self):
        """Each thread owns a separate generator."""
        samplers = []
        thread = threading.Thread(target=lambda: samplers.append(get_sampler()))
        thread.start()
        thread.join()
        assert samplers[0] is not get_sampler()

    def test_seed_from_settings(self):
        """dice_seed makes the default sampler reproducible."""
        seeded = Settings(_env_file=None, dice_seed=1234)
        with patch("polydie.dice.sampler.get_settings", return_value=seeded):
            draws = [get_sampler().randint(1, 20) for _ in range(10)]
            reset_sampler()
            again = [get_sampler().randint(1, 20) for _ in range(10)]
        assert draws == again

    def test_reset_creates_new_sampler(self):
        """reset_sampler discards the current generator."""
        before = get_sampler()
        reset_sampler()
        assert get_sampler() is not before
