"""Tests for the shared random generator."""
from __future__ import annotations

import random
import threading
from collections import Counter

import pytest

from stress_module.random_generator import ALPHABET, RAND_MAX, RandomGenerator

from .helpers import ScriptedSource, is_alphanumeric


class TestSeeding:
    """Tests for seed() and the seeded guard."""

    def test_unseeded_generator_refuses_to_draw(self):
        """Drawing before seed() should raise."""
        rng = RandomGenerator()
        with pytest.raises(RuntimeError):
            rng.uniform_int(0, 10)

    def test_seed_uses_wall_clock_seconds(self, monkeypatch):
        """Default seed should be the current time in whole seconds."""
        rng = RandomGenerator()
        monkeypatch.setattr("stress_module.random_generator.time.time", lambda: 1234.9)

        rng.seed()

        expected = random.Random(1234)
        assert rng.seeded
        assert rng.uniform_int(0, 10**6) == expected.randint(0, 10**6)

    def test_reseed_is_rejected(self):
        """A second seed() call should raise."""
        rng = RandomGenerator()
        rng.seed(1)
        with pytest.raises(RuntimeError):
            rng.seed(2)

    def test_injected_source_counts_as_seeded(self):
        """An injected source can be drawn from without seed()."""
        rng = RandomGenerator(random.Random(1))
        assert rng.seeded
        assert 0 <= rng.uniform_int(0, 5) <= 5

    def test_same_seed_same_sequence(self):
        """Two generators with the same seed should agree."""
        first, second = RandomGenerator(), RandomGenerator()
        first.seed(99)
        second.seed(99)
        assert [first.uniform_int(0, 1000) for _ in range(20)] == [
            second.uniform_int(0, 1000) for _ in range(20)
        ]


class TestUniformInt:
    """Tests for uniform_int()."""

    def test_values_stay_in_inclusive_range(self, rng):
        """Every draw should fall within [low, high]."""
        for low, high in [(0, 0), (1, 2), (-50, 50), (-10, -3), (0, 2000)]:
            for _ in range(200):
                assert low <= rng.uniform_int(low, high) <= high

    def test_degenerate_range_returns_bound(self, rng):
        """low == high should always return low."""
        assert {rng.uniform_int(7, 7) for _ in range(50)} == {7}

    def test_both_ends_are_reachable(self, rng):
        """Draws from a tiny range should hit both ends."""
        assert {rng.uniform_int(1, 3) for _ in range(300)} == {1, 2, 3}

    def test_distribution_is_roughly_uniform(self, rng):
        """Counts over many draws should be close to equal."""
        counts = Counter(rng.uniform_int(1, 6) for _ in range(6000))
        assert set(counts) == {1, 2, 3, 4, 5, 6}
        for value in counts.values():
            assert 800 <= value <= 1200

    def test_empty_range_raises(self, rng):
        """low > high is a programming error here."""
        with pytest.raises(ValueError):
            rng.uniform_int(5, 4)


class TestUniformReal:
    """Tests for the legacy real formula."""

    def test_formula_is_preserved(self):
        """Result should be low + raw / (high - low + 1)."""
        rng = RandomGenerator(ScriptedSource(ints=[1999]))
        assert rng.uniform_real(1.0, 2000.0) == pytest.approx(1.0 + 1999 / 2000.0)

    def test_zero_raw_gives_low(self):
        """A raw draw of 0 should return low exactly."""
        rng = RandomGenerator(ScriptedSource(ints=[0]))
        assert rng.uniform_real(1.0, 2000.0) == 1.0

    def test_value_can_exceed_high(self):
        """Large raw draws go past high; the formula is not clamped."""
        rng = RandomGenerator(ScriptedSource(ints=[RAND_MAX]))
        assert rng.uniform_real(1.0, 2000.0) > 2000.0

    def test_raw_stays_within_rand_max(self, rng):
        """raw() should be within [0, RAND_MAX]."""
        for _ in range(100):
            assert 0 <= rng.raw() <= RAND_MAX


class TestRandomString:
    """Tests for random_string()."""

    def test_alphabet_has_62_characters(self):
        """Alphabet is digits, lowercase and uppercase letters."""
        assert len(ALPHABET) == 62
        assert len(set(ALPHABET)) == 62

    @pytest.mark.parametrize("length", [0, 1, 249, 506])
    def test_exact_length(self, rng, length):
        """Output length should equal the request."""
        text = rng.random_string(length)
        assert len(text) == length
        assert is_alphanumeric(text)

    def test_index_is_floor_of_scaled_draw(self):
        """Each character should be ALPHABET[floor(u * 62)]."""
        rng = RandomGenerator(ScriptedSource(floats=[0.0, 0.5, 0.9999999]))
        assert rng.random_string(3) == ALPHABET[0] + ALPHABET[31] + ALPHABET[61]

    def test_negative_length_raises(self, rng):
        with pytest.raises(ValueError):
            rng.random_string(-1)


class TestThreadSafety:
    """Concurrent draws share one lock."""

    def test_concurrent_draws_stay_in_range(self, rng):
        """Draws from many threads should all be valid."""
        results: list[int] = []
        errors: list[BaseException] = []

        def worker():
            try:
                for _ in range(500):
                    results.append(rng.uniform_int(0, 2000))
            except BaseException as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not errors
        assert len(results) == 4000
        assert all(0 <= value <= 2000 for value in results)
