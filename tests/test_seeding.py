from __future__ import annotations

import pytest

from dice_roller.exceptions import InvalidArgumentError
from dice_roller.seeding import SEED_MASK, FixedSeedProvider, TimeSeedProvider


def test_time_seed_truncates_to_32_bits():
    provider = TimeSeedProvider(clock=lambda: 0x1_2345_6789_ABCD)
    assert provider() == 0x6789_ABCD


def test_time_seed_reads_clock_each_call():
    ticks = iter([10, 20])
    provider = TimeSeedProvider(clock=lambda: next(ticks))
    assert provider() == 10
    assert provider() == 20


def test_time_seed_default_clock_in_range():
    assert 0 <= TimeSeedProvider()() <= SEED_MASK


def test_fixed_seed_is_stable():
    provider = FixedSeedProvider(42)
    assert provider() == provider() == 42


@pytest.mark.parametrize("seed", [-5, 1.0, None, False])
def test_fixed_seed_rejects_invalid(seed):
    with pytest.raises(InvalidArgumentError):
        FixedSeedProvider(seed)
