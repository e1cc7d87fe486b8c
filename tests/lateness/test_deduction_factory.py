from src.hr_checkin.hr_checkin.core.enums import DeductionPolicy
from src.hr_checkin.hr_checkin.lateness.factory import DeductionStrategyFactory
from src.hr_checkin.hr_checkin.lateness.model import LatenessRule
from src.hr_checkin.hr_checkin.lateness.strategies.cumulative_strategy import CumulativeStrategy
from src.hr_checkin.hr_checkin.lateness.strategies.highest_band_strategy import HighestBandStrategy


def test_factory_cumulative():
    strategy = DeductionStrategyFactory().for_policy(DeductionPolicy.CUMULATIVE)

    assert isinstance(strategy, CumulativeStrategy)


def test_factory_highest_band():
    strategy = DeductionStrategyFactory().for_policy(DeductionPolicy.HIGHEST_BAND)

    assert isinstance(strategy, HighestBandStrategy)


def test_highest_band_tie_keeps_first_stored_rule():
    first = LatenessRule(minutes=10, amount=100)
    second = LatenessRule(minutes=10, amount=999)

    assert HighestBandStrategy().charged_rules(15, [first, second]) == [first]
