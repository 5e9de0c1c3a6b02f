import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from package_express.config.settings import Settings
from package_express.engine.validation import (
    StandardValidationService,
    TOO_HEAVY_MESSAGE,
    TOO_BIG_MESSAGE,
)


@pytest.fixture
def validator():
    return StandardValidationService()


@pytest.mark.parametrize("weight", [0, 1, 25, 49.99, 50])
def test_weight_at_or_under_limit_passes(validator, weight):
    result = validator.validate_weight(weight)
    assert result.valid
    assert result.error is None


@pytest.mark.parametrize("weight", [50.0001, 51, 60, 1e9])
def test_weight_over_limit_fails(validator, weight):
    result = validator.validate_weight(weight)
    assert not result.valid
    assert result.error == TOO_HEAVY_MESSAGE


@pytest.mark.parametrize("dims", [(0, 0, 0), (2, 2, 2), (10, 10, 30), (16.5, 16.5, 17)])
def test_dimensions_at_or_under_limit_pass(validator, dims):
    result = validator.validate_dimensions(*dims)
    assert result.valid
    assert result.error is None


@pytest.mark.parametrize("dims", [(20, 20, 20), (10, 10, 30.5), (50, 0.1, 0)])
def test_dimensions_over_limit_fail(validator, dims):
    result = validator.validate_dimensions(*dims)
    assert not result.valid
    assert result.error == TOO_BIG_MESSAGE


def test_single_large_dimension_counts_toward_sum(validator):
    """Only the sum is limited, so one long side under 50 still passes."""
    assert validator.validate_dimensions(48, 1, 1).valid
    assert not validator.validate_dimensions(48, 1, 1.5).valid


def test_zero_and_negative_values_are_not_rejected(validator):
    """No lower bound is enforced on weight or dimensions."""
    assert validator.validate_weight(0).valid
    assert validator.validate_weight(-10).valid
    assert validator.validate_dimensions(-5, -5, -5).valid
    # A negative side can bring an oversized sum back under the limit
    assert validator.validate_dimensions(40, 40, -40).valid


def test_limits_come_from_settings():
    settings = Settings.load()
    settings.max_weight = 10
    settings.max_dimensions = 20
    validator = StandardValidationService(settings)

    assert not validator.validate_weight(11).valid
    assert validator.validate_weight(10).valid
    assert not validator.validate_dimensions(10, 10, 1).valid
