"""Unit tests for coordinate validation and lookup errors."""

import math

import pytest

from roadsnap.domain.entities import (
    InvalidInput,
    Location,
    NotFound,
    ProviderFailure,
    RoadLookupError,
)


class TestLocationValidation:
    @pytest.mark.parametrize(
        "lat, lng",
        [(0, 0), (90, 180), (-90, -180), (40.758, -73.9855), (-33.8688, 151.2093)],
    )
    def test_in_range_is_valid(self, lat, lng):
        assert Location(lat, lng).is_valid()

    @pytest.mark.parametrize(
        "lat, lng",
        [(90.0001, 0), (-90.5, 0), (0, 180.01), (0, -181), (200, 400)],
    )
    def test_out_of_range_is_invalid(self, lat, lng):
        assert not Location(lat, lng).is_valid()

    def test_nan_is_invalid(self):
        assert not Location(math.nan, 0).is_valid()
        assert not Location(0, math.nan).is_valid()


class TestLookupErrors:
    def test_invalid_input(self):
        err = InvalidInput()
        assert err.status_code == 400
        assert err.message == "Invalid coordinates provided"

    def test_not_found(self):
        err = NotFound()
        assert err.status_code == 404
        assert err.message == "No nearby roads found"

    def test_provider_failure_forwards_reason(self):
        err = ProviderFailure("connection reset")
        assert err.status_code == 500
        assert err.message == "Internal server error: connection reset"
        assert err.reason == "connection reset"

    def test_all_share_base_class(self):
        for err in (InvalidInput(), NotFound(), ProviderFailure("x")):
            assert isinstance(err, RoadLookupError)
