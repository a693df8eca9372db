"""Tests for domain models and errors."""

from dataclasses import FrozenInstanceError

import pytest

from arcgis_list.domain import (
    Address,
    AddressCollection,
    AdminLevel,
    CollectionIsEmpty,
    Coordinates,
    GeocodeQuery,
    GeocoderError,
    InvalidInput,
    OutOfBounds,
    ReverseQuery,
    ServerResponseInvalid,
)


def _address(locality, latitude=10.0):
    return Address(
        provided_by="arcgis_list",
        coordinates=Coordinates(latitude=latitude, longitude=20.0),
        locality=locality,
    )


@pytest.fixture
def collection():
    return AddressCollection(
        (_address("Rennes"), _address("Nantes"), _address("Brest"))
    )


class TestCoordinates:
    @pytest.mark.parametrize("latitude,longitude", [(91, 0), (-90.5, 0), (0, 181)])
    def test_out_of_range_raises(self, latitude, longitude):
        with pytest.raises(ValueError):
            Coordinates(latitude=latitude, longitude=longitude)

    def test_is_frozen(self):
        coordinates = Coordinates(1.0, 2.0)
        with pytest.raises(FrozenInstanceError):
            coordinates.latitude = 3.0  # type: ignore[misc]


class TestAddress:
    def test_admin_level_must_be_positive(self):
        with pytest.raises(ValueError):
            AdminLevel(name="IL", level=0)

    def test_to_dict(self):
        address = Address(
            provided_by="arcgis_list",
            coordinates=Coordinates(39.78, -89.65),
            street_number="100",
            street_name="Main St",
            locality="Springfield",
            country_code="US",
            admin_levels=(AdminLevel("IL", 1),),
        )

        assert address.to_dict() == {
            "providedBy": "arcgis_list",
            "latitude": 39.78,
            "longitude": -89.65,
            "streetNumber": "100",
            "streetName": "Main St",
            "locality": "Springfield",
            "postalCode": None,
            "countryCode": "US",
            "adminLevels": [{"name": "IL", "level": 1}],
        }


class TestAddressCollection:
    def test_sequence_behaviour(self, collection):
        assert len(collection) == 3
        assert collection[1].locality == "Nantes"
        assert [a.locality for a in collection] == ["Rennes", "Nantes", "Brest"]
        assert not collection.is_empty()

    def test_first(self, collection):
        assert collection.first().locality == "Rennes"

    def test_first_on_empty_raises(self):
        with pytest.raises(CollectionIsEmpty):
            AddressCollection().first()

    def test_has_and_get(self, collection):
        assert collection.has(2)
        assert not collection.has(3)
        assert not collection.has(-1)
        assert collection.get(2).locality == "Brest"

    def test_get_out_of_bounds_raises(self, collection):
        with pytest.raises(OutOfBounds) as exc_info:
            collection.get(5)
        assert exc_info.value.index == 5

    def test_slice(self, collection):
        assert [a.locality for a in collection.slice(1)] == ["Nantes", "Brest"]
        assert [a.locality for a in collection.slice(0, 2)] == ["Rennes", "Nantes"]
        assert collection.slice(5) == ()

    def test_all(self, collection):
        assert collection.all() == collection.addresses


class TestQueries:
    def test_default_limit(self):
        assert GeocodeQuery("Main St").limit == 5

    @pytest.mark.parametrize("limit", [0, -1])
    def test_geocode_query_rejects_non_positive_limit(self, limit):
        with pytest.raises(InvalidInput):
            GeocodeQuery("Main St", limit=limit)

    def test_reverse_query_rejects_non_positive_limit(self):
        with pytest.raises(InvalidInput):
            ReverseQuery(Coordinates(0.0, 0.0), limit=0)

    def test_empty_text_is_accepted_by_query(self):
        """Empty text is rejected by the provider, not the query."""
        assert GeocodeQuery("").text == ""


class TestErrors:
    def test_errors_share_base(self):
        error = ServerResponseInvalid("bad", url="https://example.test")
        assert isinstance(error, GeocoderError)
        assert isinstance(error, Exception)

    def test_str_includes_cause(self):
        error = GeocoderError("Outer", cause=ValueError("inner"))
        assert str(error) == "Outer: inner"

    def test_str_without_cause(self):
        assert str(InvalidInput("Address cannot be empty.")) == "Address cannot be empty."
