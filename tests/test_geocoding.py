"""Tests for the geocoding module."""

import os
import unittest
from unittest.mock import MagicMock, patch

import requests

from masjid_locator.geocoding import GeocodingError, search_locations

MOCK_RESPONSE = {
    "type": "FeatureCollection",
    "query": ["luton"],
    "features": [
        {
            "id": "place.8712",
            "type": "Feature",
            "place_type": ["place"],
            "relevance": 1,
            "text": "Luton",
            "place_name": "Luton, Luton, England, United Kingdom",
            "center": [-0.4200, 51.8787],
            "context": [
                {"id": "district.1", "text": "Luton"},
                {"id": "region.2", "text": "England"},
                {"id": "country.3", "text": "United Kingdom", "short_code": "gb"},
            ],
        },
        {
            "id": "locality.99",
            "type": "Feature",
            "place_type": ["locality"],
            "relevance": 0.8,
            "text": "Bad Place",
            "place_name": "Bad Place",
            "center": [-0.1, 123.0],
        },
        {
            "id": "neighborhood.5",
            "type": "Feature",
            "place_type": ["neighborhood"],
            "relevance": 0.7,
            "text": "Bury Park",
            "place_name": "Bury Park, Luton, England, United Kingdom",
            "center": [-0.4355, 51.8845],
        },
    ],
}

TOKEN_ENV = {"MAPBOX_ACCESS_TOKEN": "pk.test"}


def _mock_response(body):
    mock_resp = MagicMock()
    mock_resp.json.return_value = body
    mock_resp.raise_for_status = MagicMock()
    return mock_resp


class TestSearchLocations(unittest.TestCase):
    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_parses_features(self, mock_get):
        mock_get.return_value = _mock_response(MOCK_RESPONSE)

        results = search_locations("luton")

        first = results[0]
        self.assertEqual(first.name, "Luton")
        self.assertEqual(first.full_address, "Luton, Luton, England, United Kingdom")
        self.assertAlmostEqual(first.latitude, 51.8787)
        self.assertAlmostEqual(first.longitude, -0.42)
        self.assertEqual(first.country, "United Kingdom")
        self.assertEqual(first.region, "England")
        self.assertEqual(first.place_type, "place")

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_drops_out_of_range_coordinates(self, mock_get):
        mock_get.return_value = _mock_response(MOCK_RESPONSE)
        results = search_locations("luton")
        self.assertEqual([r.name for r in results], ["Luton", "Bury Park"])

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_feature_without_context_has_no_country(self, mock_get):
        mock_get.return_value = _mock_response(MOCK_RESPONSE)
        results = search_locations("luton")
        self.assertIsNone(results[1].country)
        self.assertIsNone(results[1].region)

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_sends_uk_filter_and_token(self, mock_get):
        mock_get.return_value = _mock_response({"features": []})

        search_locations("east ham", limit=3, timeout=5)

        url = mock_get.call_args[0][0]
        params = mock_get.call_args[1]["params"]
        self.assertTrue(url.endswith("/mapbox.places/east%20ham.json"))
        self.assertEqual(params["country"], "gb")
        self.assertEqual(params["access_token"], "pk.test")
        self.assertEqual(params["limit"], 3)
        self.assertEqual(mock_get.call_args[1]["timeout"], 5)

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_no_timeout_by_default(self, mock_get):
        mock_get.return_value = _mock_response({"features": []})
        search_locations("luton")
        self.assertIsNone(mock_get.call_args[1]["timeout"])

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_http_error_propagates(self, mock_get):
        mock_resp = _mock_response({})
        mock_resp.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
        mock_get.return_value = mock_resp

        with self.assertRaises(requests.HTTPError):
            search_locations("luton")

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_rejects_short_query(self, mock_get):
        with self.assertRaises(GeocodingError):
            search_locations(" a ")
        mock_get.assert_not_called()

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_non_object_body_raises_geocoding_error(self, mock_get):
        mock_get.return_value = _mock_response([])
        with self.assertRaises(GeocodingError):
            search_locations("luton")

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_non_list_features_raises_geocoding_error(self, mock_get):
        mock_get.return_value = _mock_response({"features": {"id": "place.1"}})
        with self.assertRaises(GeocodingError):
            search_locations("luton")

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_null_features_means_no_results(self, mock_get):
        mock_get.return_value = _mock_response({"features": None})
        self.assertEqual(search_locations("luton"), [])

    @patch.dict(os.environ, TOKEN_ENV)
    @patch("masjid_locator.geocoding.requests.get")
    def test_skips_malformed_features_and_context(self, mock_get):
        body = {
            "features": [
                None,
                "place.1",
                {"id": "place.2", "text": "Odd", "center": 5},
                {
                    "id": "place.3",
                    "place_type": "place",
                    "text": "Luton",
                    "place_name": "Luton, England, United Kingdom",
                    "center": [-0.42, 51.88],
                    "context": [None, "country.1", {"id": "country.3", "text": "United Kingdom"}],
                },
                {"id": "place.4", "text": "Dunstable", "center": [-0.52, 51.88], "context": 7},
            ]
        }
        mock_get.return_value = _mock_response(body)

        results = search_locations("luton")

        self.assertEqual([r.name for r in results], ["Luton", "Dunstable"])
        self.assertEqual(results[0].country, "United Kingdom")
        self.assertEqual(results[0].place_type, "place")
        self.assertIsNone(results[1].country)

    @patch("masjid_locator.geocoding.requests.get")
    def test_requires_access_token(self, mock_get):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(GeocodingError):
                search_locations("luton")
        mock_get.assert_not_called()


if __name__ == "__main__":
    unittest.main()
