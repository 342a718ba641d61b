# Contains the adapter classes for communicating with external mapping APIs.

import os
from abc import ABC, abstractmethod

import requests
from dotenv import find_dotenv, load_dotenv

from api_structures import (
    APIError,
    DecodeError,
    LookupResult,
    NetworkError,
    SetupError,
)

API_KEY_VARIABLE = "GOOGLE_API_KEY"


def load_api_key(env_file: str | None = None) -> str:
    """
    Loads the .env file into the process environment and returns the Google key.
    Without an explicit file, .env is searched for from the current directory.
    Raises SetupError if an explicit file is missing or the key is missing or empty.
    """
    if env_file is not None and not os.path.isfile(env_file):
        raise SetupError(f"Error loading .env file: {env_file} does not exist.")
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))
    api_key = os.getenv(API_KEY_VARIABLE)
    if not api_key:
        raise SetupError(
            f"Error: {API_KEY_VARIABLE} environment variable is not set.")
    return api_key


class DistanceLookup(ABC):
    """
    Abstract Base Class (blueprint) for all distance clients.
    The batch driver only talks to this interface, one origin/destination pair per call.
    """
    @abstractmethod
    def lookup(self, origin: str, destination: str) -> LookupResult:
        """
        Returns the driving distance and duration between two "lat,lng" strings.
        Raises a LookupFailure subclass when the lookup cannot be completed.
        """
        pass


class GoogleDistanceMatrixAdapter(DistanceLookup):
    """The adapter for the Google Distance Matrix API."""
    DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"
    MODE = "driving"

    def __init__(self, api_key: str, verbose: bool = False):
        if not api_key:
            raise SetupError(
                f"FATAL ERROR: No Google API key was provided ({API_KEY_VARIABLE}).")
        self.api_key = api_key
        self.verbose = verbose

    def lookup(self, origin: str, destination: str) -> LookupResult:
        params = {
            'origins': origin,
            'destinations': destination,
            'mode': self.MODE,
            'key': self.api_key
        }
        if self.verbose:
            shown = dict(params, key='***')
            print(f"   > [Google] GET {self.DISTANCE_MATRIX_URL} {shown}")

        try:
            response = requests.get(self.DISTANCE_MATRIX_URL, params=params)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise NetworkError(
                f"A network error occurred contacting the Distance Matrix API: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                "The Distance Matrix API returned a body that is not JSON.") from e

        return self._parse(data)

    def _parse(self, data) -> LookupResult:
        if not isinstance(data, dict) or not isinstance(data.get('status'), str):
            raise DecodeError(
                "The Distance Matrix API response has no top-level status.")

        if data['status'] != 'OK':
            raise APIError(data['status'], data.get('error_message'))

        try:
            rows = data.get('rows') or []
            if not rows or not rows[0]['elements']:
                # A well-formed answer with nothing in it is not an error.
                return LookupResult.unavailable()

            element = rows[0]['elements'][0]
            element_status = element.get('status', 'OK')
            if element_status != 'OK':
                if self.verbose:
                    print(f"   > [Google] No route for this pair. Element status: {element_status}")
                return LookupResult.unavailable()

            # *** NORMALIZATION to our standard LookupResult object ***
            meters = element['distance']['value']
            duration_text = element['duration']['text']
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise DecodeError(
                f"Could not parse the Distance Matrix API response: missing or invalid {e}") from e

        if isinstance(meters, bool) or not isinstance(meters, (int, float)) \
                or not isinstance(duration_text, str):
            raise DecodeError(
                "The Distance Matrix API response has a distance or duration of the wrong type.")

        return LookupResult(distance_km=meters / 1000, duration=duration_text)
