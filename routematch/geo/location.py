"""Single-shot device location acquisition."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from routematch.config import get_settings
from routematch.geo.proximity import GeoPoint
from routematch.monitoring import MetricsCollector

logger = logging.getLogger(__name__)


class LocationErrorCode(Enum):
    """Location failure taxonomy."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


# (code, is_mobile) -> message
ERROR_MESSAGES = MappingProxyType(
    {
        (LocationErrorCode.PERMISSION_DENIED, True): (
            "Location permission denied. Please enable location access in your browser settings."
        ),
        (LocationErrorCode.PERMISSION_DENIED, False): (
            "Location permission denied. Please enable location access in your browser settings."
        ),
        (LocationErrorCode.POSITION_UNAVAILABLE, True): (
            "Location unavailable. Please ensure GPS is enabled."
        ),
        (LocationErrorCode.POSITION_UNAVAILABLE, False): (
            "Location unavailable on this device. For best experience, use the mobile app."
        ),
        (LocationErrorCode.TIMEOUT, True): "Location request timed out. Please try again.",
        (LocationErrorCode.TIMEOUT, False): (
            "Location request timed out. Desktop browsers may have limited GPS support."
        ),
        (LocationErrorCode.UNKNOWN, True): "Could not get location. Please try again.",
        (LocationErrorCode.UNKNOWN, False): "Could not get location. Please try again.",
    }
)

NOT_SUPPORTED_MESSAGE = "Geolocation not supported on this device."


class LocationError(Exception):
    """Failed location request."""

    def __init__(self, code: LocationErrorCode, message: str = ""):
        self.code = code
        self.message = message or ERROR_MESSAGES[(code, True)]
        super().__init__(self.message)


@dataclass(frozen=True)
class Position:
    """Device position fix."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None

    def to_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class LocationProvider(ABC):
    """Source of device positions (browser bridge, GPS daemon, ...)."""

    @abstractmethod
    async def get_position(self) -> Position:
        """
        Request one position fix.

        Raises:
            LocationError: With the provider's failure code
            PermissionError: If access to location was refused
        """


class LocationService:
    """Requests the current position from a provider."""

    def __init__(
        self,
        provider: Optional[LocationProvider],
        timeout: Optional[float] = None,
        is_mobile: bool = True,
    ):
        """
        Initialize location service.

        Args:
            provider: Position source, None when the device has no geolocation
            timeout: Seconds to wait for a fix; defaults by device class
            is_mobile: Selects mobile or desktop wording and default timeout
        """
        self._provider = provider
        self._is_mobile = is_mobile
        settings = get_settings().location
        if timeout is None:
            timeout = settings.timeout_seconds if is_mobile else settings.desktop_timeout_seconds
        self._timeout = timeout
        self._metrics = MetricsCollector()

    @property
    def timeout(self) -> float:
        return self._timeout

    async def get_current_position(self) -> Position:
        """
        Request a single position fix.

        No retry and no cached fix; concurrent calls are independent
        requests.

        Returns:
            Position with latitude, longitude and accuracy

        Raises:
            LocationError: On permission, availability, timeout or other failure
        """
        if self._provider is None:
            self._metrics.record_location_error(LocationErrorCode.POSITION_UNAVAILABLE.value)
            raise LocationError(LocationErrorCode.POSITION_UNAVAILABLE, NOT_SUPPORTED_MESSAGE)

        try:
            return await asyncio.wait_for(self._provider.get_position(), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise self._failure(LocationErrorCode.TIMEOUT, e) from e
        except LocationError as e:
            raise self._failure(e.code, e) from e
        except PermissionError as e:
            raise self._failure(LocationErrorCode.PERMISSION_DENIED, e) from e
        except Exception as e:
            raise self._failure(LocationErrorCode.UNKNOWN, e) from e

    def _failure(self, code: LocationErrorCode, cause: Exception) -> LocationError:
        logger.warning(f"Geolocation error: {code.value} ({cause!r})")
        self._metrics.record_location_error(code.value)
        return LocationError(code, ERROR_MESSAGES[(code, self._is_mobile)])
