"""
Remote Data Gateway

HTTP client for the order/colour/filament REST service. Configuration is
passed in explicitly (GatewayConfig); nothing here reads global state.

Usage:
    gateway = RemoteDataGateway(GatewayConfig.from_settings(get_settings()))
    orders = gateway.list_orders()
"""
from typing import Any, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, Field, ValidationError

from printdesk.exceptions import GatewayError
from printdesk.logging_config import get_logger
from printdesk.schemas.catalog import (
    ColourCreate,
    ColourRead,
    ColourUpdate,
    FilamentCreate,
    FilamentRead,
)
from printdesk.schemas.common import ResourceId
from printdesk.schemas.order import OrderRead, OrderWrite

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GatewayConfig(BaseModel):
    """Where the REST service lives and how long to wait for it"""
    base_url: str = "http://localhost:8000/api"
    timeout: float = Field(default=10.0, gt=0)

    @classmethod
    def from_settings(cls, settings) -> "GatewayConfig":
        return cls(base_url=settings.API_URL, timeout=settings.API_TIMEOUT_SECONDS)


class RemoteDataGateway:
    """
    Fetch/create/update/delete for orders, colours and filaments.

    Every failure (connection error, timeout, non-2xx status, body that does
    not match the schema) surfaces as GatewayError. No retries.
    """

    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RemoteDataGateway":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _url(self, path: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, payload: Optional[BaseModel] = None) -> Any:
        url = self._url(path)
        body = payload.model_dump(mode="json") if payload is not None else None
        try:
            response = self.session.request(method, url, json=body, timeout=self.config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            logger.error(
                f"{method} {url} failed: {e}",
                extra={"method": method, "url": url, "status_code": status_code},
            )
            raise GatewayError(
                f"{method} {path} failed: {e}",
                details={"method": method, "url": url, "status_code": status_code},
            ) from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(
                f"{method} {path} returned a non-JSON body",
                error_code="MALFORMED_RESPONSE",
                details={"method": method, "url": url},
            ) from e

    def _parse(self, model: Type[ModelT], data: Any, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise GatewayError(
                f"Unexpected response from {path}",
                error_code="MALFORMED_RESPONSE",
                details={"path": path, "errors": e.errors(include_url=False)},
            ) from e

    def _parse_list(self, model: Type[ModelT], data: Any, path: str) -> List[ModelT]:
        if not isinstance(data, list):
            raise GatewayError(
                f"Expected a list from {path}",
                error_code="MALFORMED_RESPONSE",
                details={"path": path},
            )
        return [self._parse(model, item, path) for item in data]

    def _create(self, path: str, payload: BaseModel) -> int:
        return self._parse(ResourceId, self._request("POST", path, payload), path).id

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def list_orders(self) -> List[OrderRead]:
        return self._parse_list(OrderRead, self._request("GET", "/data"), "/data")

    def create_order(self, order: OrderWrite) -> int:
        """POST a new order; returns the id assigned by the service."""
        return self._create("/data", order)

    def update_order(self, order_id: int, order: OrderWrite) -> None:
        self._request("PUT", f"/data/{order_id}", order)

    def delete_order(self, order_id: int) -> None:
        self._request("DELETE", f"/data/{order_id}")

    # ------------------------------------------------------------------
    # Colours
    # ------------------------------------------------------------------

    def list_colours(self) -> List[ColourRead]:
        return self._parse_list(ColourRead, self._request("GET", "/colours"), "/colours")

    def create_colour(self, colour_name: str) -> int:
        return self._create("/colours", ColourCreate(colour_name=colour_name))

    def update_colour(self, colour_id: int, colour_name: str) -> None:
        self._request("PUT", f"/colours/{colour_id}", ColourUpdate(colour_name=colour_name))

    def delete_colour(self, colour_id: int) -> None:
        self._request("DELETE", f"/colours/{colour_id}")

    # ------------------------------------------------------------------
    # Filaments
    # ------------------------------------------------------------------

    def list_filaments(self) -> List[FilamentRead]:
        return self._parse_list(FilamentRead, self._request("GET", "/filaments"), "/filaments")

    def create_filament(self, filament: FilamentCreate) -> int:
        return self._create("/filaments", filament)

    def update_filament(self, filament: FilamentRead) -> None:
        """PUT the full spool, e.g. after booking usage against it."""
        self._request("PUT", f"/filaments/{filament.id}", filament)

    def delete_filament(self, filament_id: int) -> None:
        self._request("DELETE", f"/filaments/{filament_id}")
