from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the climate analytics service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=30.0)

    def close(self) -> None:
        self._client.close()

    def seed(self) -> Dict[str, Any]:
        return self._request("POST", "/seed")

    def summary(self) -> Dict[str, Any]:
        return self._request("GET", "/readings/summary")

    def mean_temperature(self, day: str, location: str) -> Dict[str, Any]:
        return self._request("GET", f"/temperature/{day}", params={"location": location})

    def ranking(self, kind: str, **params: Any) -> List[Dict[str, Any]]:
        query = {key: _format_param(value) for key, value in params.items() if value is not None}
        return self._request("GET", f"/rankings/{kind}", params=query)

    def seasons(self) -> Dict[str, Any]:
        return self._request("GET", "/seasons")

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._client.request(method, path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            typer.secho(
                f"Could not reach {self._config.base_url}: {exc}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)
        return response.json()

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _format_param(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value
