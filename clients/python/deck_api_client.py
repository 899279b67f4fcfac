# clients/python/deck_api_client.py
import requests
from typing import Dict, Any, Optional, List, Tuple, Union

PointLike = Union[Dict[str, float], Tuple[float, float], List[float]]


def _point_payload(point: PointLike) -> Dict[str, float]:
    if isinstance(point, dict):
        return {"x": point["x"], "y": point["y"]}
    x, y = point
    return {"x": x, "y": y}


class DeckDesignerClient:
    """
    Client for the Deck Designer API.

    Wraps the /deck endpoints: layout, bill of materials, CSV export,
    project files, the starter deck and measurement parsing.

    Attributes:
        base_url: Base URL of the API
        api_key: API key for authentication
        headers: Headers to include in all requests
        timeout: Seconds to wait for each request
    """

    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the API (e.g., "http://localhost:8000")
            api_key: API key for authentication
            timeout: Seconds to wait for each request
        """
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.headers = {"X-API-Key": api_key}
        self.timeout = timeout

    def check_connection(self) -> Tuple[bool, str]:
        """
        Check if the API is accessible.

        Returns:
            Tuple of (success, message)
        """
        try:
            response = requests.get(
                f"{self.base_url}/health",
                headers=self.headers,
                timeout=self.timeout
            )
            if response.status_code == 200:
                return True, "Connection successful"
            else:
                return False, f"API returned status code {response.status_code}"
        except requests.RequestException as e:
            return False, f"Connection error: {str(e)}"

    @staticmethod
    def design_payload(
        points: List[PointLike],
        joist_spacing: Optional[float] = None,
        beam_spacing: Optional[float] = None,
        post_spacing: Optional[float] = None,
        has_railings: bool = False,
        deck_color: str = "Driftwood",
    ) -> Dict[str, Any]:
        """
        Build the request body shared by the layout and BOM endpoints.

        Spacings left as None fall back to the server defaults.
        """
        payload = {
            "points": [_point_payload(p) for p in points],
            "has_railings": has_railings,
            "deck_color": deck_color,
        }
        for key, value in (
            ("joist_spacing", joist_spacing),
            ("beam_spacing", beam_spacing),
            ("post_spacing", post_spacing),
        ):
            if value is not None:
                payload[key] = value
        return payload

    def _post(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        response = requests.post(
            f"{self.base_url}{path}",
            json=payload,
            headers=self.headers,
            timeout=self.timeout
        )
        response.raise_for_status()
        return response

    def get_layout(self, points: List[PointLike], **settings) -> Dict[str, Any]:
        """
        Compute the structural layout for a footprint.

        Args:
            points: Footprint points in canvas units
            **settings: Spacing, railing and color settings (see design_payload)

        Returns:
            Layout dictionary with deck_surface, joists, beams, posts and railings

        Raises:
            requests.HTTPError: If the API request fails
        """
        return self._post("/deck/layout", self.design_payload(points, **settings)).json()

    def get_bom(self, points: List[PointLike], **settings) -> Dict[str, Any]:
        """
        Compute the bill of materials for a footprint.

        Raises:
            requests.HTTPError: If the API request fails
        """
        return self._post("/deck/bom", self.design_payload(points, **settings)).json()

    def download_bom_csv(self, points: List[PointLike], **settings) -> str:
        """Bill of materials as CSV text."""
        return self._post("/deck/bom.csv", self.design_payload(points, **settings)).text

    def export_project(
        self,
        points: List[PointLike],
        width_ft: Optional[float] = None,
        length_ft: Optional[float] = None,
        **settings
    ) -> Dict[str, Any]:
        """Project file contents for a design."""
        payload = self.design_payload(points, **settings)
        if width_ft is not None:
            payload["width_ft"] = width_ft
        if length_ft is not None:
            payload["length_ft"] = length_ft
        return self._post("/deck/project", payload).json()

    def evaluate_project(self, project: Dict[str, Any]) -> Dict[str, Any]:
        """
        Recompute layout and BOM for a saved project file.

        Args:
            project: Parsed project file (camelCase keys)

        Returns:
            Dictionary with "layout" and "bom"

        Raises:
            requests.HTTPError: If the API request fails
        """
        return self._post("/deck/project/evaluate", project).json()

    def get_default_deck(self, width_ft: float = 12, length_ft: float = 12) -> List[Dict[str, float]]:
        """Corner points of a rectangular starter deck."""
        response = requests.get(
            f"{self.base_url}/deck/default",
            headers=self.headers,
            params={"width_ft": width_ft, "length_ft": length_ft},
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.json()["points"]

    def parse_feet(self, text: str, strict: bool = False) -> float:
        """Parse a measurement such as '12 1/2' to feet on the server."""
        return self._post("/deck/parse-feet", {"text": text, "strict": strict}).json()["feet"]
