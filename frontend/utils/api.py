from typing import Optional

import requests


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        try:
            if resp is None:
                return None
            if not resp.text:
                return None
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _get(self, endpoint: str, params: Optional[dict] = None) -> dict:
        """Make GET request."""
        try:
            resp = requests.get(
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                params=params or {},
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make POST request."""
        try:
            resp = requests.post(
                f"{self.base_url}{endpoint}",
                headers=self._headers(),
                json=data,
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")

    # Databases endpoints
    def get_databases(self) -> dict:
        """List databases with stats and collection summaries."""
        return self._get("/databases")

    def get_database(self, name: str) -> dict:
        """Get one database with its collections and documents."""
        return self._get(f"/databases/{name}")

    def create_database(self, name: str) -> dict:
        """Create a database."""
        return self._post("/databases/create", {"database": name})

    def delete_databases(self, names: list[str]) -> dict:
        """Drop databases."""
        return self._post("/databases/delete", {"names": names})

    # Collections endpoints
    def get_collections(self, database: str) -> dict:
        """List collections of a database."""
        return self._get("/collections", {"database": database})

    def get_collection(self, database: str, name: str) -> dict:
        """Get one collection with its documents."""
        return self._get(f"/collections/{name}", {"database": database})

    def create_collection(self, database: str, name: str) -> dict:
        """Create a collection."""
        return self._post("/collections/create", {
            "database": database,
            "collection": name,
        })

    def delete_collections(self, database: str, names: list[str]) -> dict:
        """Drop collections of a database."""
        return self._post("/collections/delete", {
            "database": database,
            "names": names,
        })
